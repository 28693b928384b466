import pytest
from stream_filter.filters.functions import (
    FUNCTIONS,
    compile_json_path,
    is_definite_path,
    json_path,
)
from stream_filter.utils.exceptions import EvaluationError


class TestJsonPath:
    """Test cases for the jsonPath expression function."""

    def test_string_document(self):
        """Test selecting from a JSON string."""
        assert json_path('{"foo":"bar"}', "$.foo") == "bar"

    def test_bytes_document(self):
        """Test selecting from UTF-8 encoded JSON bytes."""
        assert json_path(b'{"foo":{"bar":1}}', "$.foo.bar") == 1

    def test_parsed_document(self):
        """Test selecting from an already parsed document."""
        assert json_path({"items": [{"id": 1}, {"id": 2}]}, "$.items[1].id") == 2

    def test_multiple_matches_return_list(self):
        """Test that several matches are returned as a list."""
        assert json_path('{"a":[1,2,3]}', "$.a[*]") == [1, 2, 3]

    def test_single_wildcard_match_is_a_list(self):
        """Test that an indefinite path keeps a single match in a list."""
        assert json_path('{"a":[1]}', "$.a[*]") == [1]

    def test_indefinite_path_without_matches(self):
        """Test that an indefinite path with no matches gives an empty list."""
        assert json_path('{"a":[]}', "$.a[*]") == []
        assert json_path('{"a":[{"id":1}]}', "$..name") == []

    def test_definite_path_returns_value(self):
        """Test that a definite path selecting a list returns the list itself."""
        assert json_path('{"a":[1,2]}', "$.a") == [1, 2]

    def test_no_match(self):
        """Test that a path without results fails."""
        with pytest.raises(EvaluationError) as exc_info:
            json_path('{"foo":"bar"}', "$.missing")

        assert "No results for path" in str(exc_info.value)

    def test_invalid_json(self):
        """Test that a payload which is not JSON fails."""
        with pytest.raises(EvaluationError):
            json_path("not json", "$.foo")

    def test_invalid_path(self):
        """Test that an unparsable path fails."""
        with pytest.raises(EvaluationError):
            json_path('{"foo":"bar"}', "$.foo[")

    def test_path_must_be_string(self):
        """Test that a non-string path is rejected."""
        with pytest.raises(EvaluationError):
            json_path('{"foo":"bar"}', 5)

    def test_registered_as_function(self):
        """Test that expressions can call jsonPath."""
        assert FUNCTIONS["jsonPath"] is json_path


class TestIsDefinitePath:
    """Test cases for classifying JSON paths."""

    @pytest.mark.parametrize("path", ["$", "$.foo", "$.foo.bar", "$.items[0]", "$.items[1].id"])
    def test_definite(self, path):
        assert is_definite_path(compile_json_path(path))

    @pytest.mark.parametrize("path", ["$.a[*]", "$.*", "$..id", "$.a[0:2]", "$.a[?(@.x > 1)]"])
    def test_indefinite(self, path):
        assert not is_definite_path(compile_json_path(path))
