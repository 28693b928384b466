import io
import os
import pytest
from unittest.mock import patch
from stream_filter.messages import CONTENT_TYPE
from stream_filter.sources.stdin import StdinSource
from stream_filter.utils.exceptions import SourceError


class TestStdinSource:
    """Test cases for StdinSource"""

    @pytest.fixture(autouse=True)
    def clean_env(self):
        """Run every test without STDIN_CONTENT_TYPE set."""
        with patch.dict(os.environ, {}, clear=True):
            yield

    def test_lines_become_byte_messages(self):
        """Test that each line becomes a message without its line ending."""
        source = StdinSource(stream=io.BytesIO(b"hello\nhello world\r\nhi!"))
        source.connect()

        messages = list(source.listen())

        assert [m.payload for m in messages] == [b"hello", b"hello world", b"hi!"]
        assert all(dict(m.headers) == {} for m in messages)

    def test_content_type_header(self):
        """Test that a configured content type is set on every message."""
        source = StdinSource(stream=io.BytesIO(b"a\nb\n"), content_type="text/plain")
        source.connect()

        messages = list(source.listen())

        assert [m.headers[CONTENT_TYPE] for m in messages] == ["text/plain", "text/plain"]

    def test_content_type_from_env(self):
        """Test that the content type is read from the environment."""
        with patch.dict(os.environ, {"STDIN_CONTENT_TYPE": "application/json"}):
            source = StdinSource(stream=io.BytesIO(b"{}\n"))

        assert source.content_type == "application/json"

    def test_listen_without_connect(self):
        """Test that reading requires a connected source."""
        source = StdinSource()

        with pytest.raises(SourceError):
            next(source.listen())

    def test_disconnect(self):
        """Test that disconnect releases the stream."""
        source = StdinSource(stream=io.BytesIO(b""))
        source.connect()
        source.disconnect()

        with pytest.raises(SourceError):
            next(source.listen())
