"""Functions available to filter expressions."""

from functools import lru_cache
from typing import Any, Callable, Dict
import json

from jsonpath_ng.ext import parse as parse_json_path
from jsonpath_ng.jsonpath import Child, Fields, Index, Root, This

from stream_filter.utils.exceptions import EvaluationError


@lru_cache(maxsize=128)
def compile_json_path(path: str) -> Any:
    """Parse a JSONPath, caching the result.

    Raises:
        EvaluationError: If the path cannot be parsed.
    """
    try:
        return parse_json_path(path)
    except Exception as e:
        raise EvaluationError(f"Invalid JSON path '{path}': {e}")


def is_definite_path(path: Any) -> bool:
    """Return True if a parsed JSONPath can select at most one node.

    Only chains of single field names and single indices are definite.
    Wildcards, slices, unions, recursive descent and filters are not.
    """
    if isinstance(path, (Root, This)):
        return True
    if isinstance(path, Child):
        return is_definite_path(path.left) and is_definite_path(path.right)
    if isinstance(path, Fields):
        return len(path.fields) == 1 and path.fields[0] != "*"
    if isinstance(path, Index):
        return not hasattr(path, "indices") or len(path.indices) == 1
    return False


def json_path(value: Any, path: str) -> Any:
    """Select a value from a JSON document.

    A definite path ("$.foo", "$.items[0].id") returns the selected value and
    fails when nothing is there. Any other path ("$.items[*]", "$..id",
    filters) returns the list of matched values, which may be empty.

    Args:
        value: A JSON string, UTF-8 encoded JSON bytes, or an already parsed
            dict or list.
        path: The JSONPath to select, for example "$.foo".

    Returns:
        The selected value for a definite path, otherwise a list of values.

    Raises:
        EvaluationError: If the document is not valid JSON or a definite path
            matches nothing.
    """
    if not isinstance(path, str):
        raise EvaluationError(f"JSON path must be a string, got {type(path).__name__}")

    document = value
    if isinstance(value, (str, bytes, bytearray)):
        try:
            document = json.loads(value)
        except ValueError as e:
            raise EvaluationError(f"Payload is not valid JSON: {e}")

    compiled = compile_json_path(path)
    matches = compiled.find(document)
    if not is_definite_path(compiled):
        return [match.value for match in matches]
    if not matches:
        raise EvaluationError(f"No results for path: {path}")
    return matches[0].value


# Functions exposed to every expression, keyed by the name used in expressions
FUNCTIONS: Dict[str, Callable[..., Any]] = {
    "jsonPath": json_path,
    "len": len,
    "str": str,
    "int": int,
    "float": float,
}
