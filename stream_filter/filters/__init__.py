"""Filter module deciding which messages continue downstream.

A filter compiles a boolean expression once and evaluates it against every
message. Byte payloads with a text-like content type are decoded before the
expression sees them.

Key components:
- MessageFilter: Abstract base class for all message filters
- ExpressionFilter: Filter driven by a compiled expression
- PayloadNormalizer: Content-type aware decoding of byte payloads
- FilterExpression: A compiled filter expression
- FilterFactory: Factory for creating filters from configuration
"""

from stream_filter.filters.base import FilterLike, MessageFilter
from stream_filter.filters.expression import (
    FilterExpression,
    Predicate,
    coerce_verdict,
    compile_expression,
    evaluate,
)
from stream_filter.filters.expression_filter import ExpressionFilter
from stream_filter.filters.factory import FilterFactory
from stream_filter.filters.normalizer import PayloadNormalizer, is_text_content_type

__all__ = [
    "FilterLike",
    "MessageFilter",
    "ExpressionFilter",
    "FilterExpression",
    "FilterFactory",
    "PayloadNormalizer",
    "Predicate",
    "coerce_verdict",
    "compile_expression",
    "evaluate",
    "is_text_content_type",
]
