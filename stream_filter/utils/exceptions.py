class StreamFilterError(Exception):
    """Base exception for all Stream Filter related errors."""

    pass


class ConfigurationError(StreamFilterError):
    """Raised when the filter or application configuration is invalid.

    This covers filter expressions that fail to compile, so it is only ever
    raised at startup and never while messages are being processed.
    """

    pass


class EvaluationError(StreamFilterError):
    """Raised when a filter expression cannot be evaluated against a message."""

    pass


class UnsupportedTypeError(StreamFilterError):
    """Raised when an unsupported type is requested from a factory."""

    pass


class SourceError(StreamFilterError):
    """Raised when there is an issue reading from a message source."""

    pass


class StreamError(StreamFilterError):
    """Raised when there is an issue with a stream operation."""

    pass


class ProcessingError(StreamFilterError):
    """Raised when there is an issue with message processing."""

    pass
