from dataclasses import dataclass
import os
from stream_filter.utils.logger import logger
from stream_filter.utils.exceptions import ConfigurationError


DEFAULT_EXPRESSION = "True"
DEFAULT_CONTENT_TYPE = "application/octet-stream"
ERROR_POLICIES = ("discard", "raise")


@dataclass
class AppConfig(object):
    """
    Application-wide configuration.

    This class represents the configuration for the process running the filter,
    including logging level and which source and stream bindings to use.
    """

    log_level: str
    source_type: str
    stream_type: str

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Create an AppConfig instance from environment variables.

        Returns:
            AppConfig: Configured instance with values from environment variables
                      or defaults if the environment variables are not set.
        """
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        source_type = os.getenv("SOURCE_TYPE", "stdin").lower()
        stream_type = os.getenv("STREAM_TYPE", "stdout").lower()

        logger.info(
            f"Config: log_level={log_level}, source={source_type}, stream={stream_type}"
        )

        return cls(
            log_level=log_level,
            source_type=source_type,
            stream_type=stream_type,
        )


@dataclass(frozen=True)
class FilterConfig(object):
    """
    Configuration of the filter stage.

    Built once at process start and handed to the filter factory. The
    expression is kept as source text here; it is compiled by the factory.
    """

    expression: str = DEFAULT_EXPRESSION
    default_content_type: str = DEFAULT_CONTENT_TYPE
    error_policy: str = "discard"

    def __post_init__(self) -> None:
        if self.error_policy not in ERROR_POLICIES:
            raise ConfigurationError(
                f"Unsupported error policy: {self.error_policy}. "
                f"Supported policies: {list(ERROR_POLICIES)}"
            )

    @classmethod
    def load(cls) -> "FilterConfig":
        """
        Create a FilterConfig instance from environment variables.

        Reads FILTER_EXPRESSION, FILTER_DEFAULT_CONTENT_TYPE and
        FILTER_ERROR_POLICY. Blank values fall back to the defaults.

        Returns:
            FilterConfig: The filter configuration.

        Raises:
            ConfigurationError: If the error policy is not supported.
        """
        expression = os.getenv("FILTER_EXPRESSION", "").strip() or DEFAULT_EXPRESSION
        default_content_type = (
            os.getenv("FILTER_DEFAULT_CONTENT_TYPE", "").strip() or DEFAULT_CONTENT_TYPE
        )
        error_policy = os.getenv("FILTER_ERROR_POLICY", "discard").strip().lower()

        logger.info(
            f"Filter config: expression={expression!r}, "
            f"default_content_type={default_content_type}, error_policy={error_policy}"
        )

        return cls(
            expression=expression,
            default_content_type=default_content_type,
            error_policy=error_policy,
        )
