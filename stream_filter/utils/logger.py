import logging
import os
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Logger:
    """
    Process-wide logger for the filter stage.

    Only one instance is created. Records go to stderr, because stdout may be
    carrying the forwarded messages.
    """

    _instance: Optional["Logger"] = None

    def __init__(self, log_level: Optional[str] = None, logger_name: Optional[str] = None):
        """
        Args:
            log_level: Initial level name. Defaults to LOG_LEVEL, then "INFO".
            logger_name: Logger name. Defaults to APP_NAME, then "stream-filter".
        """
        self.logger = logging.getLogger(
            logger_name or os.getenv("APP_NAME", "stream-filter")
        )
        self.logger.handlers.clear()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(handler)
        self.logger.propagate = False

        self.set_level(log_level or os.getenv("LOG_LEVEL", "INFO"))

    def set_level(self, log_level: str) -> None:
        """Set the level by name; unknown names fall back to INFO."""
        self.logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Return the shared logger, creating it on first use."""
        if cls._instance is None:
            cls._instance = Logger()
        return cls._instance.logger

    @classmethod
    def update_level(cls, log_level: str) -> None:
        """Change the level of the shared logger."""
        if cls._instance is None:
            cls._instance = Logger(log_level=log_level)
        else:
            cls._instance.set_level(log_level)
        cls._instance.logger.debug(f"Logging level set to {log_level}")


logger = Logger.get_logger()
