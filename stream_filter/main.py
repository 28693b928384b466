import signal
import sys
from typing import Any
from dotenv import load_dotenv

from stream_filter.utils.logger import Logger
from stream_filter.utils.exceptions import ConfigurationError
from stream_filter.config.loader import AppConfig, FilterConfig
from stream_filter.filters.factory import FilterFactory
from stream_filter.processing.processor import FilterProcessor
from stream_filter.processing.worker import Worker
from stream_filter.sources import SourceFactory
from stream_filter.streams import StreamFactory


def main() -> None:
    """
    Main entry point for the stream-filter application.

    This function loads configuration, sets up the logger, compiles the filter
    expression, creates the source and stream bindings and starts the worker.
    A filter expression that does not compile stops the process before any
    message is read. It also sets up signal handlers for graceful shutdown.
    """
    load_dotenv()

    logger = Logger.get_logger()

    app_config = AppConfig.load()

    Logger.update_level(app_config.log_level)

    try:
        filter_config = FilterConfig.load()
        message_filter = FilterFactory.from_config(filter_config)
    except ConfigurationError as e:
        logger.error(f"Invalid filter configuration: {e}")
        sys.exit(1)

    processor = FilterProcessor(message_filter, filter_config.error_policy)
    source = SourceFactory.create(app_config.source_type)
    stream = StreamFactory.create(app_config.stream_type)

    worker = Worker(source=source, processor=processor, stream=stream)

    def signal_handler(sig: Any, _frame: Any) -> None:
        logger.info("Shutdown signal received")
        worker.stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    worker.run()


if __name__ == "__main__":
    main()
