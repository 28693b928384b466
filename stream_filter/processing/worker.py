from stream_filter.processing.processor import FilterProcessor
from stream_filter.sources.base import MessageSource
from stream_filter.streams.base import Stream
from stream_filter.utils.exceptions import ProcessingError
from stream_filter.utils.logger import logger


class Worker:
    """
    Main worker class that routes messages through the filter.

    This class pulls messages from the source, asks the processor for a verdict,
    forwards retained messages to the stream and drops the others. It also
    handles the lifecycle of the source and stream.
    """

    def __init__(
        self, source: MessageSource, processor: FilterProcessor, stream: Stream
    ) -> None:
        """
        Initialize the worker.

        Args:
            source: Where inbound messages come from
            processor: Decides whether each message is forwarded
            stream: Where retained messages are sent
        """
        self.source = source
        self.processor = processor
        self.stream = stream
        self.running = True
        self._stopping = False

        self.received = 0
        self.retained = 0

    def run(self) -> None:
        """
        Run the worker until the source is exhausted or stop() is called.

        Retained messages are forwarded as they were received; the decoded form
        used for evaluation is not sent on.

        Raises:
            ProcessingError: If reading, filtering or forwarding fails.
        """
        try:
            self.source.connect()
            logger.info("Worker started")

            for message in self.source.listen():
                if not self.running:
                    break

                self.received += 1
                if self.processor.process(message):
                    self.stream.send([message])
                    self.retained += 1

        except Exception as e:
            logger.error(f"Worker error: {e}")
            raise ProcessingError(f"Processing failed: {str(e)}")
        finally:
            self._shutdown()
            logger.info(
                f"Worker stopped: received={self.received}, retained={self.retained}, "
                f"discarded={self.received - self.retained}"
            )

    def _shutdown(self) -> None:
        """Close the stream and disconnect the source."""
        try:
            self.stream.close()
        except Exception as e:
            logger.error(f"Error closing stream: {e}")
        try:
            self.source.disconnect()
        except Exception as e:
            logger.error(f"Error disconnecting source: {e}")

    def stop(self) -> None:
        """
        Stop the worker gracefully.

        The message being processed is finished; no further messages are read.
        """
        if self._stopping:
            logger.debug("Stop already in progress, ignoring duplicate call")
            return

        logger.info("Stop signal received")
        self._stopping = True
        self.running = False
