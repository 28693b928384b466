import pytest
from unittest.mock import MagicMock
from stream_filter.messages import Message
from stream_filter.processing.processor import FilterProcessor
from stream_filter.processing.worker import Worker
from stream_filter.sources.base import MessageSource
from stream_filter.streams.base import Stream
from stream_filter.utils.exceptions import EvaluationError, ProcessingError


class TestWorker:
    """Test cases for Worker implementation"""

    @pytest.fixture
    def messages(self):
        """Fixture to provide inbound messages."""
        return [Message(payload="hello"), Message(payload="hello world")]

    @pytest.fixture
    def mock_source(self, messages):
        """Fixture to provide a mock source yielding the messages."""
        source = MagicMock(spec=MessageSource)
        source.listen.return_value = iter(messages)
        return source

    @pytest.fixture
    def mock_processor(self):
        """Fixture to provide a mock processor."""
        processor = MagicMock(spec=FilterProcessor)
        processor.process.side_effect = lambda m: len(m.payload) > 5
        return processor

    @pytest.fixture
    def mock_stream(self):
        """Fixture to provide a mock stream."""
        return MagicMock(spec=Stream)

    @pytest.fixture
    def worker(self, mock_source, mock_processor, mock_stream):
        """Fixture to provide a Worker instance."""
        return Worker(source=mock_source, processor=mock_processor, stream=mock_stream)

    def test_worker_init(self, worker, mock_source, mock_processor, mock_stream):
        """Test worker initialization."""
        assert worker.source == mock_source
        assert worker.processor == mock_processor
        assert worker.stream == mock_stream
        assert worker.running is True

    def test_run_forwards_retained_messages(self, worker, mock_source, mock_stream, messages):
        """Test that only retained messages are sent to the stream."""
        worker.run()

        mock_source.connect.assert_called_once()
        mock_stream.send.assert_called_once_with([messages[1]])
        assert worker.received == 2
        assert worker.retained == 1

    def test_run_cleans_up(self, worker, mock_source, mock_stream):
        """Test that the stream is closed and the source disconnected."""
        worker.run()

        mock_stream.close.assert_called_once()
        mock_source.disconnect.assert_called_once()

    def test_run_with_exception(self, worker, mock_processor, mock_source, mock_stream):
        """Test run method with exception during processing."""
        mock_processor.process.side_effect = EvaluationError("Test error")

        with pytest.raises(ProcessingError) as exc_info:
            worker.run()

        assert "Processing failed: Test error" in str(exc_info.value)

        mock_stream.close.assert_called_once()
        mock_source.disconnect.assert_called_once()

    def test_cleanup_errors_are_logged(self, worker, mock_source, mock_stream):
        """Test that a failing close does not prevent disconnecting."""
        mock_stream.close.side_effect = Exception("close failed")

        worker.run()

        mock_source.disconnect.assert_called_once()

    def test_stop_during_run(self, worker, mock_processor, mock_stream):
        """Test that stop prevents further messages from being read."""

        def stop_after_first(message):
            worker.stop()
            return True

        mock_processor.process.side_effect = stop_after_first

        worker.run()

        assert mock_processor.process.call_count == 1
        mock_stream.send.assert_called_once()

    def test_stop(self, worker):
        """Test stop method."""
        worker.stop()

        assert not worker.running

    def test_stop_twice(self, worker):
        """Test that a duplicate stop call is ignored."""
        worker.stop()
        worker.stop()

        assert not worker.running
