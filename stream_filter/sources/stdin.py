import os
import sys
from typing import BinaryIO, Iterator, Optional

from stream_filter.messages import CONTENT_TYPE, Message
from stream_filter.sources.base import MessageSource
from stream_filter.utils.exceptions import SourceError
from stream_filter.utils.logger import logger


class StdinSource(MessageSource):
    """
    Reads one message per line from standard input.

    Each line, without its line ending, becomes a byte payload. When a content
    type is configured it is set as the content-type header of every message;
    otherwise messages carry no headers and the filter's default content type
    applies.
    """

    def __init__(
        self, stream: Optional[BinaryIO] = None, content_type: Optional[str] = None
    ):
        """
        Initialize the source.

        Args:
            stream: Binary stream to read. Defaults to sys.stdin's buffer.
            content_type: Content type for every message. Defaults to the
                STDIN_CONTENT_TYPE environment variable, if set.
        """
        self._stream = stream
        self.content_type = content_type or os.getenv("STDIN_CONTENT_TYPE") or None

    def connect(self) -> None:
        if self._stream is None:
            self._stream = sys.stdin.buffer
        logger.debug(f"Reading messages from stdin (content type: {self.content_type})")

    def listen(self) -> Iterator[Message]:
        if self._stream is None:
            raise SourceError("Source is not connected")

        headers = {CONTENT_TYPE: self.content_type} if self.content_type else {}
        try:
            for line in self._stream:
                yield Message(payload=line.rstrip(b"\r\n"), headers=headers)
        except OSError as e:
            raise SourceError(f"Failed to read from stdin: {e}")

    def disconnect(self) -> None:
        self._stream = None
