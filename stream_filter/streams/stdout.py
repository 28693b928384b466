import sys
from typing import BinaryIO, List, Optional

from stream_filter.messages import Message
from stream_filter.streams.base import Stream
from stream_filter.utils.exceptions import StreamError
from stream_filter.utils.serializer import Serializer


class StdoutStream(Stream):
    """
    Writes each retained message payload to standard output, one per line.

    Byte payloads are written as they are, strings are UTF-8 encoded and any
    other payload is written as JSON.
    """

    def __init__(self, stream: Optional[BinaryIO] = None):
        self._stream = stream
        self.serializer = Serializer()

    def _get_stream(self) -> BinaryIO:
        if self._stream is None:
            self._stream = sys.stdout.buffer
        return self._stream

    def _encode(self, payload) -> bytes:
        if isinstance(payload, (bytes, bytearray)):
            return bytes(payload)
        if isinstance(payload, str):
            return payload.encode("utf-8")
        return self.serializer.serialize(payload).encode("utf-8")

    def send(self, messages: List[Message]) -> None:
        if not messages:
            return

        stream = self._get_stream()
        try:
            for message in messages:
                stream.write(self._encode(message.payload) + b"\n")
            stream.flush()
        except (OSError, ValueError) as e:
            raise StreamError(f"Failed to write to stdout: {e}")

    def close(self) -> None:
        if self._stream is not None:
            try:
                self._stream.flush()
            except (OSError, ValueError) as e:
                raise StreamError(f"Failed to flush stdout: {e}")
