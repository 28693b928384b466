from stream_filter.streams.base import Stream
from stream_filter.streams.factory import StreamFactory
from stream_filter.streams.memory import MemoryStream
from stream_filter.streams.stdout import StdoutStream

StreamFactory.register_stream("stdout", StdoutStream)
StreamFactory.register_stream("memory", MemoryStream)

__all__ = [
    "Stream",
    "StreamFactory",
    "MemoryStream",
    "StdoutStream",
]
