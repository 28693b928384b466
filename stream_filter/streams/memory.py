from typing import List

from stream_filter.messages import Message
from stream_filter.streams.base import Stream


class MemoryStream(Stream):
    """
    Keeps retained messages in memory.

    Useful for tests and for embedding the filter in another process that reads
    the collected messages itself.
    """

    def __init__(self):
        self.messages: List[Message] = []
        self.closed = False

    def send(self, messages: List[Message]) -> None:
        self.messages.extend(messages)

    def payloads(self) -> List:
        return [message.payload for message in self.messages]

    def close(self) -> None:
        self.closed = True
