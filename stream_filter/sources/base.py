from abc import ABC, abstractmethod
from typing import Iterator

from stream_filter.messages import Message


class MessageSource(ABC):
    """
    Base abstract class for all message source implementations.

    A message source delivers inbound messages to the filter one at a time.
    """

    @abstractmethod
    def connect(self) -> None:
        """
        Prepare the source for reading.

        Raises:
            SourceError: If the source cannot be opened.
        """
        pass

    @abstractmethod
    def listen(self) -> Iterator[Message]:
        """
        Yield inbound messages until the source is exhausted.

        Yields:
            Message: The next inbound message.

        Raises:
            SourceError: If reading fails.
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Release any resources held by the source."""
        pass
