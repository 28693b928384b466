from abc import ABC, abstractmethod
from typing import List

from stream_filter.messages import Message


class Stream(ABC):
    """
    Base abstract class for all stream implementations.

    This abstract class defines the interface that all stream implementations must
    adhere to. Streams receive the messages the filter retains.
    """

    @abstractmethod
    def send(self, messages: List[Message]) -> None:
        """
        Send messages to the stream destination.

        Args:
            messages (List[Message]): The messages to send.

        Raises:
            StreamError: If the send operation fails.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Close any open connections or resources.

        Raises:
            StreamError: If the close operation fails.
        """
        pass
