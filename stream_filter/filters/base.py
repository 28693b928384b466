from abc import ABC, abstractmethod
from typing import Protocol

from stream_filter.messages import Message


class FilterLike(Protocol):
    """Protocol for objects with filter method compatibility.

    This protocol defines the interface for anything that behaves like a filter,
    which makes it compatible with both actual MessageFilter implementations
    and test mocks that implement the same interface.
    """

    def accept(self, message: Message) -> bool:
        """Decide whether a message is retained."""
        ...


class MessageFilter(ABC):
    """Abstract base class for all message filters.

    This class defines the interface for message filters. All concrete filter
    implementations should inherit from this class and implement the accept method.
    """

    @abstractmethod
    def accept(self, message: Message) -> bool:
        """Decide whether a message should continue downstream.

        Args:
            message: The inbound message.

        Returns:
            True to retain the message, False to discard it.

        Raises:
            EvaluationError: If the decision cannot be made for this message.
        """
        pass
