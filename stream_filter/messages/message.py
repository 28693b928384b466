from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


# Reserved header classifying the payload
CONTENT_TYPE = "content-type"

HeaderValue = Union[str, int, float, bool, bytes]


@dataclass(frozen=True)
class Message:
    """
    An immutable message envelope.

    A message carries a payload, which is either raw bytes or an already decoded
    value, and a read-only mapping of headers. Header keys are case-sensitive.
    Operations that need a different payload build a new message through
    with_payload instead of changing this one.
    """

    payload: Any
    headers: Mapping[str, HeaderValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.payload, bytearray):
            object.__setattr__(self, "payload", bytes(self.payload))
        # Copy so later changes to the caller's dict are not visible here
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def content_type(self) -> Optional[str]:
        """The content-type header as a string, or None when it is absent."""
        value = self.headers.get(CONTENT_TYPE)
        return None if value is None else str(value)

    def with_payload(self, payload: Any) -> "Message":
        """
        Build a copy of this message carrying a different payload.

        Args:
            payload: The new payload.

        Returns:
            Message: A new message with the same headers.
        """
        return Message(payload=payload, headers=self.headers)

    def is_binary(self) -> bool:
        return isinstance(self.payload, (bytes, bytearray))
