from typing import Tuple

from stream_filter.messages import Message
from stream_filter.utils.logger import logger


# Substrings marking a content type whose bytes should be read as text
TEXT_MARKERS: Tuple[str, ...] = ("text", "json", "x-spring-tuple")

ENCODING = "utf-8"


def is_text_content_type(content_type: str) -> bool:
    """Return True if the content type contains any of the text markers."""
    return any(marker in content_type for marker in TEXT_MARKERS)


class PayloadNormalizer:
    """Decodes byte payloads of text-like messages so expressions see strings.

    The normalizer never changes the message it is given. When decoding is
    needed it returns a new message with the decoded payload and the same
    headers; in every other case it returns the original message.
    """

    def __init__(self, default_content_type: str):
        """Initialize the normalizer.

        Args:
            default_content_type: Content type assumed for messages that carry
                no content-type header.
        """
        self.default_content_type = default_content_type

    def resolve_content_type(self, message: Message) -> str:
        content_type = message.content_type
        return self.default_content_type if content_type is None else content_type

    def normalize(self, message: Message) -> Message:
        """Decode the payload of a message if it is text-like binary data.

        Invalid byte sequences are replaced rather than rejected, so this
        never fails.

        Args:
            message: The inbound message.

        Returns:
            The message to evaluate: either the original or a decoded copy.
        """
        if not message.is_binary():
            return message

        content_type = self.resolve_content_type(message)
        if not is_text_content_type(content_type):
            return message

        logger.debug(f"Decoding {len(message.payload)} byte payload ({content_type})")
        return message.with_payload(bytes(message.payload).decode(ENCODING, errors="replace"))
