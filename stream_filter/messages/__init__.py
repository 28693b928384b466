from stream_filter.messages.message import CONTENT_TYPE, HeaderValue, Message

__all__ = [
    "CONTENT_TYPE",
    "HeaderValue",
    "Message",
]
