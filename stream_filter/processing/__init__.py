from stream_filter.processing.processor import FilterProcessor
from stream_filter.processing.worker import Worker

__all__ = [
    "FilterProcessor",
    "Worker",
]
