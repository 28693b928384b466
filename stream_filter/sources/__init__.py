from stream_filter.sources.base import MessageSource
from stream_filter.sources.factory import SourceFactory
from stream_filter.sources.stdin import StdinSource

SourceFactory.register_source("stdin", StdinSource)

__all__ = [
    "MessageSource",
    "SourceFactory",
    "StdinSource",
]
