from typing import ClassVar, Dict, Type
from stream_filter.streams.base import Stream
from stream_filter.utils.registry import RegistryFactory


class StreamFactory(RegistryFactory):
    """Factory for creating Stream implementations by name."""

    KIND = "stream"
    REGISTRY: ClassVar[Dict[str, Type[Stream]]] = {}

    @classmethod
    def register_stream(cls, name: str, stream_class: Type[Stream]) -> None:
        """Register a stream implementation under a name."""
        cls._register(name, stream_class)
