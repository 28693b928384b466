from typing import ClassVar, Dict, Type
from stream_filter.sources.base import MessageSource
from stream_filter.utils.registry import RegistryFactory


class SourceFactory(RegistryFactory):
    """Factory for creating MessageSource implementations by name."""

    KIND = "source"
    REGISTRY: ClassVar[Dict[str, Type[MessageSource]]] = {}

    @classmethod
    def register_source(cls, name: str, source_class: Type[MessageSource]) -> None:
        """Register a message source implementation under a name."""
        cls._register(name, source_class)
