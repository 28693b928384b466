from typing import Any, ClassVar, Dict, Type
from stream_filter.utils.logger import logger
from stream_filter.utils.exceptions import UnsupportedTypeError


class RegistryFactory:
    """
    Base for registry-based factories.

    Subclasses keep their own REGISTRY mapping lower-cased type names to
    implementation classes, and name the kind of component they build in KIND
    so errors read naturally ("Unsupported stream type: ...").
    """

    KIND: ClassVar[str] = "component"
    REGISTRY: ClassVar[Dict[str, Type[Any]]] = {}

    @classmethod
    def _register(cls, name: str, implementation: Type[Any]) -> None:
        cls.REGISTRY[name.lower()] = implementation

    @classmethod
    def create(cls, type_name: str, **kwargs) -> Any:
        """
        Create an implementation based on the requested type.

        Args:
            type_name (str): The registered name, matched case-insensitively.
            **kwargs: Configuration parameters passed to the implementation.

        Returns:
            An initialized implementation.

        Raises:
            UnsupportedTypeError: If no implementation is registered under the name.
        """
        normalized_type = type_name.lower()
        logger.debug(f"Creating {cls.KIND} of type: {normalized_type}")

        if normalized_type not in cls.REGISTRY:
            message = (
                f"Unsupported {cls.KIND} type: {type_name}. "
                f"Supported types: {sorted(cls.REGISTRY)}"
            )
            logger.error(message)
            raise UnsupportedTypeError(message)

        return cls.REGISTRY[normalized_type](**kwargs)
