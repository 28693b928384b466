from typing import Any
import json
from stream_filter.utils.logger import logger


class Serializer:
    """
    Utility class for rendering message payloads as JSON text.

    Payloads that are neither text nor bytes (dicts, lists, numbers) have to be
    written to text-based outputs somehow. Values that cannot be represented in
    JSON directly fall back to their string form.
    """

    def serialize(self, data: Any) -> str:
        """
        Serialize data to a JSON document.

        Args:
            data (Any): The data to serialize.

        Returns:
            str: The JSON text, or the plain string form of the data if it
                cannot be encoded as JSON at all.
        """
        try:
            return json.dumps(data, default=str)
        except (TypeError, ValueError) as e:
            logger.debug(
                f"Serialization exception: {e}, converting entire object to string"
            )
            return str(data)
