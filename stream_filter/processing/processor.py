from stream_filter.filters.base import FilterLike
from stream_filter.config.loader import ERROR_POLICIES
from stream_filter.messages import Message
from stream_filter.utils.exceptions import ConfigurationError, EvaluationError
from stream_filter.utils.logger import logger


class FilterProcessor:
    """
    Turns a filter decision into a verdict for the router.

    Evaluation failures are handled according to the error policy:

    - "discard": the message is dropped and a warning is logged.
    - "raise": the EvaluationError is propagated to the caller.
    """

    def __init__(self, message_filter: FilterLike, error_policy: str = "discard"):
        if error_policy not in ERROR_POLICIES:
            raise ConfigurationError(f"Unsupported error policy: {error_policy}")
        self.message_filter = message_filter
        self.error_policy = error_policy

    def process(self, message: Message) -> bool:
        """
        Decide whether a message is forwarded.

        Args:
            message: The inbound message.

        Returns:
            bool: True if the message should be forwarded, False if it is dropped.

        Raises:
            EvaluationError: If evaluation fails and the error policy is "raise".
        """
        try:
            verdict = self.message_filter.accept(message)
        except EvaluationError as e:
            match self.error_policy:
                case "raise":
                    logger.error(f"Filter evaluation failed: {e}")
                    raise
                case _:
                    logger.warning(f"Discarding message, filter evaluation failed: {e}")
                    return False

        if not verdict:
            logger.debug("Message discarded by filter")
        return verdict
