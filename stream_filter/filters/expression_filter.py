from stream_filter.filters.base import MessageFilter
from stream_filter.filters.expression import Predicate
from stream_filter.filters.normalizer import PayloadNormalizer
from stream_filter.messages import Message
from stream_filter.utils.logger import logger


class ExpressionFilter(MessageFilter):
    """Retains messages for which a filter expression holds.

    Byte payloads of text-like messages are decoded first, so the expression
    can treat them as strings.
    """

    def __init__(self, expression: Predicate, normalizer: PayloadNormalizer):
        """Initialize the filter.

        Args:
            expression: The compiled expression deciding the verdict.
            normalizer: Normalizer applied to each message before evaluation.
        """
        self.expression = expression
        self.normalizer = normalizer

    def accept(self, message: Message) -> bool:
        normalized = self.normalizer.normalize(message)
        verdict = self.expression.evaluate(normalized)
        logger.debug(f"Verdict {verdict} for payload {normalized.payload!r:.80}")
        return verdict
