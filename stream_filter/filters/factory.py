from stream_filter.config.loader import DEFAULT_CONTENT_TYPE, DEFAULT_EXPRESSION, FilterConfig
from stream_filter.filters.expression import compile_expression
from stream_filter.filters.expression_filter import ExpressionFilter
from stream_filter.filters.normalizer import PayloadNormalizer
from stream_filter.utils.logger import logger


class FilterFactory:
    """Factory for creating filter components.

    Expressions are compiled here, once, so that a broken expression stops the
    application at startup instead of failing on every message.
    """

    @staticmethod
    def create_filter(
        expression: str = DEFAULT_EXPRESSION,
        default_content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> ExpressionFilter:
        """Create an expression filter.

        Args:
            expression: The filter expression source.
            default_content_type: Content type assumed for messages without a
                content-type header.

        Returns:
            A configured ExpressionFilter.

        Raises:
            ConfigurationError: If the expression does not compile.
        """
        compiled = compile_expression(expression)
        logger.debug(f"Compiled filter expression: {compiled.source}")
        return ExpressionFilter(compiled, PayloadNormalizer(default_content_type))

    @staticmethod
    def from_config(config: FilterConfig) -> ExpressionFilter:
        """Create an expression filter from a FilterConfig."""
        return FilterFactory.create_filter(
            expression=config.expression,
            default_content_type=config.default_content_type,
        )
