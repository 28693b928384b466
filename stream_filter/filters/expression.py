import ast
from typing import Any, List, Protocol, Set

from simpleeval import EvalWithCompoundTypes

from stream_filter.filters.functions import FUNCTIONS, compile_json_path
from stream_filter.messages import Message
from stream_filter.utils.exceptions import ConfigurationError, EvaluationError


ROOT_NAMES = frozenset({"payload", "headers"})

TRUE_STRINGS = frozenset({"true", "on", "yes", "1"})
FALSE_STRINGS = frozenset({"false", "off", "no", "0"})

# Types that answer the `length` pseudo attribute
LENGTH_TYPES = (str, bytes, bytearray, list, tuple)


class Predicate(Protocol):
    """Anything that can decide whether a message should be retained."""

    def evaluate(self, message: Message) -> bool:
        """Return the verdict for a message, raising EvaluationError on failure."""
        ...


class MessageEvaluator(EvalWithCompoundTypes):
    """simpleeval evaluator that also understands `value.length`."""

    def _eval_attribute(self, node):
        if node.attr == "length":
            value = self._eval(node.value)
            if isinstance(value, LENGTH_TYPES):
                return len(value)
        return super()._eval_attribute(node)


def coerce_verdict(result: Any) -> bool:
    """Convert an expression result to a verdict.

    Booleans pass through. Strings such as "true"/"false", "yes"/"no",
    "on"/"off" and "1"/"0" are converted. Anything else is rejected.

    Raises:
        EvaluationError: If the result has no unambiguous boolean meaning.
    """
    if isinstance(result, bool):
        return result
    if isinstance(result, str):
        text = result.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    raise EvaluationError(
        f"Expression result {result!r} ({type(result).__name__}) is not a boolean"
    )


class FilterExpression:
    """A filter expression parsed once and evaluated for every message.

    Only the parsed syntax tree is kept, and a new evaluator is built for each
    call, so a single instance can be shared between threads.
    """

    def __init__(self, source: str, tree: ast.AST):
        self._source = source
        self._tree = tree

    @property
    def source(self) -> str:
        return self._source

    def evaluate(self, message: Message) -> bool:
        """Evaluate the expression against a message.

        The expression sees the message payload as `payload` and a copy of its
        headers as `headers`.

        Args:
            message: The (normalized) message.

        Returns:
            The verdict.

        Raises:
            EvaluationError: If evaluation fails or the result is not boolean.
        """
        evaluator = MessageEvaluator(
            functions=FUNCTIONS,
            names={"payload": message.payload, "headers": dict(message.headers)},
        )
        try:
            result = evaluator.eval(self._source, previously_parsed=self._tree)
        except EvaluationError:
            raise
        except Exception as e:
            raise EvaluationError(f"Failed to evaluate '{self._source}': {e}")
        return coerce_verdict(result)

    def __repr__(self) -> str:
        return f"FilterExpression({self._source!r})"


def _operators(node: ast.AST) -> List[ast.AST]:
    if isinstance(node, (ast.BinOp, ast.UnaryOp)):
        return [node.op]
    if isinstance(node, ast.Compare):
        return list(node.ops)
    return []


def _check_tree(source: str, tree: ast.AST) -> None:
    # Syntax simpleeval has no handler for would fail on every message
    evaluator = MessageEvaluator(functions=FUNCTIONS, names={})
    bound: Set[str] = {
        node.id
        for node in ast.walk(tree)
        if isinstance(node, ast.Name) and isinstance(node.ctx, ast.Store)
    }
    known = ROOT_NAMES | set(FUNCTIONS) | bound

    for node in ast.walk(tree):
        if isinstance(node, ast.expr) and type(node) not in evaluator.nodes:
            raise ConfigurationError(
                f"{type(node).__name__} is not supported in filter expression '{source}'"
            )
        for op in _operators(node):
            if type(op) not in evaluator.operators:
                raise ConfigurationError(
                    f"Operator {type(op).__name__} is not supported in filter expression "
                    f"'{source}'"
                )
        if isinstance(node, ast.Name) and node.id not in known:
            raise ConfigurationError(
                f"Unknown name '{node.id}' in filter expression '{source}'. "
                f"Available: {sorted(ROOT_NAMES | set(FUNCTIONS))}"
            )
        if isinstance(node, ast.Attribute) and node.attr.startswith("_"):
            raise ConfigurationError(
                f"Access to '{node.attr}' is not allowed in filter expression '{source}'"
            )
        if (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == "jsonPath"
            and len(node.args) == 2
            and isinstance(node.args[1], ast.Constant)
            and isinstance(node.args[1].value, str)
        ):
            try:
                compile_json_path(node.args[1].value)
            except EvaluationError as e:
                raise ConfigurationError(str(e))


def compile_expression(source: str) -> FilterExpression:
    """Parse and check a filter expression.

    Args:
        source: The expression text, for example "payload.length > 5".

    Returns:
        FilterExpression: The compiled expression.

    Raises:
        ConfigurationError: If the expression is empty, is not valid syntax,
            refers to unknown names, or contains an invalid literal JSON path.
    """
    if not source or not source.strip():
        raise ConfigurationError("Filter expression is empty")

    try:
        tree = ast.parse(source.strip(), mode="eval").body
    except SyntaxError as e:
        raise ConfigurationError(f"Invalid filter expression '{source}': {e.msg}")

    _check_tree(source, tree)
    return FilterExpression(source.strip(), tree)


def evaluate(expression: Predicate, message: Message) -> bool:
    """Evaluate a compiled expression against a message."""
    return expression.evaluate(message)
