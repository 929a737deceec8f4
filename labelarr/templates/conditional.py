"""Conditional block processing.

Evaluates {% if %} conditions and reduces each conditional block to the
body of the branch that survives. Supported condition forms, checked in
this order:

    name == 'literal'            exact match on the value's text form
    name.startswith('literal')   prefix match, missing/falsy value = ""
    name > 10   (>=, <, <=)      numeric comparison, numbers only
    name                         truthiness

There are no boolean combinators. A condition that fails to parse, names
an unknown variable, or raises while evaluating is false.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from labelarr.templates.context import ABSENT, LabelContext, NumberValue
from labelarr.templates.parser import Branch, ConditionalBlock, Literal, Placeholder, parse_template

_QUOTES = ("'", '"')
_STARTSWITH = ".startswith("
# Two-character operators first so ">=" is not read as ">"
_RELATIONAL_OPERATORS = (">=", "<=", ">", "<")


class ConditionType(Enum):
    """Supported condition forms."""

    EQUALS = auto()
    STARTS_WITH = auto()
    GREATER_THAN = auto()
    GREATER_OR_EQUAL = auto()
    LESS_THAN = auto()
    LESS_OR_EQUAL = auto()
    TRUTHY = auto()


_OPERATOR_TYPES = {
    ">=": ConditionType.GREATER_OR_EQUAL,
    "<=": ConditionType.LESS_OR_EQUAL,
    ">": ConditionType.GREATER_THAN,
    "<": ConditionType.LESS_THAN,
}


@dataclass(frozen=True)
class Condition:
    """A parsed condition."""

    type: ConditionType
    name: str
    value: str | float | None = None  # Literal for EQUALS/STARTS_WITH, number for relational


def _unquote(text: str) -> str | None:
    """Return the contents of a '...' or "..." literal, else None."""
    text = text.strip()
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1]
    return None


def _parse_equality(expression: str) -> Condition | None:
    name, sep, rest = expression.partition("==")
    if not sep:
        return None
    literal = _unquote(rest)
    name = name.strip()
    if literal is None or not name:
        return None
    return Condition(ConditionType.EQUALS, name, literal)


def _parse_startswith(expression: str) -> Condition | None:
    if not expression.endswith(")"):
        return None
    name, sep, rest = expression.partition(_STARTSWITH)
    if not sep:
        return None
    prefix = _unquote(rest[:-1])
    name = name.strip()
    if prefix is None or not name:
        return None
    return Condition(ConditionType.STARTS_WITH, name, prefix)


def _parse_relational(expression: str) -> Condition | None:
    for operator in _RELATIONAL_OPERATORS:
        name, sep, rest = expression.partition(operator)
        if not sep:
            continue
        name = name.strip()
        literal = rest.strip()
        literal = _unquote(literal) if literal[:1] in _QUOTES else literal
        if not name or not literal:
            return None
        try:
            number = float(literal)
        except ValueError:
            return None
        return Condition(_OPERATOR_TYPES[operator], name, number)
    return None


def parse_condition(expression: str) -> Condition:
    """Parse a condition; anything unrecognised becomes a truthiness test."""
    expression = expression.strip()
    return (
        _parse_equality(expression)
        or _parse_startswith(expression)
        or _parse_relational(expression)
        or Condition(ConditionType.TRUTHY, expression)
    )


class ConditionEvaluator:
    """Evaluates condition strings against a LabelContext."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(__name__)

    def evaluate(self, expression: str, ctx: LabelContext) -> bool:
        """Check if a condition is satisfied. Never raises."""
        try:
            return self._check(parse_condition(expression), ctx)
        except Exception as e:
            self._logger.warning(f"Error evaluating condition '{expression}': {e}")
            return False

    def _check(self, condition: Condition, ctx: LabelContext) -> bool:
        ctype = condition.type

        if ctype == ConditionType.TRUTHY:
            value = ctx.get(condition.name)
            return value is not None and value.is_truthy()

        value = ctx.get(condition.name, ABSENT)

        if ctype == ConditionType.EQUALS:
            return value.as_text() == condition.value

        if ctype == ConditionType.STARTS_WITH:
            text = value.as_text() if value.is_truthy() else ""
            return text.startswith(condition.value)

        # Relational: numbers only
        if not isinstance(value, NumberValue):
            return False
        number = value.value
        if ctype == ConditionType.GREATER_THAN:
            return number > condition.value
        if ctype == ConditionType.GREATER_OR_EQUAL:
            return number >= condition.value
        if ctype == ConditionType.LESS_THAN:
            return number < condition.value
        if ctype == ConditionType.LESS_OR_EQUAL:
            return number <= condition.value

        return False


def select_branch(
    block: ConditionalBlock,
    ctx: LabelContext,
    evaluator: ConditionEvaluator,
) -> Branch | None:
    """Select the first branch whose condition holds, else the else branch.

    Returns:
        The surviving branch, or None if nothing matched and there is no else
    """
    for branch in block.branches:
        if branch.is_else:
            return branch
        if evaluator.evaluate(branch.condition, ctx):
            return branch
    return None


def process_conditional_blocks(
    template: str,
    ctx: LabelContext,
    evaluator: ConditionEvaluator | None = None,
) -> str:
    """Reduce every conditional block to its surviving branch body.

    Placeholders are left untouched, ready for interpolation.
    """
    evaluator = evaluator or ConditionEvaluator()
    parts = []
    for node in parse_template(template):
        if isinstance(node, Literal):
            parts.append(node.text)
        elif isinstance(node, Placeholder):
            parts.append(node.raw)
        else:
            branch = select_branch(node, ctx, evaluator)
            if branch is not None:
                parts.append(branch.raw_body)
    return "".join(parts)
