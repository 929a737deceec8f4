"""Placeholder interpolation.

Replaces {{ name }} placeholders with the display form of the matching
context value. Names are looked up exactly, so {{sum}} and {{sum_total}}
never interfere with each other. Placeholders with no matching variable,
or whose value cannot be formatted, are left in the output verbatim.
"""

import logging

from labelarr.templates.context import LabelContext
from labelarr.templates.parser import Literal, parse_placeholders


def interpolate(text: str, ctx: LabelContext, logger: logging.Logger | None = None) -> str:
    """Substitute every resolvable placeholder in text."""
    logger = logger or logging.getLogger(__name__)
    parts = []
    for node in parse_placeholders(text):
        if isinstance(node, Literal):
            parts.append(node.text)
            continue
        value = ctx.get(node.name)
        if value is None:
            parts.append(node.raw)
            continue
        try:
            parts.append(value.display())
        except (TypeError, ValueError) as e:
            logger.warning(f"Could not format variable '{node.name}': {e}")
            parts.append(node.raw)
    return "".join(parts)


def find_unresolved(text: str, ctx: LabelContext) -> list[str]:
    """Names of placeholders in text that ctx cannot resolve."""
    return [
        node.name
        for node in parse_placeholders(text)
        if not isinstance(node, Literal) and node.name not in ctx
    ]
