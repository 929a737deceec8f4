"""Template resolver.

Entry points for turning a label template into display text:

    render(template, context)             any mapping of raw or wrapped values
    render_column_label(template, column, rows, ...)
                                          builds the context, then renders
    generate_column_label(...)            render_column_label, trimmed and
                                          optionally HTML-escaped

Rendering is total: it always returns a string. Malformed directives and
unknown placeholders come back as literal text, never as an exception.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from labelarr.core import ColumnMeta, Row
from labelarr.templates.conditional import ConditionEvaluator, process_conditional_blocks
from labelarr.templates.context import LabelContext
from labelarr.templates.context_builder import ContextBuilder
from labelarr.templates.interpolator import interpolate
from labelarr.utilities.text import escape_html


class TemplateResolver:
    """Renders label templates.

    Usage:
        resolver = TemplateResolver()
        label = resolver.render("{{column_name}} ({{row_count}} rows)", context)

    The resolver keeps no state between calls; one instance can be shared.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(__name__)
        self._evaluator = ConditionEvaluator(logger=self._logger)
        self._builder = ContextBuilder(logger=self._logger)

    def render(self, template: str, context: LabelContext | Mapping[str, Any] | None) -> str:
        """Resolve conditional blocks, then placeholders.

        Args:
            template: Label template
            context: Variables available to the template

        Returns:
            Rendered label; the template itself if rendering fails unexpectedly
        """
        if not template or not isinstance(template, str):
            return ""

        try:
            ctx = LabelContext.coerce(context)
            branched = process_conditional_blocks(template, ctx, self._evaluator)
            result = interpolate(branched, ctx, self._logger)
        except Exception as e:
            self._logger.error(f"Failed to render template '{template}': {e}")
            return template

        self._logger.debug(f"Rendered '{template}' -> '{result}'")
        return result

    def render_column(
        self,
        template: str,
        column: ColumnMeta,
        rows: Sequence[Row] | None = None,
        aux_values: Mapping[str, Any] | None = None,
        metrics: Sequence[str] | None = None,
        include_metrics: bool | None = None,
    ) -> str:
        """Build the column's context and render the template against it."""
        if not template or not isinstance(template, str):
            return ""

        try:
            ctx = self._builder.build(column, rows, aux_values, metrics, include_metrics)
        except Exception as e:
            self._logger.error(f"Failed to build context for column {column!r}: {e}")
            return template

        return self.render(template, ctx)


def render(
    template: str,
    context: LabelContext | Mapping[str, Any] | None,
    logger: logging.Logger | None = None,
) -> str:
    """Convenience function to render a template against a context."""
    return TemplateResolver(logger=logger).render(template, context)


def render_column_label(
    template: str,
    column: ColumnMeta,
    rows: Sequence[Row] | None = None,
    aux_values: Mapping[str, Any] | None = None,
    metrics: Sequence[str] | None = None,
    include_metrics: bool | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """Convenience function to render a template for a single column."""
    return TemplateResolver(logger=logger).render_column(
        template, column, rows, aux_values, metrics, include_metrics
    )


def generate_column_label(
    template: str,
    column: ColumnMeta,
    rows: Sequence[Row] | None = None,
    aux_values: Mapping[str, Any] | None = None,
    metrics: Sequence[str] | None = None,
    include_metrics: bool | None = None,
    escape: bool = False,
    logger: logging.Logger | None = None,
) -> str:
    """Render a column label ready for display.

    Same as render_column_label, with surrounding whitespace trimmed and,
    when escape is set, HTML special characters escaped.
    """
    label = render_column_label(
        template, column, rows, aux_values, metrics, include_metrics, logger
    ).strip()
    return escape_html(label) if escape else label
