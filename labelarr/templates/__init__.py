"""Template engine module.

Renders column label templates such as:
    "{{column_name}} ({{row_count}} rows)" -> "Total Sell In (1,234 rows)"

Supports conditional blocks:
    {% if cond %}...{% elif cond %}...{% else %}...{% endif %}
"""

from labelarr.templates.conditional import (
    Condition,
    ConditionEvaluator,
    ConditionType,
    parse_condition,
    process_conditional_blocks,
    select_branch,
)
from labelarr.templates.context import (
    ABSENT,
    Absent,
    BoolValue,
    ColumnData,
    ColumnStats,
    LabelContext,
    ListValue,
    NumberValue,
    RecordValue,
    TextValue,
    Value,
    to_value,
)
from labelarr.templates.context_builder import (
    ContextBuilder,
    build_context_for_column,
    compute_column_stats,
)
from labelarr.templates.interpolator import find_unresolved, interpolate
from labelarr.templates.parser import (
    Branch,
    ConditionalBlock,
    Literal,
    Placeholder,
    parse_placeholders,
    parse_template,
)
from labelarr.templates.resolver import (
    TemplateResolver,
    generate_column_label,
    render,
    render_column_label,
)
from labelarr.templates.variables import (
    Category,
    VariableRegistry,
    get_registry,
)

__all__ = [
    # Conditional system
    "Condition",
    "ConditionEvaluator",
    "ConditionType",
    "parse_condition",
    "process_conditional_blocks",
    "select_branch",
    # Context types
    "ABSENT",
    "Absent",
    "BoolValue",
    "ColumnData",
    "ColumnStats",
    "LabelContext",
    "ListValue",
    "NumberValue",
    "RecordValue",
    "TextValue",
    "Value",
    "to_value",
    # Context builder
    "ContextBuilder",
    "build_context_for_column",
    "compute_column_stats",
    # Parser
    "Branch",
    "ConditionalBlock",
    "Literal",
    "Placeholder",
    "parse_placeholders",
    "parse_template",
    # Interpolation
    "find_unresolved",
    "interpolate",
    # Resolver
    "TemplateResolver",
    "generate_column_label",
    "render",
    "render_column_label",
    # Registry
    "Category",
    "VariableRegistry",
    "get_registry",
]
