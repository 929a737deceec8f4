"""Labels API endpoints.

Provides REST API for:
- Rendering a label template against a column and its rows (preview)
- Listing built-in template variables
- Transforming raw column identifiers into friendly names
"""

import logging

from fastapi import APIRouter, HTTPException

from labelarr.api.models import (
    RenderRequest,
    RenderResponse,
    TransformRequest,
    TransformResponse,
    VariableInfo,
    VariablesResponse,
)
from labelarr.templates import ContextBuilder, TemplateResolver, find_unresolved, get_registry
from labelarr.utilities import escape_html, transform_column_name

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/labels/render", response_model=RenderResponse)
def render_label(request: RenderRequest):
    """Render a template for a column, returning the label and its variables."""
    ctx = ContextBuilder().build(
        column=request.column.to_column(),
        rows=request.rows,
        aux_values=request.aux_values,
        metrics=request.metrics,
        include_metrics=request.include_metrics,
    )
    label = TemplateResolver().render(request.template, ctx)
    unresolved = find_unresolved(label, ctx)
    if unresolved:
        logger.info(f"Template for '{request.column.label}' left unresolved: {unresolved}")

    label = label.strip()
    return RenderResponse(
        label=escape_html(label) if request.escape else label,
        variables=ctx.display_values(),
        unresolved=unresolved,
    )


@router.get("/labels/variables", response_model=VariablesResponse)
def list_variables():
    """List built-in template variables."""
    registry = get_registry()
    return VariablesResponse(
        variables=[
            VariableInfo(
                name=definition.name,
                category=definition.category.value,
                description=definition.description,
            )
            for definition in registry.all_variables()
        ],
        by_category={
            category.value: [definition.name for definition in definitions]
            for category, definitions in registry.by_category().items()
        },
    )


@router.post("/labels/transform", response_model=TransformResponse)
def transform_name(request: TransformRequest):
    """Transform a raw column identifier into a friendly label."""
    if not request.name.strip():
        raise HTTPException(status_code=400, detail="Column name is required")
    return TransformResponse(name=request.name, label=transform_column_name(request.name))
