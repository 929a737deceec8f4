"""Pydantic models for the labels API."""

from typing import Any

from pydantic import BaseModel, Field

from labelarr.core import ColumnMeta


class ColumnPayload(BaseModel):
    """Column descriptor as sent by the configuration surface."""

    label: str = Field(..., min_length=1)
    key: str | None = None  # Defaults to the label
    data_type: str | None = None
    is_numeric: bool = False
    is_metric: bool = False
    is_percent_metric: bool = False

    def to_column(self) -> ColumnMeta:
        return ColumnMeta(
            label=self.label,
            key=self.key or self.label,
            data_type=self.data_type,
            is_numeric=self.is_numeric,
            is_metric=self.is_metric,
            is_percent_metric=self.is_percent_metric,
        )


class RenderRequest(BaseModel):
    """Render a template against one column of a result set."""

    template: str
    column: ColumnPayload
    rows: list[dict[str, Any]] = Field(default_factory=list)
    aux_values: dict[str, Any] | None = None
    metrics: list[str] | None = None
    include_metrics: bool | None = None
    escape: bool = False


class RenderResponse(BaseModel):
    label: str
    variables: dict[str, str]
    unresolved: list[str]


class VariableInfo(BaseModel):
    name: str
    category: str
    description: str


class VariablesResponse(BaseModel):
    variables: list[VariableInfo]
    by_category: dict[str, list[str]]


class TransformRequest(BaseModel):
    name: str


class TransformResponse(BaseModel):
    name: str
    label: str
