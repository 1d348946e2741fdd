"""Grid-side and backend-side filter models, load request and result."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .operators import Combinator, ComparisonOperator


class RangeValue(BaseModel):
    """Value of a range filter row; either bound may be unset."""

    model_config = ConfigDict(frozen=True)

    start: Any = None
    end: Any = None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None


class FilterDescriptor(BaseModel):
    """One row of grid filter state.

    ``operator`` and ``type`` are kept as received so that unknown tags
    reach the translator, which decides whether to skip or reject them.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    operator: str
    type: str | None = None
    value: Any = None

    @field_validator("value", mode="before")
    @classmethod
    def _range_from_mapping(cls, v: Any) -> Any:
        if isinstance(v, Mapping) and ("start" in v or "end" in v):
            return RangeValue(start=v.get("start"), end=v.get("end"))
        return v


class FilterClause(BaseModel):
    """One backend comparison: ``{field, operator, value, type?}``."""

    model_config = ConfigDict(frozen=True)

    field: str
    operator: ComparisonOperator
    value: Any
    combinator: Combinator | None = None

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready clause; the combinator travels as ``type``."""
        data: dict[str, Any] = {
            "field": self.field,
            "operator": self.operator.value,
            "value": self.value,
        }
        if self.combinator is not None:
            data["type"] = self.combinator.value
        return data


class LoadRequest(BaseModel):
    """Page request issued by the grid widget.

    Accepts both the snake_case names and the grid's own
    ``sortInfo``/``filterValue`` keys. Filter rows that do not validate are
    kept as plain mappings for the translator to drop or reject.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)
    sort_info: Any = Field(default=None, alias="sortInfo")
    filter_value: list[FilterDescriptor | dict[str, Any]] | None = Field(
        default=None, alias="filterValue"
    )


class LoadResult(BaseModel):
    """One page of records plus the server-reported total."""

    model_config = ConfigDict(frozen=True)

    data: list[Any] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)

    @property
    def items(self) -> list[Any]:
        return self.data

    @property
    def total_count(self) -> int:
        return self.count
