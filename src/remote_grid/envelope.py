"""PageEnvelope — the backend's ``{data, meta: {total}}`` response."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ResponseShapeError

_INT_TEXT = re.compile(r"^\s*[+]?\d+\s*$")


class PageMeta(BaseModel):
    """Pagination metadata; only ``total`` is required."""

    model_config = ConfigDict(extra="allow")

    total: int = Field(ge=0)

    @field_validator("total", mode="before")
    @classmethod
    def _parse_total(cls, v: Any) -> int:
        if isinstance(v, bool):
            raise ValueError("total must be an integer, got a boolean")
        if isinstance(v, int):
            return v
        if isinstance(v, float) and v.is_integer():
            return int(v)
        if isinstance(v, str) and _INT_TEXT.match(v):
            return int(v)
        raise ValueError(f"total must be an integer, got {v!r}")


class PageEnvelope(BaseModel):
    """One page of records as returned by the listing/search endpoints."""

    model_config = ConfigDict(extra="allow")

    data: list[Any]
    meta: PageMeta

    @classmethod
    def parse(cls, body: Any) -> PageEnvelope:
        """Validate *body*, raising :class:`ResponseShapeError` on mismatch."""
        if not isinstance(body, Mapping):
            raise ResponseShapeError(
                f"expected an object, got {type(body).__name__}", body
            )
        try:
            return cls.model_validate(body)
        except ValidationError as e:
            reasons = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ResponseShapeError(reasons, body) from e
