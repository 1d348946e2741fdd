"""Value coercion per declared grid type.

Coercion is total: every input yields a :class:`CoercionResult` that either
carries the coerced value or the reason it could not be produced. Malformed
numbers never turn into NaN inside a query.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .operators import ValueType

_TRUE_LITERALS = frozenset({"true"})
_FALSE_LITERALS = frozenset({"false"})


@dataclass(frozen=True)
class CoercionResult:
    """Outcome of coercing one value.

    Usage::

        result = coerce_value("42", "number")
        if result.ok:
            use(result.value)
    """

    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls, value: Any) -> CoercionResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> CoercionResult:
        return cls(error=error)


def coerce_value(value: Any, value_type: str | None) -> CoercionResult:
    """Coerce *value* according to the descriptor's declared type.

    ``string``/``select``/``date`` stringify, ``number``/``boolean`` become
    numbers (booleans as 0/1), any other type passes through unchanged.
    """
    try:
        declared = ValueType(value_type) if value_type is not None else None
    except ValueError:
        declared = None
    if declared in (ValueType.STRING, ValueType.SELECT, ValueType.DATE):
        return CoercionResult.success(_to_text(value))
    if declared in (ValueType.NUMBER, ValueType.BOOLEAN):
        return _to_number(value)
    return CoercionResult.success(value)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _to_number(value: Any) -> CoercionResult:
    if isinstance(value, bool):
        return CoercionResult.success(int(value))
    if isinstance(value, int):
        return CoercionResult.success(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return CoercionResult.failure("not a finite number")
        return CoercionResult.success(value)
    if isinstance(value, str):
        return _parse_numeric_text(value)
    return CoercionResult.failure(f"unsupported type {type(value).__name__}")


def _parse_numeric_text(raw: str) -> CoercionResult:
    text = raw.strip()
    lowered = text.lower()
    if lowered in _TRUE_LITERALS:
        return CoercionResult.success(1)
    if lowered in _FALSE_LITERALS:
        return CoercionResult.success(0)
    try:
        return CoercionResult.success(int(text))
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return CoercionResult.failure(f"{raw!r} is not numeric")
    if not math.isfinite(number):
        return CoercionResult.failure(f"{raw!r} is not a finite number")
    return CoercionResult.success(number)
