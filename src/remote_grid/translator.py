"""FilterTranslator — grid filter descriptors -> backend filter clauses."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from .coercion import coerce_value
from .descriptors import FilterClause, FilterDescriptor, RangeValue
from .exceptions import CoercionError, TranslationError, UnknownOperatorError
from .operators import Combinator, ComparisonOperator, GridOperator, comparison_for

logger = logging.getLogger(__name__)


def is_applicable(descriptor: FilterDescriptor) -> bool:
    """Return ``False`` for rows that carry no usable value.

    ``None`` never filters; ``""`` only filters for presence operators.
    """
    value = descriptor.value
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return descriptor.operator in (
            GridOperator.EMPTY.value,
            GridOperator.NOT_EMPTY.value,
        )
    return True


def shape_value(value: Any, operator: GridOperator) -> Any:
    """Apply the operator's wildcard or presence shaping to *value*."""
    if operator in (GridOperator.CONTAINS, GridOperator.NOT_CONTAINS):
        return f"%{value}%"
    if operator is GridOperator.STARTS_WITH:
        return f"{value}%"
    if operator is GridOperator.ENDS_WITH:
        return f"%{value}"
    if operator.is_presence:
        return ""
    return value


class FilterTranslator:
    """Translate grid filter rows into backend ``{field, operator, value}`` clauses.

    Output order follows input order; range operators expand into two
    clauses, lower bound first. Rows without a usable value are dropped.

    Rows that cannot be translated (malformed row, unknown operator, value
    that does not fit the operator or coerce to its declared type) are
    dropped with a warning, or raise a
    :class:`~remote_grid.exceptions.TranslationError` when ``strict`` is set.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def translate(
        self,
        descriptors: Iterable[FilterDescriptor | Mapping[str, Any]] | None,
    ) -> list[FilterClause]:
        """Return the backend clauses for *descriptors* (``[]`` for ``None``)."""
        if not descriptors:
            return []
        clauses: list[FilterClause] = []
        for raw in descriptors:
            descriptor = self._descriptor(raw)
            if descriptor is None:
                continue
            if not is_applicable(descriptor):
                logger.debug(
                    "Skipping filter on %r: no value for %r",
                    descriptor.name,
                    descriptor.operator,
                )
                continue
            try:
                clauses.extend(self._build(descriptor))
            except TranslationError as e:
                if self._strict:
                    raise
                logger.warning("Dropping filter on %r: %s", descriptor.name, e)
        return clauses

    __call__ = translate

    # -- internals ----------------------------------------------------------

    def _descriptor(
        self, raw: FilterDescriptor | Mapping[str, Any]
    ) -> FilterDescriptor | None:
        if isinstance(raw, FilterDescriptor):
            return raw
        try:
            return FilterDescriptor.model_validate(raw)
        except ValidationError as e:
            if self._strict:
                raise TranslationError(f"Malformed filter row {raw!r}: {e}") from e
            logger.warning("Dropping malformed filter row %r: %s", raw, e)
            return None

    def _build(self, descriptor: FilterDescriptor) -> list[FilterClause]:
        operator = GridOperator.parse(descriptor.operator)
        if operator is None:
            raise UnknownOperatorError(descriptor.name, descriptor.operator)

        if operator.is_range:
            return self._build_range(descriptor, operator)

        if isinstance(descriptor.value, RangeValue) and not operator.is_presence:
            raise TranslationError(
                f"{operator.value!r} expects a single value, "
                f"got {descriptor.value!r}"
            )

        shaped = shape_value(descriptor.value, operator)
        value = self._coerce(shaped, descriptor, operator)
        return [
            FilterClause(
                field=descriptor.name,
                operator=comparison_for(operator),
                value=value,
            )
        ]

    def _build_range(
        self, descriptor: FilterDescriptor, operator: GridOperator
    ) -> list[FilterClause]:
        bounds = descriptor.value
        if not isinstance(bounds, RangeValue):
            raise TranslationError(
                f"{operator.value!r} expects a {{start, end}} value, "
                f"got {bounds!r}"
            )
        if not bounds.is_bounded:
            logger.debug("Skipping open range on %r", descriptor.name)
            return []

        start = self._coerce(bounds.start, descriptor, operator)
        end = self._coerce(bounds.end, descriptor, operator)
        if operator is GridOperator.IN_RANGE:
            return [
                FilterClause(
                    field=descriptor.name, operator=ComparisonOperator.GE, value=start
                ),
                FilterClause(
                    field=descriptor.name, operator=ComparisonOperator.LE, value=end
                ),
            ]
        return [
            FilterClause(
                field=descriptor.name,
                operator=ComparisonOperator.LT,
                value=start,
                combinator=Combinator.OR,
            ),
            FilterClause(
                field=descriptor.name,
                operator=ComparisonOperator.GT,
                value=end,
                combinator=Combinator.OR,
            ),
        ]

    def _coerce(
        self, shaped: Any, descriptor: FilterDescriptor, operator: GridOperator
    ) -> Any:
        # Presence checks compare against "" whatever the declared type.
        if operator.is_presence:
            return shaped
        result = coerce_value(shaped, descriptor.type)
        if not result.ok:
            raise CoercionError(shaped, str(descriptor.type), result.error or "")
        return result.value


def translate(
    descriptors: Iterable[FilterDescriptor | Mapping[str, Any]] | None,
) -> list[FilterClause]:
    """Translate with a lenient translator."""
    return FilterTranslator().translate(descriptors)
