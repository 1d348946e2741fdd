"""Grid operator tags, backend comparison symbols and the mapping between them."""

from __future__ import annotations

from enum import Enum

from typing_extensions import assert_never


class GridOperator(str, Enum):
    """Operators a grid filter row can carry."""

    # String matching
    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"

    # Equality / presence
    EQ = "eq"
    NEQ = "neq"
    EMPTY = "empty"
    NOT_EMPTY = "notEmpty"

    # Ordering
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    # Ranges (expanded into two clauses)
    IN_RANGE = "inrange"
    NOT_IN_RANGE = "notinrange"

    @classmethod
    def parse(cls, raw: str) -> GridOperator | None:
        """Return the operator for *raw*, or ``None`` when it is unknown."""
        try:
            return cls(raw)
        except ValueError:
            return None

    @property
    def is_range(self) -> bool:
        return self in (GridOperator.IN_RANGE, GridOperator.NOT_IN_RANGE)

    @property
    def is_presence(self) -> bool:
        return self in (GridOperator.EMPTY, GridOperator.NOT_EMPTY)


class ComparisonOperator(str, Enum):
    """Comparison symbols understood by the backend filtering convention."""

    LIKE = "like"
    NOT_LIKE = "not like"
    EQ = "="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="


class ValueType(str, Enum):
    """Declared value types with a dedicated coercion."""

    STRING = "string"
    SELECT = "select"
    DATE = "date"
    NUMBER = "number"
    BOOLEAN = "boolean"


class Combinator(str, Enum):
    """Clause combinators; AND is implicit and never serialised."""

    OR = "or"


def comparison_for(operator: GridOperator) -> ComparisonOperator:
    """Map a single-clause grid operator to its comparison symbol.

    Range operators map to the symbol of their lower-bound clause; the
    translator emits both bounds explicitly.
    """
    match operator:
        case GridOperator.CONTAINS | GridOperator.STARTS_WITH | GridOperator.ENDS_WITH:
            return ComparisonOperator.LIKE
        case GridOperator.NOT_CONTAINS:
            return ComparisonOperator.NOT_LIKE
        case GridOperator.EQ | GridOperator.EMPTY:
            return ComparisonOperator.EQ
        case GridOperator.NEQ | GridOperator.NOT_EMPTY:
            return ComparisonOperator.NE
        case GridOperator.GT:
            return ComparisonOperator.GT
        case GridOperator.GTE | GridOperator.IN_RANGE:
            return ComparisonOperator.GE
        case GridOperator.LT | GridOperator.NOT_IN_RANGE:
            return ComparisonOperator.LT
        case GridOperator.LTE:
            return ComparisonOperator.LE
        case _:
            assert_never(operator)
