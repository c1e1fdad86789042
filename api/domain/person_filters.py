"""Domain helpers for person filtering and sort validation.

Filter criteria are turned into a flat list of ``Condition`` values that know
nothing about SQLAlchemy. The repository translates them into a WHERE clause and
``matches`` evaluates them in memory; both honour the same AND semantics.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

SORT_ASC = "asc"
SORT_DESC = "desc"

# Wire name -> attribute name on the Person record.
SORTABLE_FIELDS = {
    "id": "id",
    "numberPassport": "number_passport",
    "number_passport": "number_passport",
    "name": "name",
    "surname": "surname",
    "age": "age",
    "sex": "sex",
}

# Criteria attribute -> record attribute for exact-match filters.
EXACT_MATCH_FIELDS = (
    ("number_passport", "number_passport"),
    ("name", "name"),
    ("surname", "surname"),
    ("age", "age"),
    ("sex", "sex"),
)


@dataclass(frozen=True)
class FilterCriteria:
    """Optional filters plus paging/sort for a person listing.

    ``None`` (or an empty string for text fields) means the dimension is not
    constrained.
    """

    number_passport: int | None = None
    name: str | None = None
    surname: str | None = None
    age: int | None = None
    sex: str | None = None
    start_age: int | None = None
    finish_age: int | None = None
    page: int = 0
    size: int = 10
    sort_field: str = "numberPassport"
    sort_direction: str = SORT_ASC


@dataclass(frozen=True)
class Condition:
    field: str
    op: str  # "eq", "ge" or "le"
    value: Any


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: str

    @property
    def descending(self) -> bool:
        return self.direction == SORT_DESC


def _supplied(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def build_conditions(criteria: FilterCriteria) -> list[Condition]:
    """Return one condition per supplied criterion; an empty list matches everything."""
    conditions: list[Condition] = []
    for source, target in EXACT_MATCH_FIELDS:
        value = getattr(criteria, source)
        if _supplied(value):
            conditions.append(Condition(target, "eq", value))
    if _supplied(criteria.start_age):
        conditions.append(Condition("age", "ge", criteria.start_age))
    if _supplied(criteria.finish_age):
        conditions.append(Condition("age", "le", criteria.finish_age))
    return conditions


def _holds(condition: Condition, actual: Any) -> bool:
    if condition.op == "eq":
        return actual == condition.value
    if actual is None:
        return False
    if condition.op == "ge":
        return actual >= condition.value
    if condition.op == "le":
        return actual <= condition.value
    raise ValueError(f"Unknown operator: {condition.op}")


def matches(conditions: Iterable[Condition], record: Any) -> bool:
    """True when ``record`` satisfies every condition."""
    return all(_holds(c, getattr(record, c.field, None)) for c in conditions)


def sort_attribute(field: str | None) -> str | None:
    """Map a wire field name to the record attribute, or None when unknown."""
    return SORTABLE_FIELDS.get((field or "").strip())


def normalize_direction(direction: str | None) -> str | None:
    """Return ``"asc"``/``"desc"`` for any casing, or None when unrecognised."""
    normalized = (direction or "").strip().lower()
    if normalized in (SORT_ASC, SORT_DESC):
        return normalized
    return None
