"""Person record use cases (creation, listing, paging, filtering)."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from api.core.config import get_settings
from api.db.models import Person
from api.domain.person_filters import (
    FilterCriteria,
    SortOrder,
    build_conditions,
    normalize_direction,
    sort_attribute,
)
from api.domain.random_people import random_person_fields
from api.repositories.sql_repository import SQLRepository
from api.schemas.person import PersonView
from api.services import person_mapper

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class PersonServiceError(Exception):
    """Base exception for person workflows."""


class InvalidArgumentError(PersonServiceError):
    """Raised when caller-supplied arguments cannot be honoured."""


class InvalidSortError(InvalidArgumentError):
    """Unknown sort field or direction keyword."""


class InvalidPageRequestError(InvalidArgumentError):
    """Negative page index or non-positive page size."""


class InvalidCountError(InvalidArgumentError):
    """Negative number of records requested."""


@dataclass
class Page(Generic[T]):
    content: list[T]
    page_number: int
    page_size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.page_number == 0

    @property
    def last(self) -> bool:
        return self.page_number + 1 >= self.total_pages

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            content=[fn(item) for item in self.content],
            page_number=self.page_number,
            page_size=self.page_size,
            total_elements=self.total_elements,
        )


class PersonService:
    """Creates person records and serves paged, sorted and filtered listings."""

    def __init__(self, repository: SQLRepository | None = None, rng: random.Random | None = None) -> None:
        self.repository = repository or SQLRepository()
        # Seeded only when RANDOM_SEED is configured; otherwise OS entropy.
        self.rng = rng if rng is not None else random.Random(get_settings().random_seed)

    # -------------------------- creation --------------------------
    def create_person(self, view: PersonView) -> PersonView:
        saved = self.repository.save_person(person_mapper.to_entity(view))
        logger.debug("Stored person id=%s", saved.id)
        return person_mapper.to_view(saved)

    def create_random_persons(self, count: int) -> str:
        if count < 0:
            raise InvalidCountError(f"count must be >= 0, got {count}")
        # One insert per record; earlier rows stay if a later insert fails.
        for _ in range(count):
            self.create_person(PersonView(**random_person_fields(self.rng)))
        logger.info("Created %d random persons", count)
        return f"Successfully created: {count} records in the database"

    # -------------------------- listing --------------------------
    def find_all_persons(self) -> list[PersonView]:
        return person_mapper.to_view_list(self.repository.list_persons())

    def find_all_persons_page(
        self, page: int, size: int, sort_field: str, sort_direction: str
    ) -> Page[Person]:
        return self._find_page(FilterCriteria(page=page, size=size, sort_field=sort_field, sort_direction=sort_direction))

    def find_all_persons_page_dto(
        self, page: int, size: int, sort_field: str, sort_direction: str
    ) -> Page[PersonView]:
        return self.find_all_persons_page(page, size, sort_field, sort_direction).map(person_mapper.to_view)

    def find_all_persons_page_dto_filtered(self, criteria: FilterCriteria) -> Page[PersonView]:
        return self._find_page(criteria, filtered=True).map(person_mapper.to_view)

    # -------------------------- helpers --------------------------
    def _find_page(self, criteria: FilterCriteria, *, filtered: bool = False) -> Page[Person]:
        sort = self._sort_order(criteria.sort_field, criteria.sort_direction)
        if criteria.page < 0:
            raise InvalidPageRequestError(f"page must be >= 0, got {criteria.page}")
        if criteria.size < 1:
            raise InvalidPageRequestError(f"size must be >= 1, got {criteria.size}")
        conditions = build_conditions(criteria) if filtered else []
        total = self.repository.count_persons(conditions)
        rows = self.repository.find_persons(
            conditions,
            sort=sort,
            offset=criteria.page * criteria.size,
            limit=criteria.size,
        )
        return Page(content=rows, page_number=criteria.page, page_size=criteria.size, total_elements=total)

    def _sort_order(self, field: str, direction: str) -> SortOrder:
        attr = sort_attribute(field)
        if not attr:
            raise InvalidSortError(f"Unknown sort field: {field!r}")
        normalized = normalize_direction(direction)
        if not normalized:
            raise InvalidSortError(f"Invalid sort direction: {direction!r} (use 'asc' or 'desc')")
        return SortOrder(attr, normalized)
