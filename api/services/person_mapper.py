"""
Conversions between the Person entity and its transport views.
"""

from __future__ import annotations

from typing import Iterable

from api.db.models import Person
from api.schemas.person import PersonRead, PersonView


def to_entity(view: PersonView) -> Person:
    """Build a new, unsaved entity. The id is always left to the store."""
    return Person(
        number_passport=view.number_passport,
        name=view.name,
        surname=view.surname,
        age=view.age,
        sex=view.sex,
    )


def to_view(entity: Person) -> PersonView:
    return PersonView(
        number_passport=entity.number_passport,
        name=entity.name,
        surname=entity.surname,
        age=entity.age,
        sex=entity.sex,
    )


def to_read(entity: Person) -> PersonRead:
    return PersonRead(
        id=entity.id,
        number_passport=entity.number_passport,
        name=entity.name,
        surname=entity.surname,
        age=entity.age,
        sex=entity.sex,
    )


def to_view_list(entities: Iterable[Person]) -> list[PersonView]:
    return [to_view(entity) for entity in entities]
