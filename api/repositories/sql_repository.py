"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Iterable, Sequence

from sqlalchemy import and_, func, select, true

from api.db.models import Person
from api.db.session import get_session
from api.domain.person_filters import Condition, SortOrder

_OPERATORS = {
    "eq": lambda column, value: column == value,
    "ge": lambda column, value: column >= value,
    "le": lambda column, value: column <= value,
}


def _where(conditions: Iterable[Condition]):
    """Translate domain conditions into a single AND-ed SQL expression."""
    clauses = [_OPERATORS[c.op](getattr(Person, c.field), c.value) for c in conditions]
    if not clauses:
        return true()
    return and_(*clauses)


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- persons --------------------------
    def save_person(self, entity: Person) -> Person:
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def get_person(self, person_id: int) -> Person | None:
        with get_session() as session:
            return session.get(Person, person_id)

    def list_persons(self) -> list[Person]:
        with get_session() as session:
            return session.execute(select(Person)).scalars().all()

    def count_persons(self, conditions: Sequence[Condition] = ()) -> int:
        with get_session() as session:
            stmt = select(func.count()).select_from(Person).where(_where(conditions))
            return int(session.execute(stmt).scalar_one())

    def find_persons(
        self,
        conditions: Sequence[Condition] = (),
        *,
        sort: SortOrder,
        offset: int,
        limit: int,
    ) -> list[Person]:
        column = getattr(Person, sort.field)
        order = column.desc() if sort.descending else column.asc()
        with get_session() as session:
            stmt = (
                select(Person)
                .where(_where(conditions))
                .order_by(order, Person.id.asc())
                .offset(offset)
                .limit(limit)
            )
            return session.execute(stmt).scalars().all()
