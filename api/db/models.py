"""SQLAlchemy models for person records."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class Person(Base):
    __tablename__ = "persons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Not unique: duplicate passport numbers are accepted.
    number_passport = Column(Integer, nullable=True, index=True)
    name = Column(String(255), nullable=True)
    surname = Column(String(255), nullable=True)
    age = Column(Integer, nullable=False, default=0)
    sex = Column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"<Person id={self.id} number_passport={self.number_passport} name={self.name!r}>"
