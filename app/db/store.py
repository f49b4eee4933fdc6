# app/db/store.py
"""
Persistence boundary for persons.

Every operation returns a StoreResult instead of raising: store errors are
logged here, once, and reported as Outcome.FAILED. Nickname uniqueness is
enforced by a single conditional INSERT, so concurrent creations of the
same nickname never race.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List
from uuid import uuid4

from sqlalchemy import String, func, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.stack import decode_stack
from app.db.schema import people
from app.models.persons import NewPerson, Person

logger = logging.getLogger(__name__)

# str(uuid4()) is always 36 characters
PERSON_ID_LENGTH = 36
SEARCH_LIMIT = 50

_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class Outcome(str, Enum):
    OK = "ok"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class StoreResult:
    outcome: Outcome
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


def _row_to_person(row) -> Person:
    return Person(
        id=row["id"],
        nickname=row["nickname"],
        name=row["name"],
        birth_date=row["birth_date"],
        stack=decode_stack(row["stack"]),
    )


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped.lower()}%"


class PersonStore:
    def __init__(self, engine: Engine):
        dialect = engine.dialect.name
        if dialect not in _INSERTS:
            raise ValueError(f"Unsupported database dialect: {dialect}")
        self.engine = engine
        self._insert = _INSERTS[dialect]

    def _failed(self, operation: str) -> StoreResult:
        logger.exception(
            "Store %s failed",
            operation,
            extra={"operation": operation, "outcome": Outcome.FAILED.value},
        )
        return StoreResult(Outcome.FAILED)

    def create(self, person: NewPerson) -> StoreResult:
        """
        Insert a person under a fresh id.

        OK carries the new id; CONFLICT means the nickname is taken and no row was written.
        """
        person_id = str(uuid4())
        stmt = (
            self._insert(people)
            .values(
                id=person_id,
                nickname=person.nickname,
                name=person.name,
                birth_date=person.birth_date,
                stack=person.stack,
            )
            .on_conflict_do_nothing(index_elements=[people.c.nickname])
            .returning(people.c.id)
        )

        try:
            with self.engine.begin() as conn:
                inserted_id = conn.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError:
            return self._failed("create")

        if inserted_id is None:
            logger.info("Nickname already taken", extra={"outcome": Outcome.CONFLICT.value})
            return StoreResult(Outcome.CONFLICT)

        return StoreResult(Outcome.OK, inserted_id)

    def fetch_by_id(self, person_id: str) -> StoreResult:
        # Ids of the wrong shape can't exist; don't bother the database
        if len(person_id) != PERSON_ID_LENGTH:
            return StoreResult(Outcome.NOT_FOUND)

        stmt = select(
            people.c.id,
            people.c.nickname,
            people.c.name,
            people.c.birth_date,
            people.c.stack,
        ).where(people.c.id == person_id)

        try:
            with self.engine.connect() as conn:
                row = conn.execute(stmt).mappings().first()
        except SQLAlchemyError:
            return self._failed("fetch_by_id")

        if row is None:
            return StoreResult(Outcome.NOT_FOUND)

        return StoreResult(Outcome.OK, _row_to_person(row))

    def search(self, term: str) -> StoreResult:
        """
        Case-insensitive substring search over name, nickname and stack.

        Wildcards in `term` match literally. At most SEARCH_LIMIT persons are returned.
        """
        haystack = func.lower(
            people.c.name + " " + people.c.nickname + " " + people.c.stack,
            type_=String,
        )
        stmt = (
            select(
                people.c.id,
                people.c.nickname,
                people.c.name,
                people.c.birth_date,
                people.c.stack,
            )
            .where(haystack.like(_like_pattern(term), escape="\\"))
            .limit(SEARCH_LIMIT)
        )

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError:
            return self._failed("search")

        persons: List[Person] = [_row_to_person(row) for row in rows]
        return StoreResult(Outcome.OK, persons)

    def count(self) -> StoreResult:
        stmt = select(func.count()).select_from(people)

        try:
            with self.engine.connect() as conn:
                total = conn.execute(stmt).scalar()
        except SQLAlchemyError:
            return self._failed("count")

        return StoreResult(Outcome.OK, total or 0)
