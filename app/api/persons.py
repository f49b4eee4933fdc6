# app/api/persons.py

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from app.core.errors import (
    MissingSearchTermError,
    PersonNotFoundError,
    PersonRejectedError,
    StoreFailureError,
)
from app.core.validation import validate_person
from app.db.engine import get_engine
from app.db.store import Outcome, PersonStore, StoreResult
from app.models.persons import CountOut, Person, PersonCreatedOut, PersonOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pessoas"])


def get_store() -> PersonStore:
    return PersonStore(get_engine())


def _person_to_out(person: Person) -> PersonOut:
    return PersonOut(
        id=person.id,
        apelido=person.nickname,
        nome=person.name,
        nascimento=person.birth_date,
        stack=person.stack,
    )


def _raise_on_failure(result: StoreResult, operation: str) -> None:
    # The store already logged the cause
    if result.outcome is Outcome.FAILED:
        raise StoreFailureError(operation)


@router.post("/pessoas", status_code=status.HTTP_201_CREATED, response_model=PersonCreatedOut)
def create_person(
    payload: Any = Body(default=None),
    store: PersonStore = Depends(get_store),
):
    """
    Validate and store a new person; answers with its id and a Location header.
    """
    new_person = validate_person(payload)

    result = store.create(new_person)
    _raise_on_failure(result, "create")

    if result.outcome is Outcome.CONFLICT:
        raise PersonRejectedError("This person already exists.", "apelido")

    person_id = result.value
    logger.info("Person created", extra={"path": f"/pessoas/{person_id}"})

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=PersonCreatedOut(id=person_id).model_dump(),
        headers={"Location": f"/pessoas/{person_id}"},
    )


@router.get("/pessoas/{person_id}", response_model=PersonOut)
def get_person(person_id: str, store: PersonStore = Depends(get_store)) -> PersonOut:
    result = store.fetch_by_id(person_id)
    _raise_on_failure(result, "fetch_by_id")

    if result.outcome is Outcome.NOT_FOUND:
        raise PersonNotFoundError(person_id)

    return _person_to_out(result.value)


@router.get("/pessoas", response_model=List[PersonOut])
def search_people(
    t: Optional[str] = Query(default=None, description="Term matched against name, nickname and stack"),
    store: PersonStore = Depends(get_store),
) -> List[PersonOut]:
    if not t:
        raise MissingSearchTermError()

    result = store.search(t)
    _raise_on_failure(result, "search")

    return [_person_to_out(person) for person in result.value]


@router.get("/contagem-pessoas", response_model=CountOut)
def count_people(store: PersonStore = Depends(get_store)) -> CountOut:
    result = store.count()
    _raise_on_failure(result, "count")

    return CountOut(count=result.value)
