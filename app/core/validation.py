# app/core/validation.py

from typing import Any

from app.core.dates import is_date_valid
from app.core.errors import MalformedRequestError, PersonRejectedError
from app.core.stack import encode_stack
from app.models.persons import NewPerson

MAX_NICKNAME_LENGTH = 32
MAX_NAME_LENGTH = 100
MAX_STACK_ITEM_LENGTH = 32


def _require_text(payload: dict, field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or len(value) == 0:
        raise PersonRejectedError(f"The '{field}' parameter should not be empty", field)
    return value


def _require_stack(payload: dict):
    stack = payload.get("stack")
    # Only a non-empty list or object counts as present; null, [] and any scalar do not
    if not isinstance(stack, (list, dict)) or len(stack) == 0:
        raise PersonRejectedError("The 'stack' parameter should not be empty", "stack")
    return stack


def validate_stack(stack: Any) -> list:
    """
    Check every stack item in order; the first bad item decides the rejection.
    """
    if not isinstance(stack, list):
        raise PersonRejectedError("The 'stack' parameter should have only strings", "stack")

    for item in stack:
        if not isinstance(item, str):
            raise PersonRejectedError(
                "The 'stack' parameter should have only strings", "stack"
            )
        if len(item) > MAX_STACK_ITEM_LENGTH:
            raise PersonRejectedError(
                "The 'stack' parameter should have items with 32 characters or less",
                "stack",
            )
    return stack


def validate_person(payload: Any) -> NewPerson:
    """
    Validate a creation payload and normalize it for the store.

    Checks run in a fixed order and stop at the first failure, so a payload
    with several problems always gets the same message.

    Raises:
        MalformedRequestError: payload is not a JSON object.
        PersonRejectedError: a field failed validation.
    """
    if not isinstance(payload, dict):
        raise MalformedRequestError(f"expected a JSON object, got {type(payload).__name__}")

    nickname = _require_text(payload, "apelido")
    name = _require_text(payload, "nome")
    birth_date = _require_text(payload, "nascimento")
    stack = _require_stack(payload)

    if len(nickname) > MAX_NICKNAME_LENGTH:
        raise PersonRejectedError(
            "The 'apelido' parameter length should be 32 characters or less", "apelido"
        )

    if len(name) > MAX_NAME_LENGTH:
        raise PersonRejectedError(
            "The 'nome' parameter length should be 100 characters or less", "nome"
        )

    if not is_date_valid(birth_date):
        raise PersonRejectedError(
            "The 'nascimento' parameter is not a valid date of format 'YYYY-MM-DD'",
            "nascimento",
        )

    stack = validate_stack(stack)

    return NewPerson(
        nickname=nickname,
        name=name,
        birth_date=birth_date,
        stack=encode_stack(stack),
    )
