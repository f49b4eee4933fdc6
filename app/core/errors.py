# app/core/errors.py
"""
Error hierarchy for the Pessoas API.

Every error carries the HTTP status it maps to and renders as {"message": ...}.
Server-side failures always render the same fixed message so nothing internal
reaches the client.
"""

from typing import Optional

FAILURE_MESSAGE = "Something went wrong while handling the request"


class PessoasError(Exception):
    """Base exception for all Pessoas API errors."""

    def __init__(self, message: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"message": self.message}


class PersonRejectedError(PessoasError):
    """The request body failed validation, or the nickname is already taken."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, 422)
        self.field = field


class PersonNotFoundError(PessoasError):
    def __init__(self, person_id: str):
        super().__init__("This person does not exist.", 404)
        self.person_id = person_id


class MissingSearchTermError(PessoasError):
    def __init__(self):
        super().__init__("The query parameter 't' is required", 400)


class MalformedRequestError(PessoasError):
    """The body could not be read as a JSON object."""

    def __init__(self, detail: str = "request body is not a JSON object"):
        super().__init__(FAILURE_MESSAGE, 500)
        self.detail = detail


class StoreFailureError(PessoasError):
    """The store could not complete an operation; details were logged by the store."""

    def __init__(self, operation: str):
        super().__init__(FAILURE_MESSAGE, 500)
        self.operation = operation
