# app/api/error_handlers.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import FAILURE_MESSAGE, MalformedRequestError, PessoasError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """
    PessoasError renders with its own status; anything else becomes a 500
    carrying the fixed failure message.
    """

    @app.exception_handler(PessoasError)
    async def pessoas_error_handler(request: Request, exc: PessoasError):
        if isinstance(exc, MalformedRequestError):
            logger.warning(
                "Malformed request: %s", exc.detail, extra={"path": request.url.path}
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        # Only reachable for bodies that are not parseable JSON
        logger.warning(
            "Unreadable request on %s: %s", request.url.path, exc.errors(),
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": FAILURE_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s", request.url.path,
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": FAILURE_MESSAGE},
        )
