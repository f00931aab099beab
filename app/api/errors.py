from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from data.errors import NotFoundError, ValidationError

log = logging.getLogger(__name__)

T = TypeVar("T")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def guarded(message: str, fn: Callable[[], T]) -> T | JSONResponse:
    """
    Run a handler body; anything other than a user-facing error becomes a 500
    carrying `message`.
    """
    try:
        return fn()
    except (ValidationError, NotFoundError):
        raise
    except Exception:
        log.exception(message)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation(_: Request, exc: ValidationError) -> JSONResponse:
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(NotFoundError)
    async def _not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))

    # Undecodable JSON bodies: FastAPI would answer 422
    @app.exception_handler(RequestValidationError)
    async def _bad_body(_: Request, exc: RequestValidationError) -> JSONResponse:
        log.info("Rejected request body: %s", exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "Request body must be valid JSON")
