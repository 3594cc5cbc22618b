"""
employee_api.errors

Domain error taxonomy and its HTTP mapping.

Responsibilities:
- Define the errors raised by the auth gates and mutation services.
- Render them (and request validation errors) at the API boundary.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)


class ServiceError(Exception):
    """
    Base for errors that map one-to-one onto an HTTP status.
    """

    status_code: int = HTTP_400_BAD_REQUEST
    default_detail: str = "Bad request"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class Unauthenticated(ServiceError):
    status_code = HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"

    @property
    def headers(self) -> dict[str, str] | None:
        return {"WWW-Authenticate": "Bearer"}


class Forbidden(ServiceError):
    status_code = HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class Conflict(ServiceError):
    status_code = HTTP_409_CONFLICT
    default_detail = "Conflict"


class NotFound(ServiceError):
    status_code = HTTP_404_NOT_FOUND
    default_detail = "Not Found"


async def _service_error_handler(_: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


async def _validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed input is a client error (400), not FastAPI's default 422.
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, _service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]


# --- Module Notes -----------------------------------------------------------
# Errors propagate unmodified from the point of detection; this module is the only
# place that turns them into responses.
