"""
Exception handlers.

Maps the shared exception hierarchy onto HTTP status codes so routes can
let domain errors propagate instead of translating them one by one.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    CookShareError,
    ExternalServiceError,
    NotFoundError,
    StorageError,
    ValidationError,
)

from .models.errors import ValidationErrorResponse

logger = logging.getLogger(__name__)

# Most specific first
STATUS_BY_ERROR: tuple[tuple[type[CookShareError], int], ...] = (
    (NotFoundError, 404),
    (ValidationError, 400),
    (ConflictError, 409),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ExternalServiceError, 500),
)


def status_for(error: CookShareError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


async def cookshare_error_handler(request: Request, exc: CookShareError) -> JSONResponse:
    status_code = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(exc.to_dict()),
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Driver errors that escaped a repository; the message stays server-side
    logger.error("Unhandled storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=StorageError().to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(CookShareError, cookshare_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
