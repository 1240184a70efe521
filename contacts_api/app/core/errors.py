"""
Error responses for the Contacts API.

Clients of the service expect every failure as a JSON object with a
single ``error`` key, not FastAPI's default ``{"detail": ...}``.  The
handlers below translate both explicit ``HTTPException`` raises and
request validation failures into that shape.  Validation failures
(malformed JSON, wrong field types, missing body) are reported as
``400 Bad Request`` rather than FastAPI's ``422``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Сообщения об ошибках, которые ожидают существующие клиенты
CONTACT_NOT_FOUND = "Контакт не найден"
INVALID_DATA = "Неверные данные"
CONTACT_DELETED = "Контакт удален"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render an ``HTTPException`` as ``{"error": detail}``.

    A ``400`` always carries ``INVALID_DATA``: FastAPI raises it with its
    own English detail when a body cannot be read at all.
    """
    detail = exc.detail
    if exc.status_code == status.HTTP_400_BAD_REQUEST:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, detail)
        detail = INVALID_DATA
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer any unparsable request payload with ``400 Bad Request``."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": INVALID_DATA},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
