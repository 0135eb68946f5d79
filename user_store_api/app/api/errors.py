"""
Exception handlers that render errors as plain text.

Every error response body is the message followed by a newline, with a
``text/plain`` content type.  This covers errors raised by the endpoints
and the framework's own 404 and 405 responses.  Body validation failures
become ``400 Invalid user data`` instead of FastAPI's default 422 JSON
document.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

# Messages used when the framework raises with its default reason phrase.
_DEFAULT_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "404 page not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def plain_error(message: str, status_code: int, headers=None) -> PlainTextResponse:
    return PlainTextResponse(f"{message}\n", status_code=status_code, headers=headers)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    message = exc.detail
    if message == HTTPStatus(exc.status_code).phrase:
        message = _DEFAULT_MESSAGES.get(exc.status_code, message)
    logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, message)
    return plain_error(str(message), exc.status_code, getattr(exc, "headers", None))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.debug("%s %s -> invalid payload: %s", request.method, request.url.path, exc.errors())
    return plain_error("Invalid user data", status.HTTP_400_BAD_REQUEST)


async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
    return plain_error("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the plain text exception handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
