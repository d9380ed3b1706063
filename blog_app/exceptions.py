"""
Error taxonomy and the FastAPI handlers that turn it into JSON responses.

Every error body has the same shape: {"error": "<message>"}.
Storage and unexpected failures are logged server-side and reach the
client only as a generic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class BlogError(Exception):
    """Base class for errors that map onto an HTTP status"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogError):
    """A required field is missing or empty"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(BlogError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthError(BlogError):
    """
    Missing, invalid or expired credential.

    401 when nothing was presented, 403 when something was presented
    but did not check out.
    """
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str, status_code: int = status.HTTP_401_UNAUTHORIZED):
        super().__init__(message)
        self.status_code = status_code


class StorageError(BlogError):
    """The underlying store failed; never retried"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def blog_error_handler(request: Request, exc: BlogError) -> JSONResponse:
    if isinstance(exc, StorageError):
        # Already logged with its traceback where it was raised
        return _error(exc.status_code, GENERIC_ERROR_MESSAGE)
    return _error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turn FastAPI's 422 into a 400 with a readable message"""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    return _error(status.HTTP_400_BAD_REQUEST, "; ".join(problems) or "Invalid request")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return _error(exc.status_code, "Route not found")
    return _error(exc.status_code, str(exc.detail))


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogError, blog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
