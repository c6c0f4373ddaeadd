"""
Exception taxonomy and global exception handlers.
Every error leaves the API as ``{"error": message}`` with the matching status code.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""
    def __init__(self, message: str = "Invalid request"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class NotFoundError(AppError):
    """Referenced entity does not exist."""
    def __init__(self, message: str = "Entity not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class ConflictError(AppError):
    """Uniqueness violation. Reported as 400, like other client mistakes."""
    def __init__(self, message: str = "Entity already exists"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class UnexpectedError(AppError):
    """Store failure or any uncaught fault."""
    def __init__(self, message: str = "Unexpected error"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render taxonomy errors raised by services."""
    if exc.status_code >= 500:
        logger.error("Request aborted", path=request.url.path, error=exc.message)
    else:
        logger.info(
            "Request rejected",
            path=request.url.path,
            code=exc.__class__.__name__,
            error=exc.message,
        )
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bodies FastAPI cannot parse (bad JSON, wrong type) are plain 400s."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return error_response(ValidationError(message))


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle store failures and anything else nobody caught."""
    logger.exception("Unexpected error occurred", path=request.url.path)
    return error_response(UnexpectedError(str(exc) or exc.__class__.__name__))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
