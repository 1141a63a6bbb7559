"""
API error handling and result mapping.

Core operations return Ok/Err results. Routes call ``unwrap`` to get the
value out of an Ok; an Err is raised as ResultError and rendered by the
handlers below as an ErrorResponse with the matching HTTP status.
"""

from datetime import datetime

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from presentation_service.api.schemas import ErrorResponse
from presentation_service.domain_core.result import Err, ErrorKind, Result
from presentation_service.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_BY_KIND = {
    ErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_TITLE: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INDEX_OUT_OF_RANGE: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ResultError(Exception):
    """Carries an Err result out of a route handler."""

    def __init__(self, err: Err):
        self.err = err
        super().__init__(err.detail)


def unwrap(result: Result):
    """Return the value of an Ok result or raise ResultError for an Err."""
    if isinstance(result, Err):
        raise ResultError(result)
    return result.value


def _error_json(status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, timestamp=datetime.utcnow())
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def result_error_handler(request: Request, exc: ResultError) -> JSONResponse:
    """Handle Err results raised from routes."""
    status_code = STATUS_BY_KIND.get(
        exc.err.kind, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    if status_code >= 500:
        logger.error("result.error", kind=exc.err.kind.value, detail=exc.err.detail)
        detail = "An unexpected storage error occurred. Please try again later."
    else:
        logger.warning("result.error", kind=exc.err.kind.value, detail=exc.err.detail)
        detail = exc.err.detail

    return _error_json(status_code, exc.err.kind.value, detail)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies with the same status as domain validation."""
    logger.warning("request.validation_error", errors=str(exc.errors()))

    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    return _error_json(
        status.HTTP_400_BAD_REQUEST,
        ErrorKind.VALIDATION_ERROR.value,
        "Validation failed: " + "; ".join(formatted_errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning("http.exception", status_code=exc.status_code, detail=exc.detail)
    return _error_json(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unexpected.error", error_type=type(exc).__name__, error=str(exc))
    return _error_json(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def setup_error_handlers(app) -> None:
    """
    Setup error handlers for the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ResultError, result_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
