"""Map domain exceptions onto the error envelope.

This is the one place that decides HTTP status codes.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import RequestValidationFailed, TaskboardError
from ..core.logging import get_logger
from ..core.schemas.common import ApiResponse
from ..core.schemas.validation import format_validation_errors

logger = get_logger("api.errors")


def error_response(status_code: int, errors: list[str]) -> JSONResponse:
    """Build ``{success: false, errors: [...]}`` with the given status."""
    body = ApiResponse.fail(errors).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


async def taskboard_error_handler(request: Request, exc: TaskboardError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "error": type(exc).__name__, "detail": exc.detail},
        )
    return error_response(exc.status_code, exc.messages or ["Unexpected error"])


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 with one readable message per invalid field."""
    messages = format_validation_errors(exc.errors())
    logger.info("Request validation failed", extra={"path": request.url.path, "errors": messages})
    return await taskboard_error_handler(
        request, RequestValidationFailed("Request validation failed", messages)
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else still answers with the error envelope."""
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"path": request.url.path, "error": type(exc).__name__},
    )
    return error_response(500, [str(exc) or "Internal server error"])


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskboardError, taskboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
