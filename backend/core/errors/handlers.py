"""FastAPI Exception Handlers

Converts AppErrorException and unhandled exceptions into structured JSON
error responses.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.logging import get_logger

from .builders import internal_error
from .types import AppError, Result, T

log = get_logger("errors.handlers")


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Raised by APIs that do not return Result values directly.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self):
        return self.error.code


def result_to_response(error: AppError) -> JSONResponse:
    """Convert AppError to FastAPI JSONResponse."""
    status_code = error.code.http_status

    log_method = log.warning if status_code < 500 else log.error
    log_method(
        "error_response",
        error_code=error.code.name,
        error_code_num=error.code.value,
        message=error.message,
        category=error.code.category,
        correlation_id=error.context.correlation_id,
        origin=error.context.origin,
        metadata=error.metadata,
    )

    return JSONResponse(
        status_code=status_code,
        content=error.to_dict(),
    )


async def app_error_handler(request: Request, exc: AppErrorException) -> JSONResponse:
    """Handle AppErrorException raised in route handlers."""
    error = exc.error.with_context(
        request_id=request.headers.get("X-Request-ID"),
        correlation_id=request.headers.get("X-Correlation-ID"),
    )
    return result_to_response(error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unhandled exceptions."""
    error = internal_error(
        "An unexpected error occurred",
        origin="unhandled",
        cause=exc,
    ).error.with_context(correlation_id=request.headers.get("X-Correlation-ID"))

    log.exception(
        "unhandled_exception",
        error_type=type(exc).__name__,
        error_message=str(exc),
        correlation_id=error.context.correlation_id,
    )

    return result_to_response(error)


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers on the FastAPI app."""
    app.add_exception_handler(AppErrorException, app_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def raise_result(result: Result[T, AppError], exc_type: type[AppErrorException] = AppErrorException) -> T:
    """Raise ``exc_type`` if Result is Err, otherwise return the Ok value.

    Converts the Result flow into exceptions at a public API boundary:

        return raise_result(inflect_result(name, case, rule_set), EmptyInputError)
    """
    if result.is_err():
        raise exc_type(result.unwrap_err())
    return result.unwrap()
