"""Monadic Error Handling System

Result[T, E] containers, typed AppError values with an ErrorCode taxonomy,
builder functions, and FastAPI handlers.

Usage:
    from core.errors import Ok, Err, Result, AppError, empty_input

    def require_name(name: str) -> Result[str, AppError]:
        if not name:
            return empty_input("lastname", origin="declension")
        return Ok(name)

    match require_name(""):
        case Ok(name):
            ...
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    validation_error,
    empty_input,
    config_error,
    file_not_found,
    file_read_error,
    internal_error,
)

from .handlers import (
    AppErrorException,
    raise_result,
    register_error_handlers,
    result_to_response,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Validation (E2xxx)
    "validation_error",
    "empty_input",
    # Resource (E6xxx)
    "config_error",
    "file_not_found",
    "file_read_error",
    # Internal (E9xxx)
    "internal_error",
    # Handlers
    "AppErrorException",
    "raise_result",
    "register_error_handlers",
    "result_to_response",
]
