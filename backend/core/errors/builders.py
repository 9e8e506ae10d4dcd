"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder returns Err[AppError]
with the appropriate code and context.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def empty_input(field: str, origin: str = "") -> Err[AppError]:
    """An empty name part was passed where a value is required."""
    return validation_error(
        f"{field.capitalize()} cannot be empty",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
    )


# =============================================================================
# Resource / Configuration Errors (E6xxx)
# =============================================================================

def config_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E6020_CONFIG_INVALID,
    path: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create configuration/resource error."""
    meta = {"path": path, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def file_not_found(path: str, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    return config_error(
        f"Rules file not found: {path}",
        code=ErrorCode.E6001_FILE_NOT_FOUND,
        path=path,
        origin=origin,
        cause=cause,
    )


def file_read_error(path: str, reason: str, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    return config_error(
        f"Cannot read rules file {path}: {reason}",
        code=ErrorCode.E6002_FILE_READ_ERROR,
        path=path,
        origin=origin,
        cause=cause,
    )


# =============================================================================
# Internal Errors (E9xxx)
# =============================================================================

def internal_error(
    message: str,
    *,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create internal/unexpected error."""
    return Err(AppError(
        code=ErrorCode.E9001_UNEXPECTED_ERROR,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=cause,
    ))
