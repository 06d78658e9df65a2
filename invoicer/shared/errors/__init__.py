from .base import (
    AppError,
    CastError,
    ConflictError,
    ErrorKind,
    NotFoundError,
    ServerError,
    TokenExpiredError,
    TokenInvalidError,
    UnauthorizedError,
    ValidationError,
)
from .http import ErrorTranslator, handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "CastError",
    "ConflictError",
    "ErrorKind",
    "ErrorTranslator",
    "NotFoundError",
    "ServerError",
    "TokenExpiredError",
    "TokenInvalidError",
    "UnauthorizedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
