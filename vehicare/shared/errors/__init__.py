from .base import AppError, InfrastructureError, UniqueViolationError, ValidationError
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "InfrastructureError",
    "UniqueViolationError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
