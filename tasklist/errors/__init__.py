"""
Error handling for the task list service.

- Custom exception classes
- Error response formatting
"""

from .exceptions import (
    BaseError,
    BusinessError,
    DatabaseError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    InvalidIdentifierFormat,
    SystemError,
    TaskNotFoundError,
    ValidationError,
)
from .handlers import ErrorResponseFormatter, handle_api_error

__all__ = [
    "BaseError",
    "BusinessError",
    "DatabaseError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "InvalidIdentifierFormat",
    "SystemError",
    "TaskNotFoundError",
    "ValidationError",
    "ErrorResponseFormatter",
    "handle_api_error",
]
