"""
Error response formatting.

Turns any exception into the standard API error body; foreign exceptions
are wrapped in a SystemError first.
"""

import traceback
from typing import Any, Dict

from .exceptions import BaseError, ErrorSeverity, SystemError


class ErrorResponseFormatter:
    @staticmethod
    def format_for_api(error: BaseError, include_debug: bool = False) -> Dict[str, Any]:
        """
        Args:
            error: the error to render
            include_debug: attach the cause's type, message and traceback

        Returns:
            ``{"success": False, "error": {...}}``
        """
        response_data = {"success": False, "error": error.to_dict()}

        if include_debug and error.cause:
            response_data["error"]["debug_info"] = {
                "cause_type": type(error.cause).__name__,
                "cause_message": str(error.cause),
                "traceback": (
                    traceback.format_exception(type(error.cause), error.cause, error.cause.__traceback__)
                    if error.cause.__traceback__
                    else None
                ),
            }

        return response_data


def as_base_error(exception: Exception) -> BaseError:
    if isinstance(exception, BaseError):
        return exception
    return SystemError(message=str(exception), cause=exception, severity=ErrorSeverity.HIGH)


def handle_api_error(exception: Exception, include_debug: bool = False) -> Dict[str, Any]:
    return ErrorResponseFormatter.format_for_api(as_base_error(exception), include_debug)

