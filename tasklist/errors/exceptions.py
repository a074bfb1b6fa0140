"""
Error hierarchy for the task list service.

Every error carries a numeric code, a category and a severity, and logs
itself on construction at a level derived from the severity.
"""

import logging
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorSeverity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    BUSINESS = "business"
    VALIDATION = "validation"
    SYSTEM = "system"
    DATABASE = "database"


class ErrorCode:
    """Numeric error codes, grouped by category."""

    # business (1000-1999)
    BUSINESS_RULE_VIOLATION = 1001
    TASK_NOT_FOUND = 1002

    # validation (2000-2999)
    MISSING_REQUIRED_FIELD = 2001
    INVALID_FIELD_FORMAT = 2002
    SCHEMA_VALIDATION_FAILED = 2005

    # system (3000-3999)
    INTERNAL_SERVER_ERROR = 3001

    # database (5000-5999)
    QUERY_EXECUTION_FAILED = 5002


class BaseError(Exception):
    """
    Base class of all service errors.

    Provides the fields rendered into API error bodies (``to_dict``) and
    records itself to the log of the module that defines the concrete class.
    """

    def __init__(
        self,
        message: str,
        error_code: int,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code
        self.category = category
        self.severity = severity

        self.error_id = str(uuid.uuid4())
        self.timestamp = datetime.now()

        self.context = context or {}
        self.cause = cause
        self.suggestions = suggestions or []

        self._log_error()

    def _log_error(self):
        logger = logging.getLogger(self.__class__.__module__)

        log_data = {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "category": self.category.value,
            "severity": self.severity.value,
            "context": self.context,
        }

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical("Critical error: %s", self.message, extra=log_data)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error("High severity error: %s", self.message, extra=log_data)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning("Medium severity error: %s", self.message, extra=log_data)
        else:
            logger.info("Low severity error: %s", self.message, extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.category.value}: {self.message}"


class BusinessError(BaseError):
    """Violation of a business rule, e.g. acting on a task that does not exist."""

    def __init__(
        self,
        message: str,
        error_code: int = ErrorCode.BUSINESS_RULE_VIOLATION,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.BUSINESS,
            severity=severity,
            context=context,
            cause=cause,
            suggestions=suggestions,
        )


class ValidationError(BaseError):
    """Input that fails presence or format checks."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Any = None,
        error_code: int = ErrorCode.MISSING_REQUIRED_FIELD,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[str]] = None,
    ):
        validation_context = context or {}
        if field_name:
            validation_context["field_name"] = field_name
        if field_value is not None:
            validation_context["field_value"] = str(field_value)

        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.VALIDATION,
            severity=severity,
            context=validation_context,
            cause=cause,
            suggestions=suggestions or ["Check the format of the request parameters"],
        )


class SystemError(BaseError):
    """Internal failure not attributable to the caller."""

    def __init__(
        self,
        message: str,
        error_code: int = ErrorCode.INTERNAL_SERVER_ERROR,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.SYSTEM,
            severity=severity,
            context=context,
            cause=cause,
            suggestions=suggestions or ["Retry later"],
        )


class DatabaseError(BaseError):
    """Failure reported by the task store."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        table_name: Optional[str] = None,
        error_code: int = ErrorCode.QUERY_EXECUTION_FAILED,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[str]] = None,
    ):
        db_context = context or {}
        if operation:
            db_context["operation"] = operation
        if table_name:
            db_context["table_name"] = table_name

        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.DATABASE,
            severity=severity,
            context=db_context,
            cause=cause,
            suggestions=suggestions or ["Check that the database file is reachable and writable"],
        )


class TaskNotFoundError(BusinessError):
    def __init__(self, task_id: Any, context: Optional[Dict[str, Any]] = None):
        task_context = dict(context or {})
        task_context["task_id"] = task_id
        super().__init__(
            message=f"Task {task_id} not found",
            error_code=ErrorCode.TASK_NOT_FOUND,
            severity=ErrorSeverity.LOW,
            context=task_context,
            suggestions=["Refresh the task list"],
        )
        self.task_id = task_id


class InvalidIdentifierFormat(ValidationError):
    """A task identifier that cannot be parsed as an integer."""

    def __init__(self, raw_value: Any, cause: Optional[Exception] = None):
        super().__init__(
            message=f"Invalid task identifier: {raw_value!r}",
            field_name="task_id",
            field_value=raw_value,
            error_code=ErrorCode.INVALID_FIELD_FORMAT,
            cause=cause,
            suggestions=["Task identifiers are integers"],
        )
        self.raw_value = raw_value
