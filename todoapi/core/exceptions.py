"""
Custom exceptions for the Todo Items service.

Design pattern: Base exception → Specific exceptions
- TodoAPIError: Base for all errors raised by request handlers
- TodoNotFoundError: the lookup for a todo item came back empty
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standardized error codes for API responses.

    Naming convention: <DOMAIN>_<NUMBER>
    - TODO_xxx: Todo item errors
    - API_xxx: General API errors
    """

    # Todo errors
    TODO_NOT_FOUND = "TODO_001"

    # API errors
    VALIDATION_ERROR = "API_001"
    INTERNAL_ERROR = "API_002"


class TodoAPIError(Exception):
    """
    Base exception for errors surfaced by the todo handlers.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status code
        error_code: Machine-readable error identifier
        details: Additional context for logging
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Any = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }


class TodoNotFoundError(TodoAPIError):
    """
    Raised when no todo item exists for the requested id.

    HTTP Status: 404 Not Found (empty body)
    """

    def __init__(self, todo_id: int):
        super().__init__(
            message=f"Todo {todo_id} not found",
            status_code=404,
            error_code=ErrorCode.TODO_NOT_FOUND,
            details={"id": todo_id}
        )
        self.todo_id = todo_id
