"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    SPACE_NOT_FOUND = "SPACE_NOT_FOUND"
    ACTION_NOT_FOUND = "ACTION_NOT_FOUND"
    MULTI_STEP_ACTION_NOT_FOUND = "MULTI_STEP_ACTION_NOT_FOUND"
    WASTE_ENTRY_NOT_FOUND = "WASTE_ENTRY_NOT_FOUND"
    TODO_NOT_FOUND = "TODO_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_MULTIPLIER = "INVALID_MULTIPLIER"

    # Session state conflicts (409)
    NOT_CLOCKED_IN = "NOT_CLOCKED_IN"
    MULTI_STEP_ACTION_COMPLETED = "MULTI_STEP_ACTION_COMPLETED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500/503)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Input rejected by a domain rule."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details=details,
        )


class SpaceNotFoundError(AppException):
    """Space not found."""

    def __init__(self, space_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.SPACE_NOT_FOUND,
            message=f"Space not found: {space_id}",
            status_code=404,
            details={"space_id": space_id},
        )


class ActionNotFoundError(AppException):
    """Action not found."""

    def __init__(self, action_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ACTION_NOT_FOUND,
            message=f"Action not found: {action_id}",
            status_code=404,
            details={"action_id": action_id},
        )


class MultiStepActionNotFoundError(AppException):
    """Multi-step action not found."""

    def __init__(self, action_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.MULTI_STEP_ACTION_NOT_FOUND,
            message=f"Multi-step action not found: {action_id}",
            status_code=404,
            details={"multi_step_action_id": action_id},
        )


class WasteEntryNotFoundError(AppException):
    """Waste entry not found."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.WASTE_ENTRY_NOT_FOUND,
            message=f"Waste entry not found: {entry_id}",
            status_code=404,
            details={"waste_entry_id": entry_id},
        )


class TodoNotFoundError(AppException):
    """To-do item not found."""

    def __init__(self, todo_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.TODO_NOT_FOUND,
            message=f"To-do not found: {todo_id}",
            status_code=404,
            details={"todo_id": todo_id},
        )


class CommentNotFoundError(AppException):
    """Comment not found."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_NOT_FOUND,
            message=f"Comment not found: {comment_id}",
            status_code=404,
            details={"comment_id": comment_id},
        )


class InvalidMultiplierError(AppException):
    """Multiplier outside the allowed bulk-credit shortcuts."""

    def __init__(self, multiplier: int, allowed: tuple[int, ...]) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_MULTIPLIER,
            message=f"Invalid multiplier: {multiplier}",
            status_code=400,
            details={"multiplier": multiplier, "allowed": list(allowed)},
        )


class NotClockedInError(AppException):
    """Scoring attempted while the space has no active session."""

    def __init__(self, space_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_CLOCKED_IN,
            message="Clock in before recording actions",
            status_code=409,
            details={"space_id": space_id},
        )


class MultiStepActionCompletedError(AppException):
    """All steps of the multi-step action are already completed."""

    def __init__(self, action_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.MULTI_STEP_ACTION_COMPLETED,
            message="All steps of this action are already completed",
            status_code=409,
            details={"multi_step_action_id": action_id},
        )


class PersistenceError(AppException):
    """A repository read or write failed part way through an operation."""

    def __init__(self, operation: str, space_id: str, reason: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=f"Failed to {operation.replace('_', ' ')}. Verify the space before retrying.",
            status_code=503,
            details={"operation": operation, "space_id": space_id, "reason": reason},
        )
