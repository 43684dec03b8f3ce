"""Budgeting domain exceptions."""

from typing import Optional

from shape_of_money.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class ObjectNotFoundError(EntityNotFoundError):
    """Raised when a document object cannot be found."""

    def __init__(self, object_id: Optional[str] = None) -> None:
        super().__init__(
            message=f"Object '{object_id or 'unknown'}' not found",
            code=ErrorCode.OBJECT_NOT_FOUND,
            details={"object_id": object_id},
        )


class NotABudgetItemError(EntityNotFoundError):
    """Raised when an id does not refer to a budget item."""

    def __init__(self, object_id: str, actual_type: Optional[str] = None) -> None:
        super().__init__(
            message=f"Object '{object_id}' is not a budget item",
            code=ErrorCode.BUDGET_ITEM_NOT_FOUND,
            details={"object_id": object_id, "actual_type": actual_type},
        )


class NotASummaryError(EntityNotFoundError):
    """Raised when an id does not refer to a container summary."""

    def __init__(self, object_id: str, actual_type: Optional[str] = None) -> None:
        super().__init__(
            message=f"Object '{object_id}' is not a container summary",
            code=ErrorCode.SUMMARY_NOT_FOUND,
            details={"object_id": object_id, "actual_type": actual_type},
        )


class InvalidTreemapOptionsError(ValidationError):
    """Raised when treemap options cannot be used."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Invalid treemap options: {reason}",
            code=ErrorCode.INVALID_TREEMAP_OPTIONS,
            details={"reason": reason},
        )
