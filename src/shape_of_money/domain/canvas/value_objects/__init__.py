"""Value objects for the canvas document model."""

from shape_of_money.domain.canvas.value_objects.bounds import Bounds
from shape_of_money.domain.canvas.value_objects.budget_kind import BudgetKind
from shape_of_money.domain.canvas.value_objects.dimensions import (
    Dimensions,
    ResizeResult,
)
from shape_of_money.domain.canvas.value_objects.object_type import CanvasObjectType

__all__ = [
    "Bounds",
    "BudgetKind",
    "CanvasObjectType",
    "Dimensions",
    "ResizeResult",
]
