"""Canvas document model as seen by the budget engine."""

from shape_of_money.domain.canvas.entities import (
    AllocationLink,
    BudgetItem,
    CanvasObject,
    Container,
    SummaryArtifact,
    new_object_id,
)
from shape_of_money.domain.canvas.ports import DocumentMutator, DocumentView
from shape_of_money.domain.canvas.value_objects import (
    Bounds,
    BudgetKind,
    CanvasObjectType,
    Dimensions,
    ResizeResult,
)

__all__ = [
    "AllocationLink",
    "Bounds",
    "BudgetItem",
    "BudgetKind",
    "CanvasObject",
    "CanvasObjectType",
    "Container",
    "Dimensions",
    "DocumentMutator",
    "DocumentView",
    "ResizeResult",
    "SummaryArtifact",
    "new_object_id",
]
