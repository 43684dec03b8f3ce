"""Entities of the canvas document model."""

from shape_of_money.domain.canvas.entities.allocation_link import AllocationLink
from shape_of_money.domain.canvas.entities.budget_item import (
    DEFAULT_CURRENCY,
    DEFAULT_ITEM_AMOUNT,
    DEFAULT_ITEM_NAME,
    BudgetItem,
)
from shape_of_money.domain.canvas.entities.canvas_object import (
    CanvasObject,
    new_object_id,
)
from shape_of_money.domain.canvas.entities.container import Container
from shape_of_money.domain.canvas.entities.summary_artifact import (
    SUMMARY_DISPLAY_KEYS,
    SummaryArtifact,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_ITEM_AMOUNT",
    "DEFAULT_ITEM_NAME",
    "SUMMARY_DISPLAY_KEYS",
    "AllocationLink",
    "BudgetItem",
    "CanvasObject",
    "Container",
    "SummaryArtifact",
    "new_object_id",
]
