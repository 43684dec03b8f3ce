"""Budgeting domain: geometry, treemap, aggregation and synchronization rules."""

from shape_of_money.domain.budgeting.exceptions import (
    InvalidTreemapOptionsError,
    NotABudgetItemError,
    NotASummaryError,
    ObjectNotFoundError,
)

__all__ = [
    "InvalidTreemapOptionsError",
    "NotABudgetItemError",
    "NotASummaryError",
    "ObjectNotFoundError",
]
