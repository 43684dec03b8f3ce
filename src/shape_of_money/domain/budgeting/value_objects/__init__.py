"""Value objects for the budgeting domain."""

from shape_of_money.domain.budgeting.value_objects.allocation_status import (
    AllocationStatus,
)
from shape_of_money.domain.budgeting.value_objects.budget_aggregate import (
    BudgetAggregate,
)
from shape_of_money.domain.budgeting.value_objects.remainder_state import (
    RemainderStateTable,
)
from shape_of_money.domain.budgeting.value_objects.treemap import (
    DEFAULT_ASPECT_BOUNDS,
    TreemapCell,
    TreemapItem,
    TreemapLayoutOptions,
)

__all__ = [
    "DEFAULT_ASPECT_BOUNDS",
    "AllocationStatus",
    "BudgetAggregate",
    "RemainderStateTable",
    "TreemapCell",
    "TreemapItem",
    "TreemapLayoutOptions",
]
