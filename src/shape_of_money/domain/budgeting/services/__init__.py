"""Domain services of the budget consistency engine."""

from shape_of_money.domain.budgeting.services.aggregation_service import (
    AggregationService,
)
from shape_of_money.domain.budgeting.services.allocation_resolver import (
    resolve_allocations,
)
from shape_of_money.domain.budgeting.services.allocation_sync_service import (
    ALLOCATION_TOLERANCE,
    REMAINDER_LINK_LENGTH,
    AllocationSyncService,
)
from shape_of_money.domain.budgeting.services.geometry_service import (
    AMOUNT_TO_AREA_SCALE,
    MIN_BUDGET_ITEM_SIZE,
    GeometryService,
)
from shape_of_money.domain.budgeting.services.summary_reconciliation_service import (
    SUMMARY_HEIGHT,
    SUMMARY_OFFSET_X,
    SUMMARY_WIDTH,
    SummaryReconciliationService,
)
from shape_of_money.domain.budgeting.services.treemap_layout_service import (
    TreemapLayoutService,
)

__all__ = [
    "ALLOCATION_TOLERANCE",
    "AMOUNT_TO_AREA_SCALE",
    "MIN_BUDGET_ITEM_SIZE",
    "REMAINDER_LINK_LENGTH",
    "SUMMARY_HEIGHT",
    "SUMMARY_OFFSET_X",
    "SUMMARY_WIDTH",
    "AggregationService",
    "AllocationSyncService",
    "GeometryService",
    "SummaryReconciliationService",
    "TreemapLayoutService",
    "resolve_allocations",
]
