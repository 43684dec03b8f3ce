"""Module-level entry points of the budget consistency engine.

These wrap the services with the current settings. Hosts that keep a
document open should hold on to a BudgetSyncService (or a
BudgetDocumentWatcher) so remainder-link deletions are recognized
across calls.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from shape_of_money.application.dtos.sync_report_dto import SyncReport
from shape_of_money.application.services.budget_sync_service import (
    BudgetSyncService,
)
from shape_of_money.domain.budgeting.exceptions import InvalidTreemapOptionsError
from shape_of_money.domain.budgeting.services import (
    AggregationService,
    GeometryService,
    TreemapLayoutService,
)
from shape_of_money.domain.budgeting.value_objects import (
    BudgetAggregate,
    RemainderStateTable,
    TreemapCell,
    TreemapItem,
    TreemapLayoutOptions,
)
from shape_of_money.domain.canvas.entities import BudgetItem
from shape_of_money.domain.canvas.ports import DocumentMutator, DocumentView
from shape_of_money.domain.canvas.value_objects import Dimensions, ResizeResult
from shape_of_money_config import get_settings

TreemapOptionsInput = Union[TreemapLayoutOptions, Mapping[str, Any], None]


def dimensions_for_amount(
    amount: float,
    current_width: float,
    current_height: float,
) -> Dimensions:
    """Size for an amount, keeping the current aspect ratio."""
    geometry = GeometryService.from_settings(get_settings())
    return geometry.dimensions_for_amount(amount, current_width, current_height)


def resize(item: BudgetItem, scale_x: float, scale_y: float) -> ResizeResult:
    """New size and amount for a user drag-resize."""
    return GeometryService.from_settings(get_settings()).resize(item, scale_x, scale_y)


def layout_treemap(
    items: Sequence[TreemapItem],
    options: TreemapOptionsInput = None,
) -> list[TreemapCell]:
    """Squarified treemap over the items' current footprint."""
    return TreemapLayoutService.from_settings(get_settings()).layout(
        items,
        build_treemap_options(options),
    )


def build_treemap_options(options: TreemapOptionsInput) -> Optional[TreemapLayoutOptions]:
    """Validate treemap options given as a mapping."""
    if options is None or isinstance(options, TreemapLayoutOptions):
        return options
    try:
        return TreemapLayoutOptions(**dict(options))
    except PydanticValidationError as e:
        raise InvalidTreemapOptionsError(str(e)) from e


def aggregate(view: DocumentView, container_id: str) -> BudgetAggregate:
    """Totals of a container subtree, linked savings included."""
    return AggregationService(view).aggregate(container_id)


def synchronize(
    view: DocumentView,
    mutator: DocumentMutator,
    remainder_state: Optional[RemainderStateTable] = None,
) -> SyncReport:
    """
    Run one synchronization over the document.

    Pass the same remainder_state on every call for a document; without
    it a deleted remainder link is simply recreated.
    """
    service = BudgetSyncService(settings=get_settings(), remainder_state=remainder_state)
    return service.synchronize(view, mutator)
