"""Arrange selected budget items as a treemap."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.domain.budgeting.services import (
    GeometryService,
    TreemapLayoutService,
)
from shape_of_money.domain.budgeting.value_objects import (
    TreemapCell,
    TreemapItem,
    TreemapLayoutOptions,
)
from shape_of_money.domain.canvas.entities import BudgetItem
from shape_of_money.domain.canvas.value_objects import Bounds
from shape_of_money_config import Settings, get_settings

logger = logging.getLogger(__name__)

MIN_TREEMAP_ITEMS = 2


class ArrangeTreemapCommand:
    """
    Lay selected budget items out as a treemap.

    Each item keeps its amount: it is reshaped to its cell's aspect
    ratio and centered in the cell. Cells are sized from the same
    amount-to-area scale, so items fill their cells unless the minimum
    size kicks in.
    """

    def __init__(
        self,
        store: DocumentStore,
        layout_service: TreemapLayoutService,
        geometry: GeometryService,
    ):
        self._store = store
        self._layout_service = layout_service
        self._geometry = geometry

    @classmethod
    def from_settings(
        cls,
        store: DocumentStore,
        settings: Optional[Settings] = None,
    ) -> ArrangeTreemapCommand:
        settings = settings or get_settings()
        return cls(
            store=store,
            layout_service=TreemapLayoutService.from_settings(settings),
            geometry=GeometryService.from_settings(settings),
        )

    def execute(
        self,
        item_ids: Iterable[str],
        options: Optional[TreemapLayoutOptions] = None,
    ) -> List[TreemapCell]:
        view = self._store.view()
        items: Dict[str, BudgetItem] = {}
        for item_id in item_ids:
            obj = view.get_object(item_id)
            if BudgetItem.matches(obj):
                items[obj.id] = BudgetItem.from_object(obj)

        if len(items) < MIN_TREEMAP_ITEMS:
            logger.info("Treemap needs at least %d budget items", MIN_TREEMAP_ITEMS)
            return []

        cells = self._layout_service.layout(
            [
                TreemapItem(
                    id=item.id,
                    amount=item.amount,
                    x=item.bounds.x,
                    y=item.bounds.y,
                    w=item.width,
                    h=item.height,
                )
                for item in items.values()
            ],
            options,
        )
        if not cells:
            logger.info("Treemap layout produced no cells")
            return []

        with self._store.batch() as mutator:
            for cell in cells:
                item = items[cell.id]
                dims = self._geometry.fit_to_cell(item.amount, cell.w, cell.h)
                mutator.update_object(
                    item.id,
                    bounds=Bounds(
                        x=cell.x + (cell.w - dims.w) / 2,
                        y=cell.y + (cell.h - dims.h) / 2,
                        w=dims.w,
                        h=dims.h,
                    ),
                )

        logger.info("Arranged %d budget items as a treemap", len(cells))
        return cells
