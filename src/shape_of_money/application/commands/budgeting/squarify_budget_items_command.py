"""Reset budget items to squares."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.domain.budgeting.services import GeometryService
from shape_of_money.domain.canvas.entities import BudgetItem
from shape_of_money_config import Settings, get_settings

logger = logging.getLogger(__name__)


class SquarifyBudgetItemsCommand:
    """Turn each selected budget item into a square of the same area."""

    def __init__(self, store: DocumentStore, geometry: GeometryService):
        self._store = store
        self._geometry = geometry

    @classmethod
    def from_settings(
        cls,
        store: DocumentStore,
        settings: Optional[Settings] = None,
    ) -> SquarifyBudgetItemsCommand:
        settings = settings or get_settings()
        return cls(store=store, geometry=GeometryService.from_settings(settings))

    def execute(self, item_ids: Iterable[str]) -> List[str]:
        """Squarify the budget items among the ids; others are skipped."""
        view = self._store.view()
        changed: List[str] = []

        with self._store.batch() as mutator:
            for item_id in item_ids:
                obj = view.get_object(item_id)
                if not BudgetItem.matches(obj):
                    continue
                item = BudgetItem.from_object(obj)
                dims = self._geometry.square_dimensions(item.amount)
                if (dims.w, dims.h) == (item.width, item.height):
                    continue
                mutator.update_object(item.id, bounds=item.bounds.resized(dims.w, dims.h))
                changed.append(item.id)

        logger.info("Squarified %d budget items", len(changed))
        return changed
