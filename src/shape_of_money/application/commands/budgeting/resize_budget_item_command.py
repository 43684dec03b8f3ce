"""Resize a budget item and re-derive its amount."""

from __future__ import annotations

import logging
from typing import Optional

from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.application.services.document_lookup import require_budget_item
from shape_of_money.domain.budgeting.services import GeometryService
from shape_of_money.domain.canvas.value_objects import ResizeResult
from shape_of_money_config import Settings, get_settings

logger = logging.getLogger(__name__)


class ResizeBudgetItemCommand:
    """Apply a user drag-resize to a budget item."""

    def __init__(self, store: DocumentStore, geometry: GeometryService):
        self._store = store
        self._geometry = geometry

    @classmethod
    def from_settings(
        cls,
        store: DocumentStore,
        settings: Optional[Settings] = None,
    ) -> ResizeBudgetItemCommand:
        settings = settings or get_settings()
        return cls(store=store, geometry=GeometryService.from_settings(settings))

    def execute(self, item_id: str, scale_x: float, scale_y: float) -> ResizeResult:
        item = require_budget_item(self._store.view(), item_id)
        result = self._geometry.resize(item, scale_x, scale_y)

        with self._store.batch() as mutator:
            mutator.update_object(
                item.id,
                props={"amount": result.amount},
                bounds=item.bounds.resized(result.w, result.h),
            )

        logger.info(
            "Resized %s to %.1f x %.1f (amount %.2f)",
            item.id,
            result.w,
            result.h,
            result.amount,
        )
        return result
