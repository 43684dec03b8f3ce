"""Create a savings item fed by a container's leftover money."""

from __future__ import annotations

import logging
from typing import Optional

from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.application.services.document_lookup import require_summary
from shape_of_money.domain.budgeting.services import GeometryService
from shape_of_money.domain.canvas.entities import (
    DEFAULT_CURRENCY,
    BudgetItem,
    CanvasObject,
    new_object_id,
)
from shape_of_money.domain.canvas.value_objects import (
    Bounds,
    BudgetKind,
    CanvasObjectType,
)
from shape_of_money_config import Settings, get_settings

logger = logging.getLogger(__name__)

SAVINGS_ITEM_NAME = "Savings"
SAVINGS_ITEM_GAP = 20.0
SEED_SIZE = 100.0


class CreateSavingsItemCommand:
    """
    Add a savings item below a container summary.

    The new item is sourced from the summary's container, so the sync
    pass keeps its amount equal to what the container has left.
    """

    def __init__(
        self,
        store: DocumentStore,
        geometry: GeometryService,
        gap: float = SAVINGS_ITEM_GAP,
    ):
        self._store = store
        self._geometry = geometry
        self._gap = gap

    @classmethod
    def from_settings(
        cls,
        store: DocumentStore,
        settings: Optional[Settings] = None,
    ) -> CreateSavingsItemCommand:
        settings = settings or get_settings()
        return cls(
            store=store,
            geometry=GeometryService.from_settings(settings),
            gap=settings.savings_item_gap,
        )

    def execute(self, summary_id: str) -> Optional[str]:
        """Create the item; returns its id, or None when nothing is left."""
        summary = require_summary(self._store.view(), summary_id)

        amount = summary.savings_left
        if amount <= 0:
            logger.info("Container %s has nothing left to save", summary.container_id)
            return None

        dims = self._geometry.dimensions_for_amount(amount, SEED_SIZE, SEED_SIZE)
        with self._store.batch() as mutator:
            item_id = mutator.create_object(
                CanvasObject(
                    id=new_object_id(),
                    type=CanvasObjectType.BUDGET_ITEM,
                    bounds=Bounds(
                        x=summary.bounds.x,
                        y=summary.bounds.max_y + self._gap,
                        w=dims.w,
                        h=dims.h,
                    ),
                    props=BudgetItem.build_props(
                        amount=amount,
                        kind=BudgetKind.SAVINGS,
                        currency=summary.currency or DEFAULT_CURRENCY,
                        name=SAVINGS_ITEM_NAME,
                        source_container_id=summary.container_id,
                    ),
                ),
            )

        logger.info(
            "Created savings item %s from container %s (amount %.2f)",
            item_id,
            summary.container_id,
            amount,
        )
        return item_id
