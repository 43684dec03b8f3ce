"""Change the amount of a budget item from user input."""

from __future__ import annotations

import logging
from typing import Any, Optional

from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.application.services.document_lookup import require_budget_item
from shape_of_money.domain.budgeting.services import GeometryService
from shape_of_money.domain.shared.amount_text import parse_amount_label
from shape_of_money_config import Settings, get_settings

logger = logging.getLogger(__name__)


class SetBudgetItemAmountCommand:
    """Set an item's amount and resize it to match, keeping its aspect ratio."""

    def __init__(self, store: DocumentStore, geometry: GeometryService):
        self._store = store
        self._geometry = geometry

    @classmethod
    def from_settings(
        cls,
        store: DocumentStore,
        settings: Optional[Settings] = None,
    ) -> SetBudgetItemAmountCommand:
        settings = settings or get_settings()
        return cls(store=store, geometry=GeometryService.from_settings(settings))

    def execute(self, item_id: str, raw_amount: Any) -> bool:
        """
        Apply the amount; returns whether the item changed.

        Text that is not a non-negative finite number leaves the item as
        it was.
        """
        item = require_budget_item(self._store.view(), item_id)

        amount = parse_amount_label(raw_amount)
        if amount is None:
            logger.debug("Ignoring amount %r for %s", raw_amount, item_id)
            return False
        if amount == item.amount:
            return False

        dims = self._geometry.dimensions_for_amount(amount, item.width, item.height)
        with self._store.batch() as mutator:
            mutator.update_object(
                item.id,
                props={"amount": amount},
                bounds=item.bounds.resized(dims.w, dims.h),
            )

        logger.info("Amount of %s set to %s", item.id, amount)
        return True
