"""Move a container summary by hand."""

from __future__ import annotations

import logging

from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.application.services.document_lookup import require_summary

logger = logging.getLogger(__name__)


class MoveSummaryCommand:
    """Place a summary and stop the sync pass from snapping it back."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def execute(self, summary_id: str, x: float, y: float) -> None:
        summary = require_summary(self._store.view(), summary_id)
        with self._store.batch() as mutator:
            mutator.update_object(
                summary.id,
                props={"manually_positioned": True},
                bounds=summary.bounds.moved_to(x, y),
            )
        logger.info("Summary %s moved to (%.1f, %.1f)", summary.id, x, y)
