"""Give a summary's position back to the sync pass."""

from __future__ import annotations

import logging

from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.application.services.document_lookup import require_summary

logger = logging.getLogger(__name__)


class ResetSummaryPositionCommand:
    """Clear the manual-position flag; the next pass re-anchors the summary."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def execute(self, summary_id: str) -> bool:
        summary = require_summary(self._store.view(), summary_id)
        if not summary.manually_positioned:
            return False
        with self._store.batch() as mutator:
            mutator.update_object(summary.id, props={"manually_positioned": False})
        logger.info("Summary %s follows its container again", summary.id)
        return True
