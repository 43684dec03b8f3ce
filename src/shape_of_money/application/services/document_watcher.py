"""Re-run the budget sync whenever the host document changes."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from shape_of_money.application.dtos.sync_report_dto import SyncReport
from shape_of_money.application.ports.document_store import (
    DocumentChange,
    DocumentStore,
)
from shape_of_money.application.services.budget_sync_service import (
    BudgetSyncService,
)

logger = logging.getLogger(__name__)


class BudgetDocumentWatcher:
    """
    Keep a document store consistent as it is edited.

    Changes that arrive while a pass is running are not handled
    re-entrantly; they trigger one more pass once the current one is
    done.
    """

    def __init__(self, store: DocumentStore, sync_service: BudgetSyncService):
        self._store = store
        self._sync_service = sync_service
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._running = False
        self._pending = False
        self._last_report: Optional[SyncReport] = None

    @property
    def is_started(self) -> bool:
        return self._unsubscribe is not None

    @property
    def last_report(self) -> Optional[SyncReport]:
        return self._last_report

    def start(self) -> Optional[SyncReport]:
        """Subscribe to the store and bring the document up to date."""
        if self.is_started:
            return self._last_report
        self._unsubscribe = self._store.subscribe(self._on_change)
        logger.debug("Budget watcher started")
        self._sync()
        return self._last_report

    def stop(self) -> None:
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None
        self._pending = False
        logger.debug("Budget watcher stopped")

    def _on_change(self, change: DocumentChange) -> None:
        if change.is_empty or not self.is_started:
            return
        self._sync()

    def _sync(self) -> None:
        if self._running:
            self._pending = True
            return

        self._running = True
        try:
            self._pending = True
            while self._pending and self.is_started:
                self._pending = False
                with self._store.batch() as mutator:
                    self._last_report = self._sync_service.synchronize(
                        self._store.view(),
                        mutator,
                    )
        finally:
            self._running = False
