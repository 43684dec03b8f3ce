"""Application services."""

from shape_of_money.application.services.budget_sync_service import (
    BudgetSyncService,
)
from shape_of_money.application.services.document_watcher import (
    BudgetDocumentWatcher,
)
from shape_of_money.application.services.staged_document import (
    StagedChanges,
    StagedDocument,
)

__all__ = [
    "BudgetDocumentWatcher",
    "BudgetSyncService",
    "StagedChanges",
    "StagedDocument",
]
