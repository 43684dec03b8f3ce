"""Run the budget consistency pass over a host document."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from shape_of_money.application.dtos.sync_report_dto import SyncReport
from shape_of_money.application.services.staged_document import StagedDocument
from shape_of_money.domain.budgeting.services import (
    AggregationService,
    AllocationSyncService,
    GeometryService,
    SummaryReconciliationService,
)
from shape_of_money.domain.budgeting.value_objects import (
    AllocationStatus,
    BudgetAggregate,
    RemainderStateTable,
)
from shape_of_money.domain.canvas.ports import DocumentMutator, DocumentView
from shape_of_money_config import Settings, get_settings

logger = logging.getLogger(__name__)


class BudgetSyncService:
    """
    Bring derived shapes and allocation links in line with the document.

    One call runs aggregation, allocation fix-up and reconciliation on a
    staged copy of the document until a pass changes nothing, then
    hands the net difference to the mutator. The remainder-link table
    is owned by the service and survives between calls.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        remainder_state: Optional[RemainderStateTable] = None,
    ):
        self._settings = settings or get_settings()
        self._geometry = GeometryService.from_settings(self._settings)
        self._state = remainder_state if remainder_state is not None else RemainderStateTable()

    @classmethod
    def from_settings(cls, settings: Settings) -> BudgetSyncService:
        return cls(settings=settings)

    @property
    def remainder_state(self) -> RemainderStateTable:
        return self._state

    def synchronize(self, view: DocumentView, mutator: DocumentMutator) -> SyncReport:
        staged = StagedDocument(view)
        working_state = self._state.copy()
        max_passes = self._settings.max_sync_passes

        aggregates: Dict[str, BudgetAggregate] = {}
        allocations: List[AllocationStatus] = []
        converged = False
        passes = 0

        while passes < max_passes:
            passes += 1
            before = staged.mutation_count
            aggregates, allocations = self._run_pass(staged, working_state)
            if staged.mutation_count == before:
                converged = True
                break

        if not converged:
            logger.warning(
                "Budget sync did not settle after %d passes; committing last state",
                passes,
            )

        changes = staged.commit(mutator)
        self._state.replace_with(working_state)

        report = SyncReport(
            created=changes.created,
            updated=changes.updated,
            deleted=changes.deleted,
            passes=passes,
            converged=converged,
            aggregates=aggregates,
            allocations=tuple(allocations),
        )
        if report.has_changes:
            logger.info(
                "Budget sync: %d created, %d updated, %d deleted in %d passes",
                len(report.created),
                len(report.updated),
                len(report.deleted),
                passes,
            )
        return report

    def _run_pass(
        self,
        staged: StagedDocument,
        state: RemainderStateTable,
    ) -> tuple[Dict[str, BudgetAggregate], List[AllocationStatus]]:
        aggregates = AggregationService(staged).aggregate_all()

        allocations = AllocationSyncService.from_settings(
            staged,
            state,
            self._settings,
        ).synchronize(staged)

        SummaryReconciliationService.from_settings(
            staged,
            self._geometry,
            self._settings,
        ).reconcile(aggregates, staged)

        return aggregates, allocations
