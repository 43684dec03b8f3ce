"""Read container summaries for display."""

from __future__ import annotations

from typing import List

from shape_of_money.application.dtos.container_summary_dto import (
    ContainerSummaryDTO,
)
from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.application.services.document_lookup import require_summary
from shape_of_money.domain.canvas.entities import SummaryArtifact
from shape_of_money.domain.canvas.value_objects import CanvasObjectType


class ContainerSummaryQuery:
    """Query to turn stored summary artifacts into display data."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def execute(self, summary_id: str) -> ContainerSummaryDTO:
        return self._to_dto(require_summary(self._store.view(), summary_id))

    def list_all(self) -> List[ContainerSummaryDTO]:
        view = self._store.view()
        return [
            self._to_dto(SummaryArtifact.from_object(obj))
            for obj in view.find_by_type(CanvasObjectType.CONTAINER_SUMMARY)
        ]

    def for_container(self, container_id: str) -> ContainerSummaryDTO | None:
        for dto in self.list_all():
            if dto.container_id == container_id:
                return dto
        return None

    def _to_dto(self, summary: SummaryArtifact) -> ContainerSummaryDTO:
        return ContainerSummaryDTO(
            summary_id=summary.id,
            container_id=summary.container_id,
            container_name=summary.container_name,
            income_total=summary.income_total,
            expense_total=summary.expense_total,
            savings_total=summary.savings_total,
            savings_left=summary.savings_left,
            total=summary.total,
            currency=summary.currency,
            has_income=summary.has_income,
            has_expense=summary.has_expense,
            has_savings=summary.has_savings,
            manually_positioned=summary.manually_positioned,
        )
