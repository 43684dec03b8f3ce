"""Keep derived artifacts in line with the primary budget shapes."""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from typing import TYPE_CHECKING, Any, Dict, List, Mapping

from shape_of_money.domain.budgeting.services.geometry_service import GeometryService
from shape_of_money.domain.budgeting.value_objects.budget_aggregate import (
    BudgetAggregate,
)
from shape_of_money.domain.canvas.entities import (
    BudgetItem,
    CanvasObject,
    Container,
    SummaryArtifact,
    new_object_id,
)
from shape_of_money.domain.canvas.ports import DocumentMutator, DocumentView
from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType

if TYPE_CHECKING:
    from shape_of_money_config import Settings

logger = logging.getLogger(__name__)

SUMMARY_OFFSET_X = 200.0
SUMMARY_WIDTH = 300.0
SUMMARY_HEIGHT = 200.0


class SummaryReconciliationService:
    """
    Upsert container summaries and derived savings amounts.

    Every write is conditioned on the stored value actually differing,
    so repeated passes over an unchanged document write nothing.
    """

    def __init__(  # NOQA: PLR0913
        self,
        document: DocumentView,
        geometry: GeometryService,
        offset_x: float = SUMMARY_OFFSET_X,
        summary_width: float = SUMMARY_WIDTH,
        summary_height: float = SUMMARY_HEIGHT,
    ):
        self._document = document
        self._geometry = geometry
        self._offset_x = offset_x
        self._summary_width = summary_width
        self._summary_height = summary_height

    @classmethod
    def from_settings(
        cls,
        document: DocumentView,
        geometry: GeometryService,
        settings: Settings,
    ) -> SummaryReconciliationService:
        return cls(
            document=document,
            geometry=geometry,
            offset_x=settings.summary_offset_x,
            summary_width=settings.summary_width,
            summary_height=settings.summary_height,
        )

    def reconcile(
        self,
        aggregates: Mapping[str, BudgetAggregate],
        mutator: DocumentMutator,
    ) -> None:
        self.reconcile_summaries(aggregates, mutator)
        self.reconcile_derived_savings(aggregates, mutator)

    def reconcile_summaries(
        self,
        aggregates: Mapping[str, BudgetAggregate],
        mutator: DocumentMutator,
    ) -> None:
        """One summary per container with content, none for the rest."""
        by_container: Dict[str, List[SummaryArtifact]] = defaultdict(list)
        for obj in self._document.find_by_type(CanvasObjectType.CONTAINER_SUMMARY):
            summary = SummaryArtifact.from_object(obj)
            by_container[summary.container_id].append(summary)

        for obj in self._document.find_by_type(CanvasObjectType.CONTAINER):
            container = Container.from_object(obj)
            existing = by_container.pop(container.id, [])
            aggregate = aggregates.get(container.id)

            if aggregate is None or not aggregate.has_content:
                for summary in existing:
                    logger.debug("Removing summary %s of empty %s", summary.id, container.id)
                    mutator.delete_object(summary.id)
                continue

            for duplicate in existing[1:]:
                mutator.delete_object(duplicate.id)

            summary = existing[0] if existing else None
            self._upsert_summary(container, aggregate, summary, mutator)

        for orphans in by_container.values():
            for summary in orphans:
                logger.debug("Removing summary %s of missing container", summary.id)
                mutator.delete_object(summary.id)

    def reconcile_derived_savings(
        self,
        aggregates: Mapping[str, BudgetAggregate],
        mutator: DocumentMutator,
    ) -> None:
        """Savings items sourced from a container hold what it has left."""
        for obj in self._document.find_by_type(CanvasObjectType.BUDGET_ITEM):
            item = BudgetItem.from_object(obj)
            if not item.is_derived:
                continue

            aggregate = aggregates.get(item.source_container_id or "")
            if aggregate is None:
                logger.debug(
                    "Savings %s points at unknown container %s",
                    item.id,
                    item.source_container_id,
                )
                continue

            amount = aggregate.derived_savings_amount
            if math.isclose(amount, item.amount, rel_tol=1e-12, abs_tol=1e-9):
                continue

            dims = self._geometry.dimensions_for_amount(amount, item.width, item.height)
            mutator.update_object(
                item.id,
                props={"amount": amount},
                bounds=item.bounds.resized(dims.w, dims.h),
            )
            logger.debug("Savings %s: %.2f -> %.2f", item.id, item.amount, amount)

    def summary_anchor(self, container: Container) -> Bounds:
        """Where a summary sits: right of its container, top aligned."""
        return Bounds(
            x=container.bounds.max_x + self._offset_x,
            y=container.bounds.y,
            w=self._summary_width,
            h=self._summary_height,
        )

    def _upsert_summary(
        self,
        container: Container,
        aggregate: BudgetAggregate,
        summary: SummaryArtifact | None,
        mutator: DocumentMutator,
    ) -> None:
        display = _display_props(container, aggregate)
        anchor = self.summary_anchor(container)

        if summary is None:
            summary_id = mutator.create_object(
                CanvasObject(
                    id=new_object_id(),
                    type=CanvasObjectType.CONTAINER_SUMMARY,
                    bounds=anchor,
                    props={
                        "container_id": container.id,
                        **display,
                        "manually_positioned": False,
                    },
                ),
            )
            logger.debug("Created summary %s for %s", summary_id, container.id)
            return

        current = summary.display_props()
        changed = {key: value for key, value in display.items() if current[key] != value}

        bounds = None
        if not summary.manually_positioned and (
            summary.bounds.x != anchor.x or summary.bounds.y != anchor.y
        ):
            bounds = summary.bounds.moved_to(anchor.x, anchor.y)

        if changed or bounds is not None:
            mutator.update_object(summary.id, props=changed or None, bounds=bounds)


def _display_props(container: Container, aggregate: BudgetAggregate) -> Dict[str, Any]:
    return {
        "container_name": container.name,
        "income_total": aggregate.income_total,
        "expense_total": aggregate.expense_total,
        "savings_total": aggregate.savings_total,
        "currency": aggregate.currency or "",
        "has_income": aggregate.income_count > 0,
        "has_expense": aggregate.expense_count > 0,
        "has_savings": aggregate.savings_count > 0,
    }
