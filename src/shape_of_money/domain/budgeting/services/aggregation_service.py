"""Recursive aggregation of budget amounts inside containers."""

from __future__ import annotations

import logging
from typing import Dict, Set

from shape_of_money.domain.budgeting.exceptions import ObjectNotFoundError
from shape_of_money.domain.budgeting.services.allocation_resolver import (
    resolve_allocations,
)
from shape_of_money.domain.budgeting.value_objects.budget_aggregate import (
    BudgetAggregate,
)
from shape_of_money.domain.canvas.entities import AllocationLink, BudgetItem
from shape_of_money.domain.canvas.ports import DocumentView
from shape_of_money.domain.canvas.value_objects import CanvasObjectType

logger = logging.getLogger(__name__)


class AggregationService:
    """Sum income, expense and savings across a container subtree."""

    def __init__(self, document: DocumentView):
        self._document = document

    def aggregate(self, container_id: str) -> BudgetAggregate:
        """
        Aggregate every budget item below a container.

        Savings items sourced from the container itself are left out:
        they are money leaving it, already visible as income - expense.
        Savings linked into the container from elsewhere are folded in
        with the amount their link allocates.
        """
        if self._document.get_object(container_id) is None:
            raise ObjectNotFoundError(object_id=container_id)

        result = BudgetAggregate()
        descendants: Set[str] = set()
        self._collect(container_id, container_id, result, descendants)
        self._fold_linked_savings(container_id, result, descendants)
        return result

    def aggregate_all(self) -> Dict[str, BudgetAggregate]:
        """Aggregates of every container, keyed by container id."""
        return {
            obj.id: self.aggregate(obj.id)
            for obj in self._document.find_by_type(CanvasObjectType.CONTAINER)
        }

    def _collect(
        self,
        parent_id: str,
        root_id: str,
        result: BudgetAggregate,
        visited: Set[str],
    ) -> None:
        for child_id in self._document.get_children(parent_id):
            # A malformed document must not send us round in circles
            if child_id in visited or child_id == root_id:
                continue
            visited.add(child_id)

            child = self._document.get_object(child_id)
            if child is None:
                continue

            if BudgetItem.matches(child):
                self._add_item(BudgetItem.from_object(child), root_id, result)

            self._collect(child_id, root_id, result, visited)

    def _add_item(self, item: BudgetItem, root_id: str, result: BudgetAggregate) -> None:
        if item.kind is None:
            return
        if item.source_container_id == root_id:
            logger.debug("Skipping savings %s sourced from %s", item.id, root_id)
            return
        result.add(item.kind, item.amount, item.currency)

    def _fold_linked_savings(
        self,
        container_id: str,
        result: BudgetAggregate,
        descendants: Set[str],
    ) -> None:
        counted_items: Set[str] = set()
        for link_obj in self._document.get_links_to(container_id):
            link = AllocationLink.from_object(link_obj)
            if link.is_remainder or not link.from_id or link.from_id in descendants:
                continue

            source = self._document.get_object(link.from_id)
            if not BudgetItem.matches(source):
                continue
            item = BudgetItem.from_object(source)
            if not item.is_savings or item.source_container_id == container_id:
                continue

            allocation = self._allocation_for(item, link)
            if allocation is None:
                continue

            result.add_linked_savings(
                allocation,
                item.currency,
                new_item=item.id not in counted_items,
            )
            counted_items.add(item.id)

    def _allocation_for(self, item: BudgetItem, link: AllocationLink) -> float | None:
        outgoing = [
            AllocationLink.from_object(obj)
            for obj in self._document.get_links_from(item.id)
        ]
        for resolved_link, value in resolve_allocations(item.amount, outgoing):
            if resolved_link.id == link.id:
                return value
        return None
