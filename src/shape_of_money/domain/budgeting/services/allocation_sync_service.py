"""Keep savings allocations complete with an automatic remainder link."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from shape_of_money.domain.budgeting.services.allocation_resolver import (
    ResolvedLink,
    resolve_allocations,
)
from shape_of_money.domain.budgeting.value_objects.allocation_status import (
    AllocationStatus,
)
from shape_of_money.domain.budgeting.value_objects.remainder_state import (
    RemainderStateTable,
)
from shape_of_money.domain.canvas.entities import (
    AllocationLink,
    BudgetItem,
    CanvasObject,
    new_object_id,
)
from shape_of_money.domain.canvas.ports import DocumentMutator, DocumentView
from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType
from shape_of_money.domain.shared.amount_text import format_amount, round_amount

if TYPE_CHECKING:
    from shape_of_money_config import Settings

logger = logging.getLogger(__name__)

ALLOCATION_TOLERANCE = 0.005
REMAINDER_LINK_LENGTH = 120.0


class AllocationSyncService:
    """
    Make every savings item's links add up to its amount.

    Explicit links are left as the user labeled them; the difference is
    carried by one engine-managed remainder link. Deleting that link
    while money is still unallocated finalizes the split instead.
    """

    def __init__(
        self,
        document: DocumentView,
        state: RemainderStateTable,
        tolerance: float = ALLOCATION_TOLERANCE,
        remainder_link_length: float = REMAINDER_LINK_LENGTH,
    ):
        self._document = document
        self._state = state
        self._tolerance = tolerance
        self._link_length = remainder_link_length

    @classmethod
    def from_settings(
        cls,
        document: DocumentView,
        state: RemainderStateTable,
        settings: Settings,
    ) -> AllocationSyncService:
        return cls(
            document=document,
            state=state,
            tolerance=settings.allocation_tolerance,
            remainder_link_length=settings.remainder_link_length,
        )

    def synchronize(self, mutator: DocumentMutator) -> List[AllocationStatus]:
        items = [
            BudgetItem.from_object(obj)
            for obj in self._document.find_by_type(CanvasObjectType.BUDGET_ITEM)
        ]
        self._state.prune(item.id for item in items)

        savings = [item for item in items if item.is_savings]
        self._delete_orphaned_remainders({item.id for item in savings}, mutator)

        return [self._synchronize_item(item, mutator) for item in savings]

    def _synchronize_item(
        self,
        item: BudgetItem,
        mutator: DocumentMutator,
    ) -> AllocationStatus:
        links = [
            AllocationLink.from_object(obj)
            for obj in self._document.get_links_from(item.id)
        ]
        remainder_links = [link for link in links if link.is_remainder]
        remainder_link = remainder_links[0] if remainder_links else None
        for duplicate in remainder_links[1:]:
            logger.debug("Removing duplicate remainder link %s", duplicate.id)
            mutator.delete_object(duplicate.id)

        resolved = resolve_allocations(item.amount, links)
        allocated = sum(value for _, value in resolved if value is not None)
        remainder = item.amount - allocated
        has_remainder = remainder > self._tolerance
        remainder_link_id: Optional[str] = None

        if (
            remainder_link is None
            and self._state.existed(item.id)
            and has_remainder
            and resolved
        ):
            # The user removed the remainder link: settle the split for good
            self._finalize_allocation(item, resolved, allocated, mutator)
            self._state.clear(item.id)
        elif has_remainder and resolved:
            remainder_link_id = self._upsert_remainder(
                item,
                remainder_link,
                format_amount(remainder),
                mutator,
            )
            self._state.mark(item.id)
        else:
            if remainder_link is not None:
                logger.debug(
                    "Removing remainder link %s of %s (remainder %.2f)",
                    remainder_link.id,
                    item.id,
                    remainder,
                )
                mutator.delete_object(remainder_link.id)
            self._state.clear(item.id)

        return AllocationStatus(
            item_id=item.id,
            amount=item.amount,
            allocated=allocated,
            remainder=remainder,
            unresolved_link_ids=tuple(link.id for link, value in resolved if value is None),
            remainder_link_id=remainder_link_id,
        )

    def _upsert_remainder(
        self,
        item: BudgetItem,
        remainder_link: Optional[AllocationLink],
        label: str,
        mutator: DocumentMutator,
    ) -> str:
        if remainder_link is None:
            link_id = mutator.create_object(
                CanvasObject(
                    id=new_object_id(),
                    type=CanvasObjectType.ALLOCATION_LINK,
                    bounds=Bounds(
                        x=item.bounds.max_x,
                        y=item.bounds.center_y,
                        w=self._link_length,
                        h=0,
                    ),
                    parent_id=item.parent_id,
                    props=AllocationLink.build_props(
                        from_id=item.id,
                        label=label,
                        is_remainder=True,
                    ),
                ),
            )
            logger.debug("Created remainder link %s for %s: %s", link_id, item.id, label)
            return link_id

        if remainder_link.label != label:
            mutator.update_object(remainder_link.id, props={"label": label})
        return remainder_link.id

    def _finalize_allocation(
        self,
        item: BudgetItem,
        resolved: Sequence[ResolvedLink],
        allocated: float,
        mutator: DocumentMutator,
    ) -> None:
        unlabeled = [link for link, _ in resolved if link.explicit_amount is None]
        labeled = [(link, value) for link, value in resolved if link.explicit_amount is not None]

        if len(unlabeled) == 1:
            labeled_total = sum(value or 0.0 for _, value in labeled)
            label = format_amount(item.amount - labeled_total)
            mutator.update_object(unlabeled[0].id, props={"label": label})
            logger.info(
                "Remainder of %s removed by user: link %s now carries %s",
                item.id,
                unlabeled[0].id,
                label,
            )
            return

        if allocated <= 0 or not labeled:
            logger.warning(
                "Remainder of %s removed but no labeled link to scale; "
                "%d unlabeled links left as they are",
                item.id,
                len(unlabeled),
            )
            return

        factor = item.amount / allocated
        scaled = [round_amount((value or 0.0) * factor) for _, value in labeled]
        scaled[-1] = round_amount(item.amount - sum(scaled[:-1]))
        for (link, _), value in zip(labeled, scaled):
            label = format_amount(value)
            if label != link.label:
                mutator.update_object(link.id, props={"label": label})

        logger.info(
            "Remainder of %s removed by user: scaled %d links by %.4f",
            item.id,
            len(labeled),
            factor,
        )

    def _delete_orphaned_remainders(
        self,
        savings_ids: set[str],
        mutator: DocumentMutator,
    ) -> None:
        for obj in self._document.find_by_type(CanvasObjectType.ALLOCATION_LINK):
            link = AllocationLink.from_object(obj)
            if link.is_remainder and link.from_id not in savings_ids:
                logger.debug("Removing orphaned remainder link %s", link.id)
                mutator.delete_object(link.id)
