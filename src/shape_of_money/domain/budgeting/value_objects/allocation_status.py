"""Allocation state of one savings item after a sync pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class AllocationStatus:
    """How a savings item's amount is split across its links."""

    item_id: str
    amount: float
    allocated: float
    remainder: float
    unresolved_link_ids: Tuple[str, ...] = ()
    remainder_link_id: Optional[str] = None

    @property
    def has_validation_gap(self) -> bool:
        """Several unlabeled links: nothing is guessed, the host should flag it."""
        return bool(self.unresolved_link_ids)

    @property
    def is_over_allocated(self) -> bool:
        return self.remainder < 0

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "amount": self.amount,
            "allocated": self.allocated,
            "remainder": self.remainder,
            "unresolved_link_ids": list(self.unresolved_link_ids),
            "remainder_link_id": self.remainder_link_id,
            "has_validation_gap": self.has_validation_gap,
        }
