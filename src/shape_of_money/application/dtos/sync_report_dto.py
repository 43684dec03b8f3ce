"""DTO for the result of a synchronization run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from shape_of_money.domain.budgeting.value_objects import (
    AllocationStatus,
    BudgetAggregate,
)


@dataclass(frozen=True)
class SyncReport:
    """What one synchronize call changed and what it found."""

    created: Tuple[str, ...] = ()
    updated: Tuple[str, ...] = ()
    deleted: Tuple[str, ...] = ()
    passes: int = 0
    converged: bool = True
    aggregates: Dict[str, BudgetAggregate] = field(default_factory=dict)
    allocations: Tuple[AllocationStatus, ...] = ()

    @property
    def mutation_count(self) -> int:
        return len(self.created) + len(self.updated) + len(self.deleted)

    @property
    def has_changes(self) -> bool:
        return self.mutation_count > 0

    @property
    def validation_gaps(self) -> Tuple[AllocationStatus, ...]:
        """Savings items whose links are too underspecified to resolve."""
        return tuple(status for status in self.allocations if status.has_validation_gap)

    def allocation_for(self, item_id: str) -> AllocationStatus | None:
        for status in self.allocations:
            if status.item_id == item_id:
                return status
        return None

    def to_dict(self) -> dict:
        return {
            "created": list(self.created),
            "updated": list(self.updated),
            "deleted": list(self.deleted),
            "passes": self.passes,
            "converged": self.converged,
            "aggregates": {
                container_id: aggregate.to_dict()
                for container_id, aggregate in self.aggregates.items()
            },
            "allocations": [status.to_dict() for status in self.allocations],
        }
