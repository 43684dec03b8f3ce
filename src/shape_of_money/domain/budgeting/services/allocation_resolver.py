"""How much of a savings item each outgoing link claims."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from shape_of_money.domain.canvas.entities import AllocationLink

ResolvedLink = Tuple[AllocationLink, Optional[float]]


def resolve_allocations(
    amount: float,
    links: Sequence[AllocationLink],
) -> List[ResolvedLink]:
    """Resolve the explicit (non-remainder) links of one savings item.

    A parseable label is the allocation. A lone unlabeled link claims the
    whole amount. Unlabeled links among several stay unresolved (None).
    """
    explicit = [link for link in links if not link.is_remainder]
    resolved: List[ResolvedLink] = []
    for link in explicit:
        value = link.explicit_amount
        if value is None and len(explicit) == 1:
            value = amount
        resolved.append((link, value))
    return resolved
