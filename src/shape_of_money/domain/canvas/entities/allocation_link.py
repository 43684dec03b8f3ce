"""Allocation link entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from shape_of_money.domain.canvas.entities.canvas_object import CanvasObject
from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType
from shape_of_money.domain.shared.amount_text import parse_amount_label


@dataclass(frozen=True)
class AllocationLink:
    """
    A directed edge that sends part of a savings item somewhere.

    A label that parses as a non-negative number is an explicit
    allocation; anything else leaves the link unallocated. Remainder
    links are managed by the engine and anchored only at their item.
    """

    id: str
    bounds: Bounds
    from_id: Optional[str]
    to_id: Optional[str] = None
    label: str = ""
    is_remainder: bool = False
    parent_id: Optional[str] = None

    @classmethod
    def from_object(cls, obj: CanvasObject) -> AllocationLink:
        label = obj.prop("label")
        return cls(
            id=obj.id,
            bounds=obj.bounds,
            from_id=obj.prop("from_id") or None,
            to_id=obj.prop("to_id") or None,
            label=label if isinstance(label, str) else "" if label is None else str(label),
            is_remainder=bool(obj.prop("is_remainder", False)),
            parent_id=obj.parent_id,
        )

    @staticmethod
    def matches(obj: Optional[CanvasObject]) -> bool:
        return obj is not None and obj.is_type(CanvasObjectType.ALLOCATION_LINK)

    @property
    def explicit_amount(self) -> Optional[float]:
        """The labeled allocation, None when the label is not an amount."""
        return parse_amount_label(self.label)

    @staticmethod
    def build_props(
        from_id: str,
        to_id: Optional[str] = None,
        label: str = "",
        is_remainder: bool = False,
    ) -> dict[str, Any]:
        return {
            "from_id": from_id,
            "to_id": to_id or "",
            "label": label,
            "is_remainder": is_remainder,
        }
