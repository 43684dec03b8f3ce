"""Container entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from shape_of_money.domain.canvas.entities.canvas_object import CanvasObject
from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType


@dataclass(frozen=True)
class Container:
    """A rectangular grouping of budget items, links and nested containers."""

    id: str
    bounds: Bounds
    name: str = ""
    parent_id: Optional[str] = None

    @classmethod
    def from_object(cls, obj: CanvasObject) -> Container:
        name = obj.prop("name")
        return cls(
            id=obj.id,
            bounds=obj.bounds,
            name=name if isinstance(name, str) else "",
            parent_id=obj.parent_id,
        )

    @staticmethod
    def matches(obj: Optional[CanvasObject]) -> bool:
        return obj is not None and obj.is_type(CanvasObjectType.CONTAINER)
