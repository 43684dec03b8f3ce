"""Snapshot of a single document object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from uuid import uuid4

from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType


def new_object_id() -> str:
    """Generate a document object id."""
    return f"shape:{uuid4().hex}"


@dataclass(frozen=True)
class CanvasObject:
    """
    A typed object read from (or staged for) the canvas document.

    The engine never holds on to these between passes; they are read
    fresh from the document view every time.

    Attributes
    ----------
    id
        Stable document id
    type
        Type tag, usually one of CanvasObjectType
    bounds
        Page-space bounding box
    parent_id
        Id of the containing object, None for top-level objects
    props
        Type specific properties
    """

    id: str
    type: str
    bounds: Bounds = field(default_factory=Bounds)
    parent_id: Optional[str] = None
    props: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.type, CanvasObjectType):
            object.__setattr__(self, "type", self.type.value)
        object.__setattr__(self, "props", dict(self.props))

    def is_type(self, object_type: CanvasObjectType) -> bool:
        return self.type == object_type.value

    def prop(self, key: str, default: Any = None) -> Any:
        return self.props.get(key, default)

    def with_changes(
        self,
        props: Optional[Mapping[str, Any]] = None,
        bounds: Optional[Bounds] = None,
        parent_id: Optional[str] = None,
    ) -> CanvasObject:
        """Return a copy with props merged and bounds/parent replaced."""
        merged = dict(self.props)
        if props:
            merged.update(props)
        return CanvasObject(
            id=self.id,
            type=self.type,
            bounds=bounds if bounds is not None else self.bounds,
            parent_id=parent_id if parent_id is not None else self.parent_id,
            props=merged,
        )
