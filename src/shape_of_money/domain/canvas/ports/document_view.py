"""Read interface onto the canvas document.

The host canvas owns the document. The engine only reads object
snapshots through this port and never caches them between passes.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from shape_of_money.domain.canvas.entities import CanvasObject
from shape_of_money.domain.canvas.value_objects import CanvasObjectType


class DocumentView(ABC):
    """
    Read-only view of the document tree.

    Bounds are reported in page space. Links are indexed by the ids in
    their from_id/to_id props.
    """

    @abstractmethod
    def get_object(self, object_id: str) -> Optional[CanvasObject]:
        """Find object by ID."""

    @abstractmethod
    def get_children(self, parent_id: str) -> List[str]:
        """Ordered ids of the direct children of an object."""

    @abstractmethod
    def get_links_from(self, object_id: str) -> List[CanvasObject]:
        """Allocation links whose from_id is the object."""

    @abstractmethod
    def get_links_to(self, object_id: str) -> List[CanvasObject]:
        """Allocation links whose to_id is the object."""

    @abstractmethod
    def find_by_type(self, object_type: CanvasObjectType) -> List[CanvasObject]:
        """All objects of a type, in document order."""

    @abstractmethod
    def find_all(self) -> List[CanvasObject]:
        """All objects, in document order."""
