"""Write interface onto the canvas document.

Every call made during one synchronization pass belongs to the same
batch; the host applies the batch atomically.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from shape_of_money.domain.canvas.entities import CanvasObject
from shape_of_money.domain.canvas.value_objects import Bounds


class DocumentMutator(ABC):
    """Batched writes against the document."""

    @abstractmethod
    def create_object(self, obj: CanvasObject) -> str:
        """Create an object under the id it carries and return that id."""

    @abstractmethod
    def update_object(
        self,
        object_id: str,
        props: Optional[Mapping[str, Any]] = None,
        bounds: Optional[Bounds] = None,
    ) -> None:
        """Merge partial props and/or replace the bounds of an object."""

    @abstractmethod
    def delete_object(self, object_id: str) -> None:
        """Delete an object (and its children)."""
