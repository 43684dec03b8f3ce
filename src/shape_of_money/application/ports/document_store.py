"""Port for a host document that can be watched and written in batches."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, ContextManager, Tuple

from shape_of_money.domain.canvas.ports import DocumentMutator, DocumentView


@dataclass(frozen=True)
class DocumentChange:
    """Ids touched by one committed batch."""

    created: Tuple[str, ...] = ()
    updated: Tuple[str, ...] = ()
    deleted: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.created or self.updated or self.deleted)


ChangeListener = Callable[[DocumentChange], None]


class DocumentStore(ABC):
    """
    The host's document store.

    Listeners are called once per committed batch that changed
    something, never from inside a running listener.
    """

    @abstractmethod
    def view(self) -> DocumentView:
        """Read view of the current document."""

    @abstractmethod
    def batch(self) -> ContextManager[DocumentMutator]:
        """Open an atomic batch; leaving it with an exception rolls back."""

    @abstractmethod
    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener and return its unsubscribe callable."""

    @abstractmethod
    def unsubscribe(self, listener: ChangeListener) -> None:
        """Remove a change listener (no-op when not registered)."""
