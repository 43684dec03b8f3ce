"""Dict-backed document store for tests and headless hosts."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from shape_of_money.application.ports.document_store import (
    ChangeListener,
    DocumentChange,
    DocumentStore,
)
from shape_of_money.domain.budgeting.exceptions import ObjectNotFoundError
from shape_of_money.domain.canvas.entities import CanvasObject
from shape_of_money.domain.canvas.ports import DocumentMutator, DocumentView
from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType
from shape_of_money.domain.shared.exceptions import ConflictError, ErrorCode

logger = logging.getLogger(__name__)


class _ChangeLog:
    """Ids touched inside one batch, in first-touch order."""

    def __init__(self) -> None:
        self.created: Dict[str, None] = {}
        self.updated: Dict[str, None] = {}
        self.deleted: Dict[str, None] = {}

    def to_change(self) -> DocumentChange:
        created = [i for i in self.created if i not in self.deleted]
        updated = [i for i in self.updated if i not in self.created and i not in self.deleted]
        deleted = [i for i in self.deleted if i not in self.created]
        return DocumentChange(
            created=tuple(created),
            updated=tuple(updated),
            deleted=tuple(deleted),
        )


class _BatchMutator(DocumentMutator):
    def __init__(self, store: InMemoryDocumentStore, log: _ChangeLog):
        self._store = store
        self._log = log

    def create_object(self, obj: CanvasObject) -> str:
        object_id = self._store._insert(obj)
        self._log.created[object_id] = None
        return object_id

    def update_object(
        self,
        object_id: str,
        props: Optional[Mapping[str, Any]] = None,
        bounds: Optional[Bounds] = None,
    ) -> None:
        if self._store._replace(object_id, props, bounds):
            self._log.updated[object_id] = None

    def delete_object(self, object_id: str) -> None:
        for removed_id in self._store._remove(object_id):
            self._log.deleted[removed_id] = None


class InMemoryDocumentStore(DocumentStore, DocumentView):
    """
    Reference document store.

    Objects are kept in insertion order, which is also the child order.
    Batches are all-or-nothing and nested batches join the outer one.
    Listeners run after the outermost batch commits; a batch committed
    by a listener is announced after the current round of listeners.
    """

    def __init__(self, objects: Optional[List[CanvasObject]] = None):
        self._objects: Dict[str, CanvasObject] = {}
        self._listeners: List[ChangeListener] = []
        self._active: Optional[_BatchMutator] = None
        self._notifying = False
        self._queued: List[DocumentChange] = []
        for obj in objects or []:
            self._insert(obj)

    # DocumentStore

    def view(self) -> DocumentView:
        return self

    @contextmanager
    def batch(self) -> Iterator[DocumentMutator]:
        if self._active is not None:
            yield self._active
            return

        snapshot = dict(self._objects)
        log = _ChangeLog()
        self._active = _BatchMutator(self, log)
        try:
            yield self._active
        except BaseException:
            self._objects = snapshot
            logger.debug("Batch rolled back")
            raise
        finally:
            self._active = None

        change = log.to_change()
        if not change.is_empty:
            self._notify(change)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # Single writes, each in its own batch

    def create_object(self, obj: CanvasObject) -> str:
        with self.batch() as mutator:
            return mutator.create_object(obj)

    def update_object(
        self,
        object_id: str,
        props: Optional[Mapping[str, Any]] = None,
        bounds: Optional[Bounds] = None,
    ) -> None:
        with self.batch() as mutator:
            mutator.update_object(object_id, props=props, bounds=bounds)

    def delete_object(self, object_id: str) -> None:
        with self.batch() as mutator:
            mutator.delete_object(object_id)

    # DocumentView

    def get_object(self, object_id: str) -> Optional[CanvasObject]:
        return self._objects.get(object_id)

    def get_children(self, parent_id: str) -> List[str]:
        return [obj.id for obj in self._objects.values() if obj.parent_id == parent_id]

    def get_links_from(self, object_id: str) -> List[CanvasObject]:
        return self._links_where("from_id", object_id)

    def get_links_to(self, object_id: str) -> List[CanvasObject]:
        return self._links_where("to_id", object_id)

    def find_by_type(self, object_type: CanvasObjectType) -> List[CanvasObject]:
        return [obj for obj in self._objects.values() if obj.is_type(object_type)]

    def find_all(self) -> List[CanvasObject]:
        return list(self._objects.values())

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._objects

    # Internals used by the batch mutator

    def _insert(self, obj: CanvasObject) -> str:
        if obj.id in self._objects:
            raise ConflictError(
                message=f"Object '{obj.id}' already exists",
                code=ErrorCode.DUPLICATE_OBJECT,
                details={"object_id": obj.id},
            )
        self._objects[obj.id] = obj
        return obj.id

    def _replace(
        self,
        object_id: str,
        props: Optional[Mapping[str, Any]],
        bounds: Optional[Bounds],
    ) -> bool:
        current = self._objects.get(object_id)
        if current is None:
            raise ObjectNotFoundError(object_id)
        changed = current.with_changes(props=props, bounds=bounds)
        if changed == current:
            return False
        self._objects[object_id] = changed
        return True

    def _remove(self, object_id: str) -> List[str]:
        if object_id not in self._objects:
            raise ObjectNotFoundError(object_id)
        removed = []
        for child_id in self.get_children(object_id):
            removed.extend(self._remove(child_id))
        del self._objects[object_id]
        removed.append(object_id)
        return removed

    def _links_where(self, key: str, object_id: str) -> List[CanvasObject]:
        return [
            obj
            for obj in self._objects.values()
            if obj.is_type(CanvasObjectType.ALLOCATION_LINK) and obj.prop(key) == object_id
        ]

    def _notify(self, change: DocumentChange) -> None:
        if self._notifying:
            self._queued.append(change)
            return

        self._notifying = True
        try:
            pending = [change]
            while pending:
                current = pending.pop(0)
                for listener in list(self._listeners):
                    listener(current)
                pending.extend(self._queued)
                self._queued.clear()
        finally:
            self._notifying = False
            self._queued.clear()
