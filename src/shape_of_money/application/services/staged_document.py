"""Overlay that stages writes on top of a read-only document view."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from shape_of_money.domain.budgeting.exceptions import ObjectNotFoundError
from shape_of_money.domain.canvas.entities import CanvasObject
from shape_of_money.domain.canvas.ports import DocumentMutator, DocumentView
from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType
from shape_of_money.domain.shared.exceptions import ConflictError, ErrorCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StagedChanges:
    """Ids handed to the host mutator by a commit."""

    created: Tuple[str, ...] = ()
    updated: Tuple[str, ...] = ()
    deleted: Tuple[str, ...] = ()


class StagedDocument(DocumentView, DocumentMutator):
    """
    A document view with pending writes applied.

    Passes read their own writes through it while the base view stays
    untouched. Writes that would not change anything are dropped and do
    not count as mutations.
    """

    def __init__(self, base: DocumentView):
        self._base = base
        self._created: Dict[str, CanvasObject] = {}
        self._updated: Dict[str, CanvasObject] = {}
        self._deleted: Set[str] = set()
        self._mutation_count = 0

    @property
    def mutation_count(self) -> int:
        """Number of effective writes staged so far."""
        return self._mutation_count

    # DocumentView

    def get_object(self, object_id: str) -> Optional[CanvasObject]:
        if object_id in self._deleted:
            return None
        if object_id in self._created:
            return self._created[object_id]
        if object_id in self._updated:
            return self._updated[object_id]
        return self._base.get_object(object_id)

    def get_children(self, parent_id: str) -> List[str]:
        children = [
            child_id
            for child_id in self._base.get_children(parent_id)
            if self._is_child(child_id, parent_id)
        ]
        children.extend(
            obj.id for obj in self._created.values() if obj.parent_id == parent_id
        )
        return children

    def get_links_from(self, object_id: str) -> List[CanvasObject]:
        return self._links(self._base.get_links_from(object_id), "from_id", object_id)

    def get_links_to(self, object_id: str) -> List[CanvasObject]:
        return self._links(self._base.get_links_to(object_id), "to_id", object_id)

    def find_by_type(self, object_type: CanvasObjectType) -> List[CanvasObject]:
        return [obj for obj in self.find_all() if obj.is_type(object_type)]

    def find_all(self) -> List[CanvasObject]:
        current = [self.get_object(obj.id) for obj in self._base.find_all()]
        result = [obj for obj in current if obj is not None]
        result.extend(self._created.values())
        return result

    # DocumentMutator

    def create_object(self, obj: CanvasObject) -> str:
        if self.get_object(obj.id) is not None:
            raise ConflictError(
                message=f"Object '{obj.id}' already exists",
                code=ErrorCode.DUPLICATE_OBJECT,
                details={"object_id": obj.id},
            )
        self._created[obj.id] = obj
        self._mutation_count += 1
        return obj.id

    def update_object(
        self,
        object_id: str,
        props: Optional[Mapping[str, Any]] = None,
        bounds: Optional[Bounds] = None,
    ) -> None:
        current = self.get_object(object_id)
        if current is None:
            raise ObjectNotFoundError(object_id)

        changed = current.with_changes(props=props, bounds=bounds)
        if changed == current:
            return

        if object_id in self._created:
            self._created[object_id] = changed
        else:
            self._updated[object_id] = changed
        self._mutation_count += 1

    def delete_object(self, object_id: str) -> None:
        if self.get_object(object_id) is None:
            raise ObjectNotFoundError(object_id)

        for child_id in self.get_children(object_id):
            self.delete_object(child_id)

        if self._created.pop(object_id, None) is None:
            self._updated.pop(object_id, None)
            self._deleted.add(object_id)
        self._mutation_count += 1

    def commit(self, mutator: DocumentMutator) -> StagedChanges:
        """Hand the net difference to the base document to the host."""
        created = []
        for obj in self._created.values():
            created.append(mutator.create_object(obj))

        updated = []
        for object_id, obj in self._updated.items():
            stored = self._base.get_object(object_id)
            if stored is None:
                continue
            props = {
                key: value
                for key, value in obj.props.items()
                if key not in stored.props or stored.props[key] != value
            }
            bounds = obj.bounds if obj.bounds != stored.bounds else None
            if not props and bounds is None:
                continue
            mutator.update_object(object_id, props=props or None, bounds=bounds)
            updated.append(object_id)

        deleted = []
        for object_id in self._deleted_in_order():
            mutator.delete_object(object_id)
            deleted.append(object_id)

        logger.debug(
            "Committed staged changes: %d created, %d updated, %d deleted",
            len(created),
            len(updated),
            len(deleted),
        )
        return StagedChanges(
            created=tuple(created),
            updated=tuple(updated),
            deleted=tuple(deleted),
        )

    def _deleted_in_order(self) -> List[str]:
        # Parents before children; the host cascades anyway
        ordered = []
        for obj in self._base.find_all():
            if obj.id not in self._deleted:
                continue
            if obj.parent_id is not None and obj.parent_id in self._deleted:
                continue
            ordered.append(obj.id)
        return ordered

    def _is_child(self, object_id: str, parent_id: str) -> bool:
        obj = self.get_object(object_id)
        return obj is not None and obj.parent_id == parent_id

    def _links(
        self,
        base_links: List[CanvasObject],
        key: str,
        object_id: str,
    ) -> List[CanvasObject]:
        seen: Set[str] = set()
        result: List[CanvasObject] = []
        candidates = [*base_links, *self._updated.values(), *self._created.values()]
        for candidate in candidates:
            if candidate.id in seen:
                continue
            seen.add(candidate.id)
            obj = self.get_object(candidate.id)
            if (
                obj is not None
                and obj.is_type(CanvasObjectType.ALLOCATION_LINK)
                and obj.prop(key) == object_id
            ):
                result.append(obj)
        return result
