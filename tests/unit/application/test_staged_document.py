"""Tests for the StagedDocument overlay."""

import pytest
from shape_of_money.application.services import StagedDocument
from shape_of_money.domain.budgeting.exceptions import ObjectNotFoundError
from shape_of_money.domain.canvas.entities import CanvasObject
from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType
from shape_of_money.domain.shared.exceptions import ConflictError

from tests.shared.fixtures.factories import DocumentBuilder, RecordingMutator


class TestStagedDocument:
    """Test cases for staging writes over a base view."""

    def setup_method(self):
        builder = DocumentBuilder()
        self.container = builder.container("household")
        self.item = builder.item("salary", 1000, "income", parent=self.container)
        self.link = builder.link("a", self.item, self.container, label="10")
        self.store = builder.store()
        self.staged = StagedDocument(self.store)

    def _new_link(self, name="new"):
        return CanvasObject(
            id=f"shape:{name}",
            type=CanvasObjectType.ALLOCATION_LINK,
            props={"from_id": self.item, "to_id": "", "label": "5"},
        )

    def test_reads_fall_through_to_base(self):
        assert self.staged.get_object(self.item) == self.store.get_object(self.item)
        assert self.staged.get_children(self.container) == [self.item]
        assert [o.id for o in self.staged.get_links_to(self.container)] == [self.link]

    def test_created_objects_are_visible(self):
        self.staged.create_object(self._new_link())

        assert self.staged.get_object("shape:new") is not None
        assert [o.id for o in self.staged.get_links_from(self.item)] == [
            self.link,
            "shape:new",
        ]
        assert "shape:new" not in self.store

    def test_updates_are_visible(self):
        self.staged.update_object(self.item, props={"amount": 5})

        assert self.staged.get_object(self.item).prop("amount") == 5
        assert self.store.get_object(self.item).prop("amount") == 1000

    def test_updated_link_endpoints_are_reindexed(self):
        self.staged.update_object(self.link, props={"to_id": "shape:elsewhere"})

        assert self.staged.get_links_to(self.container) == []
        assert [o.id for o in self.staged.get_links_to("shape:elsewhere")] == [self.link]

    def test_deleted_objects_disappear(self):
        self.staged.delete_object(self.link)

        assert self.staged.get_object(self.link) is None
        assert self.staged.get_links_from(self.item) == []
        assert self.link not in [o.id for o in self.staged.find_all()]

    def test_delete_cascades_to_children(self):
        self.staged.delete_object(self.container)

        assert self.staged.get_object(self.item) is None

    def test_no_op_update_is_not_a_mutation(self):
        self.staged.update_object(self.item, props={"amount": 1000})

        assert self.staged.mutation_count == 0

    def test_mutations_are_counted(self):
        self.staged.create_object(self._new_link())
        self.staged.update_object(self.item, bounds=Bounds(x=1, y=1, w=1, h=1))
        self.staged.delete_object(self.link)

        assert self.staged.mutation_count == 3

    def test_duplicate_create(self):
        with pytest.raises(ConflictError):
            self.staged.create_object(self.store.get_object(self.item))

    def test_update_unknown(self):
        with pytest.raises(ObjectNotFoundError):
            self.staged.update_object("shape:missing", props={"a": 1})

    def test_delete_unknown(self):
        with pytest.raises(ObjectNotFoundError):
            self.staged.delete_object("shape:missing")


class TestStagedCommit:
    """Test cases for emitting the net difference."""

    def setup_method(self):
        builder = DocumentBuilder()
        self.container = builder.container("household")
        self.item = builder.item("salary", 1000, "income", parent=self.container)
        self.link = builder.link("a", self.item, self.container, label="10")
        self.store = builder.store()
        self.staged = StagedDocument(self.store)

    def test_commit_emits_only_changed_fields(self):
        self.staged.update_object(self.item, props={"amount": 5, "name": "Salary"})
        mutator = RecordingMutator(self.store)

        changes = self.staged.commit(mutator)

        assert mutator.calls == [("update", self.item, {"amount": 5}, None)]
        assert changes.updated == (self.item,)
        assert self.store.get_object(self.item).prop("amount") == 5

    def test_update_reverted_within_staging_emits_nothing(self):
        self.staged.update_object(self.item, props={"amount": 5})
        self.staged.update_object(self.item, props={"amount": 1000})
        mutator = RecordingMutator()

        changes = self.staged.commit(mutator)

        assert mutator.calls == []
        assert changes.updated == ()

    def test_created_then_deleted_emits_nothing(self):
        self.staged.create_object(
            CanvasObject(id="shape:tmp", type=CanvasObjectType.CONTAINER),
        )
        self.staged.delete_object("shape:tmp")
        mutator = RecordingMutator()

        self.staged.commit(mutator)

        assert mutator.calls == []

    def test_commit_order(self):
        self.staged.create_object(
            CanvasObject(id="shape:new", type=CanvasObjectType.CONTAINER),
        )
        self.staged.update_object(self.item, props={"amount": 1})
        self.staged.delete_object(self.link)
        mutator = RecordingMutator(self.store)

        changes = self.staged.commit(mutator)

        assert [call[0] for call in mutator.calls] == ["create", "update", "delete"]
        assert changes.created == ("shape:new",)
        assert changes.deleted == (self.link,)

    def test_deleted_parent_is_emitted_once(self):
        self.staged.delete_object(self.container)
        mutator = RecordingMutator(self.store)

        changes = self.staged.commit(mutator)

        assert changes.deleted == (self.container,)
        assert self.item not in self.store
