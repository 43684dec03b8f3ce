"""Tests for the module-level engine entry points."""

import pytest
import shape_of_money
from shape_of_money.domain.budgeting.exceptions import InvalidTreemapOptionsError
from shape_of_money.domain.budgeting.value_objects import (
    RemainderStateTable,
    TreemapItem,
    TreemapLayoutOptions,
)
from shape_of_money.domain.canvas.entities import BudgetItem
from shape_of_money.domain.canvas.value_objects import Bounds, BudgetKind

from tests.shared.fixtures.factories import DocumentBuilder, RecordingMutator


class TestEngineFacade:
    """Test cases for the package-level functions."""

    def test_dimensions_for_amount(self):
        dims = shape_of_money.dimensions_for_amount(100, 60, 100)

        assert dims.w == pytest.approx(60)
        assert dims.h == pytest.approx(100)

    def test_resize(self):
        item = BudgetItem(
            id="shape:i",
            bounds=Bounds(x=0, y=0, w=60, h=100),
            amount=100,
            currency="€",
            kind=BudgetKind.INCOME,
        )

        result = shape_of_money.resize(item, 2, 1)

        assert result.w == pytest.approx(120)

    def test_layout_treemap_accepts_mapping(self):
        items = [
            TreemapItem(id="shape:a", amount=10, x=0, y=0, w=10, h=10),
            TreemapItem(id="shape:b", amount=20, x=0, y=0, w=10, h=10),
        ]

        cells = shape_of_money.layout_treemap(items, {"origin": (5.0, 5.0)})

        assert min(c.x for c in cells) == pytest.approx(5)

    def test_invalid_treemap_options(self):
        with pytest.raises(InvalidTreemapOptionsError):
            shape_of_money.build_treemap_options({"aspect_ratio_bounds": (3, 1)})

    def test_options_instance_passes_through(self):
        options = TreemapLayoutOptions(padding=2)

        assert shape_of_money.build_treemap_options(options) is options

    def test_aggregate(self):
        builder = DocumentBuilder()
        household = builder.container("household")
        builder.item("salary", 1000, "income", parent=household)

        result = shape_of_money.aggregate(builder.store(), household)

        assert result.income_total == 1000

    def test_synchronize_with_shared_state(self):
        builder = DocumentBuilder()
        savings = builder.item("emergency", 300, "savings")
        builder.link("a", savings, "shape:goals", label="100")
        builder.link("b", savings, "shape:pot")
        store = builder.store()
        state = RemainderStateTable()

        shape_of_money.synchronize(store, RecordingMutator(store), state)
        [remainder] = [o for o in store.get_links_from(savings) if o.prop("is_remainder")]
        store.delete_object(remainder.id)
        shape_of_money.synchronize(store, RecordingMutator(store), state)

        assert store.get_object("shape:b").prop("label") == "200"
