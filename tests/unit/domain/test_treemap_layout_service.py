"""Tests for the TreemapLayoutService domain service."""

import math

import pytest
from pydantic import ValidationError
from shape_of_money.domain.budgeting.services import TreemapLayoutService
from shape_of_money.domain.budgeting.value_objects import (
    TreemapItem,
    TreemapLayoutOptions,
)

from tests.shared.fixtures.factories import default_settings


def _overlap(a, b) -> float:
    width = min(a.x + a.w, b.x + b.w) - max(a.x, b.x)
    height = min(a.y + a.h, b.y + b.h) - max(a.y, b.y)
    return max(width, 0) * max(height, 0)


class TestTreemapLayout:
    """Test cases for the squarified treemap layout."""

    def setup_method(self):
        self.service = TreemapLayoutService()
        self.items = [
            TreemapItem(id="shape:rent", amount=100, x=0, y=0, w=60, h=100),
            TreemapItem(id="shape:food", amount=50, x=100, y=20, w=40, h=75),
            TreemapItem(id="shape:fun", amount=25, x=200, y=40, w=30, h=50),
        ]

    def test_empty_input(self):
        assert self.service.layout([]) == []

    def test_one_cell_per_item_with_amounts_unchanged(self):
        cells = self.service.layout(self.items)

        assert sorted(cell.id for cell in cells) == sorted(i.id for i in self.items)
        amounts = {cell.id: cell.amount for cell in cells}
        assert amounts == {"shape:rent": 100, "shape:food": 50, "shape:fun": 25}

    def test_cell_areas_follow_amounts(self):
        cells = self.service.layout(self.items)

        for cell in cells:
            assert cell.w * cell.h == pytest.approx(cell.amount * 60, rel=1e-9)
        assert sum(c.w * c.h for c in cells) == pytest.approx(175 * 60)

    def test_cells_do_not_overlap(self):
        cells = self.service.layout(self.items)

        for i, a in enumerate(cells):
            for b in cells[i + 1 :]:
                assert _overlap(a, b) == pytest.approx(0, abs=1e-6)

    def test_largest_item_first(self):
        cells = self.service.layout(list(reversed(self.items)))

        assert cells[0].id == "shape:rent"

    def test_origin_defaults_to_selection_corner(self):
        cells = self.service.layout(self.items)

        assert min(c.x for c in cells) == pytest.approx(0)
        assert min(c.y for c in cells) == pytest.approx(0)

    def test_explicit_origin(self):
        cells = self.service.layout(
            self.items,
            TreemapLayoutOptions(origin=(500.0, 300.0)),
        )

        assert min(c.x for c in cells) == pytest.approx(500)
        assert min(c.y for c in cells) == pytest.approx(300)

    def test_aspect_ratio_clamped_for_wide_selection(self):
        items = [
            TreemapItem(id="shape:a", amount=100, x=0, y=0, w=10, h=10),
            TreemapItem(id="shape:b", amount=100, x=10000, y=0, w=10, h=10),
        ]

        cells = self.service.layout(items)

        width = max(c.x + c.w for c in cells) - min(c.x for c in cells)
        height = max(c.y + c.h for c in cells) - min(c.y for c in cells)
        assert width / height == pytest.approx(4.0)

    def test_zero_and_malformed_amounts_get_minimum_area(self):
        items = [
            TreemapItem(id="shape:a", amount=0, x=0, y=0, w=10, h=10),
            TreemapItem(id="shape:b", amount=None, x=0, y=0, w=10, h=10),
            TreemapItem(id="shape:c", amount=-5, x=0, y=0, w=10, h=10),
        ]

        cells = self.service.layout(items)

        assert len(cells) == 3
        for cell in cells:
            assert cell.w * cell.h == pytest.approx(1.0)

    @pytest.mark.parametrize("amount", [math.nan, math.inf])
    def test_non_finite_amount_gives_no_layout(self, amount):
        items = [
            TreemapItem(id="shape:a", amount=amount, x=0, y=0, w=10, h=10),
            TreemapItem(id="shape:b", amount=100, x=20, y=0, w=60, h=100),
        ]

        assert self.service.layout(items) == []

    def test_padding_shrinks_cells(self):
        cells = self.service.layout(self.items, TreemapLayoutOptions(padding=4))

        for cell in cells:
            assert cell.w * cell.h < cell.amount * 60
            assert cell.w >= 0
            assert cell.h >= 0

    def test_round_coordinates(self):
        cells = self.service.layout(
            self.items,
            TreemapLayoutOptions(origin=(0.0, 0.0), round_coordinates=True),
        )

        for cell in cells:
            assert cell.x == int(cell.x)
            assert cell.y == int(cell.y)
            assert cell.w == int(cell.w)

    def test_single_item_fills_container(self):
        cells = self.service.layout([self.items[0]])

        assert len(cells) == 1
        assert cells[0].w * cells[0].h == pytest.approx(6000)
        assert cells[0].w / cells[0].h == pytest.approx(0.6)

    def test_from_settings_uses_default_options(self):
        service = TreemapLayoutService.from_settings(
            default_settings(treemap_aspect_min=1.0, treemap_aspect_max=1.0),
        )

        cells = service.layout(self.items)

        width = max(c.x + c.w for c in cells) - min(c.x for c in cells)
        height = max(c.y + c.h for c in cells) - min(c.y for c in cells)
        assert width == pytest.approx(height)


class TestTreemapLayoutOptions:
    """Test cases for option validation."""

    def test_defaults(self):
        options = TreemapLayoutOptions()

        assert options.padding == 0
        assert options.origin is None
        assert options.aspect_ratio_bounds == (0.25, 4.0)
        assert options.round_coordinates is False

    @pytest.mark.parametrize("bounds", [(0, 4), (4, 1), (-1, 2)])
    def test_invalid_aspect_bounds(self, bounds):
        with pytest.raises(ValidationError):
            TreemapLayoutOptions(aspect_ratio_bounds=bounds)

    def test_negative_padding(self):
        with pytest.raises(ValidationError):
            TreemapLayoutOptions(padding=-1)
