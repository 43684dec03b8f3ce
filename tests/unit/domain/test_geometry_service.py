"""Tests for the GeometryService domain service."""

import math

import pytest
from shape_of_money.domain.budgeting.services import GeometryService
from shape_of_money.domain.canvas.entities import BudgetItem
from shape_of_money.domain.canvas.value_objects import Bounds, BudgetKind

from tests.shared.fixtures.factories import default_settings


def _item(amount: float, w: float = 60.0, h: float = 100.0) -> BudgetItem:
    return BudgetItem(
        id="shape:item",
        bounds=Bounds(x=0, y=0, w=w, h=h),
        amount=amount,
        currency="€",
        kind=BudgetKind.INCOME,
    )


class TestDimensionsForAmount:
    """Test cases for sizing an item from its amount."""

    def setup_method(self):
        self.geometry = GeometryService()

    def test_keeps_aspect_ratio(self):
        dims = self.geometry.dimensions_for_amount(100, 60, 100)

        assert dims.w == pytest.approx(60)
        assert dims.h == pytest.approx(100)

    def test_area_follows_amount(self):
        for amount in (1, 12.5, 100, 2500):
            dims = self.geometry.dimensions_for_amount(amount, 30, 10)
            assert dims.w * dims.h == pytest.approx(amount * 60)
            assert dims.w / dims.h == pytest.approx(3)

    def test_zero_amount_gives_minimum_square(self):
        dims = self.geometry.dimensions_for_amount(0, 60, 100)

        assert (dims.w, dims.h) == (1, 1)

    @pytest.mark.parametrize("amount", [-10, math.nan, math.inf, "abc", None])
    def test_malformed_amount_counts_as_zero(self, amount):
        dims = self.geometry.dimensions_for_amount(amount, 60, 100)

        assert (dims.w, dims.h) == (1, 1)

    @pytest.mark.parametrize("size", [(0, 100), (60, -1), (math.nan, 10)])
    def test_invalid_current_size_means_square(self, size):
        dims = self.geometry.dimensions_for_amount(60, *size)

        assert dims.w == pytest.approx(60)
        assert dims.h == pytest.approx(60)

    def test_sides_never_below_minimum(self):
        dims = self.geometry.dimensions_for_amount(1, 1000, 1)

        assert dims.h >= 1
        assert dims.w >= 1
        assert dims.w * dims.h == pytest.approx(60)

    def test_tiny_amount_is_floored_to_minimum_size(self):
        dims = self.geometry.dimensions_for_amount(0.001, 1, 1)

        assert (dims.w, dims.h) == (1, 1)

    @pytest.mark.parametrize("amount", [0.001, 1, 12.5, 100, 2500, 1e6])
    @pytest.mark.parametrize(
        "size",
        [(60, 100), (1, 1), (30, 10), (1000, 1), (1, 1000), (0.5, 400)],
    )
    def test_result_is_a_fixed_point(self, amount, size):
        first = self.geometry.dimensions_for_amount(amount, *size)
        second = self.geometry.dimensions_for_amount(amount, first.w, first.h)

        assert second.w == pytest.approx(first.w)
        assert second.h == pytest.approx(first.h)
        assert first.w >= 1
        assert first.h >= 1
        assert first.w * first.h == pytest.approx(max(amount * 60, 1))

    def test_width_clamped_at_area_over_minimum_is_stable(self):
        first = self.geometry.dimensions_for_amount(1, 1000, 1)
        second = self.geometry.dimensions_for_amount(1, first.w, first.h)

        assert first.w == pytest.approx(60)
        assert first.h == pytest.approx(1)
        assert (second.w, second.h) == pytest.approx((first.w, first.h))

    def test_square_dimensions(self):
        dims = self.geometry.square_dimensions(60)

        assert dims.w == pytest.approx(60)
        assert dims.h == pytest.approx(60)

    def test_from_settings_uses_scale(self):
        geometry = GeometryService.from_settings(
            default_settings(amount_to_area_scale=100.0),
        )
        dims = geometry.square_dimensions(100)

        assert dims.w == pytest.approx(100)


class TestResize:
    """Test cases for user drag-resizes."""

    def setup_method(self):
        self.geometry = GeometryService()

    def test_width_change_wins(self):
        result = self.geometry.resize(_item(100), 2.0, 1.0)

        assert result.w == pytest.approx(120)
        assert result.h == pytest.approx(50)
        assert result.amount == pytest.approx(100)

    def test_height_change_wins(self):
        result = self.geometry.resize(_item(100), 1.1, 1.5)

        assert result.h == pytest.approx(150)
        assert result.w == pytest.approx(40)
        assert result.amount == pytest.approx(100)

    def test_tie_goes_to_width(self):
        result = self.geometry.resize(_item(100), 0.5, 1.5)

        assert result.w == pytest.approx(30)
        assert result.h == pytest.approx(200)

    def test_non_finite_scale_is_ignored(self):
        result = self.geometry.resize(_item(100), math.nan, 2.0)

        assert result.h == pytest.approx(200)
        assert result.w == pytest.approx(30)

    def test_zero_amount_collapses_to_minimum(self):
        result = self.geometry.resize(_item(0), 3.0, 1.0)

        assert (result.w, result.h, result.amount) == (1, 1, 0.0)

    def test_minimum_size_changes_amount(self):
        result = self.geometry.resize(_item(0.001, w=1, h=1), 2.0, 1.0)

        assert (result.w, result.h) == (1, 1)
        assert result.amount == pytest.approx(1 / 60)

    def test_extreme_drag_keeps_area(self):
        result = self.geometry.resize(_item(100), 500.0, 1.0)

        assert result.h == pytest.approx(1)
        assert result.w == pytest.approx(6000)
        assert result.amount == pytest.approx(100)


class TestFitToCell:
    """Test cases for shaping an amount like a treemap cell."""

    def setup_method(self):
        self.geometry = GeometryService()

    def test_takes_cell_ratio(self):
        dims = self.geometry.fit_to_cell(100, 30, 200)

        assert dims.w == pytest.approx(30)
        assert dims.h == pytest.approx(200)

    def test_collapsed_cell_height(self):
        dims = self.geometry.fit_to_cell(100, 30, 0)

        assert dims.w * dims.h == pytest.approx(6000)
        assert dims.w >= 1
        assert dims.h >= 1

    def test_zero_amount(self):
        dims = self.geometry.fit_to_cell(0, 30, 200)

        assert (dims.w, dims.h) == (1, 1)

    def test_amount_for_dimensions(self):
        assert self.geometry.amount_for_dimensions(60, 100) == pytest.approx(100)
        assert self.geometry.amount_for_dimensions(0, 60) == pytest.approx(1)
