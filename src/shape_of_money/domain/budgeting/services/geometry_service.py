"""Amount <-> dimensions mapping for budget items."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from shape_of_money.domain.canvas.value_objects import Dimensions, ResizeResult
from shape_of_money.domain.shared.amount_text import coerce_amount

if TYPE_CHECKING:
    from shape_of_money.domain.canvas.entities import BudgetItem
    from shape_of_money_config import Settings

# Area in square canvas units per unit of money
AMOUNT_TO_AREA_SCALE = 60.0
# Smallest side a budget item may have
MIN_BUDGET_ITEM_SIZE = 1.0

# Guard for cell ratios computed from collapsed treemap cells
_MIN_RATIO = 1e-6


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class GeometryService:
    """
    Keep a budget item's area proportional to its amount.

    The target area of an amount is ``amount * amount_to_area_scale``;
    neither side may drop below ``min_size``.
    """

    def __init__(
        self,
        amount_to_area_scale: float = AMOUNT_TO_AREA_SCALE,
        min_size: float = MIN_BUDGET_ITEM_SIZE,
    ):
        self._scale = amount_to_area_scale
        self._min_size = min_size

    @classmethod
    def from_settings(cls, settings: Settings) -> GeometryService:
        return cls(
            amount_to_area_scale=settings.amount_to_area_scale,
            min_size=settings.min_item_size,
        )

    @property
    def amount_to_area_scale(self) -> float:
        return self._scale

    @property
    def min_size(self) -> float:
        return self._min_size

    @property
    def min_area(self) -> float:
        return self._min_size * self._min_size

    def target_area(self, amount: float) -> float:
        return coerce_amount(amount) * self._scale

    def dimensions_for_amount(
        self,
        amount: float,
        current_width: float,
        current_height: float,
    ) -> Dimensions:
        """
        Size for an amount, keeping the current aspect ratio.

        Parameters
        ----------
        amount
            Amount to represent; negative or malformed values count as 0
        current_width, current_height
            Current size, used only for its aspect ratio (1 when either
            side is not positive)
        """
        target_area = self.target_area(amount)
        if target_area <= 0:
            return Dimensions(w=self._min_size, h=self._min_size)

        if _is_positive(current_width) and _is_positive(current_height):
            aspect_ratio = current_width / current_height
        else:
            aspect_ratio = 1.0

        ideal_width = math.sqrt(target_area * aspect_ratio)
        return self._enforce_width_preference(target_area, ideal_width)

    def square_dimensions(self, amount: float) -> Dimensions:
        """Square of the area the amount calls for."""
        return self.dimensions_for_amount(amount, 1.0, 1.0)

    def resize(
        self,
        item: BudgetItem,
        scale_x: float,
        scale_y: float,
    ) -> ResizeResult:
        """
        Resize an item by the user's drag scale factors.

        Whichever axis changed more wins: its scaled size is kept and
        the other side is recomputed from the item's current amount.
        The amount is then re-derived from the final area, which only
        differs from the old amount when the minimum size kicks in.
        """
        target_area = self.target_area(item.amount)
        if target_area <= 0:
            return ResizeResult(w=self._min_size, h=self._min_size, amount=0.0)

        scale_x = scale_x if math.isfinite(scale_x) else 1.0
        scale_y = scale_y if math.isfinite(scale_y) else 1.0

        if abs(scale_x - 1) >= abs(scale_y - 1):
            dims = self._enforce_width_preference(target_area, item.width * scale_x)
        else:
            dims = self._enforce_height_preference(target_area, item.height * scale_y)

        return ResizeResult(
            w=dims.w,
            h=dims.h,
            amount=self.amount_for_dimensions(dims.w, dims.h),
        )

    def amount_for_dimensions(self, width: float, height: float) -> float:
        """Amount whose target area is width * height."""
        return self._normalize(width) * self._normalize(height) / self._scale

    def fit_to_cell(self, amount: float, cell_width: float, cell_height: float) -> Dimensions:
        """Size for an amount shaped like a treemap cell."""
        min_area = self.min_area
        constrained_area = max(self.target_area(amount), min_area)
        if constrained_area <= min_area:
            return Dimensions(w=self._min_size, h=self._min_size)

        ratio = cell_width / cell_height if _is_positive(cell_height) else 1.0
        if not math.isfinite(ratio):
            ratio = 1.0

        width = math.sqrt(constrained_area * max(ratio, _MIN_RATIO))
        if not math.isfinite(width):
            width = self._min_size
        height = constrained_area / max(width, _MIN_RATIO)
        if not math.isfinite(height):
            height = self._min_size

        if width < self._min_size:
            width = self._min_size
            height = constrained_area / width

        if height < self._min_size:
            height = self._min_size
            width = constrained_area / height

        return Dimensions(w=width, h=height)

    def _normalize(self, value: float) -> float:
        return value if _is_positive(value) else self._min_size

    def _enforce_width_preference(self, target_area: float, width_candidate: float) -> Dimensions:
        low = self._min_size
        high = max(low, target_area / low)

        width = _clamp(self._normalize(width_candidate), low, high)
        height = _clamp(target_area / width, low, high)

        width = _clamp(target_area / height, low, high)
        height = _clamp(target_area / width, low, high)

        return Dimensions(w=width, h=height)

    def _enforce_height_preference(self, target_area: float, height_candidate: float) -> Dimensions:
        low = self._min_size
        high = max(low, target_area / low)

        height = _clamp(self._normalize(height_candidate), low, high)
        width = _clamp(target_area / height, low, high)

        height = _clamp(target_area / width, low, high)
        width = _clamp(target_area / height, low, high)

        return Dimensions(w=width, h=height)


def _is_positive(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0
