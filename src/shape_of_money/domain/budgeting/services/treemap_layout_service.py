"""Squarified treemap layout for a selection of budget items."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from shape_of_money.domain.budgeting.services.geometry_service import (
    AMOUNT_TO_AREA_SCALE,
    MIN_BUDGET_ITEM_SIZE,
)
from shape_of_money.domain.budgeting.value_objects.treemap import (
    TreemapCell,
    TreemapItem,
    TreemapLayoutOptions,
)

if TYPE_CHECKING:
    from shape_of_money_config import Settings

logger = logging.getLogger(__name__)


@dataclass
class _Node:
    id: str
    amount: float
    area: float
    x0: float = 0.0
    y0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class TreemapLayoutService:
    """Arrange items into a treemap whose cell areas follow their amounts."""

    def __init__(
        self,
        amount_to_area_scale: float = AMOUNT_TO_AREA_SCALE,
        min_size: float = MIN_BUDGET_ITEM_SIZE,
        default_options: Optional[TreemapLayoutOptions] = None,
    ):
        self._scale = amount_to_area_scale
        self._min_size = min_size
        self._default_options = default_options or TreemapLayoutOptions()

    @classmethod
    def from_settings(cls, settings: Settings) -> TreemapLayoutService:
        return cls(
            amount_to_area_scale=settings.amount_to_area_scale,
            min_size=settings.min_item_size,
            default_options=TreemapLayoutOptions(
                padding=settings.treemap_padding,
                aspect_ratio_bounds=(
                    settings.treemap_aspect_min,
                    settings.treemap_aspect_max,
                ),
                round_coordinates=settings.treemap_round_coordinates,
            ),
        )

    def layout(
        self,
        items: Sequence[TreemapItem],
        options: Optional[TreemapLayoutOptions] = None,
    ) -> List[TreemapCell]:
        """
        Lay the items out roughly over the footprint they occupy now.

        Returns an empty list when there is nothing sensible to lay out
        (no items, or a total area that is not a positive finite number).
        """
        if not items:
            return []
        options = options or self._default_options

        min_area = self._min_size * self._min_size
        nodes = [
            _Node(
                id=item.id,
                amount=item.amount,
                area=max(_clamped_amount(item.amount) * self._scale, min_area),
            )
            for item in items
        ]
        total_area = sum(node.area for node in nodes)
        if not math.isfinite(total_area) or total_area <= 0:
            logger.debug("Treemap skipped: total area %r", total_area)
            return []

        min_x = min(item.x for item in items)
        min_y = min(item.y for item in items)
        max_x = max(item.x + item.w for item in items)
        max_y = max(item.y + item.h for item in items)

        selection_width = max(max_x - min_x, self._min_size)
        selection_height = max(max_y - min_y, self._min_size)
        low, high = options.aspect_ratio_bounds
        target_aspect = _clamp(selection_width / selection_height, low, high)

        container_width = max(math.sqrt(total_area * target_aspect), self._min_size)
        container_height = total_area / container_width
        if container_height < self._min_size:
            container_height = self._min_size
            container_width = max(total_area / container_height, self._min_size)

        ratio = max(target_aspect, 1 / target_aspect)
        origin_x, origin_y = options.origin if options.origin is not None else (min_x, min_y)

        # Largest first, stable for equal areas
        nodes.sort(key=lambda node: node.area, reverse=True)

        half_pad = options.padding / 2
        _squarify(
            nodes,
            ratio,
            -half_pad,
            -half_pad,
            container_width + half_pad,
            container_height + half_pad,
        )

        cells = []
        for node in nodes:
            x0, y0, x1, y1 = _inset(node, half_pad)
            if options.round_coordinates:
                x0, y0, x1, y1 = round(x0), round(y0), round(x1), round(y1)
            cells.append(
                TreemapCell(
                    id=node.id,
                    amount=node.amount,
                    x=origin_x + x0,
                    y=origin_y + y0,
                    w=x1 - x0,
                    h=y1 - y0,
                ),
            )

        logger.debug(
            "Treemap laid out %d cells in %.1f x %.1f (ratio %.2f)",
            len(cells),
            container_width,
            container_height,
            ratio,
        )
        return cells


def _clamped_amount(amount: float) -> float:
    # NaN and infinities are kept so the total area check rejects them
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return 0.0
    if math.isnan(amount):
        return amount
    return max(float(amount), 0.0)


def _inset(node: _Node, pad: float) -> tuple[float, float, float, float]:
    x0, y0, x1, y1 = node.x0 + pad, node.y0 + pad, node.x1 - pad, node.y1 - pad
    if x1 < x0:
        x0 = x1 = (x0 + x1) / 2
    if y1 < y0:
        y0 = y1 = (y0 + y1) / 2
    return x0, y0, x1, y1


def _squarify(  # NOQA: PLR0913
    nodes: List[_Node],
    ratio: float,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
) -> None:
    """Squarified tiling (Bruls et al.) with a target row aspect ratio.

    Rows are grown while the worst aspect ratio in the row does not get
    worse, then laid along the shorter side of the remaining space.
    """
    remaining = sum(node.area for node in nodes)
    i0 = 0
    n = len(nodes)

    while i0 < n:
        dx = x1 - x0
        dy = y1 - y0

        # Next non-empty node starts the row
        i1 = i0
        row_value = nodes[i1].area
        i1 += 1
        while not row_value and i1 < n:
            row_value = nodes[i1].area
            i1 += 1

        min_value = max_value = row_value
        alpha = max(dy / dx, dx / dy) / (remaining * ratio) if dx > 0 and dy > 0 else 0.0
        beta = row_value * row_value * alpha
        min_ratio = max(max_value / beta, beta / min_value) if beta > 0 else math.inf

        while i1 < n:
            node_value = nodes[i1].area
            row_value += node_value
            min_value = min(min_value, node_value)
            max_value = max(max_value, node_value)
            beta = row_value * row_value * alpha
            new_ratio = max(max_value / beta, beta / min_value) if beta > 0 else math.inf
            if new_ratio > min_ratio:
                row_value -= node_value
                break
            min_ratio = new_ratio
            i1 += 1

        row = nodes[i0:i1]
        if dx < dy:
            row_y1 = y0 + dy * row_value / remaining if remaining else y1
            _dice(row, row_value, x0, y0, x1, row_y1)
            y0 = row_y1
        else:
            row_x1 = x0 + dx * row_value / remaining if remaining else x1
            _slice(row, row_value, x0, y0, row_x1, y1)
            x0 = row_x1

        remaining -= row_value
        i0 = i1


def _dice(row: List[_Node], value: float, x0: float, y0: float, x1: float, y1: float) -> None:
    """Lay a row out left to right."""
    k = (x1 - x0) / value if value else 0.0
    for node in row:
        node.y0, node.y1 = y0, y1
        node.x0 = x0
        x0 += node.area * k
        node.x1 = x0


def _slice(row: List[_Node], value: float, x0: float, y0: float, x1: float, y1: float) -> None:
    """Lay a row out top to bottom."""
    k = (y1 - y0) / value if value else 0.0
    for node in row:
        node.x0, node.x1 = x0, x1
        node.y0 = y0
        y0 += node.area * k
        node.y1 = y0
