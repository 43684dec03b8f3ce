"""Create budget items the way the draw tool does."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from shape_of_money.application.ports.document_store import DocumentStore
from shape_of_money.domain.budgeting.services import AMOUNT_TO_AREA_SCALE
from shape_of_money.domain.canvas.entities import (
    DEFAULT_CURRENCY,
    DEFAULT_ITEM_AMOUNT,
    DEFAULT_ITEM_NAME,
    BudgetItem,
    CanvasObject,
    new_object_id,
)
from shape_of_money.domain.canvas.value_objects import (
    Bounds,
    BudgetKind,
    CanvasObjectType,
)
from shape_of_money_config import Settings, get_settings

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

MIN_DRAG_SIDE = 8.0
MIN_DRAWN_SIDE = 54.8
MIN_DRAWN_AMOUNT = 50
CLICK_ITEM_SIZE = 80.0


class CreateBudgetItemCommand:
    """Create a budget item from a drag rectangle or a single click."""

    def __init__(
        self,
        store: DocumentStore,
        amount_to_area_scale: float = AMOUNT_TO_AREA_SCALE,
    ):
        self._store = store
        self._scale = amount_to_area_scale

    @classmethod
    def from_settings(
        cls,
        store: DocumentStore,
        settings: Optional[Settings] = None,
    ) -> CreateBudgetItemCommand:
        settings = settings or get_settings()
        return cls(store=store, amount_to_area_scale=settings.amount_to_area_scale)

    def from_drag(
        self,
        start: Point,
        end: Point,
        kind: BudgetKind = BudgetKind.INCOME,
        parent_id: Optional[str] = None,
    ) -> str:
        """
        Create an item spanning the dragged rectangle.

        The amount follows the drawn area (never below 50). Items drawn
        smaller than the minimum drawn side are grown to it, keeping the
        drag's aspect ratio.
        """
        min_x, max_x = sorted((start[0], end[0]))
        min_y, max_y = sorted((start[1], end[1]))
        width = max(MIN_DRAG_SIDE, max_x - min_x)
        height = max(MIN_DRAG_SIDE, max_y - min_y)
        width, height = _grow_to_minimum(width, height)

        return self._create(
            Bounds(x=min_x, y=min_y, w=width, h=height),
            self._amount_for_area(width * height),
            kind,
            parent_id,
        )

    def at_point(
        self,
        x: float,
        y: float,
        kind: BudgetKind = BudgetKind.INCOME,
        parent_id: Optional[str] = None,
    ) -> str:
        """Create a default square item centered on a clicked point."""
        half = CLICK_ITEM_SIZE / 2
        return self._create(
            Bounds(x=x - half, y=y - half, w=CLICK_ITEM_SIZE, h=CLICK_ITEM_SIZE),
            DEFAULT_ITEM_AMOUNT,
            kind,
            parent_id,
        )

    def _amount_for_area(self, area: float) -> float:
        return float(max(MIN_DRAWN_AMOUNT, round(area / self._scale)))

    def _create(
        self,
        bounds: Bounds,
        amount: float,
        kind: BudgetKind,
        parent_id: Optional[str],
    ) -> str:
        with self._store.batch() as mutator:
            item_id = mutator.create_object(
                CanvasObject(
                    id=new_object_id(),
                    type=CanvasObjectType.BUDGET_ITEM,
                    bounds=bounds,
                    parent_id=parent_id,
                    props=BudgetItem.build_props(
                        amount=amount,
                        kind=kind,
                        currency=DEFAULT_CURRENCY,
                        name=DEFAULT_ITEM_NAME,
                    ),
                ),
            )
        logger.info("Created %s budget item %s (amount %s)", kind.value, item_id, amount)
        return item_id


def _grow_to_minimum(width: float, height: float) -> Tuple[float, float]:
    if width >= MIN_DRAWN_SIDE and height >= MIN_DRAWN_SIDE:
        return width, height

    aspect_ratio = width / height
    new_width = max(MIN_DRAWN_SIDE, width)
    new_height = max(MIN_DRAWN_SIDE, height)
    if width < MIN_DRAWN_SIDE:
        new_height = max(MIN_DRAWN_SIDE, new_width / aspect_ratio)
    elif height < MIN_DRAWN_SIDE:
        new_width = max(MIN_DRAWN_SIDE, new_height * aspect_ratio)
    return new_width, new_height
