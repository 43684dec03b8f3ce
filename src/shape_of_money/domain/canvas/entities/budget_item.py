"""Budget item entity."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from shape_of_money.domain.canvas.entities.canvas_object import CanvasObject
from shape_of_money.domain.canvas.value_objects import (
    Bounds,
    BudgetKind,
    CanvasObjectType,
)
from shape_of_money.domain.shared.amount_text import coerce_amount

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "€"
DEFAULT_ITEM_NAME = "Budget Item"
DEFAULT_ITEM_AMOUNT = 100.0


@dataclass(frozen=True)
class BudgetItem:
    """
    A rectangle whose area stands for a monetary amount.

    The amount is the source of truth; width and height follow from it
    except while the user resizes the item directly.

    Attributes
    ----------
    amount
        Non-negative amount (malformed stored values read as 0)
    currency
        Short currency tag, empty means unknown
    kind
        Income, expense or savings; None when the stored kind is unknown
    source_container_id
        Set only on savings items whose amount is derived from a container
    """

    id: str
    bounds: Bounds
    amount: float
    currency: str
    kind: Optional[BudgetKind]
    name: str = DEFAULT_ITEM_NAME
    color: str = ""
    opacity: float = 1.0
    source_container_id: Optional[str] = None
    parent_id: Optional[str] = None

    @classmethod
    def from_object(cls, obj: CanvasObject) -> BudgetItem:
        kind = BudgetKind.parse(obj.prop("kind"))
        if kind is None:
            logger.debug("Budget item %s has unknown kind %r", obj.id, obj.prop("kind"))

        currency = obj.prop("currency")
        source = obj.prop("source_container_id")
        opacity = obj.prop("opacity", 1.0)
        return cls(
            id=obj.id,
            bounds=obj.bounds,
            amount=coerce_amount(obj.prop("amount")),
            currency=currency.strip() if isinstance(currency, str) else "",
            kind=kind,
            name=str(obj.prop("name") or ""),
            color=str(obj.prop("color") or ""),
            opacity=_coerce_opacity(opacity),
            source_container_id=source if isinstance(source, str) and source else None,
            parent_id=obj.parent_id,
        )

    @staticmethod
    def matches(obj: Optional[CanvasObject]) -> bool:
        return obj is not None and obj.is_type(CanvasObjectType.BUDGET_ITEM)

    @property
    def width(self) -> float:
        return self.bounds.w

    @property
    def height(self) -> float:
        return self.bounds.h

    @property
    def is_savings(self) -> bool:
        return self.kind == BudgetKind.SAVINGS

    @property
    def is_derived(self) -> bool:
        """Whether the amount is computed from a source container."""
        return self.is_savings and self.source_container_id is not None

    @staticmethod
    def build_props(  # NOQA: PLR0913
        amount: float,
        kind: BudgetKind,
        currency: str = DEFAULT_CURRENCY,
        name: str = DEFAULT_ITEM_NAME,
        color: Optional[str] = None,
        opacity: float = 1.0,
        source_container_id: Optional[str] = None,
    ) -> dict[str, Any]:
        return {
            "amount": amount,
            "currency": currency,
            "kind": kind.value,
            "name": name,
            "color": color or kind.default_color,
            "opacity": opacity,
            "source_container_id": source_container_id or "",
        }


def _coerce_opacity(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 1.0
    if not math.isfinite(value):
        return 1.0
    return min(max(float(value), 0.0), 1.0)
