"""Container summary artifact entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from shape_of_money.domain.canvas.entities.canvas_object import CanvasObject
from shape_of_money.domain.canvas.value_objects import Bounds, CanvasObjectType
from shape_of_money.domain.shared.amount_text import coerce_amount

SUMMARY_DISPLAY_KEYS = (
    "container_name",
    "income_total",
    "expense_total",
    "savings_total",
    "currency",
    "has_income",
    "has_expense",
    "has_savings",
)


@dataclass(frozen=True)
class SummaryArtifact:
    """
    Read-only display of a container's aggregated totals.

    Created and removed only by the reconciler. Once the user drags it,
    manually_positioned is set and its position is left alone.
    """

    id: str
    bounds: Bounds
    container_id: str
    container_name: str = ""
    income_total: float = 0.0
    expense_total: float = 0.0
    savings_total: float = 0.0
    currency: str = ""
    has_income: bool = False
    has_expense: bool = False
    has_savings: bool = False
    manually_positioned: bool = False

    @classmethod
    def from_object(cls, obj: CanvasObject) -> SummaryArtifact:
        return cls(
            id=obj.id,
            bounds=obj.bounds,
            container_id=str(obj.prop("container_id") or ""),
            container_name=str(obj.prop("container_name") or ""),
            income_total=coerce_amount(obj.prop("income_total")),
            expense_total=coerce_amount(obj.prop("expense_total")),
            savings_total=coerce_amount(obj.prop("savings_total")),
            currency=str(obj.prop("currency") or ""),
            has_income=bool(obj.prop("has_income", False)),
            has_expense=bool(obj.prop("has_expense", False)),
            has_savings=bool(obj.prop("has_savings", False)),
            manually_positioned=bool(obj.prop("manually_positioned", False)),
        )

    @staticmethod
    def matches(obj: Optional[CanvasObject]) -> bool:
        return obj is not None and obj.is_type(CanvasObjectType.CONTAINER_SUMMARY)

    @property
    def savings_left(self) -> float:
        return self.savings_total + self.income_total - self.expense_total

    @property
    def total(self) -> float:
        return self.savings_total + self.income_total + self.expense_total

    def display_props(self) -> dict[str, Any]:
        return {key: getattr(self, key) for key in SUMMARY_DISPLAY_KEYS}
