"""Kinds of budget items."""

from __future__ import annotations

from enum import Enum
from typing import Any


class BudgetKind(Enum):
    """What a budget item's amount represents."""

    INCOME = "income"
    EXPENSE = "expense"
    SAVINGS = "savings"

    @classmethod
    def parse(cls, value: Any) -> BudgetKind | None:
        if isinstance(value, BudgetKind):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def default_color(self) -> str:
        return {
            BudgetKind.INCOME: "green",
            BudgetKind.EXPENSE: "red",
            BudgetKind.SAVINGS: "blue",
        }[self]
