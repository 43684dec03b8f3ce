"""Aggregated totals of a container subtree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set

from shape_of_money.domain.canvas.value_objects import BudgetKind


@dataclass
class BudgetAggregate:
    """Per-kind totals and counts collected from a container."""

    total: float = 0.0
    count: int = 0
    income_total: float = 0.0
    expense_total: float = 0.0
    savings_total: float = 0.0
    income_count: int = 0
    expense_count: int = 0
    savings_count: int = 0
    # Part of savings_total that arrived through allocation links
    linked_savings_total: float = 0.0
    currencies: Set[str] = field(default_factory=set)

    def add(self, kind: BudgetKind, amount: float, currency: str = "") -> None:
        self.total += amount
        self.count += 1
        if kind == BudgetKind.INCOME:
            self.income_total += amount
            self.income_count += 1
        elif kind == BudgetKind.EXPENSE:
            self.expense_total += amount
            self.expense_count += 1
        else:
            self.savings_total += amount
            self.savings_count += 1
        if currency:
            self.currencies.add(currency)

    def add_linked_savings(
        self,
        amount: float,
        currency: str = "",
        new_item: bool = True,
    ) -> None:
        """Add savings arriving through a link; count each item once."""
        if new_item:
            self.add(BudgetKind.SAVINGS, amount, currency)
        else:
            self.total += amount
            self.savings_total += amount
        self.linked_savings_total += amount

    @property
    def currency(self) -> Optional[str]:
        """The single currency tag, None when unknown or mixed."""
        if len(self.currencies) == 1:
            return next(iter(self.currencies))
        return None

    @property
    def is_mixed_currency(self) -> bool:
        return len(self.currencies) > 1

    @property
    def has_content(self) -> bool:
        return self.count > 0

    @property
    def savings_left(self) -> float:
        return self.income_total + self.savings_total - self.expense_total

    @property
    def derived_savings_amount(self) -> float:
        """What a savings item sourced from this container should hold."""
        return max(0.0, self.savings_left)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "count": self.count,
            "income_total": self.income_total,
            "expense_total": self.expense_total,
            "savings_total": self.savings_total,
            "income_count": self.income_count,
            "expense_count": self.expense_count,
            "savings_count": self.savings_count,
            "linked_savings_total": self.linked_savings_total,
            "currencies": sorted(self.currencies),
            "currency": self.currency,
        }
