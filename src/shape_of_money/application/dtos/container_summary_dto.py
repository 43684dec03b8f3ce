"""DTO for a container summary as the host displays it."""

from dataclasses import dataclass

from shape_of_money.domain.shared.amount_text import round_amount


@dataclass(frozen=True)
class ContainerSummaryDTO:
    """Totals of one container, ready for presentation."""

    summary_id: str
    container_id: str
    container_name: str
    income_total: float
    expense_total: float
    savings_total: float
    savings_left: float
    total: float
    currency: str
    has_income: bool
    has_expense: bool
    has_savings: bool
    manually_positioned: bool = False

    @property
    def is_mixed_currency(self) -> bool:
        return not self.currency

    @property
    def has_breakdown(self) -> bool:
        return self.has_savings or (self.has_income and self.has_expense)

    @property
    def can_add_savings_item(self) -> bool:
        return self.savings_left > 0

    @property
    def formatted_income(self) -> str:
        return self.format(self.income_total)

    @property
    def formatted_expense(self) -> str:
        return self.format(self.expense_total)

    @property
    def formatted_savings(self) -> str:
        return self.format(self.savings_total)

    @property
    def formatted_savings_left(self) -> str:
        return self.format(self.savings_left)

    @property
    def formatted_total(self) -> str:
        return self.format(self.total)

    def format(self, value: float) -> str:
        """`<currency><amount>`, grouped, at most two fraction digits."""
        text = f"{round_amount(abs(value)):,.2f}".rstrip("0").rstrip(".")
        sign = "-" if value < 0 and text != "0" else ""
        return f"{sign}{self.currency}{text}"

    def to_dict(self) -> dict:
        return {
            "summary_id": self.summary_id,
            "container_id": self.container_id,
            "container_name": self.container_name,
            "income_total": self.income_total,
            "expense_total": self.expense_total,
            "savings_total": self.savings_total,
            "savings_left": self.savings_left,
            "total": self.total,
            "currency": self.currency,
            "is_mixed_currency": self.is_mixed_currency,
            "has_income": self.has_income,
            "has_expense": self.has_expense,
            "has_savings": self.has_savings,
            "has_breakdown": self.has_breakdown,
            "can_add_savings_item": self.can_add_savings_item,
            "manually_positioned": self.manually_positioned,
            "formatted": {
                "income": self.formatted_income,
                "expense": self.formatted_expense,
                "savings": self.formatted_savings,
                "savings_left": self.formatted_savings_left,
                "total": self.formatted_total,
            },
        }
