"""Tests for the AggregationService domain service."""

import pytest
from shape_of_money.domain.budgeting.exceptions import ObjectNotFoundError
from shape_of_money.domain.budgeting.services import AggregationService
from shape_of_money.domain.budgeting.value_objects import BudgetAggregate
from shape_of_money.domain.canvas.value_objects import BudgetKind

from tests.shared.fixtures.factories import DocumentBuilder


class TestAggregate:
    """Test cases for aggregating a container subtree."""

    def setup_method(self):
        self.builder = DocumentBuilder()
        self.household = self.builder.container("household")

    def _aggregate(self, container_id=None) -> BudgetAggregate:
        service = AggregationService(self.builder.store())
        return service.aggregate(container_id or self.household)

    def test_income_and_expense(self):
        self.builder.item("salary", 1000, "income", parent=self.household)
        self.builder.item("rent", 400, "expense", parent=self.household)

        result = self._aggregate()

        assert result.income_total == 1000
        assert result.expense_total == 400
        assert result.total == 1400
        assert result.count == 2
        assert result.savings_left == 600
        assert result.currency == "€"

    def test_nested_containers_are_included(self):
        fixed = self.builder.container("fixed", parent=self.household)
        self.builder.item("rent", 400, "expense", parent=fixed)
        self.builder.item("salary", 1000, "income", parent=self.household)

        result = self._aggregate()

        assert result.expense_total == 400
        assert result.income_total == 1000
        assert result.expense_count == 1

    def test_items_outside_are_ignored(self):
        self.builder.item("salary", 1000, "income", parent=self.household)
        self.builder.item("bonus", 500, "income")

        assert self._aggregate().income_total == 1000

    def test_unknown_kind_is_ignored(self):
        self.builder.item("gift", 70, "gift", parent=self.household)
        self.builder.item("salary", 1000, "income", parent=self.household)

        result = self._aggregate()

        assert result.count == 1
        assert result.total == 1000

    def test_empty_container(self):
        result = self._aggregate()

        assert result.count == 0
        assert not result.has_content
        assert result.currency is None

    def test_savings_sourced_from_container_excluded(self):
        self.builder.item("salary", 1000, "income", parent=self.household)
        self.builder.item(
            "leftover",
            1000,
            "savings",
            parent=self.household,
            source=self.household,
        )

        result = self._aggregate()

        assert result.savings_total == 0
        assert result.count == 1

    def test_savings_sourced_elsewhere_counted(self):
        self.builder.item(
            "leftover",
            250,
            "savings",
            parent=self.household,
            source="shape:other",
        )

        result = self._aggregate()

        assert result.savings_total == 250
        assert result.savings_count == 1

    def test_mixed_currency(self):
        self.builder.item("salary", 1000, "income", parent=self.household)
        self.builder.item("side-job", 100, "income", parent=self.household, currency="$")

        result = self._aggregate()

        assert result.is_mixed_currency
        assert result.currency is None
        assert result.to_dict()["currencies"] == ["$", "€"]

    def test_unknown_container(self):
        service = AggregationService(self.builder.store())

        with pytest.raises(ObjectNotFoundError):
            service.aggregate("shape:missing")

    def test_parent_cycle_terminates(self):
        a = self.builder.container("a", parent="shape:b")
        self.builder.container("b", parent=a)
        self.builder.item("salary", 10, "income", parent="shape:b")

        result = self._aggregate(a)

        assert result.income_total == 10

    def test_aggregate_all(self):
        other = self.builder.container("other")
        self.builder.item("salary", 1000, "income", parent=self.household)

        results = AggregationService(self.builder.store()).aggregate_all()

        assert set(results) == {self.household, other}
        assert results[other].count == 0


class TestLinkedSavings:
    """Test cases for savings arriving through allocation links."""

    def setup_method(self):
        self.builder = DocumentBuilder()
        self.goals = self.builder.container("goals")
        self.pot = self.builder.container("pot", x=1000)
        self.savings = self.builder.item("emergency", 300, "savings", parent=self.pot)

    def _aggregate(self) -> BudgetAggregate:
        return AggregationService(self.builder.store()).aggregate(self.goals)

    def test_labeled_link(self):
        self.builder.link("to-goals", self.savings, self.goals, label="100")

        result = self._aggregate()

        assert result.savings_total == 100
        assert result.savings_count == 1
        assert result.linked_savings_total == 100

    def test_lone_unlabeled_link_takes_full_amount(self):
        self.builder.link("to-goals", self.savings, self.goals)

        assert self._aggregate().savings_total == 300

    def test_unlabeled_link_among_several_is_not_counted(self):
        self.builder.link("to-goals", self.savings, self.goals)
        self.builder.link("to-pot", self.savings, self.pot)

        result = self._aggregate()

        assert result.savings_total == 0
        assert result.count == 0

    def test_two_links_from_one_item_count_it_once(self):
        self.builder.link("first", self.savings, self.goals, label="100")
        self.builder.link("second", self.savings, self.goals, label="50")

        result = self._aggregate()

        assert result.savings_total == 150
        assert result.savings_count == 1

    def test_link_from_inside_the_container_is_not_double_counted(self):
        inner = self.builder.item("inner", 80, "savings", parent=self.goals)
        self.builder.link("loop", inner, self.goals, label="80")

        result = self._aggregate()

        assert result.savings_total == 80
        assert result.savings_count == 1

    def test_link_from_non_savings_item_is_ignored(self):
        income = self.builder.item("salary", 500, "income", parent=self.pot)
        self.builder.link("odd", income, self.goals, label="100")

        assert self._aggregate().count == 0

    def test_remainder_link_is_ignored(self):
        self.builder.link("rest", self.savings, self.goals, label="300", is_remainder=True)

        assert self._aggregate().count == 0


class TestBudgetAggregate:
    """Test cases for the BudgetAggregate value object."""

    def test_derived_savings_never_negative(self):
        aggregate = BudgetAggregate()
        aggregate.add(BudgetKind.INCOME, 100)
        aggregate.add(BudgetKind.EXPENSE, 250)

        assert aggregate.savings_left == -150
        assert aggregate.derived_savings_amount == 0

    def test_linked_savings_counted_once(self):
        aggregate = BudgetAggregate()
        aggregate.add_linked_savings(10, "€")
        aggregate.add_linked_savings(5, "€", new_item=False)

        assert aggregate.savings_total == 15
        assert aggregate.savings_count == 1
        assert aggregate.count == 1
        assert aggregate.total == 15
