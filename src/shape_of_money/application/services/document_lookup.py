"""Typed lookups of document objects by id."""

from shape_of_money.domain.budgeting.exceptions import (
    NotABudgetItemError,
    NotASummaryError,
    ObjectNotFoundError,
)
from shape_of_money.domain.canvas.entities import BudgetItem, SummaryArtifact
from shape_of_money.domain.canvas.ports import DocumentView


def require_budget_item(view: DocumentView, object_id: str) -> BudgetItem:
    obj = view.get_object(object_id)
    if obj is None:
        raise ObjectNotFoundError(object_id)
    if not BudgetItem.matches(obj):
        raise NotABudgetItemError(object_id, actual_type=obj.type)
    return BudgetItem.from_object(obj)


def require_summary(view: DocumentView, object_id: str) -> SummaryArtifact:
    obj = view.get_object(object_id)
    if obj is None:
        raise ObjectNotFoundError(object_id)
    if not SummaryArtifact.matches(obj):
        raise NotASummaryError(object_id, actual_type=obj.type)
    return SummaryArtifact.from_object(obj)
