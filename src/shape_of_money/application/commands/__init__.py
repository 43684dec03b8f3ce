"""Application commands."""

from shape_of_money.application.commands.budgeting import (
    ArrangeTreemapCommand,
    CreateBudgetItemCommand,
    CreateSavingsItemCommand,
    MoveSummaryCommand,
    ResetSummaryPositionCommand,
    ResizeBudgetItemCommand,
    SetBudgetItemAmountCommand,
    SquarifyBudgetItemsCommand,
)

__all__ = [
    "ArrangeTreemapCommand",
    "CreateBudgetItemCommand",
    "CreateSavingsItemCommand",
    "MoveSummaryCommand",
    "ResetSummaryPositionCommand",
    "ResizeBudgetItemCommand",
    "SetBudgetItemAmountCommand",
    "SquarifyBudgetItemsCommand",
]
