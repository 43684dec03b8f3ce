"""Budget item and summary commands."""

from shape_of_money.application.commands.budgeting.arrange_treemap_command import (
    ArrangeTreemapCommand,
)
from shape_of_money.application.commands.budgeting.create_budget_item_command import (
    CreateBudgetItemCommand,
)
from shape_of_money.application.commands.budgeting.create_savings_item_command import (
    CreateSavingsItemCommand,
)
from shape_of_money.application.commands.budgeting.move_summary_command import (
    MoveSummaryCommand,
)
from shape_of_money.application.commands.budgeting.reset_summary_position_command import (
    ResetSummaryPositionCommand,
)
from shape_of_money.application.commands.budgeting.resize_budget_item_command import (
    ResizeBudgetItemCommand,
)
from shape_of_money.application.commands.budgeting.set_budget_item_amount_command import (
    SetBudgetItemAmountCommand,
)
from shape_of_money.application.commands.budgeting.squarify_budget_items_command import (
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
