"""Budget consistency engine for amount-proportional canvas shapes."""

from shape_of_money.engine import (
    aggregate,
    build_treemap_options,
    dimensions_for_amount,
    layout_treemap,
    resize,
    synchronize,
)

__version__ = "0.1.0"

__all__ = [
    "aggregate",
    "build_treemap_options",
    "dimensions_for_amount",
    "layout_treemap",
    "resize",
    "synchronize",
]
