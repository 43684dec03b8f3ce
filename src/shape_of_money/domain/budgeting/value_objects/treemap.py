"""Inputs, options and outputs of the treemap layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

DEFAULT_ASPECT_BOUNDS: Tuple[float, float] = (0.25, 4.0)


@dataclass(frozen=True)
class TreemapItem:
    """An item to arrange, with its current page-space bounding box."""

    id: str
    amount: float
    x: float
    y: float
    w: float
    h: float


# Output cells share the item shape; amount is passed through unchanged.
TreemapCell = TreemapItem


class TreemapLayoutOptions(BaseModel):
    """
    Tuning knobs for the treemap layout.

    Attributes
    ----------
    padding
        Gap between neighbouring cells
    origin
        Top-left corner of the layout, defaults to the selection's
    aspect_ratio_bounds
        (min, max) clamp applied to the selection's aspect ratio
    round_coordinates
        Snap cell edges to whole units
    """

    padding: float = 0.0
    origin: Optional[Tuple[float, float]] = None
    aspect_ratio_bounds: Tuple[float, float] = DEFAULT_ASPECT_BOUNDS
    round_coordinates: bool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validate_bounds(self) -> TreemapLayoutOptions:
        low, high = self.aspect_ratio_bounds
        if low <= 0 or high <= 0 or low > high:
            msg = f"Invalid aspect ratio bounds {self.aspect_ratio_bounds!r}"
            raise ValueError(msg)
        if self.padding < 0:
            msg = "Treemap padding cannot be negative"
            raise ValueError(msg)
        return self
