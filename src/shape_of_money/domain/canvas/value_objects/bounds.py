"""Axis-aligned page-space rectangle."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Bounds(BaseModel):
    """Value object for an object's page-space bounding box."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator("x", "y", "w", "h", mode="before")
    @classmethod
    def validate_finite(cls, v: Any) -> float:
        try:
            number = float(v)
        except (TypeError, ValueError) as exc:
            msg = f"Bounds must be numbers, got {v!r}"
            raise ValueError(msg) from exc
        if not math.isfinite(number):
            msg = "Bounds must be finite numbers"
            raise ValueError(msg)
        return number

    @field_validator("w", "h")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            msg = "Bounds cannot have a negative size"
            raise ValueError(msg)
        return v

    @property
    def max_x(self) -> float:
        return self.x + self.w

    @property
    def max_y(self) -> float:
        return self.y + self.h

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    def moved_to(self, x: float, y: float) -> Bounds:
        return Bounds(x=x, y=y, w=self.w, h=self.h)

    def resized(self, w: float, h: float) -> Bounds:
        return Bounds(x=self.x, y=self.y, w=w, h=h)

    @classmethod
    def enclosing(cls, rects: list[Bounds]) -> Bounds:
        """Smallest bounds containing every rectangle."""
        if not rects:
            msg = "Cannot enclose an empty list of bounds"
            raise ValueError(msg)
        min_x = min(r.x for r in rects)
        min_y = min(r.y for r in rects)
        max_x = max(r.max_x for r in rects)
        max_y = max(r.max_y for r in rects)
        return cls(x=min_x, y=min_y, w=max_x - min_x, h=max_y - min_y)
