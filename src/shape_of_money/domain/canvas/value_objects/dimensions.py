"""Width/height pair produced by the geometry mapper."""

from pydantic import BaseModel, ConfigDict


class Dimensions(BaseModel):
    """Value object for a budget item's width and height."""

    w: float
    h: float

    model_config = ConfigDict(frozen=True)

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def aspect_ratio(self) -> float:
        return self.w / self.h if self.h > 0 else 1.0


class ResizeResult(BaseModel):
    """Dimensions plus the amount re-derived from them."""

    w: float
    h: float
    amount: float

    model_config = ConfigDict(frozen=True)
