"""Geometric primitives in wall-local coordinates (feet).

X runs along the wall from its start, Y runs up from the floor.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict


# Shared tolerance for every containment, dedupe and overlap comparison.
EPSILON = 1e-9


class LinearSpan(BaseModel):
    """An interval along one axis."""
    model_config = ConfigDict(frozen=True)

    start: float
    end: float

    def normalized(self) -> LinearSpan:
        if self.start <= self.end:
            return self
        return LinearSpan(start=self.end, end=self.start)

    def expanded(self, amount: float) -> LinearSpan:
        span = self.normalized()
        return LinearSpan(start=span.start - amount, end=span.end + amount)

    def contains(self, value: float) -> bool:
        """Inclusive containment, widened by EPSILON on both ends."""
        span = self.normalized()
        return span.start - EPSILON <= value <= span.end + EPSILON


class Rect(BaseModel):
    """Axis-aligned rectangle: left edge x, bottom edge y."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def x_span(self) -> LinearSpan:
        return LinearSpan(start=self.x, end=self.right)

    def overlaps(self, other: Rect) -> bool:
        """Strict overlap on both axes; shared edges do not count."""
        x_overlap = self.x < other.right - EPSILON and self.right > other.x + EPSILON
        y_overlap = self.y < other.top - EPSILON and self.top > other.y + EPSILON
        return x_overlap and y_overlap
