"""Building element models: walls and their openings."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .geometry import Rect
from .units import Length


class Wall(BaseModel):
    """An independent linear wall segment, addressed by its zero-based index."""
    model_config = ConfigDict(frozen=True)

    index: int
    length: Length

    @property
    def number(self) -> int:
        """One-based wall number used in messages and drawings."""
        return self.index + 1


class Opening(BaseModel):
    """A rectangular penetration (door, window, ...) in wall-local coordinates."""
    model_config = ConfigDict(frozen=True)

    id: str = ""
    type: str
    wall_index: int
    x: Length       # Left edge from wall start
    y: Length       # Bottom edge from floor
    width: Length
    height: Length

    def label(self, index: int) -> str:
        """Display label; falls back to `#<n>` when the id is blank."""
        return self.id if self.id.strip() else f"#{index + 1}"

    @property
    def rect(self) -> Rect:
        return Rect(
            x=self.x.feet,
            y=self.y.feet,
            width=self.width.feet,
            height=self.height.feet,
        )
