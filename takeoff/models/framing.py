"""Framing plan and stud takeoff output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, computed_field

from .units import Length


class StudRole(str, Enum):
    """Role of a drawn stud centerline. Trimmers and cripples are counted, not placed."""
    COMMON = "common"
    KING = "king"


class FramedWallPlan(BaseModel):
    """Stud layout for one wall. Centers are wall-local X positions in feet."""
    model_config = ConfigDict(frozen=True)

    nominal_centers: tuple[float, ...]   # Uniform OC pass, ignoring openings
    common_centers: tuple[float, ...]    # Nominal minus framed opening zones
    king_centers: tuple[float, ...]
    final_centers: tuple[float, ...]     # common ∪ king, deduplicated
    trimmer_count: int = 0
    cripple_top_count: int = 0
    cripple_bottom_count: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def base_stud_count(self) -> int:
        return (
            len(self.final_centers)
            + self.trimmer_count
            + self.cripple_top_count
            + self.cripple_bottom_count
        )


class FramingBreakdown(BaseModel):
    """Per-role stud counts summed over all walls."""
    common_studs: int = 0
    king_studs: int = 0
    trimmer_studs: int = 0
    cripple_top_studs: int = 0
    cripple_bottom_studs: int = 0

    @classmethod
    def from_plans(cls, plans: list[FramedWallPlan]) -> FramingBreakdown:
        return cls(
            common_studs=sum(len(p.common_centers) for p in plans),
            king_studs=sum(len(p.king_centers) for p in plans),
            trimmer_studs=sum(p.trimmer_count for p in plans),
            cripple_top_studs=sum(p.cripple_top_count for p in plans),
            cripple_bottom_studs=sum(p.cripple_bottom_count for p in plans),
        )


class StudTakeoffResult(BaseModel):
    """
    Stud quantities for a set of walls.

    `framing` is populated only when openings were framed; plain
    on-center takeoffs leave it as None.
    """
    spacing: Length
    waste_factor: float
    base_studs: int
    total_studs: int
    studs_per_wall: list[int]
    framing: FramingBreakdown | None = None
