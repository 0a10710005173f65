"""Full project takeoff report."""

from __future__ import annotations
from pydantic import BaseModel

from .framing import FramedWallPlan, StudTakeoffResult
from .materials import DrywallTakeoffResult, InsulationTakeoffResult
from .units import Area, Length


class TakeoffReport(BaseModel):
    """Everything computed for one project in a single pass."""
    project_name: str
    wall_height: Length
    wall_lengths: list[Length]
    gross_area: Area
    penetration_area: Area
    net_area: Area
    warnings: list[str] = []
    wall_plans: list[FramedWallPlan] = []
    calculators_run: list[str] = []      # Ids, in execution order

    drywall: DrywallTakeoffResult | None = None
    studs: StudTakeoffResult | None = None
    insulation: InsulationTakeoffResult | None = None
