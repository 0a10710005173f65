"""Stud takeoff: plain on-center counts, or opening-aware framed counts."""

from __future__ import annotations
import logging
import math
from collections.abc import Sequence

from takeoff.calculators.base import TakeoffCalculator, check_waste
from takeoff.core.planner import plan_project_walls
from takeoff.models import (
    FramedWallPlan, FramingBreakdown, Length, StudTakeoffResult, TakeoffProject,
)
from takeoff.models.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _apply_waste(base_studs: int, waste_factor: float) -> int:
    return 0 if base_studs <= 0 else math.ceil(base_studs * (1.0 + waste_factor))


def calculate_studs(
    wall_lengths: Sequence[Length], spacing: Length, waste_factor: float = 0.0,
) -> StudTakeoffResult:
    """Per wall: ceil(length / spacing) + 1, both end studs included."""
    check_waste(waste_factor)
    if spacing.inches <= 0:
        raise InvalidArgumentError("spacing", "Spacing must be greater than zero.")
    if not wall_lengths:
        raise InvalidArgumentError("wall_lengths", "At least one wall length is required.")

    per_wall: list[int] = []
    for length in wall_lengths:
        if length.inches <= 0:
            raise InvalidArgumentError("wall_lengths", "Wall lengths must be greater than zero.")
        per_wall.append(math.ceil(length.inches / spacing.inches) + 1)

    base = sum(per_wall)
    return StudTakeoffResult(
        spacing=spacing,
        waste_factor=waste_factor,
        base_studs=base,
        total_studs=_apply_waste(base, waste_factor),
        studs_per_wall=per_wall,
    )


def calculate_framed_studs(
    plans: Sequence[FramedWallPlan], spacing: Length, waste_factor: float = 0.0,
) -> StudTakeoffResult:
    """Stud totals from per-wall framed plans, with a role breakdown."""
    check_waste(waste_factor)

    per_wall = [p.base_stud_count for p in plans]
    base = sum(per_wall)
    return StudTakeoffResult(
        spacing=spacing,
        waste_factor=waste_factor,
        base_studs=base,
        total_studs=_apply_waste(base, waste_factor),
        studs_per_wall=per_wall,
        framing=FramingBreakdown.from_plans(list(plans)),
    )


class StudCalculator(TakeoffCalculator):
    """Frames openings when `studsSubtractPenetrations` is set."""

    priority = 20

    def get_id(self) -> str:
        return "studs"

    def get_name(self) -> str:
        return "Stud Count"

    def applies(self, project: TakeoffProject) -> bool:
        if not project.wall_lengths:
            return False
        if any(length.inches <= 0 for length in project.wall_lengths):
            logger.info("Skipping stud takeoff for %r: zero-length wall", project.name)
            return False
        return True

    def calculate(
        self,
        project: TakeoffProject,
        wall_plans: Sequence[FramedWallPlan] | None = None,
    ) -> StudTakeoffResult:
        settings = project.settings
        if settings.studs_subtract_penetrations:
            if wall_plans is None:
                wall_plans = plan_project_walls(project)
            return calculate_framed_studs(wall_plans, settings.spacing, settings.studs_waste)
        return calculate_studs(project.wall_lengths, settings.spacing, settings.studs_waste)
