"""Drywall sheet takeoff from net wall area."""

from __future__ import annotations
import math
from collections.abc import Sequence

from takeoff.calculators.base import TakeoffCalculator, check_waste
from takeoff.core.openings import net_wall_area
from takeoff.models import (
    Area, DrywallSheet, DrywallTakeoffResult, FramedWallPlan, TakeoffProject,
)


def calculate_drywall(
    net_area: Area, sheet: DrywallSheet, waste_factor: float,
) -> DrywallTakeoffResult:
    """Sheets needed to cover `net_area` plus waste, always rounded up."""
    check_waste(waste_factor)

    gross = net_area * (1.0 + waste_factor)
    raw_sheets = gross.square_feet / sheet.area.square_feet
    sheet_count = 0 if raw_sheets <= 0 else math.ceil(raw_sheets)

    return DrywallTakeoffResult(
        net_area=net_area,
        gross_area=gross,
        sheet=sheet,
        waste_factor=waste_factor,
        sheet_count=sheet_count,
    )


class DrywallCalculator(TakeoffCalculator):
    priority = 10

    def get_id(self) -> str:
        return "drywall"

    def get_name(self) -> str:
        return "Drywall Sheets"

    def applies(self, project: TakeoffProject) -> bool:
        return len(project.wall_lengths) > 0

    def calculate(
        self,
        project: TakeoffProject,
        wall_plans: Sequence[FramedWallPlan] | None = None,
    ) -> DrywallTakeoffResult:
        settings = project.settings
        return calculate_drywall(
            net_wall_area(project),
            DrywallSheet.from_size(settings.sheet_size),
            settings.drywall_waste,
        )
