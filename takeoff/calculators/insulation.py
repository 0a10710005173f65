"""Insulation roll/bag takeoff from net wall area."""

from __future__ import annotations
import math
from collections.abc import Sequence

from takeoff.calculators.base import TakeoffCalculator, check_waste
from takeoff.core.openings import net_wall_area
from takeoff.models import (
    Area, FramedWallPlan, InsulationProduct, InsulationTakeoffResult, TakeoffProject,
)


def calculate_insulation(
    net_area: Area, product: InsulationProduct, waste_factor: float,
) -> InsulationTakeoffResult:
    check_waste(waste_factor)

    gross = net_area * (1.0 + waste_factor)
    raw_qty = gross.square_feet / product.coverage.square_feet
    quantity = 0 if raw_qty <= 0 else math.ceil(raw_qty)

    return InsulationTakeoffResult(
        net_area=net_area,
        gross_area=gross,
        product=product,
        waste_factor=waste_factor,
        quantity=quantity,
    )


class InsulationCalculator(TakeoffCalculator):
    priority = 30

    def get_id(self) -> str:
        return "insulation"

    def get_name(self) -> str:
        return "Insulation Units"

    def applies(self, project: TakeoffProject) -> bool:
        return len(project.wall_lengths) > 0

    def calculate(
        self,
        project: TakeoffProject,
        wall_plans: Sequence[FramedWallPlan] | None = None,
    ) -> InsulationTakeoffResult:
        settings = project.settings
        product = InsulationProduct(
            coverage=Area.from_square_feet(settings.insulation_coverage_square_feet),
        )
        return calculate_insulation(net_wall_area(project), product, settings.insulation_waste)
