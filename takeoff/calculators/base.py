"""Quantity calculator interface.

A calculator turns one normalized project into one material quantity:
drywall sheets, studs, insulation units. Area-based calculators read the
merged net wall area; the stud calculator reads per-wall framing plans.
Waste factors are fractions applied before rounding up to whole units.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel

from takeoff.models import FramedWallPlan, TakeoffProject
from takeoff.models.errors import require_non_negative


class TakeoffCalculator(ABC):
    """
    One material takeoff.

    `applies()` gates a calculator on project content (a stud count needs
    positive wall lengths). The registry orders calculators by `priority`,
    which also fixes the order of `TakeoffReport.calculators_run`.
    """

    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Stable id used in CalculatorConfig filters (e.g. 'studs')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def applies(self, project: TakeoffProject) -> bool:
        ...

    @abstractmethod
    def calculate(
        self,
        project: TakeoffProject,
        wall_plans: Sequence[FramedWallPlan] | None = None,
    ) -> BaseModel:
        """
        Compute the quantity result.

        `wall_plans`, when given, are the project's framed plans in
        wall-index order; calculators that need them must not re-plan.
        """
        ...


def check_waste(waste_factor: float) -> None:
    require_non_negative(waste_factor, "waste_factor")
