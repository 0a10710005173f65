"""Calculator registry: stores and resolves quantity calculators."""

from __future__ import annotations

from takeoff.calculators.base import TakeoffCalculator
from takeoff.models import CalculatorConfig, TakeoffProject


class CalculatorRegistry:
    """
    Central registry for all quantity calculators.

    Calculators are registered at startup. For each project, the registry
    returns the applicable calculators sorted by priority.
    """

    def __init__(self) -> None:
        self._calculators: dict[str, TakeoffCalculator] = {}

    def register(self, calculator: TakeoffCalculator) -> None:
        self._calculators[calculator.get_id()] = calculator

    def unregister(self, calculator_id: str) -> None:
        self._calculators.pop(calculator_id, None)

    def get_calculator(self, calculator_id: str) -> TakeoffCalculator | None:
        return self._calculators.get(calculator_id)

    def list_calculators(self) -> list[TakeoffCalculator]:
        return sorted(self._calculators.values(), key=lambda c: c.priority)

    def get_applicable(
        self, project: TakeoffProject, config: CalculatorConfig | None = None,
    ) -> list[TakeoffCalculator]:
        """
        Calculators that apply to the project, lowest priority first.

        Respects CalculatorConfig.enabled_calculators and disabled_calculators.
        """
        config = config or CalculatorConfig()
        candidates = self.list_calculators()

        if config.enabled_calculators:
            candidates = [c for c in candidates if c.get_id() in config.enabled_calculators]
        if config.disabled_calculators:
            candidates = [c for c in candidates if c.get_id() not in config.disabled_calculators]

        return [c for c in candidates if c.applies(project)]


def create_default_registry() -> CalculatorRegistry:
    """Create a registry with the drywall, stud and insulation calculators."""
    from takeoff.calculators.drywall import DrywallCalculator
    from takeoff.calculators.insulation import InsulationCalculator
    from takeoff.calculators.studs import StudCalculator

    registry = CalculatorRegistry()
    registry.register(DrywallCalculator())
    registry.register(StudCalculator())
    registry.register(InsulationCalculator())
    return registry
