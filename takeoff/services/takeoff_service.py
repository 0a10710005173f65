"""High-level takeoff service: facade for the API and CLI layers."""

from __future__ import annotations
import logging
from pathlib import Path

from takeoff.core.openings import gross_wall_area, net_wall_area, penetration_area
from takeoff.core.planner import plan_project_walls
from takeoff.core.registry import CalculatorRegistry, create_default_registry
from takeoff.core.validator import find_overlap_warnings
from takeoff.models import (
    CalculatorConfig, DrywallTakeoffResult, InsulationTakeoffResult,
    StudTakeoffResult, TakeoffProject, TakeoffReport,
)
from takeoff.services.project_loader import load_project

logger = logging.getLogger(__name__)


class TakeoffService:
    """Runs area, framing and quantity calculations over a normalized project."""

    def __init__(self, registry: CalculatorRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def load(self, path: Path | str) -> TakeoffProject:
        return load_project(path)

    def run(
        self, project: TakeoffProject, config: CalculatorConfig | None = None,
    ) -> TakeoffReport:
        report = TakeoffReport(
            project_name=project.name,
            wall_height=project.wall_height,
            wall_lengths=list(project.wall_lengths),
            gross_area=gross_wall_area(project),
            penetration_area=penetration_area(project),
            net_area=net_wall_area(project),
            warnings=find_overlap_warnings(project.openings),
        )

        # Framing plans need positive wall lengths. Computed once and shared
        # with the stud calculator.
        plans = None
        if all(length.inches > 0 for length in project.wall_lengths):
            plans = plan_project_walls(project)
            report.wall_plans = plans

        for calculator in self.registry.get_applicable(project, config):
            result = calculator.calculate(project, plans)
            report.calculators_run.append(calculator.get_id())
            logger.debug("Calculator %s finished for %r", calculator.get_id(), project.name)
            if isinstance(result, DrywallTakeoffResult):
                report.drywall = result
            elif isinstance(result, StudTakeoffResult):
                report.studs = result
            elif isinstance(result, InsulationTakeoffResult):
                report.insulation = result

        logger.info(
            "Takeoff for %r: net area %.2f sqft, %d warning(s)",
            project.name, report.net_area.square_feet, len(report.warnings),
        )
        return report

    def list_calculators(self) -> list[dict[str, str]]:
        return [
            {"id": c.get_id(), "name": c.get_name()}
            for c in self.registry.list_calculators()
        ]
