"""Tests for the calculator registry."""

from pydantic import BaseModel

from takeoff.calculators.base import TakeoffCalculator
from takeoff.core.registry import CalculatorRegistry, create_default_registry
from takeoff.models import CalculatorConfig, TakeoffProject


class _Never(TakeoffCalculator):
    priority = 5

    def get_id(self) -> str:
        return "never"

    def get_name(self) -> str:
        return "Never"

    def applies(self, project: TakeoffProject) -> bool:
        return False

    def calculate(self, project: TakeoffProject, wall_plans=None) -> BaseModel:
        raise AssertionError("not applicable")


def _ids(calculators):
    return [c.get_id() for c in calculators]


def test_default_registry_sorted_by_priority():
    assert _ids(create_default_registry().list_calculators()) == ["drywall", "studs", "insulation"]


def test_get_applicable_all(project):
    assert _ids(create_default_registry().get_applicable(project)) == [
        "drywall", "studs", "insulation",
    ]


def test_enabled_filter(project):
    config = CalculatorConfig(enabled_calculators=["insulation"])
    assert _ids(create_default_registry().get_applicable(project, config)) == ["insulation"]


def test_disabled_filter(project):
    config = CalculatorConfig(disabled_calculators=["studs"])
    assert _ids(create_default_registry().get_applicable(project, config)) == [
        "drywall", "insulation",
    ]


def test_applies_filter(project):
    registry = CalculatorRegistry()
    registry.register(_Never())
    assert registry.list_calculators()[0].get_id() == "never"
    assert registry.get_applicable(project) == []


def test_register_replaces_and_unregister():
    registry = create_default_registry()
    registry.register(_Never())
    assert registry.get_calculator("never") is not None

    registry.unregister("never")
    registry.unregister("missing")
    assert registry.get_calculator("never") is None
    assert len(registry.list_calculators()) == 3
