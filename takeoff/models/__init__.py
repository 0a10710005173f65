from .errors import InvalidArgumentError
from .units import Length, Area, UnitBasis
from .geometry import EPSILON, LinearSpan, Rect
from .building import Wall, Opening
from .parameters import StudType, DrywallSheetSize, ProjectSettings, CalculatorConfig
from .framing import StudRole, FramedWallPlan, FramingBreakdown, StudTakeoffResult
from .materials import (
    DrywallSheet, InsulationProduct, DrywallTakeoffResult, InsulationTakeoffResult,
)
from .project import PenetrationInput, ProjectInput, TakeoffProject
from .report import TakeoffReport

__all__ = [
    "InvalidArgumentError",
    "Length", "Area", "UnitBasis",
    "EPSILON", "LinearSpan", "Rect",
    "Wall", "Opening",
    "StudType", "DrywallSheetSize", "ProjectSettings", "CalculatorConfig",
    "StudRole", "FramedWallPlan", "FramingBreakdown", "StudTakeoffResult",
    "DrywallSheet", "InsulationProduct", "DrywallTakeoffResult", "InsulationTakeoffResult",
    "PenetrationInput", "ProjectInput", "TakeoffProject",
    "TakeoffReport",
]
