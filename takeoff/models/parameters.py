"""Project takeoff settings and framing stock definitions."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .errors import InvalidArgumentError, require_non_negative, require_positive
from .units import Length


class StudType(str, Enum):
    TWO_BY_FOUR = "2x4"
    TWO_BY_SIX = "2x6"
    TWO_BY_EIGHT = "2x8"
    TWO_BY_TEN = "2x10"
    TWO_BY_TWELVE = "2x12"

    @property
    def width(self) -> Length:
        """Dressed face width used for trimmer/king offsets."""
        return Length.from_inches(_STUD_WIDTH_INCHES[self])


_STUD_WIDTH_INCHES = {
    StudType.TWO_BY_FOUR: 3.5,
    StudType.TWO_BY_SIX: 5.5,
    StudType.TWO_BY_EIGHT: 7.25,
    StudType.TWO_BY_TEN: 9.25,
    StudType.TWO_BY_TWELVE: 11.25,
}

# Smallest on-center spacing accepted from a project file.
MIN_STUD_SPACING_INCHES = 1.0


class DrywallSheetSize(str, Enum):
    FOUR_BY_EIGHT = "4x8"
    FOUR_BY_TWELVE = "4x12"


class ProjectSettings(BaseModel):
    """User-adjustable takeoff settings, as read from the project file."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    drywall_sheet: str = "4x8"
    drywall_waste: float = 0.10                  # Fraction, 0.10 = 10%
    studs_spacing_inches: float = 16.0           # On-center
    studs_waste: float = 0.0
    stud_type: str = "2x4"
    studs_subtract_penetrations: bool = False    # Frame openings instead of plain OC count
    insulation_waste: float = 0.10
    insulation_coverage_square_feet: float = 40.0  # Per roll or bag

    def validate_settings(self) -> ProjectSettings:
        """Check ranges and return a copy with normalized tokens."""
        sheet = (self.drywall_sheet or "").strip().lower()
        if not sheet:
            raise InvalidArgumentError("drywallSheet", "Drywall sheet is required.")
        if sheet not in {s.value for s in DrywallSheetSize}:
            raise InvalidArgumentError("drywallSheet", "Drywall sheet must be '4x8' or '4x12'.")

        stud = (self.stud_type or "").strip().lower()
        if not stud:
            raise InvalidArgumentError("studType", "Stud type is required.")
        if stud not in {s.value for s in StudType}:
            raise InvalidArgumentError(
                "studType", "Stud type must be one of: 2x4, 2x6, 2x8, 2x10, 2x12.",
            )

        require_non_negative(self.drywall_waste, "drywallWaste")
        require_non_negative(self.studs_waste, "studsWaste")
        require_non_negative(self.insulation_waste, "insulationWaste")
        require_positive(self.studs_spacing_inches, "studsSpacingInches")
        if self.studs_spacing_inches < MIN_STUD_SPACING_INCHES:
            raise InvalidArgumentError(
                "studsSpacingInches",
                f"studsSpacingInches must be at least {MIN_STUD_SPACING_INCHES:g} inch.",
            )
        require_positive(self.insulation_coverage_square_feet, "insulationCoverageSquareFeet")

        return self.model_copy(update={"drywall_sheet": sheet, "stud_type": stud})

    @property
    def sheet_size(self) -> DrywallSheetSize:
        return DrywallSheetSize(self.drywall_sheet.strip().lower())

    @property
    def stud(self) -> StudType:
        return StudType(self.stud_type.strip().lower())

    @property
    def spacing(self) -> Length:
        return Length.from_inches(self.studs_spacing_inches)


class CalculatorConfig(BaseModel):
    """Controls which quantity calculators run."""
    enabled_calculators: list[str] = []    # Empty = every registered calculator
    disabled_calculators: list[str] = []
