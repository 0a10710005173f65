"""Measurement types: non-negative lengths and areas.

Lengths are stored in inches and areas in square inches, which lines up
with residential takeoff inputs (stud spacing, sheet sizes). Feet are the
working basis of the framing and area core.
"""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator

from .errors import require_finite, require_non_negative


class UnitBasis(str, Enum):
    INCHES = "in"
    FEET = "ft"
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    METERS = "m"

    @property
    def inches_per_unit(self) -> float:
        return _INCHES_PER_UNIT[self]


_INCHES_PER_UNIT = {
    UnitBasis.INCHES: 1.0,
    UnitBasis.FEET: 12.0,
    UnitBasis.MILLIMETERS: 1.0 / 25.4,
    UnitBasis.CENTIMETERS: 1.0 / 2.54,
    UnitBasis.METERS: 1000.0 / 25.4,
}


def _check_magnitude(value: float, what: str) -> float:
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"{what} must be a finite number.")
    if value < 0:
        raise ValueError(f"{what} cannot be negative.")
    return value


class Length(BaseModel):
    """An immutable non-negative length."""
    model_config = ConfigDict(frozen=True)

    inches: float

    @field_validator("inches")
    @classmethod
    def _valid_inches(cls, v: float) -> float:
        return _check_magnitude(v, "Length")

    @classmethod
    def from_inches(cls, inches: float) -> Length:
        require_non_negative(inches, "inches")
        return cls(inches=inches)

    @classmethod
    def from_feet(cls, feet: float) -> Length:
        require_non_negative(feet, "feet")
        return cls(inches=feet * 12.0)

    @classmethod
    def from_feet_and_inches(cls, feet: float, inches: float) -> Length:
        require_non_negative(feet, "feet")
        require_non_negative(inches, "inches")
        return cls(inches=feet * 12.0 + inches)

    @classmethod
    def from_unit(cls, value: float, basis: UnitBasis) -> Length:
        require_non_negative(value, "value")
        return cls(inches=value * basis.inches_per_unit)

    @property
    def feet(self) -> float:
        return self.inches / 12.0

    def to(self, basis: UnitBasis) -> float:
        return self.inches / basis.inches_per_unit

    def __add__(self, other: Length) -> Length:
        return Length.from_inches(self.inches + other.inches)

    def __sub__(self, other: Length) -> Length:
        return Length.from_inches(self.inches - other.inches)

    def __mul__(self, factor: float) -> Length:
        return Length.from_inches(self.inches * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Length:
        if divisor == 0:
            raise ZeroDivisionError("Divisor cannot be zero.")
        return Length.from_inches(self.inches / divisor)

    def __str__(self) -> str:
        return f"{self.feet:.3f} ft ({self.inches:.3f} in)"


class Area(BaseModel):
    """An immutable non-negative area."""
    model_config = ConfigDict(frozen=True)

    square_inches: float

    @field_validator("square_inches")
    @classmethod
    def _valid_square_inches(cls, v: float) -> float:
        return _check_magnitude(v, "Area")

    @classmethod
    def from_square_inches(cls, square_inches: float) -> Area:
        require_non_negative(square_inches, "square_inches")
        return cls(square_inches=square_inches)

    @classmethod
    def from_square_feet(cls, square_feet: float) -> Area:
        require_non_negative(square_feet, "square_feet")
        return cls(square_inches=square_feet * 144.0)

    @classmethod
    def from_rectangle(cls, width: Length, height: Length) -> Area:
        return cls.from_square_inches(width.inches * height.inches)

    @property
    def square_feet(self) -> float:
        return self.square_inches / 144.0

    def __add__(self, other: Area) -> Area:
        return Area.from_square_inches(self.square_inches + other.square_inches)

    def __sub__(self, other: Area) -> Area:
        return Area.from_square_inches(self.square_inches - other.square_inches)

    def __mul__(self, factor: float) -> Area:
        require_finite(factor, "factor")
        return Area.from_square_inches(self.square_inches * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Area:
        if divisor == 0:
            raise ZeroDivisionError("Divisor cannot be zero.")
        return Area.from_square_inches(self.square_inches / divisor)

    def __str__(self) -> str:
        return f"{self.square_feet:.3f} sqft ({self.square_inches:.3f} sqin)"
