"""Sheet goods and insulation products, plus their takeoff results."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, field_validator

from .parameters import DrywallSheetSize
from .units import Area, Length


class DrywallSheet(BaseModel):
    """A rectangular sheet good (drywall, plywood)."""
    model_config = ConfigDict(frozen=True)

    width: Length
    height: Length

    @field_validator("width", "height")
    @classmethod
    def _positive(cls, v: Length) -> Length:
        if v.inches <= 0:
            raise ValueError("Sheet dimensions must be greater than zero.")
        return v

    @property
    def area(self) -> Area:
        return Area.from_rectangle(self.width, self.height)

    @classmethod
    def from_size(cls, size: DrywallSheetSize) -> DrywallSheet:
        long_side = 8.0 if size == DrywallSheetSize.FOUR_BY_EIGHT else 12.0
        return cls(width=Length.from_feet(4.0), height=Length.from_feet(long_side))


class InsulationProduct(BaseModel):
    """An insulation roll or bag with known coverage."""
    model_config = ConfigDict(frozen=True)

    coverage: Area
    name: str | None = None

    @field_validator("coverage")
    @classmethod
    def _positive(cls, v: Area) -> Area:
        if v.square_inches <= 0:
            raise ValueError("Coverage area must be greater than zero.")
        return v

    @field_validator("name")
    @classmethod
    def _clean_name(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class DrywallTakeoffResult(BaseModel):
    net_area: Area
    gross_area: Area      # After waste
    sheet: DrywallSheet
    waste_factor: float
    sheet_count: int


class InsulationTakeoffResult(BaseModel):
    net_area: Area
    gross_area: Area
    product: InsulationProduct
    waste_factor: float
    quantity: int
