"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from takeoff.models import (
    CalculatorConfig, FramedWallPlan, ProjectInput, StudType, TakeoffReport,
)


class TakeoffRequest(BaseModel):
    """Request body for the /takeoff and /render endpoints."""
    project: ProjectInput
    config: CalculatorConfig = Field(default_factory=CalculatorConfig)


class TakeoffResponse(BaseModel):
    report: TakeoffReport
    calculator_count: int
    wall_count: int


class OpeningInput(BaseModel):
    """Opening rectangle in wall-local feet."""
    x: float
    y: float
    width: float
    height: float


class WallPlanRequest(BaseModel):
    """A single wall to frame."""
    wall_length_feet: float
    wall_height_feet: float
    spacing_inches: float = 16.0
    stud_type: StudType = StudType.TWO_BY_FOUR
    openings: list[OpeningInput] = []


class WallPlanResponse(BaseModel):
    plan: FramedWallPlan


class CalculatorInfo(BaseModel):
    id: str
    name: str


class ErrorResponse(BaseModel):
    error: str
    error_type: str
    param: str | None = None
