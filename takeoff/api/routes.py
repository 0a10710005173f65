"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Response

from takeoff.core.normalizer import normalize_project
from takeoff.core.planner import build_wall_plan
from takeoff.core.validator import find_overlap_warnings, validate_layout
from takeoff.models import PenetrationInput, Rect
from takeoff.rendering.wall_strip import WallStripSvgRenderer, build_wall_strip
from takeoff.services.takeoff_service import TakeoffService
from takeoff.api.schemas import (
    CalculatorInfo, ErrorResponse, TakeoffRequest, TakeoffResponse, WallPlanRequest,
    WallPlanResponse,
)

router = APIRouter()

# Shared service instance
_service = TakeoffService()
_renderer = WallStripSvgRenderer()

# Bounds and settings violations, see register_exception_handlers
INVALID_ARGUMENT = {422: {"model": ErrorResponse, "description": "Invalid project geometry or settings"}}


@router.post("/takeoff", response_model=TakeoffResponse, responses=INVALID_ARGUMENT)
async def run_takeoff(request: TakeoffRequest) -> TakeoffResponse:
    """Validate a project and compute areas, framing and quantities."""
    project = normalize_project(request.project)
    report = _service.run(project, request.config)

    return TakeoffResponse(
        report=report,
        calculator_count=len(report.calculators_run),
        wall_count=len(project.wall_lengths),
    )


@router.post("/walls/plan", response_model=WallPlanResponse, responses=INVALID_ARGUMENT)
async def plan_wall(request: WallPlanRequest) -> WallPlanResponse:
    """Frame a single wall with the given openings."""
    validate_layout(
        request.wall_height_feet,
        [request.wall_length_feet],
        [
            PenetrationInput(
                type="opening", wall_index=0,
                x_feet=o.x, y_feet=o.y, width_feet=o.width, height_feet=o.height,
            )
            for o in request.openings
        ],
    )

    plan = build_wall_plan(
        wall_length=request.wall_length_feet,
        wall_height=request.wall_height_feet,
        spacing=request.spacing_inches / 12.0,
        stud_width=request.stud_type.width.feet,
        openings=[Rect(x=o.x, y=o.y, width=o.width, height=o.height) for o in request.openings],
    )
    return WallPlanResponse(plan=plan)


@router.post("/render", responses=INVALID_ARGUMENT)
async def render_project(request: TakeoffRequest) -> Response:
    """Render the project's wall strips as SVG."""
    project = normalize_project(request.project)
    report = _service.run(project, request.config)
    svg = _renderer.render(build_wall_strip(project, report))
    return Response(content=svg, media_type="image/svg+xml")


@router.post("/validate", responses=INVALID_ARGUMENT)
async def validate_project(request: TakeoffRequest) -> dict[str, list[str]]:
    """Check bounds (422 on failure) and list overlap warnings."""
    project = normalize_project(request.project)
    return {"warnings": find_overlap_warnings(project.openings)}


@router.get("/calculators", response_model=list[CalculatorInfo])
async def list_calculators() -> list[CalculatorInfo]:
    """List all available quantity calculators."""
    return [CalculatorInfo(**c) for c in _service.list_calculators()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
