"""Framed wall planner. Turns nominal stud layout into an opening-aware plan."""

from __future__ import annotations
import logging
from collections.abc import Sequence

from takeoff.models import FramedWallPlan, Rect, TakeoffProject
from takeoff.models.errors import require_non_negative, require_positive
from takeoff.models.geometry import EPSILON
from takeoff.core.layout import (
    KING_OFFSET, TRIMMER_OFFSET,
    add_king_centers, generate_centers, merge_distinct_centers,
    remove_centers_inside_spans,
)

logger = logging.getLogger(__name__)


def build_wall_plan(
    wall_length: float,
    wall_height: float,
    spacing: float,
    stud_width: float,
    openings: Sequence[Rect],
) -> FramedWallPlan:
    """
    Build the stud plan for one wall. All inputs are in feet.

    Nominal studs falling inside an opening's framed zone (the opening
    widened by 1.5 stud widths per side) become king/trimmer framing.
    Nominal positions strictly inside an opening are reused as cripples
    above the header and/or below the sill.
    """
    require_non_negative(wall_height, "wall_height")
    require_positive(stud_width, "stud_width")

    nominal = generate_centers(wall_length, spacing)
    if not openings:
        return FramedWallPlan(
            nominal_centers=tuple(nominal),
            common_centers=tuple(nominal),
            king_centers=(),
            final_centers=tuple(nominal),
        )

    half_stud = stud_width * TRIMMER_OFFSET
    opening_spans = [o.x_span for o in openings]
    framed_zones = [span.expanded(stud_width * KING_OFFSET) for span in opening_spans]

    common = remove_centers_inside_spans(nominal, framed_zones)
    kings = add_king_centers([], opening_spans, stud_width, wall_length)

    trimmers = 0
    cripple_top = 0
    cripple_bottom = 0

    for opening in openings:
        for trimmer_x in (opening.x - half_stud, opening.right + half_stud):
            if -EPSILON <= trimmer_x <= wall_length + EPSILON:
                trimmers += 1

        interior = sum(
            1 for c in nominal
            if opening.x + EPSILON < c < opening.right - EPSILON
        )

        header_y = opening.top + half_stud
        if header_y < wall_height - EPSILON:
            cripple_top += interior

        sill_y = opening.y - half_stud
        if opening.y > EPSILON and sill_y > EPSILON:
            cripple_bottom += interior

    plan = FramedWallPlan(
        nominal_centers=tuple(nominal),
        common_centers=tuple(common),
        king_centers=tuple(kings),
        final_centers=tuple(merge_distinct_centers(common, kings)),
        trimmer_count=trimmers,
        cripple_top_count=cripple_top,
        cripple_bottom_count=cripple_bottom,
    )
    logger.debug(
        "Planned wall %.3f ft with %d opening(s): %d studs",
        wall_length, len(openings), plan.base_stud_count,
    )
    return plan


def plan_project_walls(project: TakeoffProject) -> list[FramedWallPlan]:
    """One framed plan per wall, in wall-index order."""
    settings = project.settings
    return [
        build_wall_plan(
            wall_length=wall.length.feet,
            wall_height=project.wall_height.feet,
            spacing=settings.spacing.feet,
            stud_width=settings.stud.width.feet,
            openings=[o.rect for o in project.openings_on_wall(wall.index)],
        )
        for wall in project.walls
    ]
