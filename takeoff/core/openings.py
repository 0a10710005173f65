"""Opening area as the union of possibly overlapping rectangles on one wall.

Uses a coordinate sweep: the distinct left/right edges split the wall into
vertical slabs, and within each slab the covered Y intervals are merged.
Overlapping openings are therefore counted once, independent of order.
"""

from __future__ import annotations
from collections import defaultdict
from collections.abc import Sequence

from takeoff.models import Area, Opening, Rect, TakeoffProject
from takeoff.models.geometry import EPSILON


def merged_opening_area(rects: Sequence[Rect]) -> float:
    """Union area of rectangles that all sit on the same wall."""
    if not rects:
        return 0.0

    x_breaks = sorted({edge for r in rects for edge in (r.x, r.right)})
    total = 0.0

    for x0, x1 in zip(x_breaks, x_breaks[1:]):
        slab_width = x1 - x0
        if slab_width <= EPSILON:
            continue

        intervals = sorted(
            (r.y, r.top) for r in rects
            if r.x < x1 - EPSILON and r.right > x0 + EPSILON
        )
        total += slab_width * _covered_length(intervals)

    return total


def _covered_length(intervals: list[tuple[float, float]]) -> float:
    """Total length covered by sorted intervals; gaps within EPSILON close."""
    if not intervals:
        return 0.0

    covered = 0.0
    cur_start, cur_end = intervals[0]
    for start, end in intervals[1:]:
        if start <= cur_end + EPSILON:
            cur_end = max(cur_end, end)
        else:
            covered += cur_end - cur_start
            cur_start, cur_end = start, end
    return covered + (cur_end - cur_start)


def group_by_wall(openings: Sequence[Opening]) -> dict[int, list[Opening]]:
    """Openings keyed by wall index, preserving input order within a wall."""
    groups: dict[int, list[Opening]] = defaultdict(list)
    for opening in openings:
        groups[opening.wall_index].append(opening)
    return dict(groups)


def gross_wall_area(project: TakeoffProject) -> Area:
    """Sum of wall length × shared height, before deductions."""
    return Area.from_rectangle(project.total_wall_length(), project.wall_height)


def penetration_area(project: TakeoffProject) -> Area:
    """Merged opening area summed over walls."""
    square_feet = sum(
        merged_opening_area([o.rect for o in openings])
        for openings in group_by_wall(project.openings).values()
    )
    return Area.from_square_feet(square_feet)


def net_wall_area(project: TakeoffProject) -> Area:
    gross = gross_wall_area(project).square_feet
    return Area.from_square_feet(max(0.0, gross - penetration_area(project).square_feet))
