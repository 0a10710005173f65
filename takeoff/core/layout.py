"""Stud centerline layout: nominal spacing, opening-zone removal, king studs.

All positions are wall-local X in feet.
"""

from __future__ import annotations
from collections.abc import Iterable, Sequence

from takeoff.models.errors import InvalidArgumentError, require_positive
from takeoff.models.geometry import EPSILON, LinearSpan

# Trimmer centerline sits half a stud outside the opening edge, the king
# one full stud beyond that.
TRIMMER_OFFSET = 0.5
KING_OFFSET = 1.5

# Upper bound on nominal positions for one wall.
MAX_CENTERS_PER_WALL = 10_000


def generate_centers(wall_length: float, spacing: float) -> list[float]:
    """
    Nominal on-center stud positions, always including both wall ends.

    The last stud sits at `wall_length` even when the length is not a
    multiple of `spacing`.
    """
    require_positive(wall_length, "wall_length")
    require_positive(spacing, "spacing")
    if wall_length / spacing > MAX_CENTERS_PER_WALL:
        raise InvalidArgumentError(
            "spacing",
            f"Spacing is too small: more than {MAX_CENTERS_PER_WALL} studs on one wall.",
        )

    centers = [0.0]
    x = spacing
    while x < wall_length - EPSILON:
        centers.append(x)
        x += spacing
    centers.append(wall_length)
    return centers


def remove_centers_inside_spans(
    centers: Sequence[float], spans: Sequence[LinearSpan],
) -> list[float]:
    """Drop every center inside any span. Span edges count as inside."""
    if not spans:
        return list(centers)
    normalized = [s.normalized() for s in spans]
    return [c for c in centers if not any(s.contains(c) for s in normalized)]


def merge_distinct_centers(*groups: Iterable[float]) -> list[float]:
    """Sort the union of `groups`, collapsing values within EPSILON."""
    merged: list[float] = []
    for x in sorted(c for group in groups for c in group):
        if not merged or abs(merged[-1] - x) > EPSILON:
            merged.append(x)
    return merged


def king_centers_for_span(
    span: LinearSpan, stud_width: float, wall_length: float,
) -> list[float]:
    """King positions flanking one opening, dropped if off the wall."""
    span = span.normalized()
    offset = stud_width * KING_OFFSET
    kings: list[float] = []
    for x in (span.start - offset, span.end + offset):
        if -EPSILON <= x <= wall_length + EPSILON:
            kings.append(min(max(x, 0.0), wall_length))
    return kings


def add_king_centers(
    centers: Sequence[float],
    opening_spans: Sequence[LinearSpan],
    stud_width: float,
    wall_length: float,
) -> list[float]:
    """
    Insert king-stud centerlines beside each raw opening span.

    Result is sorted and deduplicated, so a king landing on an existing
    center (an end stud, say) appears once.
    """
    require_positive(stud_width, "stud_width")
    require_positive(wall_length, "wall_length")

    kings: list[float] = []
    for span in opening_spans:
        kings.extend(king_centers_for_span(span, stud_width, wall_length))
    return merge_distinct_centers(centers, kings)
