"""Bounds and overlap validation for walls and openings.

Bounds violations are hard errors (`InvalidArgumentError`) raised before
any area or framing computation. Overlapping openings are legal, they are
only reported as warnings, since the area merger handles them.
"""

from __future__ import annotations
import logging
from collections.abc import Sequence

from takeoff.models import Opening, PenetrationInput
from takeoff.models.errors import (
    InvalidArgumentError, require_non_negative, require_positive,
)
from takeoff.models.geometry import EPSILON

logger = logging.getLogger(__name__)

PENETRATIONS = "penetrations"


def _fmt(value: float) -> str:
    """Up to three decimals, trailing zeros dropped."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return text or "0"


def validate_walls(wall_height: float, wall_lengths: Sequence[float]) -> None:
    require_non_negative(wall_height, "wallHeightFeet")
    if not wall_lengths:
        raise InvalidArgumentError("wallLengthsFeet", "At least one wall length is required.")
    for length in wall_lengths:
        require_non_negative(length, "wallLengthsFeet")


def validate_penetration(
    penetration: PenetrationInput,
    index: int,
    wall_lengths: Sequence[float],
    wall_height: float,
) -> None:
    """Check one opening against its wall's length and the shared height."""
    label = penetration.label(index)

    if not (penetration.type or "").strip():
        raise InvalidArgumentError(PENETRATIONS, f"Penetration '{label}' must include a type.")

    wall_index = penetration.wall_index
    if wall_index < 0 or wall_index >= len(wall_lengths):
        raise InvalidArgumentError(
            PENETRATIONS,
            f"Penetration '{label}' references wall index {wall_index}, "
            f"but valid range is 0..{len(wall_lengths) - 1}.",
        )

    try:
        require_non_negative(penetration.x_feet, "xFeet")
        require_non_negative(penetration.y_feet, "yFeet")
        require_positive(penetration.width_feet, "widthFeet")
        require_positive(penetration.height_feet, "heightFeet")
    except InvalidArgumentError as exc:
        raise InvalidArgumentError(
            PENETRATIONS, f"Penetration '{label}': {exc.message}",
        ) from exc

    wall_length = wall_lengths[wall_index]
    wall_no = wall_index + 1
    x, y = penetration.x_feet, penetration.y_feet

    if x > wall_length + EPSILON:
        raise InvalidArgumentError(
            PENETRATIONS,
            f"Penetration '{label}' exceeds wall {wall_no} length: "
            f"x={_fmt(x)} ft > {_fmt(wall_length)} ft.",
        )
    if y > wall_height + EPSILON:
        raise InvalidArgumentError(
            PENETRATIONS,
            f"Penetration '{label}' exceeds wall height: "
            f"y={_fmt(y)} ft > {_fmt(wall_height)} ft.",
        )

    right = x + penetration.width_feet
    if right > wall_length + EPSILON:
        raise InvalidArgumentError(
            PENETRATIONS,
            f"Penetration '{label}' exceeds wall {wall_no} length: "
            f"x+width={_fmt(right)} ft > {_fmt(wall_length)} ft.",
        )

    top = y + penetration.height_feet
    if top > wall_height + EPSILON:
        raise InvalidArgumentError(
            PENETRATIONS,
            f"Penetration '{label}' exceeds wall height: "
            f"y+height={_fmt(top)} ft > {_fmt(wall_height)} ft.",
        )


def validate_layout(
    wall_height: float,
    wall_lengths: Sequence[float],
    penetrations: Sequence[PenetrationInput],
) -> None:
    """Fail fast on the first invalid wall or opening."""
    validate_walls(wall_height, wall_lengths)
    for i, penetration in enumerate(penetrations):
        validate_penetration(penetration, i, wall_lengths, wall_height)


def find_overlap_warnings(openings: Sequence[Opening]) -> list[str]:
    """
    One warning per pair of overlapping openings on the same wall.

    Labels use each opening's position in the project-wide list, so a
    blank-id opening is named the same way here and in validation errors.
    """
    warnings: list[str] = []
    indexed = list(enumerate(openings))

    for n, (i, a) in enumerate(indexed):
        for j, b in indexed[n + 1:]:
            if a.wall_index != b.wall_index:
                continue
            if a.rect.overlaps(b.rect):
                warnings.append(
                    f"Penetrations '{a.label(i)}' and '{b.label(j)}' overlap on wall "
                    f"{a.wall_index + 1}. Net area uses merged opening area "
                    "(not double-counted)."
                )

    for w in warnings:
        logger.warning(w)
    return warnings
