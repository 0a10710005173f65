"""Shared fixtures for takeoff tests."""

from __future__ import annotations

import pytest

from takeoff.core.normalizer import normalize_project
from takeoff.models import Length, Opening, ProjectInput, Rect, TakeoffProject

STUD_2X6_FEET = 5.5 / 12.0
SPACING_16_FEET = 16.0 / 12.0


def make_opening(
    id: str, wall_index: int, x: float, y: float, width: float, height: float,
    type: str = "window",
) -> Opening:
    """Opening from feet values."""
    return Opening(
        id=id, type=type, wall_index=wall_index,
        x=Length.from_feet(x), y=Length.from_feet(y),
        width=Length.from_feet(width), height=Length.from_feet(height),
    )


@pytest.fixture
def door() -> Rect:
    """3 ft x 7 ft door, 2.5 ft from the wall start."""
    return Rect(x=2.5, y=0.0, width=3.0, height=7.0)


@pytest.fixture
def window() -> Rect:
    """4 ft x 3 ft window with a 3 ft sill height."""
    return Rect(x=8.0, y=3.0, width=4.0, height=3.0)


@pytest.fixture
def project_data() -> dict:
    """Two 24 ft walls at 10 ft: a door on wall 1, a window on wall 2."""
    return {
        "name": "  Garage  ",
        "wallHeightFeet": 10.0,
        "wallLengthsFeet": [24.0, 24.0],
        "settings": {
            "studType": "2x6",
            "studsSubtractPenetrations": True,
        },
        "penetrations": [
            {"id": "D1", "type": "door", "wallIndex": 0,
             "xFeet": 2.5, "yFeet": 0.0, "widthFeet": 3.0, "heightFeet": 7.0},
            {"id": "W1", "type": " window ", "wallIndex": 1,
             "xFeet": 8.0, "yFeet": 3.0, "widthFeet": 4.0, "heightFeet": 3.0},
        ],
    }


@pytest.fixture
def project(project_data: dict) -> TakeoffProject:
    return normalize_project(ProjectInput.model_validate(project_data))
