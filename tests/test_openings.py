"""Tests for merged opening area and project area totals."""

import pytest

from takeoff.core.normalizer import normalize_project
from takeoff.core.openings import (
    gross_wall_area, group_by_wall, merged_opening_area, net_wall_area, penetration_area,
)
from takeoff.models import ProjectInput, Rect

from conftest import make_opening


class TestMergedOpeningArea:
    def test_empty(self):
        assert merged_opening_area([]) == 0.0

    def test_disjoint_rectangles_sum(self):
        rects = [Rect(x=0, y=0, width=2, height=2), Rect(x=3, y=0, width=1, height=4)]
        assert merged_opening_area(rects) == pytest.approx(8.0)

    def test_overlap_counted_once(self):
        rects = [Rect(x=0, y=0, width=4, height=4), Rect(x=2, y=2, width=4, height=4)]
        assert merged_opening_area(rects) == pytest.approx(28.0)

    def test_contained_rectangle(self):
        rects = [Rect(x=0, y=0, width=10, height=10), Rect(x=2, y=2, width=1, height=1)]
        assert merged_opening_area(rects) == pytest.approx(100.0)

    def test_identical_rectangles(self):
        rects = [Rect(x=1, y=1, width=2, height=3)] * 3
        assert merged_opening_area(rects) == pytest.approx(6.0)

    def test_stacked_rectangles_touching(self):
        rects = [Rect(x=0, y=0, width=2, height=2), Rect(x=0, y=2, width=2, height=2)]
        assert merged_opening_area(rects) == pytest.approx(8.0)

    def test_order_independent(self):
        rects = [
            Rect(x=0, y=0, width=4, height=4),
            Rect(x=2, y=2, width=4, height=4),
            Rect(x=5, y=0, width=1, height=1),
        ]
        assert merged_opening_area(rects) == pytest.approx(merged_opening_area(rects[::-1]))


def test_group_by_wall_preserves_order():
    openings = [
        make_opening("a", 1, 0, 0, 1, 1),
        make_opening("b", 0, 0, 0, 1, 1),
        make_opening("c", 1, 2, 0, 1, 1),
    ]
    groups = group_by_wall(openings)
    assert [o.id for o in groups[1]] == ["a", "c"]
    assert [o.id for o in groups[0]] == ["b"]


class TestProjectAreas:
    def test_sample_project(self, project):
        assert gross_wall_area(project).square_feet == pytest.approx(480.0)
        assert penetration_area(project).square_feet == pytest.approx(33.0)
        assert net_wall_area(project).square_feet == pytest.approx(447.0)

    def test_overlap_on_same_wall_not_double_counted(self, project_data):
        project_data["penetrations"] = [
            {"id": "A", "type": "window", "wallIndex": 0,
             "xFeet": 0, "yFeet": 0, "widthFeet": 4, "heightFeet": 4},
            {"id": "B", "type": "window", "wallIndex": 0,
             "xFeet": 2, "yFeet": 2, "widthFeet": 4, "heightFeet": 4},
        ]
        project = normalize_project(ProjectInput.model_validate(project_data))
        assert penetration_area(project).square_feet == pytest.approx(28.0)

    def test_same_position_on_different_walls_counts_twice(self, project_data):
        opening = {"type": "window", "xFeet": 0, "yFeet": 0, "widthFeet": 4, "heightFeet": 4}
        project_data["penetrations"] = [
            {**opening, "wallIndex": 0}, {**opening, "wallIndex": 1},
        ]
        project = normalize_project(ProjectInput.model_validate(project_data))
        assert penetration_area(project).square_feet == pytest.approx(32.0)

    def test_opening_covering_whole_wall(self, project_data):
        project_data["wallLengthsFeet"] = [8.0]
        project_data["penetrations"] = [
            {"id": "X", "type": "opening", "wallIndex": 0,
             "xFeet": 0, "yFeet": 0, "widthFeet": 8, "heightFeet": 10},
        ]
        project = normalize_project(ProjectInput.model_validate(project_data))
        assert net_wall_area(project).square_feet == pytest.approx(0.0)


def test_merged_area_repeatable():
    rects = [
        Rect(x=0, y=0, width=4, height=4),
        Rect(x=2, y=2, width=4, height=4),
        Rect(x=3, y=1, width=0.5, height=6),
    ]
    first = merged_opening_area(rects)
    assert merged_opening_area(rects) == first
    assert merged_opening_area(list(rects)) == first
