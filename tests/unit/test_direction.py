"""Tests for compass direction decomposition."""

import pytest

from smartdup.duplicate.direction import Direction


class TestParse:
    """Tests for Direction.parse."""

    @pytest.mark.parametrize("value", ["top-right", "TOP_RIGHT", " top_right ", Direction.TOP_RIGHT])
    def test_accepted_spellings(self, value):
        assert Direction.parse(value) is Direction.TOP_RIGHT

    def test_unknown_direction(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.parse("north")


class TestComponents:
    """Tests for axis components."""

    def test_cardinal(self):
        assert Direction.LEFT.horizontal == "left"
        assert Direction.LEFT.vertical is None
        assert Direction.TOP.horizontal is None
        assert Direction.TOP.vertical == "top"

    def test_diagonal(self):
        assert Direction.BOTTOM_LEFT.horizontal == "left"
        assert Direction.BOTTOM_LEFT.vertical == "bottom"

    def test_is_forward(self):
        """Right or bottom components insert after the original."""
        assert Direction.RIGHT.is_forward
        assert Direction.BOTTOM.is_forward
        assert Direction.TOP_RIGHT.is_forward
        assert Direction.BOTTOM_LEFT.is_forward
        assert not Direction.LEFT.is_forward
        assert not Direction.TOP.is_forward
        assert not Direction.TOP_LEFT.is_forward

    def test_label(self):
        assert Direction.RIGHT.label == "Right"
        assert Direction.BOTTOM_RIGHT.label == "Bottom Right"


class TestOffset:
    """Tests for the shared offset rule."""

    @pytest.mark.parametrize("direction,expected", [
        (Direction.RIGHT, (10, 0)),
        (Direction.LEFT, (-10, 0)),
        (Direction.TOP, (0, -20)),
        (Direction.BOTTOM, (0, 20)),
        (Direction.TOP_LEFT, (-10, -20)),
        (Direction.BOTTOM_RIGHT, (10, 20)),
    ])
    def test_offsets(self, direction, expected):
        assert direction.offset(10, 20) == expected

    def test_missing_axis_never_moves(self):
        """No horizontal component means dx is 0, and vice versa."""
        for direction in Direction:
            dx, dy = direction.offset(7, 9)
            if direction.horizontal is None:
                assert dx == 0
            if direction.vertical is None:
                assert dy == 0


class TestSortKey:
    """Tests for processing order."""

    def test_right_sorts_rightmost_first(self):
        points = [(0, 0), (300, 0), (100, 0)]
        ordered = sorted(points, key=lambda p: Direction.RIGHT.sort_key(*p))
        assert ordered == [(300, 0), (100, 0), (0, 0)]

    def test_top_sorts_topmost_first(self):
        points = [(0, 50), (0, -20), (0, 10)]
        ordered = sorted(points, key=lambda p: Direction.TOP.sort_key(*p))
        assert ordered == [(0, -20), (0, 10), (0, 50)]

    def test_diagonal_breaks_ties_vertically(self):
        points = [(100, 0), (100, 200), (0, 500)]
        ordered = sorted(points, key=lambda p: Direction.BOTTOM_RIGHT.sort_key(*p))
        assert ordered == [(100, 200), (100, 0), (0, 500)]
