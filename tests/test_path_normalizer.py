"""Unit tests for unit-box normalization."""

import pytest

from symbol_recognizer.utils.gesture_utils import Point
from symbol_recognizer.utils.path_normalizer import get_path_bounding_box, normalize_path


def test_maps_into_unit_box(greater_than_stroke):
    normalized = normalize_path(greater_than_stroke)
    assert len(normalized) == len(greater_than_stroke)
    assert all(0.0 <= p.x <= 1.0 and 0.0 <= p.y <= 1.0 for p in normalized)
    bbox = get_path_bounding_box(normalized)
    assert (bbox.min_x, bbox.max_x, bbox.min_y, bbox.max_y) == (0.0, 1.0, 0.0, 1.0)


def test_remaps_relative_to_minimum():
    normalized = normalize_path([Point(10, 20), Point(30, 60), Point(20, 40)])
    assert normalized == (Point(0, 0), Point(1, 1), Point(0.5, 0.5))


def test_idempotent_on_normalized_path(less_than_stroke):
    once = normalize_path(less_than_stroke)
    twice = normalize_path(once)
    for a, b in zip(once, twice):
        assert a.x == pytest.approx(b.x)
        assert a.y == pytest.approx(b.y)


@pytest.mark.parametrize("points", [
    [Point(0, 5), Point(10, 5), Point(20, 5)],
    [Point(3, 0), Point(3, 10), Point(3, 20)],
    [Point(1, 1), Point(1, 1)],
])
def test_degenerate_box_returns_input(points):
    assert normalize_path(points) == tuple(points)


def test_empty_path():
    assert normalize_path([]) == ()
