"""Shared pytest fixtures for the symbol_recognizer test suite.

Fixtures:
    trace: Builds a densely sampled stroke through a list of vertices
    greater_than_stroke: ">" traced (0,0) -> (50,50) -> (0,100)
    less_than_stroke: "<" traced (50,0) -> (0,50) -> (50,100)
    diagonal_stroke: Straight line (0,0) -> (100,100), 11 samples
"""

from typing import List, Tuple

import pytest

from symbol_recognizer.utils.gesture_utils import Point


def make_trace(vertices: List[Tuple[float, float]], steps: int = 10) -> List[Point]:
    """Linearly interpolate `steps` segments between consecutive vertices."""
    points = [Point(*vertices[0])]
    for (x0, y0), (x1, y1) in zip(vertices, vertices[1:]):
        for i in range(1, steps + 1):
            t = i / steps
            points.append(Point(x0 + (x1 - x0) * t, y0 + (y1 - y0) * t))
    return points


@pytest.fixture
def trace():
    return make_trace


@pytest.fixture
def greater_than_stroke():
    return make_trace([(0, 0), (50, 50), (0, 100)])


@pytest.fixture
def less_than_stroke():
    return make_trace([(50, 0), (0, 50), (50, 100)])


@pytest.fixture
def diagonal_stroke():
    return make_trace([(0, 0), (100, 100)])
