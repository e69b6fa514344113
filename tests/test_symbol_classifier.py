"""Tests for symbol scoring and the classify entry point."""

import math

import numpy as np
import pytest

from symbol_recognizer import ClassificationResult, Symbol, SymbolClassifier, classify
from symbol_recognizer.recognition.feature_extractor import extract_features
from symbol_recognizer.recognition.symbol_classifier import get_stroke_stats, score_symbols
from symbol_recognizer.utils.gesture_utils import Point


def assert_unrecognized(result):
    assert result.symbol == Symbol.EQUALS
    assert result.confidence == 0


def test_greater_than_scenario(greater_than_stroke):
    result = classify(greater_than_stroke)
    assert result.symbol == Symbol.GREATER_THAN
    assert result.confidence >= 40


def test_less_than_scenario(less_than_stroke):
    result = classify(less_than_stroke)
    assert result.symbol == Symbol.LESS_THAN
    assert result.confidence >= 40


def test_diagonal_line_is_unrecognized(diagonal_stroke):
    assert_unrecognized(classify(diagonal_stroke))


@pytest.mark.parametrize("points", [
    [],
    [(0, 0), (1, 1)],
    [(0, 0), (50, 50), (0, 100), (10, 10)],
])
def test_fewer_than_five_points_is_unrecognized(points):
    assert_unrecognized(classify(points))


def test_nan_point_is_dropped(greater_than_stroke):
    raw = list(greater_than_stroke)
    raw[2] = Point(float('nan'), raw[2].y)
    result = classify(raw)
    assert result.symbol == Symbol.GREATER_THAN
    assert result.confidence >= 40


def test_nan_point_can_push_below_the_floor():
    raw = [(0, 0), (25, 25), (float('nan'), 50), (25, 75), (0, 100)]
    assert_unrecognized(classify(raw))


def test_dip_and_level_endpoints_give_full_confidence(trace):
    # Out and back to the start: apex right, middle lowest, ends level
    result = classify(trace([(0, 0), (50, 50), (0, 0)]))
    assert result == ClassificationResult(Symbol.GREATER_THAN, 100)


def test_dip_without_level_endpoints(trace):
    result = classify(trace([(0, 0), (50, 50), (0, 40)]))
    assert result == ClassificationResult(Symbol.GREATER_THAN, 70)


def test_level_endpoints_without_dip(trace):
    # Apex at the top, endpoints close in height
    result = classify(trace([(50, 50), (0, 0), (50, 60)]))
    assert result.symbol == Symbol.LESS_THAN
    assert result.confidence == 70


def test_score_symbols_is_exclusive_on_apex(greater_than_stroke):
    scores = score_symbols(extract_features(greater_than_stroke))
    assert scores == {Symbol.GREATER_THAN: 40, Symbol.LESS_THAN: 0}


def test_flat_stroke_outside_aspect_window_is_unrecognized():
    line = [(10 * i, 7) for i in range(8)]
    assert_unrecognized(classify(line))


def test_garbage_input_never_raises():
    assert_unrecognized(classify(None))
    assert_unrecognized(classify([None, 'a', {}, (1,), object(), {'x': 'y'}]))


def test_infinite_coordinates_are_unrecognized(greater_than_stroke):
    raw = list(greater_than_stroke)
    raw[5] = Point(math.inf, 3)
    assert_unrecognized(classify(raw))


def test_accepts_dict_points(greater_than_stroke):
    raw = [{'x': p.x, 'y': p.y, 't': i} for i, p in enumerate(greater_than_stroke)]
    assert classify(raw).symbol == Symbol.GREATER_THAN


def test_symbol_values_compare_as_strings(less_than_stroke):
    assert classify(less_than_stroke).symbol == '<'
    assert Symbol.EQUALS.value == '='


def test_custom_tolerance_can_simplify_away_the_shape(greater_than_stroke):
    assert_unrecognized(SymbolClassifier(tolerance=500).classify(greater_than_stroke))


def test_result_helpers():
    assert not ClassificationResult.unrecognized().is_recognized
    assert ClassificationResult(Symbol.LESS_THAN, 40).is_recognized


def test_stroke_stats(greater_than_stroke):
    stats = get_stroke_stats(greater_than_stroke)
    assert stats['valid_points'] == 21
    assert stats['first_direction'] == 'right'
    assert stats['scores'] == {'>': 40, '<': 0}
    assert get_stroke_stats([(0, 0)]) == {}


def test_midpoint_tying_an_endpoint_scores_neither_apex(trace):
    # Middle point shares the first point's x: neither rightmost nor leftmost
    stroke = trace([(0, 0), (0, 50), (50, 100)], steps=5)
    features = extract_features(stroke)
    assert features.normalized_path[len(features.normalized_path) // 2].x == features.normalized_path[0].x
    assert score_symbols(features) == {Symbol.GREATER_THAN: 0, Symbol.LESS_THAN: 0}
    assert_unrecognized(classify(stroke))


def test_huge_finite_coordinates_do_not_raise():
    raw = [(0, 0), (1e200, 1e200), (2e200, 2e200), (1e200, 3e200), (0, 4e200)]
    assert classify(raw) == ClassificationResult(Symbol.GREATER_THAN, 40)


def test_ints_too_large_for_float_are_dropped(greater_than_stroke):
    raw = [(10**400, 0)] + list(greater_than_stroke)
    assert classify(raw).symbol == Symbol.GREATER_THAN
    assert_unrecognized(classify([(10**400, 10**400)] * 6))


def test_numpy_stroke_classifies_like_tuples(greater_than_stroke):
    arr = np.array([(p.x, p.y) for p in greater_than_stroke])
    assert classify(arr) == classify(greater_than_stroke)
