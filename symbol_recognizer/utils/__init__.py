"""
Utilities package for stroke processing.

Point model, validation, simplification, normalization and logging shared
by the recognition pipeline.
"""

from .gesture_utils import (
    Point,
    BoundingBox,
    PathUtils,
    DataValidator
)
from .path_simplifier import DistanceSimplifier, simplify_path
from .path_normalizer import get_path_bounding_box, normalize_path

__all__ = [
    'Point',
    'BoundingBox',
    'PathUtils',
    'DataValidator',
    'DistanceSimplifier',
    'simplify_path',
    'get_path_bounding_box',
    'normalize_path'
]
