"""
Shape descriptors for a single stroke.

Features are computed on the simplified, normalized path, so every
vertical measure lies in [0, 1] and the aspect ratio compares the
stroke's normalized extents.
"""

import logging
import math
from dataclasses import dataclass
from typing import Literal, Optional, Sequence

import numpy as np

from ..config.settings import RecognitionConfig
from ..utils.gesture_utils import Path, Point
from ..utils.path_normalizer import get_path_bounding_box, normalize_path
from ..utils.path_simplifier import DistanceSimplifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Features:
    """Descriptors of one normalized stroke."""
    first_direction: Literal['left', 'right']
    start_y: float
    mid_y: float
    end_y: float
    curvature: float
    aspect_ratio: float
    length: int
    normalized_path: Path


def calculate_bearing(p1: Point, p2: Point) -> float:
    """Bearing of the vector p1 -> p2 in degrees. A zero-length vector has bearing 0."""
    return math.degrees(math.atan2(p2.y - p1.y, p2.x - p1.x))


def calculate_curvature(points: Sequence[Point]) -> float:
    """
    Average absolute turning angle of a path, in degrees.
    
    The turn at each interior point is the difference between the bearings
    of its incoming and outgoing segments, wrapped into [0, 180]. Turns that
    are not finite are left out of the average.
    
    Returns:
        0.0 for paths shorter than 3 points, otherwise the mean turn
    """
    if len(points) < 3:
        return 0.0
    
    x_coords = np.array([p.x for p in points], dtype=float)
    y_coords = np.array([p.y for p in points], dtype=float)
    
    # arctan2(0, 0) == 0, so repeated points contribute a bearing of 0
    bearings = np.degrees(np.arctan2(np.diff(y_coords), np.diff(x_coords)))
    turns = np.abs(np.diff(bearings))
    turns = np.where(turns > 180.0, 360.0 - turns, turns)
    
    turns = turns[np.isfinite(turns)]
    if turns.size == 0:
        return 0.0
    return float(np.mean(turns))


class FeatureExtractor:
    """
    Runs simplification and normalization on a validated stroke and
    derives its shape descriptors.
    """
    
    def __init__(self, tolerance: float = RecognitionConfig.SIMPLIFY_TOLERANCE):
        self.simplifier = DistanceSimplifier(tolerance)
    
    def extract(self, points: Sequence[Point]) -> Optional[Features]:
        """
        Extract features from a validated stroke.
        
        Args:
            points: Validated points in capture coordinates
            
        Returns:
            Features, or None when the stroke is too short at any stage
        """
        if len(points) < RecognitionConfig.MIN_VALID_POINTS:
            logger.debug(f"Too few points for features: {len(points)}")
            return None
        
        simplified = self.simplifier.simplify(points)
        if len(simplified) < RecognitionConfig.MIN_FEATURE_POINTS:
            logger.debug(f"Too few points after simplification: {len(simplified)}")
            return None
        
        normalized = normalize_path(simplified)
        if len(normalized) < RecognitionConfig.MIN_FEATURE_POINTS:
            return None
        
        return self.describe(normalized)
    
    def describe(self, normalized: Sequence[Point]) -> Optional[Features]:
        """Derive features from an already simplified and normalized path."""
        n = len(normalized)
        if n < RecognitionConfig.MIN_FEATURE_POINTS:
            return None
        
        # Middle third absorbs the remainder of the integer division
        first_third = normalized[:n // 3]
        last_third = normalized[(2 * n) // 3:]
        if not first_third or not last_third:
            return None
        
        first_direction = 'right' if last_third[0].x - first_third[0].x > 0 else 'left'
        
        bbox = get_path_bounding_box(normalized)
        aspect_ratio = bbox.width / (bbox.height or 1)
        
        return Features(
            first_direction=first_direction,
            start_y=normalized[0].y,
            mid_y=normalized[n // 2].y,
            end_y=normalized[-1].y,
            curvature=calculate_curvature(normalized),
            aspect_ratio=aspect_ratio,
            length=n,
            normalized_path=tuple(normalized),
        )


def extract_features(points: Sequence[Point],
                     tolerance: float = RecognitionConfig.SIMPLIFY_TOLERANCE) -> Optional[Features]:
    """
    Simple interface to extract features from a validated stroke.
    """
    return FeatureExtractor(tolerance).extract(points)
