"""
Distance-based path decimation.

Touch capture samples far more points than the shape needs. This module
thins a stroke in one greedy pass: a point survives only when it has moved
more than the tolerance away from the last point kept. It is a noise filter,
not a shape-preserving simplification.
"""

import logging
from typing import Dict, Sequence

from ..config.settings import RecognitionConfig
from .gesture_utils import Path, Point

logger = logging.getLogger(__name__)


class DistanceSimplifier:
    """
    Greedy streaming decimation of a stroke, O(n) in path length.
    """
    
    def __init__(self, tolerance: float = RecognitionConfig.SIMPLIFY_TOLERANCE):
        """
        Initialize the simplifier.
        
        Args:
            tolerance: Minimum distance from the last kept point for a point
                       to be kept. Values <= 0 keep every point.
        """
        if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)):
            raise ValueError(f"Tolerance must be numeric, got {tolerance!r}")
        self.tolerance = float(tolerance)
    
    def simplify(self, points: Sequence[Point]) -> Path:
        """
        Simplify a path.
        
        Args:
            points: Ordered points of a stroke
            
        Returns:
            New path starting with the first point and ending with the
            original last point
        """
        if len(points) <= 2 or self.tolerance <= 0:
            return tuple(points)
        
        result = [points[0]]
        last_kept = points[0]
        
        for point in points[1:]:
            if point.distance_to(last_kept) > self.tolerance:
                result.append(point)
                last_kept = point
        
        # Identity, not equality: an earlier point with the same value is not the end
        if result[-1] is not points[-1]:
            result.append(points[-1])
        
        logger.debug(f"Simplified {len(points)} -> {len(result)} points (tolerance={self.tolerance})")
        return tuple(result)
    
    def get_compression_ratio(self, original: Sequence[Point], simplified: Sequence[Point]) -> float:
        """
        Calculate the compression ratio achieved by simplification.
        
        Returns:
            Compression ratio (original_length / simplified_length)
        """
        if not original or not simplified:
            return 1.0
        return len(original) / len(simplified)


def simplify_path(points: Sequence[Point],
                  tolerance: float = RecognitionConfig.SIMPLIFY_TOLERANCE) -> Path:
    """
    Convenience function for distance-based simplification.
    
    Example:
        >>> pts = [Point(0, 0), Point(1, 0), Point(2, 0), Point(10, 0)]
        >>> simplify_path(pts, tolerance=5)
        (Point(0.0, 0.0), Point(10.0, 0.0))
    """
    return DistanceSimplifier(tolerance).simplify(points)


# Configuration presets for different capture densities
SIMPLIFICATION_PRESETS: Dict[str, dict] = {
    "none": {"tolerance": 0.0, "description": "Keep every captured point"},
    "default": {"tolerance": RecognitionConfig.SIMPLIFY_TOLERANCE,
                "description": "Drop jitter from high-frequency sampling (default)"},
    "coarse": {"tolerance": 15.0, "description": "Aggressive thinning for dense input"},
}


def get_preset_config(preset_name: str) -> dict:
    """
    Get configuration for a named preset, falling back to the default one.
    """
    return SIMPLIFICATION_PRESETS.get(preset_name, SIMPLIFICATION_PRESETS["default"])
