"""
Shared point and path utilities for symbol recognition.

This module holds the point model, bounding box helpers and the input
validator used by every stage of the recognition pipeline.
"""

import logging
import math
import numbers
from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in capture-surface coordinates."""
    x: float
    y: float
    
    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"
    
    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        # Saturates to inf for huge coordinates
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


Path = Tuple[Point, ...]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box of a path."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    width: float
    height: float
    
    @property
    def is_degenerate(self) -> bool:
        """True when all points share an x or a y coordinate."""
        return self.width == 0 or self.height == 0


class PathUtils:
    """Utility class for path processing."""
    
    @staticmethod
    def get_path_bounds(points: Sequence[Point]) -> BoundingBox:
        """Get bounding box of a path. An empty path has an all-zero box."""
        if not points:
            return BoundingBox(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
        
        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)
        
        return BoundingBox(min_x, max_x, min_y, max_y, max_x - min_x, max_y - min_y)


class DataValidator:
    """Filters raw capture data down to well-formed points."""
    
    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, numbers.Real) and not isinstance(value, bool)
    
    @staticmethod
    def coerce_point(candidate: Any) -> Optional[Point]:
        """
        Turn a raw candidate into a Point, or None if it is malformed.
        
        Accepts Point objects, dicts with 'x'/'y' keys, (x, y) sequences
        (including rows of an (N, 2) numpy array) and any object exposing
        numeric x/y attributes. NaN coordinates and integers too large for
        a float are rejected here; infinities pass and are caught by
        all_finite().
        """
        if candidate is None:
            return None

        if isinstance(candidate, dict):
            x, y = candidate.get('x'), candidate.get('y')
        elif isinstance(candidate, np.ndarray) or (
                isinstance(candidate, SequenceABC)
                and not isinstance(candidate, (str, bytes))):
            if np.ndim(candidate) != 1 or len(candidate) < 2:
                return None
            x, y = candidate[0], candidate[1]
        else:
            x, y = getattr(candidate, 'x', None), getattr(candidate, 'y', None)

        if not (DataValidator._is_number(x) and DataValidator._is_number(y)):
            return None
        try:
            fx, fy = float(x), float(y)
        except OverflowError:
            return None
        if math.isnan(fx) or math.isnan(fy):
            return None

        if isinstance(candidate, Point):
            return candidate
        return Point(fx, fy)
    
    @staticmethod
    def validate_points(candidates: Optional[Iterable[Any]]) -> Path:
        """
        Keep the structurally valid points of a raw sequence.
        
        Args:
            candidates: Raw point sequence, possibly with malformed entries
            
        Returns:
            Tuple of Points in their original order (possibly empty)
        """
        if candidates is None:
            return ()
        
        valid = []
        dropped = 0
        for candidate in candidates:
            point = DataValidator.coerce_point(candidate)
            if point is None:
                dropped += 1
                continue
            valid.append(point)
        
        if dropped:
            logger.debug(f"Dropped {dropped} malformed point(s), {len(valid)} remain")
        return tuple(valid)
    
    @staticmethod
    def all_finite(points: Sequence[Point]) -> bool:
        """Check that no coordinate is NaN or infinite."""
        return all(p.is_finite() for p in points)
