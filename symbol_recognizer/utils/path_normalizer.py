"""
Rescale a path into the unit bounding box.
"""

import logging
from typing import Sequence

from .gesture_utils import BoundingBox, Path, PathUtils, Point

logger = logging.getLogger(__name__)


def get_path_bounding_box(points: Sequence[Point]) -> BoundingBox:
    """Bounding box of a path (all zeros for an empty path)."""
    return PathUtils.get_path_bounds(points)


def normalize_path(points: Sequence[Point]) -> Path:
    """
    Map every point into [0, 1] x [0, 1] relative to the path's bounding box.
    
    A path with zero width or zero height is returned unchanged; there is
    no meaningful scale on the flat axis.
    
    Args:
        points: Path to normalize
        
    Returns:
        New normalized path, or the input points if the box is degenerate
    """
    bbox = get_path_bounding_box(points)
    if bbox.is_degenerate:
        logger.debug(f"Degenerate bounding box ({bbox.width}x{bbox.height}), skipping normalization")
        return tuple(points)
    
    return tuple(
        Point((p.x - bbox.min_x) / bbox.width, (p.y - bbox.min_y) / bbox.height)
        for p in points
    )
