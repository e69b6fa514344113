"""
Symbol Classification for Single Strokes

Scores a completed stroke against the geometric profile of each known
symbol and picks the best match. Unmatched strokes resolve to "=" with
zero confidence.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from ..config.settings import RecognitionConfig
from ..utils.gesture_utils import DataValidator, Point
from .feature_extractor import FeatureExtractor, Features

logger = logging.getLogger(__name__)


class Symbol(str, Enum):
    """The closed set of recognizable symbols."""
    GREATER_THAN = '>'
    LESS_THAN = '<'
    EQUALS = '='


@dataclass(frozen=True)
class ClassificationResult:
    """Recognized symbol with a confidence in [0, 100]."""
    symbol: Symbol
    confidence: float
    
    @classmethod
    def unrecognized(cls) -> 'ClassificationResult':
        return cls(Symbol.EQUALS, 0)
    
    @property
    def is_recognized(self) -> bool:
        return self.confidence > 0


def _apex_right(first: Point, mid: Point, last: Point) -> bool:
    return mid.x > first.x and mid.x > last.x


def _apex_left(first: Point, mid: Point, last: Point) -> bool:
    return mid.x < first.x and mid.x < last.x


_APEX_CHECKS = {
    Symbol.GREATER_THAN: _apex_right,
    Symbol.LESS_THAN: _apex_left,
}


def score_symbol(symbol: Symbol, features: Features) -> int:
    """
    Score one directional symbol against a stroke's features.
    
    The apex check gates the other two: a stroke scores 0, or 40 plus 30
    for a downward dip at the middle plus 30 for level endpoints.
    """
    path = features.normalized_path
    first = path[0]
    mid = path[len(path) // 2]
    last = path[-1]
    
    if not _APEX_CHECKS[symbol](first, mid, last):
        return 0
    
    score = RecognitionConfig.APEX_SCORE
    if mid.y > first.y and mid.y > last.y:
        score += RecognitionConfig.DIP_SCORE
    if abs(first.y - last.y) < RecognitionConfig.LEVEL_TOLERANCE:
        score += RecognitionConfig.LEVEL_SCORE
    return score


def score_symbols(features: Features) -> Dict[Symbol, int]:
    """
    Score every directional symbol. Outside the aspect-ratio window both
    scores stay 0.
    """
    scores = {symbol: 0 for symbol in _APEX_CHECKS}
    if not (RecognitionConfig.MIN_ASPECT_RATIO < features.aspect_ratio
            < RecognitionConfig.MAX_ASPECT_RATIO):
        return scores
    
    for symbol in scores:
        scores[symbol] = score_symbol(symbol, features)
    return scores


class SymbolClassifier:
    """
    Classifies a completed stroke as one of the known symbols.
    """
    
    def __init__(self, tolerance: float = RecognitionConfig.SIMPLIFY_TOLERANCE):
        """
        Args:
            tolerance: Simplification tolerance in capture coordinates
        """
        self.extractor = FeatureExtractor(tolerance)
    
    def classify(self, points: Optional[Iterable[Any]]) -> ClassificationResult:
        """
        Classify a stroke.
        
        Args:
            points: Raw point sequence (Points, dicts, pairs); malformed
                    entries are dropped
            
        Returns:
            ClassificationResult, "=" with confidence 0 when nothing matches
        """
        path = DataValidator.validate_points(points)
        if len(path) < RecognitionConfig.MIN_VALID_POINTS:
            logger.debug(f"Stroke below the {RecognitionConfig.MIN_VALID_POINTS}-point floor: {len(path)}")
            return ClassificationResult.unrecognized()
        
        if not DataValidator.all_finite(path):
            logger.debug("Non-finite coordinates in stroke, not classifying")
            return ClassificationResult.unrecognized()
        
        features = self.extractor.extract(path)
        if features is None:
            return ClassificationResult.unrecognized()
        
        scores = score_symbols(features)
        
        best_symbol = Symbol.EQUALS
        best_score = 0
        for symbol, score in scores.items():
            if score > best_score:
                best_symbol = symbol
                best_score = score
        
        if best_score < RecognitionConfig.MIN_WINNING_SCORE:
            return ClassificationResult.unrecognized()
        
        result = ClassificationResult(best_symbol, min(RecognitionConfig.MAX_CONFIDENCE, best_score))
        logger.debug(f"Classified {len(path)} points as {result.symbol.value} ({result.confidence})")
        return result
    
    def get_stroke_stats(self, points: Optional[Iterable[Any]]) -> Dict[str, Any]:
        """
        Get detailed statistics about a stroke for debugging/analysis.
        
        Returns:
            Dictionary with point counts, features and per-symbol scores,
            empty if no features could be extracted
        """
        path = DataValidator.validate_points(points)
        if not DataValidator.all_finite(path):
            return {}
        features = self.extractor.extract(path)
        if features is None:
            return {}
        
        return {
            'valid_points': len(path),
            'simplified_points': features.length,
            'first_direction': features.first_direction,
            'start_y': features.start_y,
            'mid_y': features.mid_y,
            'end_y': features.end_y,
            'curvature': features.curvature,
            'aspect_ratio': features.aspect_ratio,
            'scores': {symbol.value: score for symbol, score in score_symbols(features).items()},
        }


# Convenience functions for simple usage
def classify(points: Optional[Iterable[Any]]) -> ClassificationResult:
    """
    Simple interface to classify a stroke with the default settings.
    """
    return SymbolClassifier().classify(points)


def get_stroke_stats(points: Optional[Iterable[Any]]) -> Dict[str, Any]:
    """
    Get detailed statistics about a stroke.
    """
    return SymbolClassifier().get_stroke_stats(points)
