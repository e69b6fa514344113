"""
Stroke feature extraction and symbol classification.
"""

from .feature_extractor import (
    FeatureExtractor,
    Features,
    calculate_curvature,
    extract_features
)
from .symbol_classifier import (
    ClassificationResult,
    Symbol,
    SymbolClassifier,
    classify,
    get_stroke_stats,
    score_symbols
)

__all__ = [
    'FeatureExtractor',
    'Features',
    'calculate_curvature',
    'extract_features',
    'ClassificationResult',
    'Symbol',
    'SymbolClassifier',
    'classify',
    'get_stroke_stats',
    'score_symbols'
]
