"""
Symbol Recognizer Package
Classifies a single freehand stroke as ">", "<" or "=".
"""

from .core.session import StrokeSession, StrokeOutcome, StrokeStatus
from .recognition.symbol_classifier import (
    ClassificationResult,
    Symbol,
    SymbolClassifier,
    classify
)
from .utils.gesture_utils import Point

__version__ = "1.0.0"
__all__ = [
    "classify",
    "ClassificationResult",
    "Symbol",
    "SymbolClassifier",
    "StrokeSession",
    "StrokeOutcome",
    "StrokeStatus",
    "Point"
]
