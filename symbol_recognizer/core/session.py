"""
Stroke session that sits between a drawing surface and the classifier.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple

from ..config.settings import RecognitionConfig
from ..recognition.symbol_classifier import ClassificationResult, Symbol, SymbolClassifier
from ..utils.gesture_utils import DataValidator, Path
from ..utils.logger import RecognitionLogger

logger = logging.getLogger(__name__)


class StrokeStatus(str, Enum):
    """What happened to a completed stroke."""
    EMPTY = 'empty'
    TOO_SHORT = 'too_short'
    INVALID_INPUT = 'invalid_input'
    RECOGNIZED = 'recognized'
    ERROR = 'error'


_STATUS_LABELS = {
    StrokeStatus.EMPTY: '',
    StrokeStatus.TOO_SHORT: 'Too short',
    StrokeStatus.INVALID_INPUT: 'Invalid input',
    StrokeStatus.ERROR: 'Error',
}


@dataclass(frozen=True)
class StrokeOutcome:
    """Result of handling one stroke, ready for display."""
    status: StrokeStatus
    path: Path
    symbol: Optional[Symbol] = None
    confidence: float = 0
    
    @property
    def label(self) -> str:
        """Text to show for this outcome."""
        if self.status == StrokeStatus.RECOGNIZED and self.symbol is not None:
            return self.symbol.value
        return _STATUS_LABELS.get(self.status, '')


class StrokeSession:
    """
    Feeds completed strokes to the classifier and keeps the strokes drawn
    so far for display.
    """
    
    def __init__(self, classifier: Optional[SymbolClassifier] = None,
                 logger: Optional[RecognitionLogger] = None,
                 on_result: Optional[Callable[[StrokeOutcome], None]] = None):
        """
        Args:
            classifier: Classifier to use (default settings if None)
            logger: Outcome logger; None disables console logging
            on_result: Called with every outcome except empty strokes
        """
        self.classifier = classifier or SymbolClassifier()
        self.logger = logger
        self.on_result = on_result
        
        self._paths: List[Path] = []
        self.current: Optional[StrokeOutcome] = None
    
    @property
    def paths(self) -> Tuple[Path, ...]:
        """Strokes retained for display, oldest first."""
        return tuple(self._paths)
    
    def handle_stroke(self, raw_points: Optional[Iterable[Any]]) -> StrokeOutcome:
        """
        Handle one completed stroke.
        
        Args:
            raw_points: Points captured between touch-down and touch-up
            
        Returns:
            StrokeOutcome describing the stroke
        """
        path = DataValidator.validate_points(raw_points)
        
        if not path:
            return StrokeOutcome(StrokeStatus.EMPTY, path)
        
        if len(path) < RecognitionConfig.MIN_VALID_POINTS:
            outcome = StrokeOutcome(StrokeStatus.TOO_SHORT, path)
        elif not DataValidator.all_finite(path):
            outcome = StrokeOutcome(StrokeStatus.INVALID_INPUT, path)
        else:
            outcome = self._recognize(path)
        
        # Invalid strokes are reported but not drawn
        if outcome.status != StrokeStatus.INVALID_INPUT:
            self._paths.append(path)
        
        self.current = outcome
        if self.logger:
            self.logger.log_outcome(outcome)
        if self.on_result:
            self.on_result(outcome)
        return outcome
    
    def _recognize(self, path: Path) -> StrokeOutcome:
        try:
            result: ClassificationResult = self.classifier.classify(path)
        except Exception as e:
            logger.error(f"Recognition error: {e}")
            if self.logger:
                self.logger.log_error("Recognition error:", e)
            return StrokeOutcome(StrokeStatus.ERROR, path)
        
        return StrokeOutcome(StrokeStatus.RECOGNIZED, path, result.symbol, result.confidence)
    
    def clear(self):
        """Forget all strokes and the current outcome."""
        self._paths = []
        self.current = None
