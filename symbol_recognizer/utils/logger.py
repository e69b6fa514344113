"""
Console and debug-file logging for recognized strokes.
"""

import datetime
import logging
from typing import TYPE_CHECKING, Optional

from ..config.settings import RecognitionConfig

if TYPE_CHECKING:
    from ..core.session import StrokeOutcome

logger = logging.getLogger(__name__)


class RecognitionLogger:
    """Handles logging of stroke outcomes for the drawing shell."""
    
    def __init__(self, debug_file: Optional[str] = RecognitionConfig.DEBUG_LOG_FILE,
                 enabled: bool = True):
        """
        Args:
            debug_file: Path of the debug log, or None to skip the file
            enabled: Console output switch; errors are always reported
        """
        self.enabled = enabled
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")
    
    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]
    
    def log(self, message: str):
        """Print a timestamped line when logging is enabled."""
        if self.enabled:
            print(f"[{self._timestamp()}] {message}")
    
    def log_error(self, message: str, error: BaseException):
        """Errors bypass the enabled switch."""
        logger.error(f"{message} {error}")
        self._write(f"ERROR {message} {error!r}")
    
    def log_outcome(self, outcome: 'StrokeOutcome'):
        """Log one stroke outcome."""
        from ..core.session import StrokeStatus

        status = outcome.status
        label = outcome.label
        confidence = outcome.confidence
        point_count = len(outcome.path)

        if status == StrokeStatus.RECOGNIZED:
            if confidence > 0:
                self.log(f"✏️ SYMBOL {label} [{confidence:.1f}%] from {point_count} point(s)")
            else:
                self.log(f"❔ UNRECOGNIZED stroke, defaulting to {label} ({point_count} point(s))")
        elif status == StrokeStatus.TOO_SHORT:
            self.log(f"✂️ TOO SHORT: {point_count} point(s)")
        elif status == StrokeStatus.INVALID_INPUT:
            self.log("🚫 INVALID INPUT: non-finite coordinates, skipping recognition")
        elif status == StrokeStatus.ERROR:
            self.log("💥 RECOGNITION ERROR")

        self._write(f"{status.value} label={label!r} confidence={confidence} points={point_count}")
    
    def _write(self, message: str):
        if not self.debug_file:
            return
        try:
            self.debug_file.write(f"[{self._timestamp()}] {message}\n")
            self.debug_file.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not write debug file: {e}")
    
    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
