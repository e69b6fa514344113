from .session import StrokeOutcome, StrokeSession, StrokeStatus

__all__ = ['StrokeOutcome', 'StrokeSession', 'StrokeStatus']
