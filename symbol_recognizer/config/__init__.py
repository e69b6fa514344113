from .settings import RecognitionConfig

__all__ = ['RecognitionConfig']
