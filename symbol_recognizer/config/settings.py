"""
Configuration settings for the symbol recognizer.
"""

class RecognitionConfig:
    """Configuration constants for stroke symbol recognition."""
    
    # Path simplification (same units as the captured coordinates)
    SIMPLIFY_TOLERANCE = 5.0
    
    # Point count floors
    MIN_VALID_POINTS = 5
    MIN_FEATURE_POINTS = 3
    
    # Directional symbols are only attempted inside this open window
    MIN_ASPECT_RATIO = 0.5
    MAX_ASPECT_RATIO = 2.0
    
    # Scoring (points per passed check)
    APEX_SCORE = 40
    DIP_SCORE = 30
    LEVEL_SCORE = 30
    LEVEL_TOLERANCE = 0.3  # normalized units
    
    MIN_WINNING_SCORE = 40
    MAX_CONFIDENCE = 100
    
    # Console/debug logging
    DEBUG_LOG_FILE = 'symbol_debug.log'
