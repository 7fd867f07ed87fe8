"""
Thresholds for the local speaking-pattern heuristics.
Changing these changes reported metrics.
"""

FILLER_WORDS = [
    "um", "uh", "like", "you know", "basically", "actually", "literally",
    "sort of", "kind of", "i mean", "well", "so", "right", "okay",
]

# Minimum speaking span (minutes) used as the WPM denominator
MIN_SPEAKING_MINUTES = 0.1

# Gaps between candidate segments outside this band are not pauses
PAUSE_MIN_SEC = 0.5
PAUSE_MAX_SEC = 10.0
DEFAULT_PAUSE_SEC = 2.0

# Acoustic silence ratio -> pause seconds
SILENCE_RATIO_PAUSE_SEC = 2.0
