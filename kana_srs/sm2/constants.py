"""
SM-2 Constants and Parameters

All configurable parameters for the review scheduler in one place.
"""

from enum import IntEnum


# ---- Quality Ratings ----

class Quality(IntEnum):
    """Self-reported recall grade (0-5)."""
    BLACKOUT = 0    # No recall at all
    WRONG = 1       # Wrong, but recognised the answer
    FORGOT = 2      # Wrong, answer felt familiar
    HARD = 3        # Recalled with difficulty
    GOOD = 4        # Recalled easily
    PERFECT = 5     # Instant recall


PASSING_QUALITY = Quality.HARD  # quality >= 3 counts as correct


# ---- Ease Factor ----

INITIAL_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
LAPSE_EASE_PENALTY = 0.2


# ---- Intervals (days) ----

FIRST_INTERVAL = 1
SECOND_INTERVAL = 6
LAPSE_INTERVAL = 1

# Only applied from the third repetition on
EASY_BONUS = 1.3
HARD_INTERVAL_MULTIPLIER = 0.8

MS_PER_DAY = 24 * 60 * 60 * 1000


# ---- Status Thresholds ----

REVIEW_MIN_REPETITIONS = 2
MASTERED_MIN_REPETITIONS = 4
MASTERED_MIN_INTERVAL = 14


# ---- Item Identity ----

ITEM_ID_PREFIX = "card_"
