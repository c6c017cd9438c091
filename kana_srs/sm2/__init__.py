"""
SM-2 - spaced repetition scheduler

Main API for the kana review engine.

This package implements the SuperMemo-2 family scheduler with:
- Fixed first intervals (1 day, 6 days)
- Ease-factor growth and a 1.3 floor
- Easy bonus / hard dampener from the third repetition on

Quick start:
    from kana_srs import sm2

    item = sm2.initialize_item("ka")
    outcome = sm2.review_item(item, sm2.Quality.GOOD)

Persistence lives in kana_srs.sm2.database (import it directly).
"""

# Core scheduler API (algorithm logic)
from kana_srs.sm2.scheduler import (
    InvalidQualityError,
    ReviewOutcome,
    review_item,
    validate_quality,
)

# Constants and parameters
from kana_srs.sm2.constants import (
    Quality,
    PASSING_QUALITY,
    INITIAL_EASE_FACTOR,
    MIN_EASE_FACTOR,
    EASY_BONUS,
    HARD_INTERVAL_MULTIPLIER,
    MS_PER_DAY,
)

# Item state
from kana_srs.sm2.item_state import (
    LearningItem,
    initialize_item,
    item_id_for,
    is_due,
    is_new,
    now_ms,
)


__all__ = [
    # Core algorithm
    "review_item",
    "validate_quality",
    "ReviewOutcome",
    "InvalidQualityError",

    # Enums
    "Quality",

    # Item state
    "LearningItem",
    "initialize_item",
    "item_id_for",
    "is_due",
    "is_new",
    "now_ms",

    # Parameters
    "PASSING_QUALITY",
    "INITIAL_EASE_FACTOR",
    "MIN_EASE_FACTOR",
    "EASY_BONUS",
    "HARD_INTERVAL_MULTIPLIER",
    "MS_PER_DAY",
]
