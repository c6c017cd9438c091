"""
Scheduler - SM-2 Algorithm Logic

Pure review transition (no database calls).

Main workflow:
1. Load the item (caller's responsibility)
2. Validate the quality rating
3. Apply the lapse or success rules
4. Return the updated item + correctness signal

Database I/O is handled by the database module.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional
import math

from kana_srs.sm2.constants import (
    EASY_BONUS,
    FIRST_INTERVAL,
    HARD_INTERVAL_MULTIPLIER,
    LAPSE_EASE_PENALTY,
    LAPSE_INTERVAL,
    MIN_EASE_FACTOR,
    MS_PER_DAY,
    PASSING_QUALITY,
    SECOND_INTERVAL,
    Quality,
)
from kana_srs.sm2.item_state import LearningItem, now_ms


class InvalidQualityError(ValueError):
    """Raised when a quality rating is not an integer in 0..5."""


@dataclass(frozen=True)
class ReviewOutcome:
    """Result of reviewing one item."""
    item: LearningItem
    is_correct: bool


def validate_quality(quality) -> Quality:
    """
    Coerce a rating to Quality, rejecting anything outside 0..5.

    Bools and floats are rejected rather than truncated.
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidQualityError(f"Quality must be an integer 0-5, got {quality!r}")
    if quality < Quality.BLACKOUT or quality > Quality.PERFECT:
        raise InvalidQualityError(f"Quality must be between 0 and 5, got {quality}")
    return Quality(quality)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


def next_ease_factor(ease_factor: float, quality: int) -> float:
    """
    SM-2 ease update for a passing review, floored at MIN_EASE_FACTOR.

    Formula: EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
    """
    distance = 5 - quality
    updated = ease_factor + (0.1 - distance * (0.08 + distance * 0.02))
    return max(MIN_EASE_FACTOR, updated)


def next_interval(previous_interval: int, repetitions: int, ease_factor: float, quality: int) -> int:
    """
    Interval for a passing review, given the already incremented repetition count.

    The first two intervals are fixed; the easy bonus and hard dampener
    only apply from the third repetition on.
    """
    if repetitions == 1:
        return FIRST_INTERVAL
    if repetitions == 2:
        return SECOND_INTERVAL

    interval = max(1, round_half_up(previous_interval * ease_factor))
    if quality == Quality.PERFECT:
        interval = round_half_up(interval * EASY_BONUS)
    elif quality == Quality.HARD:
        interval = max(1, round_half_up(interval * HARD_INTERVAL_MULTIPLIER))
    return interval


def review_item(
    item: LearningItem,
    quality: int,
    timestamp: Optional[int] = None
) -> ReviewOutcome:
    """
    Process a review and return the updated item + correctness.

    This is the core SM-2 transition. No database calls, and the input
    item is left untouched.

    Args:
        item: LearningItem being reviewed
        quality: Recall grade 0-5
        timestamp: Review time in ms (defaults to now)

    Returns:
        ReviewOutcome with the new item and is_correct

    Raises:
        InvalidQualityError: if quality is not an integer in 0..5
    """
    grade = validate_quality(quality)
    if timestamp is None:
        timestamp = now_ms()

    is_correct = grade >= PASSING_QUALITY

    if item.first_learned_at is not None:
        first_learned_at = item.first_learned_at
    elif item.last_review_at is None:
        first_learned_at = timestamp
    else:
        first_learned_at = None

    if not is_correct:
        # 0, 1 and 2 share one lapse path
        repetitions = 0
        interval = LAPSE_INTERVAL
        lapse_count = item.lapse_count + 1
        ease_factor = max(MIN_EASE_FACTOR, item.ease_factor - LAPSE_EASE_PENALTY)
    else:
        repetitions = item.repetitions + 1
        lapse_count = item.lapse_count
        ease_factor = next_ease_factor(item.ease_factor, grade)
        interval = next_interval(item.interval, repetitions, ease_factor, grade)

    updated = replace(
        item,
        ease_factor=ease_factor,
        interval=interval,
        repetitions=repetitions,
        lapse_count=lapse_count,
        last_review_at=timestamp,
        next_review_at=timestamp + interval * MS_PER_DAY,
        first_learned_at=first_learned_at,
    )
    return ReviewOutcome(item=updated, is_correct=is_correct)
