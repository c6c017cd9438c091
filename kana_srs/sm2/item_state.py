"""
Item State - SM-2 Learning Item

Defines the per-symbol learning state and the derived "new"/"due" notions.

Key concepts:
- Ease factor: multiplier controlling how fast intervals grow
- Interval: whole days until the next review
- Repetitions: consecutive passing reviews since the last lapse
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import time

from kana_srs.sm2.constants import INITIAL_EASE_FACTOR, ITEM_ID_PREFIX


@dataclass
class LearningItem:
    """
    Review state for a single catalog symbol.

    Timestamps are epoch milliseconds.
    """
    id: str
    symbol_id: str

    # SM-2 parameters
    ease_factor: float
    interval: int  # days, 0 until first review
    repetitions: int

    # Review tracking
    next_review_at: int
    last_review_at: Optional[int]  # None means never reviewed
    lapse_count: int

    # Set once, on the first-ever review
    first_learned_at: Optional[int] = None


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def item_id_for(symbol_id: str) -> str:
    """Stable item id for a catalog symbol."""
    return f"{ITEM_ID_PREFIX}{symbol_id}"


def initialize_item(symbol_id: str, timestamp: Optional[int] = None) -> LearningItem:
    """
    Initialize state for a symbol that has never been studied.

    Args:
        symbol_id: Catalog id of the symbol
        timestamp: Creation time in ms (defaults to now)

    Returns:
        New LearningItem, due immediately
    """
    if timestamp is None:
        timestamp = now_ms()

    return LearningItem(
        id=item_id_for(symbol_id),
        symbol_id=symbol_id,
        ease_factor=INITIAL_EASE_FACTOR,
        interval=0,
        repetitions=0,
        next_review_at=timestamp,
        last_review_at=None,
        lapse_count=0,
        first_learned_at=None,
    )


def is_new(item: LearningItem) -> bool:
    """True when the item has never been reviewed."""
    return item.last_review_at is None


def is_due(item: LearningItem, timestamp: int) -> bool:
    """True when a previously reviewed item has reached its review time."""
    return item.last_review_at is not None and item.next_review_at <= timestamp
