"""
Per-day study aggregates.

Each submitted review bumps the aggregate for the current local day.
"""

from __future__ import annotations

from typing import Iterable, Optional

from kana_srs.dates import local_date_key, normalize_date_key
from kana_srs.schemas import SessionAggregate


def empty_aggregate(date_key: str) -> SessionAggregate:
    return SessionAggregate(date=date_key, cards_reviewed=0, correct_count=0, average_time=0.0)


def find_aggregate_for_day(
    aggregates: Iterable[SessionAggregate],
    date_key: str
) -> Optional[SessionAggregate]:
    """Find the aggregate whose normalized date matches date_key."""
    target = normalize_date_key(date_key)
    for aggregate in aggregates:
        if normalize_date_key(aggregate.date) == target:
            return aggregate
    return None


def apply_review_to_aggregate(
    aggregate: Optional[SessionAggregate],
    is_correct: bool,
    time_spent_ms: int,
    date_key: Optional[str] = None
) -> SessionAggregate:
    """
    Fold one review into a day's aggregate and return the new aggregate.

    The running mean uses the count before incrementing:
        new_avg = (old_avg * old_count + sample) / (old_count + 1)

    Args:
        aggregate: Today's aggregate, or None if there is none yet
        is_correct: Whether the review passed
        time_spent_ms: Response time in milliseconds
        date_key: Day key for a fresh aggregate (defaults to today)
    """
    if aggregate is None:
        aggregate = empty_aggregate(date_key or local_date_key())

    old_count = aggregate.cards_reviewed
    sample_seconds = time_spent_ms / 1000
    new_count = old_count + 1

    return aggregate.model_copy(update={
        "date": normalize_date_key(aggregate.date),
        "cards_reviewed": new_count,
        "correct_count": aggregate.correct_count + (1 if is_correct else 0),
        "average_time": (aggregate.average_time * old_count + sample_seconds) / new_count,
    })
