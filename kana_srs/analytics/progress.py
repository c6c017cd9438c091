"""
Status classification and progress counts.

Every item falls in exactly one of new / learning / review / mastered.
"""

from __future__ import annotations

from typing import Iterable, Optional

from kana_srs.analytics.constants import STATUS_ORDER
from kana_srs.analytics.types import ItemStatus, ProgressSummary
from kana_srs.catalog_repo import Catalog, filter_by_scope
from kana_srs.schemas import StudySettings
from kana_srs.session_builders.review_queue import due_items, new_items_for_today
from kana_srs.sm2.constants import (
    MASTERED_MIN_INTERVAL,
    MASTERED_MIN_REPETITIONS,
    REVIEW_MIN_REPETITIONS,
)
from kana_srs.sm2.item_state import LearningItem, is_new, now_ms


def is_mastered(item: LearningItem) -> bool:
    """Durably learned: four straight passes and a two-week interval."""
    return (
        not is_new(item)
        and item.repetitions >= MASTERED_MIN_REPETITIONS
        and item.interval >= MASTERED_MIN_INTERVAL
    )


def classify_item(item: LearningItem) -> ItemStatus:
    if is_new(item):
        return "new"
    if is_mastered(item):
        return "mastered"
    if item.repetitions < REVIEW_MIN_REPETITIONS:
        return "learning"
    return "review"


def items_by_status(items: Iterable[LearningItem]) -> dict[str, list[LearningItem]]:
    """Group items by status; every status key is present."""
    groups: dict[str, list[LearningItem]] = {status: [] for status in STATUS_ORDER}
    for item in items:
        groups[classify_item(item)].append(item)
    return groups


def build_progress(
    items: list[LearningItem],
    settings: StudySettings,
    timestamp: Optional[int] = None,
    catalog: Optional[Catalog] = None
) -> ProgressSummary:
    """
    Dashboard counts for the in-scope items.

    due_today mirrors the queue builder's cap without building a queue.
    """
    if timestamp is None:
        timestamp = now_ms()

    eligible = filter_by_scope(items, settings.kana_scope, catalog)
    groups = items_by_status(eligible)
    due_count = len(due_items(eligible, timestamp))
    new_count = len(new_items_for_today(eligible, settings.daily_new_cards, timestamp))

    return ProgressSummary(
        new=len(groups["new"]),
        learning=len(groups["learning"]),
        review=len(groups["review"]),
        mastered=len(groups["mastered"]),
        total=len(eligible),
        due_today=min(due_count + new_count, settings.daily_reviews),
    )
