"""
Session Builder - Daily Review Queue

Creates study sessions from two pools:
1. Due pool: reviewed items whose next review time has passed
2. New pool: never-reviewed items, limited by today's new-item allowance

Session Logic:
- Filter by study scope
- Due items first, then new items
- Cap the whole session at the daily review limit
- Optionally shuffle
"""

from __future__ import annotations
from typing import Iterable, Optional

from kana_srs.catalog_repo import Catalog, filter_by_scope
from kana_srs.dates import start_of_local_day_ms
from kana_srs.logging_config import get_logger
from kana_srs.schemas import StudySettings
from kana_srs.session_builders.ordering import KeepOrder, OrderStrategy, RandomOrder, fill_in_order
from kana_srs.session_builders.queue_types import StudyQueue
from kana_srs.sm2.item_state import LearningItem, is_due, is_new, now_ms

logger = get_logger(__name__)


def due_items(items: Iterable[LearningItem], timestamp: int) -> list[LearningItem]:
    """Previously reviewed items due at timestamp, in collection order."""
    return [item for item in items if is_due(item, timestamp)]


def count_learned_today(items: Iterable[LearningItem], timestamp: int) -> int:
    """
    Count items first learned on the local day containing timestamp.

    Lapsed items still count; the quota is about first exposure.
    """
    day_start = start_of_local_day_ms(timestamp)
    return sum(
        1 for item in items
        if item.first_learned_at is not None and item.first_learned_at >= day_start
    )


def new_item_allowance(items: Iterable[LearningItem], daily_new_cards: int, timestamp: int) -> int:
    """How many new items may still be introduced today."""
    return max(0, daily_new_cards - count_learned_today(items, timestamp))


def new_items_for_today(
    items: list[LearningItem],
    daily_new_cards: int,
    timestamp: int
) -> list[LearningItem]:
    """Never-reviewed items up to today's remaining allowance, in collection order."""
    allowance = new_item_allowance(items, daily_new_cards, timestamp)
    return [item for item in items if is_new(item)][:allowance]


def build_study_queue(
    items: list[LearningItem],
    settings: StudySettings,
    timestamp: Optional[int] = None,
    catalog: Optional[Catalog] = None,
    order: Optional[OrderStrategy] = None
) -> StudyQueue:
    """
    Build the queue for one study session.

    Args:
        items: Full item collection
        settings: Daily limits, scope and shuffle flag
        timestamp: Current time in ms (defaults to now)
        catalog: Symbol catalog used for the scope filter
        order: Strategy applied when shuffle_cards is on (defaults to RandomOrder)

    Returns:
        StudyQueue with at most settings.daily_reviews items
    """
    if timestamp is None:
        timestamp = now_ms()

    eligible = filter_by_scope(items, settings.kana_scope, catalog)
    pools = {
        "due": due_items(eligible, timestamp),
        "new": new_items_for_today(eligible, settings.daily_new_cards, timestamp),
    }
    queue = fill_in_order(pools, ["due", "new"], settings.daily_reviews)

    if settings.shuffle_cards:
        queue = (order or RandomOrder())(queue)
    else:
        queue = KeepOrder()(queue)

    logger.info(
        "Built study queue: %d items (due=%d, new=%d, cap=%d)",
        len(queue), len(pools["due"]), len(pools["new"]), settings.daily_reviews
    )
    return StudyQueue.start(queue)
