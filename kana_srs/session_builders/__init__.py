"""Session builder modules for study queues."""

from kana_srs.session_builders.ordering import KeepOrder, OrderStrategy, RandomOrder
from kana_srs.session_builders.queue_types import StudyQueue
from kana_srs.session_builders.review_queue import (
    build_study_queue,
    count_learned_today,
    due_items,
    new_item_allowance,
    new_items_for_today,
)

__all__ = [
    "KeepOrder",
    "OrderStrategy",
    "RandomOrder",
    "StudyQueue",
    "build_study_queue",
    "count_learned_today",
    "due_items",
    "new_item_allowance",
    "new_items_for_today",
]
