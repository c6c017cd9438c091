"""
Study session lifecycle.

Holds the loaded items, settings and the active queue as explicit state,
and talks to storage only through a ProgressGateway.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from kana_srs import backup
from kana_srs.analytics import ProgressSummary, StatsDashboardData, build_progress, build_stats_dashboard
from kana_srs.catalog_repo import Catalog, KanaSymbol, get_catalog, get_symbol
from kana_srs.daily_sessions import apply_review_to_aggregate, find_aggregate_for_day
from kana_srs.dates import local_date_key, to_local_datetime
from kana_srs.logging_config import get_logger
from kana_srs.normalization import items_changed, normalize_items
from kana_srs.schemas import BackupPayload, ReviewLogEntry, StudySettings
from kana_srs.session_builders import OrderStrategy, StudyQueue, build_study_queue
from kana_srs.sm2 import LearningItem, now_ms, review_item
from kana_srs.sm2.gateway import ProgressGateway

logger = get_logger(__name__)


@dataclass(frozen=True)
class PendingReview:
    """
    A review applied in memory but not yet persisted.
    """
    item: LearningItem
    is_correct: bool
    log_entry: ReviewLogEntry
    items_snapshot: list[LearningItem]
    date_key: str


class StudyController:
    """
    Headless study controller.

    Args:
        store: Persistence gateway
        catalog: Symbol catalog (defaults to the kana catalog)
        clock: Callable returning now in epoch ms
        order: Shuffle strategy used when settings.shuffle_cards is on
    """

    def __init__(
        self,
        store: ProgressGateway,
        catalog: Optional[Catalog] = None,
        clock: Optional[Callable[[], int]] = None,
        order: Optional[OrderStrategy] = None,
    ):
        self.store = store
        self.catalog = catalog if catalog is not None else get_catalog()
        self.clock = clock or now_ms
        self.order = order

        self.items: list[LearningItem] = []
        self.settings = StudySettings()
        self.queue = StudyQueue()

    # ---- Loading and settings ----

    def load_data(self) -> None:
        """
        Load settings and items, normalize against the catalog, and save
        the cleaned collection back when normalization changed it.
        """
        self.settings = self.store.get_settings()
        stored = self.store.get_items()
        self.items = normalize_items(stored, self.catalog, self.clock())
        if items_changed(stored, self.items):
            self.store.save_items(self.items)
        logger.info("Loaded %d items (scope=%s)", len(self.items), self.settings.kana_scope)

    def update_settings(self, **updates: Any) -> StudySettings:
        """Apply partial settings updates, validate and persist them."""
        merged = {**self.settings.model_dump(), **updates}
        self.settings = StudySettings.model_validate(merged)
        self.store.save_settings(self.settings)
        return self.settings

    # ---- Session ----

    def start_session(self) -> StudyQueue:
        self.queue = build_study_queue(
            self.items,
            self.settings,
            timestamp=self.clock(),
            catalog=self.catalog,
            order=self.order,
        )
        return self.queue

    @property
    def current_item(self) -> Optional[LearningItem]:
        return self.queue.current

    def symbol_for(self, item: LearningItem) -> Optional[KanaSymbol]:
        return get_symbol(item.symbol_id, self.catalog)

    def record_review(self, quality: int, time_spent_ms: int = 0) -> Optional[PendingReview]:
        """
        Apply a review to in-memory state and advance the queue.

        Returns None when there is no current item. Raises
        InvalidQualityError or ValidationError before touching any state.
        """
        current = self.queue.current
        if current is None:
            return None

        timestamp = self.clock()
        outcome = review_item(current, quality, timestamp)
        log_entry = ReviewLogEntry(
            item_id=outcome.item.id,
            timestamp=timestamp,
            quality=int(quality),
            time_spent_ms=time_spent_ms,
        )

        self.items = [
            outcome.item if item.id == outcome.item.id else item
            for item in self.items
        ]
        self.queue.advance(outcome.is_correct)

        return PendingReview(
            item=outcome.item,
            is_correct=outcome.is_correct,
            log_entry=log_entry,
            items_snapshot=list(self.items),
            date_key=local_date_key(timestamp),
        )

    async def persist_review(self, pending: PendingReview) -> None:
        """
        Save the item collection, the review log entry and today's aggregate.

        Item and log writes run concurrently with reading the aggregates;
        the aggregate is then read-modify-written. Errors propagate to the
        caller; nothing is retried.
        """
        try:
            aggregates, _, _ = await asyncio.gather(
                asyncio.to_thread(self.store.get_session_aggregates),
                asyncio.to_thread(self.store.save_items, pending.items_snapshot),
                asyncio.to_thread(self.store.append_review_log, pending.log_entry),
            )
            today = find_aggregate_for_day(aggregates, pending.date_key)
            updated = apply_review_to_aggregate(
                today,
                pending.is_correct,
                pending.log_entry.time_spent_ms,
                pending.date_key,
            )
            await asyncio.to_thread(self.store.upsert_session_aggregate, updated)
        except Exception:
            logger.exception("Failed to persist review of %s", pending.item.id)
            raise

    async def submit_review(self, quality: int, time_spent_ms: int = 0) -> Optional[bool]:
        """
        Record a review and wait until it is durable.

        Returns is_correct, or None when the queue is empty.
        """
        pending = self.record_review(quality, time_spent_ms)
        if pending is None:
            return None
        await self.persist_review(pending)
        return pending.is_correct

    # ---- Dashboards ----

    def get_progress(self) -> ProgressSummary:
        return build_progress(self.items, self.settings, self.clock(), self.catalog)

    def get_stats(self) -> StatsDashboardData:
        today = to_local_datetime(self.clock()).date()
        return build_stats_dashboard(self.store.get_session_aggregates(), self.get_progress(), today)

    # ---- Backup ----

    def export_backup(self) -> BackupPayload:
        return backup.export_backup(self.store, self.clock())

    def export_backup_json(self) -> str:
        return backup.dump_backup_json(self.export_backup())

    def import_backup(self, data: Union[str, dict, BackupPayload]) -> BackupPayload:
        """Merge a backup into the store, then reload in-memory state."""
        merged = backup.import_backup(self.store, data, self.clock())
        self.load_data()
        return merged

    def reset_all(self) -> None:
        """Delete all progress and start over with fresh items."""
        self.store.clear_all()
        self.queue = StudyQueue()
        self.load_data()
