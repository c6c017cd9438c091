"""
Database - Progress Database I/O Operations

Handles all database operations for items, review log, daily aggregates
and settings. Uses SQLAlchemy ORM; SQLite by default, any SQLAlchemy URL works.

This module handles ONLY database I/O.
Algorithm logic is handled by the scheduler module.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, delete
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from kana_srs import config
from kana_srs.dates import normalize_date_key
from kana_srs.logging_config import get_logger
from kana_srs.schemas import ReviewLogEntry, SessionAggregate, StudySettings, settings_from_raw
from kana_srs.sm2.gateway import ProgressGateway
from kana_srs.sm2.item_state import LearningItem
from kana_srs.sm2.models import (
    Base,
    LearningItemRow,
    ReviewLogRow,
    SessionAggregateRow,
    SettingsRow,
)

logger = get_logger(__name__)

SETTINGS_ROW_ID = 1


def create_db_engine(db_url: str) -> Engine:
    """
    Build an engine for db_url.

    SQLite connections are shared across worker threads, so same-thread
    checks are disabled; other backends get a small connection pool.
    """
    if db_url.startswith("sqlite"):
        if db_url.startswith("sqlite:///") and ":memory:" not in db_url:
            Path(db_url.replace("sqlite:///", "", 1)).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            echo=False,
        )
    return create_engine(
        db_url,
        pool_size=5,           # Keep 5 connections open
        max_overflow=10,       # Allow up to 10 extra connections
        pool_pre_ping=True,    # Verify connections before use
        echo=False,
    )


def _row_to_item(row: LearningItemRow) -> LearningItem:
    return LearningItem(
        id=row.id,
        symbol_id=row.symbol_id,
        ease_factor=row.ease_factor,
        interval=row.interval,
        repetitions=row.repetitions,
        next_review_at=row.next_review_at,
        last_review_at=row.last_review_at,
        lapse_count=row.lapse_count,
        first_learned_at=row.first_learned_at,
    )


def _item_to_row(item: LearningItem, position: int) -> LearningItemRow:
    return LearningItemRow(
        id=item.id,
        symbol_id=item.symbol_id,
        position=position,
        ease_factor=item.ease_factor,
        interval=item.interval,
        repetitions=item.repetitions,
        next_review_at=item.next_review_at,
        last_review_at=item.last_review_at,
        lapse_count=item.lapse_count,
        first_learned_at=item.first_learned_at,
    )


def _aggregate_to_row(aggregate: SessionAggregate) -> SessionAggregateRow:
    return SessionAggregateRow(
        date=normalize_date_key(aggregate.date),
        cards_reviewed=aggregate.cards_reviewed,
        correct_count=aggregate.correct_count,
        average_time=aggregate.average_time,
    )


def _review_to_row(entry: ReviewLogEntry) -> ReviewLogRow:
    return ReviewLogRow(
        item_id=entry.item_id,
        timestamp=entry.timestamp,
        quality=entry.quality,
        time_spent_ms=entry.time_spent_ms,
    )


class ProgressStore(ProgressGateway):
    """SQLAlchemy-backed implementation of the progress gateway."""

    def __init__(self, db_url: Optional[str] = None):
        self.db_url = db_url or config.get_database_url()
        self.engine = create_db_engine(self.db_url)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

    def init_db(self) -> None:
        """
        Initialize database schema if tables don't exist.

        Safe to call multiple times.
        """
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    def get_session(self) -> Session:
        return self.SessionLocal()

    # ---- Items ----

    def get_items(self) -> list[LearningItem]:
        session = self.get_session()
        try:
            rows = session.query(LearningItemRow).order_by(LearningItemRow.position).all()
            return [_row_to_item(row) for row in rows]
        finally:
            session.close()

    def save_items(self, items: list[LearningItem]) -> None:
        """
        Replace the stored collection (single transaction).

        Args:
            items: Full item collection in display order
        """
        session = self.get_session()
        try:
            session.execute(delete(LearningItemRow))
            session.add_all([_item_to_row(item, idx) for idx, item in enumerate(items)])
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ---- Settings ----

    def get_settings(self) -> StudySettings:
        session = self.get_session()
        try:
            row = session.get(SettingsRow, SETTINGS_ROW_ID)
            return settings_from_raw(row.payload if row is not None else None)
        finally:
            session.close()

    def save_settings(self, settings: StudySettings) -> None:
        session = self.get_session()
        try:
            session.merge(SettingsRow(id=SETTINGS_ROW_ID, payload=settings.model_dump(by_alias=True)))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ---- Review log ----

    def append_review_log(self, entry: ReviewLogEntry) -> None:
        session = self.get_session()
        try:
            session.add(_review_to_row(entry))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_review_log(self) -> list[ReviewLogEntry]:
        session = self.get_session()
        try:
            rows = session.query(ReviewLogRow).order_by(
                ReviewLogRow.timestamp, ReviewLogRow.id
            ).all()
            return [
                ReviewLogEntry(
                    item_id=row.item_id,
                    timestamp=row.timestamp,
                    quality=row.quality,
                    time_spent_ms=row.time_spent_ms,
                )
                for row in rows
            ]
        finally:
            session.close()

    # ---- Daily aggregates ----

    def get_session_aggregates(self) -> list[SessionAggregate]:
        session = self.get_session()
        try:
            rows = session.query(SessionAggregateRow).order_by(SessionAggregateRow.date).all()
            return [
                SessionAggregate(
                    date=row.date,
                    cards_reviewed=row.cards_reviewed,
                    correct_count=row.correct_count,
                    average_time=row.average_time,
                )
                for row in rows
            ]
        finally:
            session.close()

    def upsert_session_aggregate(self, aggregate: SessionAggregate) -> None:
        """
        Insert or replace the aggregate keyed by its normalized date.

        Read-modify-write is the caller's job; this only writes.
        """
        session = self.get_session()
        try:
            session.merge(_aggregate_to_row(aggregate))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ---- Bulk ----

    def replace_all(
        self,
        items: list[LearningItem],
        review_log: list[ReviewLogEntry],
        aggregates: list[SessionAggregate],
        settings: StudySettings,
    ) -> None:
        """Replace every collection in one transaction (used by imports)."""
        session = self.get_session()
        try:
            session.execute(delete(LearningItemRow))
            session.execute(delete(ReviewLogRow))
            session.execute(delete(SessionAggregateRow))
            session.add_all([_item_to_row(item, idx) for idx, item in enumerate(items)])
            session.add_all([_review_to_row(entry) for entry in review_log])
            for aggregate in aggregates:
                session.merge(_aggregate_to_row(aggregate))
            session.merge(SettingsRow(id=SETTINGS_ROW_ID, payload=settings.model_dump(by_alias=True)))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
        logger.info(
            "Replaced store contents: %d items, %d reviews, %d daily aggregates",
            len(items), len(review_log), len(aggregates)
        )

    def clear_all(self) -> None:
        session = self.get_session()
        try:
            session.execute(delete(LearningItemRow))
            session.execute(delete(ReviewLogRow))
            session.execute(delete(SessionAggregateRow))
            session.execute(delete(SettingsRow))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
        logger.info("Cleared all stored progress")
