"""
Abstract Progress Gateway

Defines the persistence contract the study controller and backup code use.
Implementations own storage; callers only get and set whole collections.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from kana_srs.schemas import ReviewLogEntry, SessionAggregate, StudySettings
from kana_srs.sm2.item_state import LearningItem


class ProgressGateway(ABC):
    """
    Abstract base class for progress storage.

    Subclasses should implement every collection accessor below.
    """

    @abstractmethod
    def get_items(self) -> list[LearningItem]:
        """Return all learning items in collection order."""

    @abstractmethod
    def save_items(self, items: list[LearningItem]) -> None:
        """Replace the stored item collection."""

    @abstractmethod
    def get_settings(self) -> StudySettings:
        """Return settings, defaults when absent or corrupt."""

    @abstractmethod
    def save_settings(self, settings: StudySettings) -> None:
        """Persist settings."""

    @abstractmethod
    def append_review_log(self, entry: ReviewLogEntry) -> None:
        """Append one review to the log."""

    @abstractmethod
    def get_review_log(self) -> list[ReviewLogEntry]:
        """Return the review log ordered by timestamp."""

    @abstractmethod
    def get_session_aggregates(self) -> list[SessionAggregate]:
        """Return daily aggregates ordered by date."""

    @abstractmethod
    def upsert_session_aggregate(self, aggregate: SessionAggregate) -> None:
        """Insert or replace the aggregate for its (normalized) date."""

    @abstractmethod
    def replace_all(
        self,
        items: list[LearningItem],
        review_log: list[ReviewLogEntry],
        aggregates: list[SessionAggregate],
        settings: StudySettings,
    ) -> None:
        """Replace every collection in one transaction."""

    @abstractmethod
    def clear_all(self) -> None:
        """Delete all stored progress and settings."""
