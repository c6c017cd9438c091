"""
Pydantic models for persisted settings, logs and backup documents.

JSON documents use camelCase keys. Older backups used different names
(cards/reviews/sessions, kanaId, lastReview, ...), which are accepted on input.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel, to_snake

from kana_srs.logging_config import get_logger
from kana_srs.sm2.item_state import LearningItem

logger = get_logger(__name__)


KanaScope = Literal["all", "seion", "no_katakana"]
StudyMode = Literal["hiragana", "katakana", "both"]
ThemeMode = Literal["light", "dark", "auto"]


class CamelModel(BaseModel):
    """Base model serialising to camelCase and accepting either spelling."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ---- Settings ----

class NotificationTime(CamelModel):
    """Daily reminder time."""
    hour: int = Field(20, ge=0, le=23)
    minute: int = Field(0, ge=0, le=59)


class StudySettings(CamelModel):
    """User-configurable study limits plus display preferences."""
    daily_new_cards: int = Field(20, ge=0)
    daily_reviews: int = Field(100, ge=0)
    kana_scope: KanaScope = "all"
    shuffle_cards: bool = True

    # Display preferences, stored so backups round-trip
    show_romaji: bool = True
    study_mode: StudyMode = "both"
    theme_mode: ThemeMode = "auto"
    notifications_enabled: bool = False
    notification_time: NotificationTime = Field(default_factory=NotificationTime)
    last_backup_time: Optional[int] = None


def settings_from_raw(raw: Any) -> StudySettings:
    """
    Build settings from a stored document, falling back to defaults.

    Fields that fail validation are dropped individually so one corrupt
    value does not wipe the rest of the user's preferences.
    """
    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning("Stored settings are not a mapping; using defaults")
        return StudySettings()

    try:
        return StudySettings.model_validate(raw)
    except ValidationError as exc:
        bad_keys = {err["loc"][0] for err in exc.errors() if err["loc"]}
        logger.warning("Dropping invalid settings fields: %s", sorted(map(str, bad_keys)))
        cleaned = {
            k: v for k, v in raw.items()
            if not {k, to_camel(k), to_snake(k)} & bad_keys
        }
        try:
            return StudySettings.model_validate(cleaned)
        except ValidationError:
            return StudySettings()


# ---- Review log and daily aggregates ----

class ReviewLogEntry(CamelModel):
    """One submitted review."""
    item_id: str = Field(
        validation_alias=AliasChoices("itemId", "cardId", "item_id"),
        serialization_alias="itemId",
    )
    timestamp: int
    quality: int = Field(ge=0, le=5)
    time_spent_ms: int = Field(
        0,
        ge=0,
        validation_alias=AliasChoices("timeSpentMs", "timeSpent", "time_spent_ms"),
        serialization_alias="timeSpentMs",
    )


class SessionAggregate(CamelModel):
    """Per calendar day totals."""
    date: str  # local YYYY-MM-DD
    cards_reviewed: int = Field(0, ge=0)
    correct_count: int = Field(0, ge=0)
    average_time: float = Field(0.0, ge=0)  # seconds


# ---- Backup document ----

class BackupItem(CamelModel):
    """Serialized LearningItem."""
    id: str
    symbol_id: str = Field(
        validation_alias=AliasChoices("symbolId", "kanaId", "symbol_id"),
        serialization_alias="symbolId",
    )
    ease_factor: float = Field(ge=1.3)
    interval: int = Field(ge=0)
    repetitions: int = Field(ge=0)
    next_review_at: int = Field(
        validation_alias=AliasChoices("nextReviewAt", "nextReview", "next_review_at"),
        serialization_alias="nextReviewAt",
    )
    last_review_at: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("lastReviewAt", "lastReview", "last_review_at"),
        serialization_alias="lastReviewAt",
    )
    lapse_count: int = Field(
        0,
        ge=0,
        validation_alias=AliasChoices("lapseCount", "lapses", "lapse_count"),
        serialization_alias="lapseCount",
    )
    first_learned_at: Optional[int] = None

    @model_validator(mode="after")
    def check_review_state(self) -> "BackupItem":
        """Reviewed items need an interval of at least a day; new items carry no progress."""
        if self.last_review_at is not None:
            if self.interval < 1:
                raise ValueError(f"Reviewed item {self.id} has interval {self.interval}")
        elif self.interval != 0 or self.repetitions != 0:
            raise ValueError(f"Never-reviewed item {self.id} has interval or repetitions set")
        return self

    @classmethod
    def from_item(cls, item: LearningItem) -> "BackupItem":
        return cls(
            id=item.id,
            symbol_id=item.symbol_id,
            ease_factor=item.ease_factor,
            interval=item.interval,
            repetitions=item.repetitions,
            next_review_at=item.next_review_at,
            last_review_at=item.last_review_at,
            lapse_count=item.lapse_count,
            first_learned_at=item.first_learned_at,
        )

    def to_item(self) -> LearningItem:
        return LearningItem(
            id=self.id,
            symbol_id=self.symbol_id,
            ease_factor=self.ease_factor,
            interval=self.interval,
            repetitions=self.repetitions,
            next_review_at=self.next_review_at,
            last_review_at=self.last_review_at,
            lapse_count=self.lapse_count,
            first_learned_at=self.first_learned_at,
        )


class BackupPayload(CamelModel):
    """Full export of one local store."""
    items: list[BackupItem] = Field(
        default_factory=list,
        validation_alias=AliasChoices("items", "cards"),
        serialization_alias="items",
    )
    review_log: list[ReviewLogEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("reviewLog", "reviews", "review_log"),
        serialization_alias="reviewLog",
    )
    session_aggregates: list[SessionAggregate] = Field(
        default_factory=list,
        validation_alias=AliasChoices("sessionAggregates", "sessions", "session_aggregates"),
        serialization_alias="sessionAggregates",
    )
    settings: StudySettings = Field(default_factory=StudySettings)
    backup_version: int = Field(
        validation_alias=AliasChoices("backupVersion", "syncVersion", "backup_version"),
        serialization_alias="backupVersion",
    )
    last_modified: int = 0
