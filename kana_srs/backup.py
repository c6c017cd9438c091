"""
JSON backup export and merge-import.

Import never overwrites blindly: items keep the more recently reviewed copy,
review logs and daily aggregates are deduplicated. A payload is fully
validated before anything is merged, and the merged result is written in a
single transaction.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Union

from pydantic import ValidationError

from kana_srs.dates import normalize_date_key
from kana_srs.logging_config import get_logger
from kana_srs.schemas import (
    BackupItem,
    BackupPayload,
    ReviewLogEntry,
    SessionAggregate,
    StudySettings,
)
from kana_srs.sm2.gateway import ProgressGateway
from kana_srs.sm2.item_state import now_ms

logger = get_logger(__name__)

BACKUP_VERSION = 1


class InvalidBackupError(ValueError):
    """Raised when a backup document cannot be imported."""


# ---- Export ----

def export_backup(store: ProgressGateway, timestamp: Optional[int] = None) -> BackupPayload:
    """Snapshot every stored collection into a backup payload."""
    return BackupPayload(
        items=[BackupItem.from_item(item) for item in store.get_items()],
        review_log=store.get_review_log(),
        session_aggregates=store.get_session_aggregates(),
        settings=store.get_settings(),
        backup_version=BACKUP_VERSION,
        last_modified=timestamp if timestamp is not None else now_ms(),
    )


def dump_backup_json(payload: BackupPayload) -> str:
    return json.dumps(payload.model_dump(by_alias=True), ensure_ascii=False, indent=2)


# ---- Validation ----

def validate_backup(data: Any) -> BackupPayload:
    """
    Validate a decoded backup document.

    Raises:
        InvalidBackupError: wrong shape, missing version, or a version
            newer than this build understands
    """
    if isinstance(data, BackupPayload):
        payload = data
    else:
        if not isinstance(data, dict):
            raise InvalidBackupError("Backup must be a JSON object")
        try:
            payload = BackupPayload.model_validate(data)
        except ValidationError as exc:
            raise InvalidBackupError(f"Backup does not match the expected schema: {exc}") from exc

    if payload.backup_version < 1:
        raise InvalidBackupError(f"Invalid backup version: {payload.backup_version}")
    if payload.backup_version > BACKUP_VERSION:
        raise InvalidBackupError(
            f"Backup version {payload.backup_version} is newer than supported ({BACKUP_VERSION})"
        )
    return payload


def parse_backup_json(text: str) -> BackupPayload:
    """Decode and validate a backup JSON string."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise InvalidBackupError(f"Backup is not valid JSON: {exc}") from exc
    return validate_backup(data)


# ---- Merge ----

def merge_items(local: list[BackupItem], remote: list[BackupItem]) -> list[BackupItem]:
    """
    Union by item id; the copy with the later last review wins.

    Never-reviewed counts as 0 and ties keep the local copy.
    """
    merged: dict[str, BackupItem] = {item.id: item for item in local}
    for item in remote:
        existing = merged.get(item.id)
        if existing is None or (item.last_review_at or 0) > (existing.last_review_at or 0):
            merged[item.id] = item
    return list(merged.values())


def merge_review_logs(
    local: list[ReviewLogEntry],
    remote: list[ReviewLogEntry]
) -> list[ReviewLogEntry]:
    """Union deduplicated by (item_id, timestamp), sorted by timestamp."""
    seen: set[tuple[str, int]] = set()
    merged: list[ReviewLogEntry] = []
    for entry in [*local, *remote]:
        key = (entry.item_id, entry.timestamp)
        if key not in seen:
            seen.add(key)
            merged.append(entry)
    return sorted(merged, key=lambda e: e.timestamp)


def merge_session_aggregates(
    local: list[SessionAggregate],
    remote: list[SessionAggregate]
) -> list[SessionAggregate]:
    """Union by normalized date keeping the larger cards_reviewed, sorted by date."""
    by_date: dict[str, SessionAggregate] = {}
    for aggregate in local:
        key = normalize_date_key(aggregate.date)
        by_date[key] = aggregate.model_copy(update={"date": key})
    for aggregate in remote:
        key = normalize_date_key(aggregate.date)
        existing = by_date.get(key)
        if existing is None or aggregate.cards_reviewed > existing.cards_reviewed:
            by_date[key] = aggregate.model_copy(update={"date": key})
    return [by_date[key] for key in sorted(by_date)]


def merge_settings(local: BackupPayload, remote: BackupPayload) -> StudySettings:
    """Overlay settings, the side modified more recently taking precedence."""
    local_fields = local.settings.model_dump(exclude_unset=True)
    remote_fields = remote.settings.model_dump(exclude_unset=True)
    if remote.last_modified > local.last_modified:
        merged = {**local.settings.model_dump(), **remote_fields}
    else:
        merged = {**remote.settings.model_dump(), **local_fields}
    return StudySettings.model_validate(merged)


def merge_backups(local: BackupPayload, remote: BackupPayload) -> BackupPayload:
    return BackupPayload(
        items=merge_items(local.items, remote.items),
        review_log=merge_review_logs(local.review_log, remote.review_log),
        session_aggregates=merge_session_aggregates(
            local.session_aggregates, remote.session_aggregates
        ),
        settings=merge_settings(local, remote),
        backup_version=BACKUP_VERSION,
        last_modified=max(local.last_modified, remote.last_modified),
    )


# ---- Import ----

def import_backup(
    store: ProgressGateway,
    data: Union[str, dict, BackupPayload],
    timestamp: Optional[int] = None
) -> BackupPayload:
    """
    Validate a backup, merge it into the store and write the result atomically.

    Args:
        store: Destination gateway
        data: JSON text, decoded dict, or an already validated payload
        timestamp: Import time in ms (defaults to now)

    Returns:
        The merged payload as written

    Raises:
        InvalidBackupError: nothing is written when validation fails
    """
    if timestamp is None:
        timestamp = now_ms()

    remote = parse_backup_json(data) if isinstance(data, str) else validate_backup(data)
    local = export_backup(store, timestamp=timestamp)
    merged = merge_backups(local, remote)
    settings = merged.settings.model_copy(update={"last_backup_time": timestamp})

    store.replace_all(
        items=[item.to_item() for item in merged.items],
        review_log=merged.review_log,
        aggregates=merged.session_aggregates,
        settings=settings,
    )
    logger.info(
        "Imported backup v%d: %d items, %d reviews, %d days",
        remote.backup_version, len(merged.items), len(merged.review_log),
        len(merged.session_aggregates)
    )
    return merged.model_copy(update={"settings": settings})
