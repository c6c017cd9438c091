import json

import pytest

from kana_srs.backup import (
    BACKUP_VERSION,
    InvalidBackupError,
    dump_backup_json,
    export_backup,
    import_backup,
    merge_items,
    merge_review_logs,
    merge_session_aggregates,
    merge_settings,
    parse_backup_json,
)
from kana_srs.schemas import BackupItem, BackupPayload, ReviewLogEntry, SessionAggregate, StudySettings
from kana_srs.sm2.constants import MS_PER_DAY
from kana_srs.sm2.database import ProgressStore


def _backup_item(item_id, last_review_at=None, repetitions=0):
    return BackupItem(
        id=item_id,
        symbol_id=item_id.replace("card_", ""),
        ease_factor=2.5,
        interval=1 if last_review_at else 0,
        repetitions=repetitions,
        next_review_at=0,
        last_review_at=last_review_at,
    )


@pytest.fixture
def populated_store(store, fresh_items, reviewed, noon):
    items = list(fresh_items)
    items[0] = reviewed(items[0], noon - MS_PER_DAY, noon + 5 * MS_PER_DAY, repetitions=2, interval=6)
    store.save_items(items)
    store.save_settings(StudySettings(daily_new_cards=8))
    store.append_review_log(ReviewLogEntry(item_id=items[0].id, timestamp=noon - MS_PER_DAY, quality=4))
    store.upsert_session_aggregate(SessionAggregate(date="2024-03-04", cards_reviewed=1, correct_count=1))
    return store


def test_export_uses_camel_case_keys(populated_store, noon):
    text = dump_backup_json(export_backup(populated_store, noon))
    data = json.loads(text)

    assert set(data) == {
        "items", "reviewLog", "sessionAggregates", "settings", "backupVersion", "lastModified"
    }
    assert data["backupVersion"] == BACKUP_VERSION
    assert data["lastModified"] == noon
    assert data["items"][0]["symbolId"] == "a"
    assert data["items"][0]["lastReviewAt"] == noon - MS_PER_DAY
    assert data["reviewLog"][0]["itemId"] == "card_a"
    assert data["settings"]["dailyNewCards"] == 8


def test_export_then_import_into_empty_store(populated_store, tmp_path, noon):
    text = dump_backup_json(export_backup(populated_store, noon))
    target = ProgressStore(f"sqlite:///{tmp_path / 'target.db'}")
    target.init_db()
    try:
        import_backup(target, text, noon + 1000)

        assert target.get_items() == populated_store.get_items()
        assert len(target.get_review_log()) == 1
        assert target.get_session_aggregates()[0].date == "2024-03-04"
        settings = target.get_settings()
        assert settings.daily_new_cards == 8
        assert settings.last_backup_time == noon + 1000
    finally:
        target.dispose()


def test_import_accepts_legacy_keys(store, noon):
    legacy = {
        "cards": [{
            "id": "card_ka",
            "kanaId": "ka",
            "easeFactor": 2.6,
            "interval": 6,
            "repetitions": 2,
            "nextReview": noon + 6 * MS_PER_DAY,
            "lastReview": noon,
            "lapses": 1,
        }],
        "reviews": [{"cardId": "card_ka", "timestamp": noon, "quality": 4, "timeSpent": 1200}],
        "sessions": [{"date": "Tue Mar 05 2024", "cardsReviewed": 3, "correctCount": 2, "averageTime": 1.5}],
        "settings": {"dailyNewCards": 7},
        "syncVersion": 1,
    }

    import_backup(store, legacy, noon)

    [item] = store.get_items()
    assert item.symbol_id == "ka"
    assert item.lapse_count == 1
    assert item.last_review_at == noon
    assert store.get_review_log()[0].time_spent_ms == 1200
    assert store.get_session_aggregates()[0].date == "2024-03-05"
    assert store.get_settings().daily_new_cards == 7


@pytest.mark.parametrize("text", [
    "not json",
    "[1, 2, 3]",
    json.dumps({"items": []}),
    json.dumps({"items": [], "backupVersion": 0}),
    json.dumps({"items": [], "backupVersion": BACKUP_VERSION + 1}),
    json.dumps({"items": "oops", "backupVersion": 1}),
    json.dumps({"items": [{"id": "card_a"}], "backupVersion": 1}),
    json.dumps({"items": [{
        "id": "card_ka", "symbolId": "ka", "easeFactor": 2.5, "interval": 0,
        "repetitions": 2, "nextReviewAt": 0, "lastReviewAt": 1,
    }], "backupVersion": 1}),
    json.dumps({"items": [{
        "id": "card_ka", "symbolId": "ka", "easeFactor": 2.5, "interval": 6,
        "repetitions": 2, "nextReviewAt": 0, "lastReviewAt": None,
    }], "backupVersion": 1}),
])
def test_invalid_backups_are_rejected_without_writes(populated_store, text, noon):
    before_items = populated_store.get_items()
    before_log = populated_store.get_review_log()

    with pytest.raises(InvalidBackupError):
        import_backup(populated_store, text, noon)

    assert populated_store.get_items() == before_items
    assert len(populated_store.get_review_log()) == len(before_log)
    assert populated_store.get_settings().last_backup_time is None


def test_parse_backup_json_returns_payload():
    payload = parse_backup_json(json.dumps({"backupVersion": 1}))
    assert isinstance(payload, BackupPayload)
    assert payload.items == []


def test_merge_items_prefers_later_review_and_keeps_local_on_tie(noon):
    local = [_backup_item("card_a", noon), _backup_item("card_i", noon, repetitions=1)]
    remote = [
        _backup_item("card_a", noon + 1, repetitions=5),
        _backup_item("card_i", noon, repetitions=9),
        _backup_item("card_u"),
    ]

    merged = {item.id: item for item in merge_items(local, remote)}

    assert merged["card_a"].repetitions == 5
    assert merged["card_i"].repetitions == 1
    assert "card_u" in merged


def test_merge_items_with_empty_local_is_identity(noon):
    remote = [_backup_item("card_a", noon), _backup_item("card_i")]
    assert merge_items([], remote) == remote


def test_merge_review_logs_deduplicates_and_sorts(noon):
    local = [ReviewLogEntry(item_id="card_a", timestamp=noon + 5, quality=4)]
    remote = [
        ReviewLogEntry(item_id="card_a", timestamp=noon + 5, quality=4),
        ReviewLogEntry(item_id="card_i", timestamp=noon + 5, quality=2),
        ReviewLogEntry(item_id="card_a", timestamp=noon, quality=5),
    ]

    merged = merge_review_logs(local, remote)

    assert [(e.item_id, e.timestamp) for e in merged] == [
        ("card_a", noon), ("card_a", noon + 5), ("card_i", noon + 5)
    ]


def test_merge_session_aggregates_keeps_larger_day():
    local = [
        SessionAggregate(date="2024-03-05", cards_reviewed=10),
        SessionAggregate(date="2024-03-03", cards_reviewed=2),
    ]
    remote = [
        SessionAggregate(date="2024-03-05T07:00:00", cards_reviewed=4),
        SessionAggregate(date="2024-03-03", cards_reviewed=6),
        SessionAggregate(date="2024-03-01", cards_reviewed=1),
    ]

    merged = merge_session_aggregates(local, remote)

    assert [(a.date, a.cards_reviewed) for a in merged] == [
        ("2024-03-01", 1), ("2024-03-03", 6), ("2024-03-05", 10)
    ]


def test_merge_settings_prefers_newer_side():
    local = BackupPayload(
        settings=StudySettings(daily_new_cards=5, show_romaji=False),
        backup_version=1,
        last_modified=100,
    )
    remote = BackupPayload(
        settings=StudySettings(daily_new_cards=15),
        backup_version=1,
        last_modified=200,
    )

    newer_remote = merge_settings(local, remote)
    newer_local = merge_settings(local, remote.model_copy(update={"last_modified": 50}))

    assert newer_remote.daily_new_cards == 15
    assert newer_remote.show_romaji is False
    assert newer_local.daily_new_cards == 5
    assert newer_local.show_romaji is False
