from datetime import date

import pandas as pd
import pytest

from kana_srs.analytics import ProgressSummary, build_stats_dashboard
from kana_srs.analytics.metrics import compute_study_streak
from kana_srs.analytics.queries import aggregates_to_df, load_session_aggregates_df
from kana_srs.schemas import SessionAggregate

TODAY = date(2024, 3, 5)


def _progress():
    return ProgressSummary(new=90, learning=5, review=5, mastered=4, total=104, due_today=20)


def _aggregates():
    return [
        SessionAggregate(date="2024-03-05", cards_reviewed=10, correct_count=8, average_time=2.0),
        SessionAggregate(date="2024-03-02", cards_reviewed=4, correct_count=2, average_time=3.0),
        SessionAggregate(date="2024-03-04T09:00:00", cards_reviewed=5, correct_count=5, average_time=1.0),
    ]


def test_aggregates_to_df_sorts_and_normalizes_dates():
    df = aggregates_to_df(_aggregates())

    assert list(df["date"]) == ["2024-03-02", "2024-03-04", "2024-03-05"]
    assert df["day"].dtype.kind == "M"


def test_aggregates_to_df_empty_has_columns():
    df = aggregates_to_df([])
    assert df.empty
    assert "cards_reviewed" in df.columns


def test_stats_dashboard_metrics():
    stats = build_stats_dashboard(_aggregates(), _progress(), TODAY)

    assert stats.total_reviewed_recent == 19
    assert stats.average_accuracy_recent == pytest.approx((0.5 + 1.0 + 0.8) / 3 * 100)
    assert stats.study_streak_days == 2
    assert stats.progress.mastery_percent == pytest.approx(4 / 104 * 100)
    assert list(stats.daily_reviewed) == [4, 5, 10]


def test_weekly_activity_covers_last_seven_days():
    stats = build_stats_dashboard(_aggregates(), _progress(), TODAY)
    activity = stats.weekly_activity

    assert len(activity) == 7
    assert activity.index[-1] == pd.Timestamp(TODAY)
    assert activity.index[0] == pd.Timestamp(date(2024, 2, 28))
    assert list(activity) == [False, False, False, True, False, True, True]


def test_recent_window_uses_last_seven_days_of_records():
    aggregates = [
        SessionAggregate(date=f"2024-02-{day:02d}", cards_reviewed=day, correct_count=0)
        for day in range(1, 11)
    ]

    stats = build_stats_dashboard(aggregates, _progress(), TODAY)

    assert stats.total_reviewed_recent == sum(range(4, 11))
    assert stats.average_accuracy_recent == 0.0
    assert stats.study_streak_days == 0


def test_streak_counts_from_yesterday_when_today_is_open():
    df = aggregates_to_df([
        SessionAggregate(date="2024-03-04", cards_reviewed=1),
        SessionAggregate(date="2024-03-03", cards_reviewed=1),
        SessionAggregate(date="2024-03-01", cards_reviewed=1),
    ])

    assert compute_study_streak(df, TODAY) == 2


def test_empty_dashboard():
    stats = build_stats_dashboard([], _progress(), TODAY)

    assert stats.total_reviewed_recent == 0
    assert stats.average_accuracy_recent == 0.0
    assert stats.study_streak_days == 0
    assert not stats.weekly_activity.any()
    assert stats.daily_reviewed.empty


def test_load_session_aggregates_df_reads_store(store):
    for aggregate in _aggregates():
        store.upsert_session_aggregate(aggregate)

    df = load_session_aggregates_df(store)

    assert list(df["cards_reviewed"]) == [4, 5, 10]
