"""
Service layer to assemble the stats dashboard.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from kana_srs.analytics.constants import ACTIVITY_WINDOW_DAYS, RECENT_SESSION_COUNT
from kana_srs.analytics.metrics import (
    compute_average_accuracy,
    compute_daily_reviewed,
    compute_study_streak,
    compute_total_reviewed,
    compute_weekly_activity,
    recent_sessions,
)
from kana_srs.analytics.queries import aggregates_to_df
from kana_srs.analytics.types import ProgressSummary, StatsDashboardData
from kana_srs.schemas import SessionAggregate


def build_stats_dashboard(
    aggregates: list[SessionAggregate],
    progress: ProgressSummary,
    today: Optional[date] = None
) -> StatsDashboardData:
    """
    Build all KPI values and series needed by the stats page.
    """
    if today is None:
        today = date.today()

    sessions_df = aggregates_to_df(aggregates)
    recent_df = recent_sessions(sessions_df, RECENT_SESSION_COUNT)

    return StatsDashboardData(
        progress=progress,
        total_reviewed_recent=compute_total_reviewed(recent_df),
        average_accuracy_recent=compute_average_accuracy(recent_df),
        study_streak_days=compute_study_streak(sessions_df, today),
        weekly_activity=compute_weekly_activity(sessions_df, today, ACTIVITY_WINDOW_DAYS),
        daily_reviewed=compute_daily_reviewed(sessions_df),
    )
