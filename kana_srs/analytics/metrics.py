"""
Metric computations for the stats dashboard.
"""

from __future__ import annotations

from datetime import date, timedelta

import pandas as pd


def recent_sessions(sessions_df: pd.DataFrame, count: int) -> pd.DataFrame:
    """
    The most recent `count` stored days.
    """
    if sessions_df.empty:
        return sessions_df
    return sessions_df.tail(count)


def compute_total_reviewed(sessions_df: pd.DataFrame) -> int:
    if sessions_df.empty:
        return 0
    return int(sessions_df["cards_reviewed"].sum())


def compute_average_accuracy(sessions_df: pd.DataFrame) -> float:
    """
    Mean of per-day accuracy, in percent. Days with no reviews count as 0.
    """
    if sessions_df.empty:
        return 0.0
    reviewed = sessions_df["cards_reviewed"].astype("float64")
    per_day = (sessions_df["correct_count"] / reviewed).where(reviewed > 0, 0.0)
    return float(per_day.mean() * 100)


def build_activity_index(today: date, days: int) -> pd.DatetimeIndex:
    """
    Dense local-day index ending today.
    """
    return pd.date_range(end=pd.Timestamp(today), periods=days, freq="D")


def compute_weekly_activity(
    sessions_df: pd.DataFrame,
    today: date,
    days: int = 7
) -> pd.Series:
    """
    Whether a study record exists for each of the last `days` local days.
    """
    day_index = build_activity_index(today, days)
    if sessions_df.empty:
        return pd.Series(False, index=day_index, dtype="bool")
    return pd.Series(day_index.isin(sessions_df["day"]), index=day_index, dtype="bool")


def compute_study_streak(sessions_df: pd.DataFrame, today: date) -> int:
    """
    Consecutive studied days ending today, or yesterday if today is still open.
    """
    if sessions_df.empty:
        return 0

    studied = {ts.date() for ts in sessions_df["day"]}
    cursor = today if today in studied else today - timedelta(days=1)
    streak = 0
    while cursor in studied:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def compute_daily_reviewed(sessions_df: pd.DataFrame) -> pd.Series:
    """
    Cards reviewed per stored day.
    """
    if sessions_df.empty:
        return pd.Series(dtype="int64")
    return sessions_df.set_index("day")["cards_reviewed"].astype("int64")
