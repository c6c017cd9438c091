"""
Types for progress summaries and stats dashboards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


ItemStatus = Literal["new", "learning", "review", "mastered"]


@dataclass(frozen=True)
class ProgressSummary:
    """
    Status counts over the in-scope items plus today's workload.
    """
    new: int
    learning: int
    review: int
    mastered: int
    total: int
    due_today: int

    @property
    def mastery_percent(self) -> float:
        return (self.mastered / self.total) * 100 if self.total else 0.0


@dataclass(frozen=True)
class StatsDashboardData:
    """
    Precomputed metrics and series for the stats page.
    """
    progress: ProgressSummary
    total_reviewed_recent: int
    average_accuracy_recent: float  # percent, mean of per-day accuracy
    study_streak_days: int
    weekly_activity: pd.Series  # bool, indexed by local day, oldest first
    daily_reviewed: pd.Series  # cards reviewed per stored day
