"""
Constants for progress classification and stats dashboards.
"""

from __future__ import annotations

from typing import Final


STATUS_ORDER: Final[list[str]] = ["new", "learning", "review", "mastered"]

STATUS_LABELS: Final[dict[str, str]] = {
    "new": "New",
    "learning": "Learning",
    "review": "Review",
    "mastered": "Mastered",
}

RECENT_SESSION_COUNT: Final[int] = 7
ACTIVITY_WINDOW_DAYS: Final[int] = 7
