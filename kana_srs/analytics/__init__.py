"""
Analytics package exports.
"""

from kana_srs.analytics.constants import STATUS_LABELS, STATUS_ORDER
from kana_srs.analytics.progress import build_progress, classify_item, is_mastered, items_by_status
from kana_srs.analytics.service import build_stats_dashboard
from kana_srs.analytics.types import ItemStatus, ProgressSummary, StatsDashboardData

__all__ = [
    "STATUS_LABELS",
    "STATUS_ORDER",
    "build_progress",
    "build_stats_dashboard",
    "classify_item",
    "is_mastered",
    "items_by_status",
    "ItemStatus",
    "ProgressSummary",
    "StatsDashboardData",
]
