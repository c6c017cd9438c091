"""
Align the stored item collection with the catalog.

Exactly one learning item per catalog symbol: orphans are dropped,
duplicates collapsed, missing items synthesized. Never raises.
"""

from __future__ import annotations

from typing import Optional

from kana_srs.catalog_repo import Catalog, get_catalog, symbol_ids
from kana_srs.logging_config import get_logger
from kana_srs.sm2.item_state import LearningItem, initialize_item, now_ms

logger = get_logger(__name__)


def _prefer(existing: LearningItem, candidate: LearningItem) -> LearningItem:
    """
    Pick which of two items for the same symbol to keep.

    Most recent review wins; on a tie the longer streak wins; otherwise
    the first one seen is kept.
    """
    existing_last = existing.last_review_at or 0
    candidate_last = candidate.last_review_at or 0
    if candidate_last > existing_last:
        return candidate
    if candidate_last == existing_last and candidate.repetitions > existing.repetitions:
        return candidate
    return existing


def normalize_items(
    items: list[LearningItem],
    catalog: Optional[Catalog] = None,
    timestamp: Optional[int] = None
) -> list[LearningItem]:
    """
    Return a collection with exactly one item per catalog symbol.

    Existing items keep their stored order; synthesized items are appended
    in catalog order. Running it twice gives the same result as once.

    Args:
        items: Stored items (may contain orphans or duplicates)
        catalog: Symbol catalog (defaults to the kana catalog)
        timestamp: Creation time for synthesized items (defaults to now)
    """
    catalog = catalog if catalog is not None else get_catalog()
    known_ids = set(symbol_ids(catalog))

    by_symbol: dict[str, LearningItem] = {}
    dropped = 0
    for item in items:
        if item.symbol_id not in known_ids:
            dropped += 1
            continue
        existing = by_symbol.get(item.symbol_id)
        by_symbol[item.symbol_id] = item if existing is None else _prefer(existing, item)

    created = 0
    for symbol in catalog:
        if symbol.id not in by_symbol:
            if timestamp is None:
                timestamp = now_ms()
            by_symbol[symbol.id] = initialize_item(symbol.id, timestamp)
            created += 1

    if dropped or created:
        logger.info("Normalized items: dropped %d orphaned, created %d missing", dropped, created)
    return list(by_symbol.values())


def items_changed(before: list[LearningItem], after: list[LearningItem]) -> bool:
    """True when normalization altered the collection and it should be saved."""
    return before != after
