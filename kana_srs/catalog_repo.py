"""
Read-only repository for the kana catalog.

Provides the ordered symbol list and scope filtering. The catalog is never
mutated; learning items refer to it by symbol id.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Literal, Optional, Sequence

from kana_srs.kana_data import KANA_ROWS
from kana_srs.sm2.item_state import LearningItem

KanaType = Literal["seion", "dakuon", "handakuon", "yoon"]


@dataclass(frozen=True)
class KanaSymbol:
    """One catalog entry."""
    id: str
    hiragana: str
    katakana: str
    romaji: str
    type: KanaType  # scope tag
    row: str


Catalog = Sequence[KanaSymbol]


@lru_cache(maxsize=1)
def get_catalog() -> tuple[KanaSymbol, ...]:
    """Return the full catalog in teaching order."""
    return tuple(KanaSymbol(*row) for row in KANA_ROWS)


def get_symbol(symbol_id: str, catalog: Optional[Catalog] = None) -> Optional[KanaSymbol]:
    """Look up a symbol by id, or None if it is not in the catalog."""
    for symbol in catalog if catalog is not None else get_catalog():
        if symbol.id == symbol_id:
            return symbol
    return None


def symbol_ids(catalog: Optional[Catalog] = None) -> list[str]:
    """All symbol ids in catalog order."""
    return [s.id for s in (catalog if catalog is not None else get_catalog())]


def eligible_symbol_ids(scope: str, catalog: Optional[Catalog] = None) -> set[str]:
    """
    Symbol ids included by a study scope.

    "seion" keeps the basic symbols only; "all" and "no_katakana" keep the
    whole catalog ("no_katakana" only changes which script is shown).
    """
    catalog = catalog if catalog is not None else get_catalog()
    if scope == "seion":
        return {s.id for s in catalog if s.type == "seion"}
    return {s.id for s in catalog}


def filter_by_scope(
    items: Iterable[LearningItem],
    scope: str,
    catalog: Optional[Catalog] = None
) -> list[LearningItem]:
    """Keep items whose symbol is in scope, preserving order."""
    eligible = eligible_symbol_ids(scope, catalog)
    return [item for item in items if item.symbol_id in eligible]
