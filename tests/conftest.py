import datetime as dt
from dataclasses import replace

import pytest

from kana_srs.catalog_repo import get_catalog
from kana_srs.sm2.constants import MS_PER_DAY
from kana_srs.sm2.database import ProgressStore
from kana_srs.sm2.item_state import initialize_item


def local_ms(year, month, day, hour=12, minute=0):
    """Epoch ms for a local wall-clock time."""
    return int(dt.datetime(year, month, day, hour, minute).timestamp() * 1000)


@pytest.fixture
def noon():
    """Local noon on a fixed day, far from any midnight boundary."""
    return local_ms(2024, 3, 5)


@pytest.fixture
def catalog():
    return get_catalog()


@pytest.fixture
def fresh_items(catalog, noon):
    """One never-reviewed item per catalog symbol, created a week ago."""
    return [initialize_item(symbol.id, noon - 7 * MS_PER_DAY) for symbol in catalog]


@pytest.fixture
def reviewed():
    """Factory: copy of an item marked as reviewed with the given state."""
    def _reviewed(item, last_review_at, next_review_at, repetitions=1, interval=1,
                  first_learned_at=None, **extra):
        return replace(
            item,
            last_review_at=last_review_at,
            next_review_at=next_review_at,
            repetitions=repetitions,
            interval=interval,
            first_learned_at=first_learned_at if first_learned_at is not None else last_review_at,
            **extra,
        )
    return _reviewed


@pytest.fixture
def store(tmp_path):
    progress_store = ProgressStore(f"sqlite:///{tmp_path / 'progress.db'}")
    progress_store.init_db()
    yield progress_store
    progress_store.dispose()
