import datetime as dt

import pytest

from kana_srs.dates import local_date_key, normalize_date_key, start_of_local_day_ms


def test_local_date_key_from_ms(noon):
    assert local_date_key(noon) == "2024-03-05"


def test_start_of_local_day(noon):
    midnight = int(dt.datetime(2024, 3, 5).timestamp() * 1000)
    assert start_of_local_day_ms(noon) == midnight
    assert start_of_local_day_ms(midnight) == midnight


@pytest.mark.parametrize("stored", [
    "2024-03-05",
    "2024-03-05T10:30:00",
    "2024-03-05 23:59:59",
    "Tue Mar 05 2024",
])
def test_normalize_date_key_formats(stored):
    assert normalize_date_key(stored) == "2024-03-05"


def test_normalize_date_key_converts_offsets_to_local():
    stored = "2024-03-05T12:00:00Z"
    expected = dt.datetime(2024, 3, 5, 12, tzinfo=dt.timezone.utc).astimezone().strftime("%Y-%m-%d")
    assert normalize_date_key(stored) == expected


@pytest.mark.parametrize("stored", ["not a date", ""])
def test_unparseable_dates_are_returned_unchanged(stored):
    assert normalize_date_key(stored) == stored
