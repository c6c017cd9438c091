"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

import pandas as pd

from kana_srs.dates import normalize_date_key
from kana_srs.schemas import SessionAggregate
from kana_srs.sm2.gateway import ProgressGateway

AGGREGATE_COLUMNS = ["date", "day", "cards_reviewed", "correct_count", "average_time"]


def aggregates_to_df(aggregates: list[SessionAggregate]) -> pd.DataFrame:
    """
    Daily aggregates as a dataframe sorted by local day.
    """
    if not aggregates:
        return pd.DataFrame(columns=AGGREGATE_COLUMNS)

    df = pd.DataFrame([agg.model_dump() for agg in aggregates])
    df["date"] = df["date"].map(normalize_date_key)
    df["day"] = pd.to_datetime(df["date"], format="%Y-%m-%d", errors="coerce")
    df = df.dropna(subset=["day"])
    df = df.sort_values("day").reset_index(drop=True)
    return df[AGGREGATE_COLUMNS]


def load_session_aggregates_df(store: ProgressGateway) -> pd.DataFrame:
    """
    Load stored daily aggregates into a dataframe.
    """
    return aggregates_to_df(store.get_session_aggregates())
