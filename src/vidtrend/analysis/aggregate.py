"""Per-group summaries of the derived video table."""
from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

import pandas as pd

log = logging.getLogger(__name__)

REDUCERS = ("sum", "mean", "count")
YEAR_KEYWORD: Tuple[str, str] = ("publication_year", "keyword")


def summarize(
    df: pd.DataFrame,
    group_keys: Sequence[str],
    measure: str,
    reducer: str,
    name: Optional[str] = None,
) -> pd.DataFrame:
    """
    Reduce ``measure`` within each group of ``group_keys``.

    Returns a tidy frame with one row per non-empty group, the key columns
    followed by a value column called ``name`` (default ``"<reducer>_<measure>"``),
    sorted by the keys.
    """
    keys = list(group_keys)
    if not keys:
        raise ValueError("At least one group key is required")
    if reducer not in REDUCERS:
        raise ValueError(f"Unknown reducer {reducer!r}; expected one of {REDUCERS}")
    unknown = [col for col in [*keys, measure] if col not in df.columns]
    if unknown:
        raise ValueError(f"Unknown columns: {unknown}")

    grouped = df.groupby(keys, observed=True, dropna=False, sort=True)[measure]
    if reducer == "count":
        values = grouped.size()
    else:
        values = grouped.agg(reducer).astype("float64")
    out = values.rename(name or f"{reducer}_{measure}").reset_index()
    log.debug("Summarized %s by %s into %d groups", measure, keys, len(out))
    return out


def aggregate(
    df: pd.DataFrame,
    group_keys: Sequence[str],
    measure: str,
    reducer: str,
) -> Dict[Tuple, float]:
    """Map each group-key tuple to the reduced ``measure``, ordered by key."""
    frame = summarize(df, group_keys, measure, reducer, name="_value")
    keys = list(group_keys)
    result: Dict[Tuple, float] = {}
    for row in frame.itertuples(index=False):
        values = tuple(row)
        result[values[: len(keys)]] = float(values[-1])
    return result


def comments_by_year_keyword(df: pd.DataFrame) -> pd.DataFrame:
    """Total comments per publication year and keyword."""
    return summarize(df, YEAR_KEYWORD, "comments", "sum", name="total_comments")


def title_length_by_year_keyword(df: pd.DataFrame) -> pd.DataFrame:
    """Mean title length per publication year and keyword."""
    return summarize(df, YEAR_KEYWORD, "title_length", "mean", name="avg_title_length")


def videos_by_year(df: pd.DataFrame) -> pd.DataFrame:
    return summarize(df, ["publication_year"], "video_id", "count", name="video_count")
