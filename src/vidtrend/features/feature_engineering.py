"""Derive features from cleaned YouTube video statistics."""
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP

import numpy as np
import pandas as pd

from ..ingest.loader import COUNT_COLUMNS

log = logging.getLogger(__name__)

DERIVED_COLUMNS = ["likes_per_1k", "comments_per_1k", "title_length", "publication_year"]


def round_half_up(value: Decimal, places: int = 2) -> float:
    """Round half away from zero to ``places`` decimals."""
    quantum = Decimal(1).scaleb(-places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def _ratio(count: int, views: int, places: int) -> float:
    if views == 0:
        return np.nan
    # exact quotient; a float quotient can fall either side of a .xx5 boundary
    return round_half_up(Decimal(int(count)) * 1000 / Decimal(int(views)), places)


def per_thousand(counts: pd.Series, views: pd.Series, places: int = 2) -> pd.Series:
    """
    ``round(counts / (views / 1000), places)`` row by row.

    Rows with zero views have no defined rate and get NaN.
    """
    values = [_ratio(c, v, places) for c, v in zip(counts, views)]
    return pd.Series(values, index=counts.index, dtype="float64")


def derive(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``df`` with per-1k ratios, title length and publication year."""
    incomplete = [col for col in COUNT_COLUMNS if df[col].isna().any()]
    if incomplete:
        raise ValueError(f"Missing values in {incomplete}; clean the table before deriving features")

    out = df.copy()
    out["likes_per_1k"] = per_thousand(out["likes"], out["views"])
    out["comments_per_1k"] = per_thousand(out["comments"], out["views"])
    out["title_length"] = out["title"].str.len().astype("int64")
    out["publication_year"] = out["published_at"].dt.strftime("%Y").astype("category")
    out["published_at"] = out["published_at"].dt.normalize()

    zero_views = int((out["views"] == 0).sum())
    if zero_views:
        log.warning("%d rows have zero views; their per-1k ratios are undefined (NaN)", zero_views)
    log.info("Derived %s for %d rows", ", ".join(DERIVED_COLUMNS), len(out))
    return out
