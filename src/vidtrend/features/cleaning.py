"""Missing-value detection and row removal."""
from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from ..ingest.loader import COUNT_COLUMNS

log = logging.getLogger(__name__)


def missing_counts(df: pd.DataFrame) -> pd.Series:
    """Number of missing values per column."""
    return df.isna().sum()


def clean(df: pd.DataFrame, required: Sequence[str] = COUNT_COLUMNS) -> pd.DataFrame:
    """
    Drop every row with a missing value in any of ``required``.

    Counts cannot be imputed from the other fields, so incomplete rows are
    removed rather than filled. Returns a new frame with a fresh index; the
    input is left untouched.
    """
    cleaned = df.dropna(subset=list(required)).reset_index(drop=True)
    dropped = len(df) - len(cleaned)
    if dropped:
        log.info("Dropped %d of %d rows with missing %s", dropped, len(df), ", ".join(required))
    else:
        log.debug("No rows with missing %s", ", ".join(required))
    return cleaned
