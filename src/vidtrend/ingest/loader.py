"""Load the video statistics CSV into a typed dataframe."""
from __future__ import annotations

import logging
from typing import Dict, List

import numpy as np
import pandas as pd

from ..errors import LoadError

log = logging.getLogger(__name__)

# Source header -> column name used throughout the pipeline
COLUMN_MAP: Dict[str, str] = {
    "Title": "title",
    "Video ID": "video_id",
    "Published At": "published_at",
    "Keyword": "keyword",
    "Likes": "likes",
    "Comments": "comments",
    "Views": "views",
}

COUNT_COLUMNS: List[str] = ["likes", "comments", "views"]

# Blank fields are missing in every column; these markers only in count columns
MISSING_MARKERS = ("NA", "NaN")

# Written by R's write.csv / pandas' to_csv when the row index is exported
_INDEX_HEADERS = ("", "Unnamed: 0")


def _validate_header(columns: List[str]) -> List[str]:
    """Return the header with a leading index column removed, or raise LoadError."""
    if columns and columns[0] in _INDEX_HEADERS:
        columns = columns[1:]
    missing = [name for name in COLUMN_MAP if name not in columns]
    unexpected = [name for name in columns if name not in COLUMN_MAP]
    if missing or unexpected:
        raise LoadError(
            f"Header mismatch: missing={missing or '[]'} unexpected={unexpected or '[]'}"
        )
    return columns


def _parse_counts(series: pd.Series) -> pd.Series:
    name = series.name
    series = series.mask(series.isin(MISSING_MARKERS))
    numbers = pd.to_numeric(series, errors="coerce")
    bad = series.notna() & numbers.isna()
    if bad.any():
        raise LoadError(f"Non-numeric values in {name!r}: {series[bad].head(3).tolist()}")
    present = numbers.dropna()
    if not np.isfinite(present).all():
        raise LoadError(f"Non-finite values in {name!r}")
    if (present < 0).any():
        raise LoadError(f"Negative values in {name!r}")
    if (present != present.round()).any():
        raise LoadError(f"Fractional values in {name!r}")
    return numbers.astype("Int64")


def _parse_published_at(series: pd.Series) -> pd.Series:
    dates = pd.to_datetime(series.str.slice(0, 10), format="%Y-%m-%d", errors="coerce")
    bad = dates.isna()
    if bad.any():
        raise LoadError(f"Unparseable 'Published At' values: {series[bad].head(3).tolist()}")
    return dates


def load_video_stats(path: str) -> pd.DataFrame:
    """
    Read the comma-separated video statistics file at ``path``.

    Returns a dataframe with snake_case columns (see ``COLUMN_MAP``), counts as
    nullable integers and ``published_at`` as a date. Raises ``LoadError`` when
    the file cannot be read or its header or values do not match the schema.
    """
    try:
        raw = pd.read_csv(
            path,
            sep=",",
            skipinitialspace=True,
            dtype=str,
            keep_default_na=False,
        )
    except FileNotFoundError as exc:
        log.error("File %s was not found", path)
        raise LoadError(f"Input file not found: {path}") from exc
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        log.error("Error reading CSV file %s: %s", path, exc)
        raise LoadError(f"Could not read {path}: {exc}") from exc

    raw.columns = [str(c).strip() for c in raw.columns]
    header = _validate_header(list(raw.columns))
    raw = raw[header].copy()
    for col in raw.columns:
        stripped = raw[col].str.strip()
        raw[col] = stripped.where(stripped != "")
    raw = raw.rename(columns=COLUMN_MAP)

    df = pd.DataFrame(
        {
            "title": raw["title"].fillna("").astype(str),
            "video_id": raw["video_id"].fillna("").astype(str),
            "published_at": _parse_published_at(raw["published_at"]),
            "keyword": raw["keyword"].fillna("").astype(str),
        }
    )
    for col in COUNT_COLUMNS:
        df[col] = _parse_counts(raw[col])

    log.info("Loaded %d rows from %s", len(df), path)
    return df
