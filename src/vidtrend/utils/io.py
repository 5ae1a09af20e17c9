"""I/O helpers for CSV summaries and safe writes."""
from __future__ import annotations

import os
import pandas as pd


def ensure_dir(path: str) -> None:
    """Create directory if it does not exist."""
    os.makedirs(path, exist_ok=True)


def write_csv(df: pd.DataFrame, path: str) -> str:
    """Write dataframe to CSV at path, creating parent directories."""
    dirpath = os.path.dirname(path) or "."
    ensure_dir(dirpath)
    df.to_csv(path, index=False)
    return path
