"""Centralized path helpers for the data directory."""
from __future__ import annotations

import os
from dataclasses import dataclass
from ..config import get_config


@dataclass(frozen=True)
class DataPaths:
    base: str
    processed: str
    figures: str


def get_paths(base_dir: str | None = None) -> DataPaths:
    cfg = get_config()
    base = os.path.abspath(base_dir or cfg.data_dir)
    return DataPaths(
        base=base,
        processed=os.path.join(base, "processed"),
        figures=os.path.join(base, "figures"),
    )
