"""End-to-end run: load, clean, derive, aggregate and chart."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import pandas as pd

from ..analysis.aggregate import YEAR_KEYWORD, aggregate, comments_by_year_keyword, title_length_by_year_keyword
from ..config import get_config
from ..features.cleaning import clean
from ..features.feature_engineering import derive
from ..ingest.loader import load_video_stats
from ..utils.io import write_csv
from ..utils.paths import get_paths
from ..viz.charts import build_figures, save_figure

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    table: pd.DataFrame
    comments_by_group: Dict[Tuple, float]
    title_length_by_group: Dict[Tuple, float]
    dropped_rows: int
    outputs: Dict[str, str] = field(default_factory=dict)


def prepare(path: str) -> Tuple[pd.DataFrame, int]:
    """Load, clean and derive. Returns the derived table and the number of dropped rows."""
    raw = load_video_stats(path)
    cleaned = clean(raw)
    return derive(cleaned), len(raw) - len(cleaned)


def run_pipeline(
    input_path: Optional[str] = None,
    output_dir: Optional[str] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """
    Run the whole analysis on ``input_path`` (default: configured input file).

    Unless ``dry_run`` is set, summary tables are written as CSV to
    ``<output_dir>/processed`` and charts as HTML to ``<output_dir>/figures``.
    """
    cfg = get_config()
    path = input_path or cfg.video_stats_path
    log.info("Running analysis on %s", path)

    table, dropped = prepare(path)
    comments = aggregate(table, YEAR_KEYWORD, "comments", "sum")
    title_lengths = aggregate(table, YEAR_KEYWORD, "title_length", "mean")

    outputs: Dict[str, str] = {}
    if dry_run:
        log.info("Dry run: %d rows, %d groups; nothing written", len(table), len(comments))
    else:
        paths = get_paths(output_dir)
        outputs["comments_by_year_keyword"] = write_csv(
            comments_by_year_keyword(table), os.path.join(paths.processed, "comments_by_year_keyword.csv")
        )
        outputs["title_length_by_year_keyword"] = write_csv(
            title_length_by_year_keyword(table), os.path.join(paths.processed, "title_length_by_year_keyword.csv")
        )
        for name, fig in build_figures(table).items():
            outputs[name] = save_figure(fig, name, paths.figures)
        log.info("Analysis complete. Wrote %d files under %s", len(outputs), paths.base)

    return PipelineResult(
        table=table,
        comments_by_group=comments,
        title_length_by_group=title_lengths,
        dropped_rows=dropped,
        outputs=outputs,
    )
