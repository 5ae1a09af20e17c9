"""Command-line interface entrypoint."""
from __future__ import annotations

import argparse
import logging
import sys

from .config import get_config
from .errors import LoadError
from .features.cleaning import missing_counts
from .ingest.loader import load_video_stats
from .logging_config import configure_logging
from .pipelines.pipeline import run_pipeline

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="YouTube video statistics trend analysis")
    sub = parser.add_subparsers(dest="command")

    p_run = sub.add_parser("run", help="Run end-to-end analysis")
    p_run.add_argument("--input", type=str, default=None, help="Path to videos-stats CSV")
    p_run.add_argument("--output-dir", type=str, default=None, help="Base directory for outputs")
    p_run.add_argument("--dry-run", action="store_true", help="Compute without writing outputs")

    p_profile = sub.add_parser("profile", help="Show shape, dtypes and missing values of the input")
    p_profile.add_argument("--input", type=str, default=None, help="Path to videos-stats CSV")

    return parser


def _profile(path: str) -> None:
    df = load_video_stats(path)
    print(f"rows={len(df)} columns={len(df.columns)}")
    print(df.dtypes.to_string())
    print(df.describe().to_string())
    print("missing values:")
    print(missing_counts(df).to_string())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    try:
        if args.command == "run":
            result = run_pipeline(input_path=args.input, output_dir=args.output_dir, dry_run=args.dry_run)
            print(f"rows={len(result.table)} dropped={result.dropped_rows} groups={len(result.comments_by_group)}")
        elif args.command == "profile":
            _profile(args.input or get_config().video_stats_path)
        else:
            parser.print_help()
    except LoadError as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
