"""Structured logging configuration."""
from __future__ import annotations

import logging
import sys
from .config import get_config


def configure_logging() -> None:
    cfg = get_config()
    name = cfg.log_level.upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
