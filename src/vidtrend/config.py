"""Configuration loading via environment variables with sane defaults."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _default_input_path() -> str:
    return os.getenv(
        "VIDEO_STATS_PATH",
        os.path.join(os.getenv("DATA_DIR", "./data"), "raw", "videos-stats.csv"),
    )


@dataclass(frozen=True)
class AppConfig:
    data_dir: str = field(default_factory=lambda: os.getenv("DATA_DIR", "./data"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    video_stats_path: str = field(default_factory=_default_input_path)


def get_config() -> AppConfig:
    """Return loaded app configuration."""
    return AppConfig()
