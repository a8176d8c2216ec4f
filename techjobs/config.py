"""
Configuration for TechJobs.

Settings come from the environment (optionally seeded from a .env file,
see techjobs.env).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    """Runtime settings."""
    data_file: Optional[Path] = None  # None means the bundled job_data.csv
    log_level: str = "INFO"
    log_dir: Optional[Path] = None  # No file logging when unset

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        data_file = env.get("TECHJOBS_DATA_FILE") or None
        log_dir = env.get("TECHJOBS_LOG_DIR") or None
        log_level = (env.get("TECHJOBS_LOG_LEVEL") or "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"TECHJOBS_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            data_file=Path(data_file) if data_file else None,
            log_level=log_level,
            log_dir=Path(log_dir) if log_dir else None,
        )
