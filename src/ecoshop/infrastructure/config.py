"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def normalize_database_url(raw_url: str) -> str:
    """Fill in the default SQLite file and accept Heroku-style postgres:// URLs."""
    if not raw_url:
        return f"sqlite:///{_DATA_DIR / 'ecoshop.db'}"
    if raw_url.startswith("postgres://"):
        return "postgresql://" + raw_url[len("postgres://"):]
    return raw_url


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "WARNING"
    sqlite_timeout: float = 30.0

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            database_url=normalize_database_url(os.getenv("ECOSHOP_DATABASE_URL", "")),
            log_level=os.getenv("ECOSHOP_LOG_LEVEL", "WARNING").upper(),
            sqlite_timeout=float(os.getenv("ECOSHOP_SQLITE_TIMEOUT", "30")),
        )
