"""Configuration helpers for the flashcard study tool."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_DATABASE_PATH = Path("data/flashcards.sqlite")
DEFAULT_COLLECTION = "flashcards"
DEFAULT_EXPORT_DIR = Path(".")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(slots=True)
class Settings:
    """Runtime settings with environment overrides."""

    database_path: Path = DEFAULT_DATABASE_PATH
    collection: str = DEFAULT_COLLECTION
    export_dir: Path = DEFAULT_EXPORT_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls) -> "Settings":
        """Construct settings from environment variables when available."""

        return cls(
            database_path=Path(
                os.environ.get("FLASHCARDS_DATABASE_PATH", DEFAULT_DATABASE_PATH.as_posix())
            ),
            collection=os.environ.get("FLASHCARDS_COLLECTION", DEFAULT_COLLECTION),
            export_dir=Path(
                os.environ.get("FLASHCARDS_EXPORT_DIR", DEFAULT_EXPORT_DIR.as_posix())
            ),
            log_level=os.environ.get("FLASHCARDS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


__all__ = ["Settings"]
