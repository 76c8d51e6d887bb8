"""SQLite persistence layer for the flashcard collection."""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List


logger = logging.getLogger(__name__)


class SQLiteStore:
    """Keeps each card collection as one JSON array, stored verbatim."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._init()

    def _init(self) -> None:
        with self._connect() as conn:
            conn.executescript(
                """
                PRAGMA journal_mode=WAL;
                CREATE TABLE IF NOT EXISTS collections (
                    name TEXT PRIMARY KEY,
                    cards_json TEXT NOT NULL,
                    updated_at INTEGER NOT NULL
                );
                """
            )

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def load_cards(self, name: str) -> List[dict]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT cards_json FROM collections WHERE name=?",
                (name,),
            ).fetchone()
        if row is None:
            return []
        return json.loads(row["cards_json"])

    def save_cards(self, name: str, cards: List[dict], timestamp: int) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO collections(name,cards_json,updated_at)
                VALUES(?,?,?)
                ON CONFLICT(name) DO UPDATE SET
                    cards_json=excluded.cards_json,
                    updated_at=excluded.updated_at
                """,
                (name, json.dumps(cards, separators=(",", ":"), ensure_ascii=False), timestamp),
            )
        logger.debug("Saved %d card(s) to collection %r", len(cards), name)


__all__ = ["SQLiteStore"]
