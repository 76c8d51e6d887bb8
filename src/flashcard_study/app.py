"""Flashcard application wiring the collection, the session and the scheduler."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .collection import CardCollection, parse_cards
from .config import Settings
from .db import SQLiteStore
from .schemas import Card, GradeResult, StudyStatus, utcnow
from .selection import StudySession


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def export_filename(now: datetime) -> str:
    return f"flashcards-{now.date().isoformat()}.json"


class FlashcardApp:
    """Core orchestration class behind the command line."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.settings = settings or Settings.load()
        self.clock = clock or utcnow
        self.store = SQLiteStore(self.settings.database_path)
        self.collection = CardCollection.load(self.store, self.settings.collection)
        self.session = StudySession()
        self.collection.subscribe(self.session.restart)

    # ------------------------------------------------------------------
    # Study loop

    @property
    def cards(self) -> tuple[Card, ...]:
        return self.collection.cards

    def study_status(self) -> StudyStatus:
        return self.session.status(self.collection.cards, self.clock())

    def current_card(self) -> Optional[Card]:
        return self.session.current_card(self.collection.cards, self.clock())

    def submit_answer(self, raw_answer: str) -> Optional[GradeResult]:
        """Grade the current card and store the result; ``None`` when nothing is due."""

        now = self.clock()
        result = self.session.submit(self.collection.cards, raw_answer, now)
        if result is None:
            logger.info("Answer submitted with no cards due")
            return None
        self.collection.update_card(result.card, now)
        return result

    # ------------------------------------------------------------------
    # Card management

    def add_card(self, front: str, back: str) -> Card:
        return self.collection.add_card(front, back, self.clock())

    def reset_progress(self) -> str:
        self.collection.reset_progress(self.clock())
        return "All learning progress has been reset"

    def remove_all_cards(self) -> str:
        self.collection.remove_all(self.clock())
        return "All cards have been removed"

    def export_cards(self, path: Optional[Path] = None) -> Path:
        target = Path(path) if path else self.settings.export_dir / export_filename(self.clock())
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.collection.export_json(), encoding="utf-8")
        logger.info("Exported %d card(s) to %s", len(self.collection), target)
        return target

    def read_import(self, path: Path) -> list[Card]:
        """Parse an export file without touching the collection."""

        return parse_cards(Path(path).read_text(encoding="utf-8"))

    def import_cards(self, cards: list[Card]) -> str:
        self.collection.replace_all(cards, self.clock())
        return f"Successfully imported {len(cards)} cards"


__all__ = ["FlashcardApp", "export_filename"]
