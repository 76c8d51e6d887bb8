"""Due-card selection and rotation through a study session."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from .schemas import Card, GradeResult, StudyStatus
from .srs import grade_and_reschedule


logger = logging.getLogger(__name__)


def due_cards(cards: Sequence[Card], now: datetime) -> List[Card]:
    """Cards with ``next_review <= now`` in collection order."""

    return [card for card in cards if card.is_due(now)]


class StudySession:
    """Cursor over the due cards of a collection.

    The session never writes cards itself: ``submit`` hands the graded card
    back and the owner of the collection stores it. Whenever the owner swaps
    in a different collection (add, import, reset, remove) it must call
    ``restart``.
    """

    def __init__(self) -> None:
        self.index = 0

    def restart(self) -> None:
        self.index = 0

    def current_card(self, cards: Sequence[Card], now: datetime) -> Optional[Card]:
        due = due_cards(cards, now)
        if not due:
            return None
        if self.index >= len(due):
            self.index = 0
        return due[self.index]

    def submit(
        self,
        cards: Sequence[Card],
        raw_answer: str,
        now: datetime,
    ) -> Optional[GradeResult]:
        """Grade the current card, then step the cursor over the recomputed due set.

        The graded card drops out of the due set before the cursor moves, so
        with due cards ``[A, B, C]`` answering A lands on C; B comes up after
        the wrap.
        """
        card = self.current_card(cards, now)
        if card is None:
            return None

        result = grade_and_reschedule(card, raw_answer, now)
        updated = [result.card if item.id == card.id else item for item in cards]
        remaining = due_cards(updated, now)

        next_index = self.index + 1
        self.index = 0 if next_index >= len(remaining) else next_index
        logger.debug(
            "Graded %s (correct=%s); %d due, cursor at %d",
            card.id,
            result.was_correct,
            len(remaining),
            self.index,
        )
        return result

    def status(self, cards: Sequence[Card], now: datetime) -> StudyStatus:
        current = self.current_card(cards, now)
        return StudyStatus(
            total_cards=len(cards),
            due_cards=len(due_cards(cards, now)),
            position=self.index,
            current_card=current,
        )


__all__ = ["StudySession", "due_cards"]
