"""Flashcard study package: spaced-repetition scheduling and study sessions."""

from .app import FlashcardApp
from .config import Settings
from .schemas import Card, GradeResult, StudyStatus
from .selection import StudySession, due_cards
from .srs import grade_and_reschedule, next_interval

__all__ = [
    "Card",
    "FlashcardApp",
    "GradeResult",
    "Settings",
    "StudySession",
    "StudyStatus",
    "due_cards",
    "grade_and_reschedule",
    "next_interval",
]
