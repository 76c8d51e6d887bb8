"""Dataclasses describing cards and study payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render an instant the way browsers do (``2024-05-01T09:30:00.000Z``)."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 instant; naive values are taken as UTC."""

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class Card:
    id: str
    front: str
    back: str
    next_review: datetime
    interval: int = 1
    repetitions: int = 0

    def is_due(self, now: datetime) -> bool:
        return self.next_review <= now

    @classmethod
    def from_dict(cls, payload: dict) -> "Card":
        return cls(
            id=payload["id"],
            front=payload["front"],
            back=payload["back"],
            next_review=parse_timestamp(payload["nextReview"]),
            interval=int(payload["interval"]),
            repetitions=int(payload["repetitions"]),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "front": self.front,
            "back": self.back,
            "nextReview": format_timestamp(self.next_review),
            "interval": self.interval,
            "repetitions": self.repetitions,
        }


@dataclass(slots=True, frozen=True)
class GradeResult:
    card: Card
    was_correct: bool


@dataclass(slots=True)
class StudyStatus:
    total_cards: int
    due_cards: int
    position: int
    current_card: Optional[Card] = None

    @property
    def idle(self) -> bool:
        return self.current_card is None


__all__ = [
    "Card",
    "GradeResult",
    "StudyStatus",
    "format_timestamp",
    "parse_timestamp",
    "utcnow",
]
