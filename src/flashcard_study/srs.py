"""Simple spaced repetition scheduling helpers."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from .evaluation import answers_match
from .schemas import Card, GradeResult


logger = logging.getLogger(__name__)

DAY = timedelta(days=1)
SECOND_INTERVAL_DAYS = 6


def next_interval(repetitions: int, previous_interval: int) -> int:
    """Interval in days after a correct answer bringing the streak to ``repetitions``."""

    if repetitions == 1:
        return 1
    if repetitions == 2:
        return SECOND_INTERVAL_DAYS
    # times 2.5, halves rounded up (2.5 -> 3, 37.5 -> 38), kept in integers
    return max(1, (previous_interval * 5 + 1) // 2)


def due_after(now: datetime, days: int) -> datetime:
    try:
        return now + timedelta(days=days)
    except OverflowError:
        return datetime.max.replace(tzinfo=timezone.utc if now.tzinfo else None)


def grade_and_reschedule(card: Card, raw_answer: str, now: datetime) -> GradeResult:
    """Grade one answer and return the rescheduled card."""

    if not answers_match(raw_answer, card.back):
        logger.debug("Lapse on card %s", card.id)
        updated = replace(card, repetitions=0, interval=1, next_review=due_after(now, 1))
        return GradeResult(card=updated, was_correct=False)

    repetitions = card.repetitions + 1
    interval = next_interval(repetitions, card.interval)
    updated = replace(
        card,
        repetitions=repetitions,
        interval=interval,
        next_review=due_after(now, interval),
    )
    logger.debug("Card %s correct, next review in %d day(s)", card.id, interval)
    return GradeResult(card=updated, was_correct=True)


__all__ = ["DAY", "grade_and_reschedule", "next_interval", "due_after"]
