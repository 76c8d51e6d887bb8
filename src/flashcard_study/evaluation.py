"""Answer comparison helpers."""

from __future__ import annotations


CORRECT_FEEDBACK = "Correct! 🎉"


def normalize_answer(text: str) -> str:
    return text.strip().casefold()


def answers_match(given: str, expected: str) -> bool:
    """Exact match after trimming and case folding; no partial credit."""

    return normalize_answer(given) == normalize_answer(expected)


def feedback_for(was_correct: bool, expected: str) -> str:
    if was_correct:
        return CORRECT_FEEDBACK
    return f"Incorrect. The answer was: {expected}"


__all__ = ["answers_match", "feedback_for", "normalize_answer", "CORRECT_FEEDBACK"]
