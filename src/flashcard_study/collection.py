"""Authoritative card collection with persistence and import/export."""

from __future__ import annotations

import json
import logging
import math
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

from .db import SQLiteStore
from .schemas import Card, parse_timestamp


logger = logging.getLogger(__name__)

Listener = Callable[[], None]

_STRING_FIELDS = ("id", "front", "back", "nextReview")
_COUNT_FIELDS = ("interval", "repetitions")


class InvalidCardFile(ValueError):
    """Raised when imported or stored card data does not have the card shape."""


def _is_count(value: object) -> bool:
    """Whole, finite JSON number; booleans excluded."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or (math.isfinite(value) and value.is_integer())


def is_valid_card(payload: object) -> bool:
    if not isinstance(payload, dict):
        return False
    if not all(isinstance(payload.get(key), str) for key in _STRING_FIELDS):
        return False
    if not all(_is_count(payload.get(key)) for key in _COUNT_FIELDS):
        return False
    if payload["interval"] < 1 or payload["repetitions"] < 0:
        return False
    try:
        parse_timestamp(payload["nextReview"])
    except ValueError:
        return False
    return True


def cards_from_payload(payload: object) -> List[Card]:
    if not isinstance(payload, list) or not all(is_valid_card(item) for item in payload):
        raise InvalidCardFile("Invalid file format")
    return [Card.from_dict(item) for item in payload]


def parse_cards(text: str) -> List[Card]:
    """Validate a JSON export; all cards are accepted or none are."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidCardFile("Invalid file format") from exc
    return cards_from_payload(payload)


class CardCollection:
    """Ordered cards, saved to the store after every change.

    Listeners fire whenever the collection is swapped for a different one
    (add, import, progress reset, removal). Writing back a graded card is
    not such a change.
    """

    def __init__(
        self,
        store: SQLiteStore,
        name: str = "flashcards",
        cards: Optional[Iterable[Card]] = None,
    ) -> None:
        self.store = store
        self.name = name
        self._cards: List[Card] = list(cards or [])
        self._listeners: List[Listener] = []

    @classmethod
    def load(cls, store: SQLiteStore, name: str = "flashcards") -> "CardCollection":
        cards = cards_from_payload(store.load_cards(name))
        logger.info("Loaded %d card(s) from collection %r", len(cards), name)
        return cls(store, name, cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def get(self, card_id: str) -> Optional[Card]:
        for card in self._cards:
            if card.id == card_id:
                return card
        return None

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    # mutations --------------------------------------------------------

    def add_card(self, front: str, back: str, now: datetime) -> Card:
        if not front.strip() or not back.strip():
            raise ValueError("Card front and back are required")
        card = Card(id=str(uuid.uuid4()), front=front, back=back, next_review=now)
        self._replace([*self._cards, card], now)
        logger.info("Added card %s", card.id)
        return card

    def update_card(self, card: Card, now: datetime) -> None:
        for index, existing in enumerate(self._cards):
            if existing.id == card.id:
                self._cards[index] = card
                self._save(now)
                return
        raise KeyError(f"Unknown card {card.id}")

    def reset_progress(self, now: datetime) -> None:
        self._replace(
            [replace(card, next_review=now, interval=1, repetitions=0) for card in self._cards],
            now,
        )
        logger.info("Reset progress for %d card(s)", len(self._cards))

    def remove_all(self, now: datetime) -> None:
        removed = len(self._cards)
        self._replace([], now)
        logger.info("Removed %d card(s)", removed)

    def replace_all(self, cards: Iterable[Card], now: datetime) -> None:
        self._replace(list(cards), now)
        logger.info("Imported %d card(s)", len(self._cards))

    # import/export ----------------------------------------------------

    def export_json(self) -> str:
        return json.dumps([card.to_dict() for card in self._cards], indent=2, ensure_ascii=False)

    # internals --------------------------------------------------------

    def _replace(self, cards: List[Card], now: datetime) -> None:
        self._cards = cards
        self._save(now)
        for listener in self._listeners:
            listener()

    def _save(self, now: datetime) -> None:
        self.store.save_cards(
            self.name,
            [card.to_dict() for card in self._cards],
            int(now.timestamp()),
        )


__all__ = [
    "CardCollection",
    "InvalidCardFile",
    "cards_from_payload",
    "is_valid_card",
    "parse_cards",
]
