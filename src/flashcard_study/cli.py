"""Command line front end for the flashcard study tool."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from .app import FlashcardApp
from .collection import InvalidCardFile
from .config import Settings
from .evaluation import feedback_for


logger = logging.getLogger(__name__)

QUIT_COMMANDS = {":q", ":quit"}
NOTHING_DUE = "No cards due for review. 🎉"


def _confirm(question: str, assume_yes: bool) -> bool:
    if assume_yes:
        return True
    try:
        reply = input(f"{question} [y/N] ")
    except EOFError:
        return False
    return reply.strip().lower() in {"y", "yes"}


def _cmd_add(app: FlashcardApp, args: argparse.Namespace) -> int:
    card = app.add_card(args.front, args.back)
    print(f"Added card {card.id}")
    return 0


def _cmd_status(app: FlashcardApp, args: argparse.Namespace) -> int:
    status = app.study_status()
    print(f"{status.total_cards} cards, {status.due_cards} due")
    return 0


def _cmd_study(app: FlashcardApp, args: argparse.Namespace) -> int:
    while True:
        status = app.study_status()
        if status.idle:
            print(NOTHING_DUE)
            return 0
        card = status.current_card
        print(f"Study Deck ({status.due_cards} cards due)")
        print(card.front)
        try:
            answer = input("> ")
        except EOFError:
            print()
            return 0
        if answer.strip() in QUIT_COMMANDS:
            return 0
        if not answer.strip():
            continue
        result = app.submit_answer(answer)
        if result is not None:
            print(feedback_for(result.was_correct, card.back))


def _cmd_reset(app: FlashcardApp, args: argparse.Namespace) -> int:
    if not _confirm("Are you sure you want to reset all learning progress?", args.yes):
        return 0
    print(app.reset_progress())
    return 0


def _cmd_clear(app: FlashcardApp, args: argparse.Namespace) -> int:
    if not _confirm("Are you sure you want to remove ALL cards?", args.yes):
        return 0
    print(app.remove_all_cards())
    return 0


def _cmd_export(app: FlashcardApp, args: argparse.Namespace) -> int:
    target = app.export_cards(Path(args.path) if args.path else None)
    print(f"Cards exported successfully ({target})")
    return 0


def _cmd_import(app: FlashcardApp, args: argparse.Namespace) -> int:
    try:
        cards = app.read_import(Path(args.path))
    except InvalidCardFile:
        print("Error importing cards: Invalid file format")
        return 1
    if not _confirm(f"Import {len(cards)} cards? This will replace current cards.", args.yes):
        return 0
    print(app.import_cards(cards))
    return 0


COMMANDS = {
    "add": _cmd_add,
    "status": _cmd_status,
    "study": _cmd_study,
    "reset": _cmd_reset,
    "clear": _cmd_clear,
    "export": _cmd_export,
    "import": _cmd_import,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flashcards", description="Study flashcards with spaced repetition")
    parser.add_argument("--database", help="Path to SQLite database override")
    parser.add_argument("--log-level", help="Logging level (default: FLASHCARDS_LOG_LEVEL or WARNING)")
    parser.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Create a new card")
    add.add_argument("front", help="Front of card")
    add.add_argument("back", help="Back of card")

    sub.add_parser("status", help="Show how many cards are due")
    sub.add_parser("study", help="Answer due cards interactively (:q to stop)")
    sub.add_parser("reset", help="Reset all learning progress")
    sub.add_parser("clear", help="Remove all cards")

    export = sub.add_parser("export", help="Write cards to a JSON file")
    export.add_argument("path", nargs="?", help="Target file (default: flashcards-<date>.json)")

    import_ = sub.add_parser("import", help="Replace cards with a JSON export")
    import_.add_argument("path", help="JSON file to import")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.load()
    if args.database:
        settings = replace(settings, database_path=Path(args.database))
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = FlashcardApp(settings=settings)
        return COMMANDS[args.command](app, args)
    except (ValueError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
