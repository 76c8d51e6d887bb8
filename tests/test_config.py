from pathlib import Path

from flashcard_study import Settings


def test_defaults_without_environment(monkeypatch):
    for key in (
        "FLASHCARDS_DATABASE_PATH",
        "FLASHCARDS_COLLECTION",
        "FLASHCARDS_EXPORT_DIR",
        "FLASHCARDS_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = Settings.load()

    assert settings == Settings()
    assert settings.database_path == Path("data/flashcards.sqlite")


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("FLASHCARDS_DATABASE_PATH", str(tmp_path / "db.sqlite"))
    monkeypatch.setenv("FLASHCARDS_COLLECTION", "spanish")
    monkeypatch.setenv("FLASHCARDS_EXPORT_DIR", str(tmp_path))
    monkeypatch.setenv("FLASHCARDS_LOG_LEVEL", "debug")

    settings = Settings.load()

    assert settings.database_path == tmp_path / "db.sqlite"
    assert settings.collection == "spanish"
    assert settings.export_dir == tmp_path
    assert settings.log_level == "DEBUG"
