"""Tests for the process level settings."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.config import Settings, get_settings, reset_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each test from an empty directory with no settings variables."""

    monkeypatch.chdir(tmp_path)
    for name in ("APP_NAME", "LOG_LEVEL", "PROFILE", "CONFIG_FILE", "SECRETS_DIR"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_defaults() -> None:
    settings = Settings()

    assert settings.app_name == "greeting-service"
    assert settings.log_level == "INFO"
    assert settings.profile is None
    assert settings.config_file == Path("application.properties")
    assert settings.secrets_dir is None


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PROFILE", "dev")
    monkeypatch.setenv("SECRETS_DIR", str(tmp_path))

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.profile == "dev"
    assert settings.secrets_dir == tmp_path


def test_dotenv_with_greeting_keys_is_accepted(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "APP_NAME=greeter\nGREETING_MESSAGE=hello\n", encoding="utf-8"
    )

    assert Settings().app_name == "greeter"


def test_invalid_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        Settings()


def test_blank_profile_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROFILE", "  ")

    assert Settings().profile is None


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("APP_NAME", "renamed")

    assert get_settings() is first

    reset_settings_cache()
    assert get_settings().app_name == "renamed"
