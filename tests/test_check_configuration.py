"""Tests for the configuration preflight script."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.config import reset_settings_cache  # noqa: E402
from scripts import check_configuration  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    for name in (
        "GREETING_MESSAGE",
        "GREETING_HANDSHAKE",
        "GREETING_HANDSHAKE_PRIVATEKEY",
        "PROFILE",
        "CONFIG_FILE",
        "SECRETS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_reports_sources_and_passes(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    properties = tmp_path / "custom.properties"
    properties.write_text(
        "greeting.message=hello\ngreeting.handshake=mutual-tls\n", encoding="utf-8"
    )
    monkeypatch.setenv("GREETING_HANDSHAKE_PRIVATEKEY", "abc123")
    monkeypatch.setattr(
        sys, "argv", ["check_configuration", "--config-file", str(properties)]
    )

    check_configuration.main()

    output = capsys.readouterr().out
    assert f"greeting.message: properties:{properties}" in output
    assert "greeting.handshake.privateKey (secret): environment" in output
    assert "Configuration check passed." in output
    assert "abc123" not in output


def test_exits_with_missing_keys(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("GREETING_MESSAGE", "hello")
    monkeypatch.setattr(sys, "argv", ["check_configuration"])

    with pytest.raises(SystemExit) as exc_info:
        check_configuration.main()

    assert "greeting.handshake" in str(exc_info.value.code)
    output = capsys.readouterr().out
    assert "greeting.handshake: MISSING" in output
    assert "greeting.handshake.privateKey (secret): MISSING" in output


def test_blank_profile_argument_is_validated(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    captured = []

    def capture_sources(settings):
        captured.append(settings)
        return []

    monkeypatch.setattr(check_configuration, "build_config_sources", capture_sources)
    monkeypatch.setattr(
        sys,
        "argv",
        ["check_configuration", "--profile", "  ", "--secrets-dir", str(tmp_path)],
    )

    with pytest.raises(SystemExit):
        check_configuration.main()

    assert captured[0].profile is None
    assert captured[0].secrets_dir == tmp_path
