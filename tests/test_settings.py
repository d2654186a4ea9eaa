from pathlib import Path

import pytest

from funniversaries.settings import load_settings


def test_load_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", " token ")
    monkeypatch.setenv("TELEGRAM_ALLOWED_USER_ID", "111")
    monkeypatch.setenv("TELEGRAM_ALLOWED_CHAT_ID", "222")
    monkeypatch.setenv("ANNIVERSARY_CONFIG_PATH", str(tmp_path / "counts.toml"))

    settings = load_settings()

    assert settings.telegram_bot_token == "token"
    assert settings.telegram_allowed_user_id == 111
    assert settings.telegram_allowed_chat_id == 222
    assert settings.anniversary_config_path == tmp_path / "counts.toml"


def test_load_settings_requires_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)

    with pytest.raises(ValueError):
        load_settings()
