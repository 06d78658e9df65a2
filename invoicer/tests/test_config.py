from __future__ import annotations

import pytest

from invoicer.shared.config import AppConfig

STRONG_SECRET = "x" * 48


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("TOKEN_TTL_SECONDS", raising=False)
    monkeypatch.delenv("MAX_CONTENT_LENGTH", raising=False)
    monkeypatch.setenv("BCRYPT_ROUNDS", "12")

    config = AppConfig()

    assert config.token_ttl_seconds == 86400
    assert config.bcrypt_rounds == 12
    assert config.max_content_length == 2 * 1024 * 1024


def test_missing_secret_fails(monkeypatch) -> None:
    monkeypatch.delenv("JWT_SECRET")

    with pytest.raises(Exception):
        AppConfig(_env_file=None)


def test_production_refuses_weak_secret(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", "secret")

    with pytest.raises(SystemExit):
        AppConfig(_env_file=None)


def test_production_accepts_strong_secret(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", STRONG_SECRET)
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")

    config = AppConfig(_env_file=None)

    assert config.is_production()
    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]


def test_bcrypt_rounds_bounds(monkeypatch) -> None:
    monkeypatch.setenv("BCRYPT_ROUNDS", "3")

    with pytest.raises(Exception):
        AppConfig(_env_file=None)


def test_log_settings_are_read_from_the_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "api.log"))

    config = AppConfig(_env_file=None)

    assert config.log_level == "warning"
    assert config.log_file == str(tmp_path / "api.log")
