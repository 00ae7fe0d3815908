"""Tests for `api/config.py` environment loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from api import config
from api.config import Settings, load_settings


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch, tmp_path):
    monkeypatch.setattr(os, "environ", dict(os.environ))
    monkeypatch.setattr(config, "env_path", tmp_path / "missing.env")
    for name in ("HOST", "PORT", "LOG_LEVEL", "LOG_FILE", "SPA_DIST_DIR", "CORS_ORIGINS", "SERVICE_NAME"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    assert load_settings() == Settings()


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SPA_DIST_DIR", "dist/spa")
    monkeypatch.setenv("CORS_ORIGINS", "https://firm.example, https://www.firm.example,")

    settings = load_settings()

    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.spa_dist_dir == Path("dist/spa")
    assert settings.cors_origins == ("https://firm.example", "https://www.firm.example")


def test_invalid_port(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(RuntimeError, match="PORT must be an integer"):
        load_settings()


def test_dotenv_file_is_loaded(monkeypatch, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SERVICE_NAME=intake-from-dotenv\n", encoding="utf-8")
    monkeypatch.setattr(config, "env_path", env_file)

    assert load_settings().service_name == "intake-from-dotenv"
