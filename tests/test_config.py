from __future__ import annotations

import sys
from pathlib import Path

# Make the api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173/, https://example.com")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.app_env == "prod"
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ("http://localhost:5173", "https://example.com")
    finally:
        core_config.get_settings.cache_clear()


def test_bad_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.port == 8080
        assert settings.cors_origins == ()
    finally:
        core_config.get_settings.cache_clear()


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "FOO")
    core_config.get_settings.cache_clear()
    try:
        assert core_config.get_settings().log_level == "INFO"
    finally:
        core_config.get_settings.cache_clear()
