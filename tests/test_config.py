"""Tests for settings loading."""

import pytest

from leakbot.config import DEFAULT_WATERMARK, ConfigError, load_settings

_ENV_KEYS = [
    "TELEGRAM_BOT_TOKEN",
    "LEAKOSINT_API_TOKEN",
    "LEAKOSINT_API_URL",
    "LEAKOSINT_LANG",
    "LEAKOSINT_LIMIT",
    "LEAKOSINT_TIMEOUT",
    "MESSAGE_LIMIT",
    "WATERMARK",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No inherited variables and no .env in the working directory."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env):
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "tg")
    clean_env.setenv("LEAKOSINT_API_TOKEN", "lk")

    settings = load_settings()
    assert settings.leakosint_api_url == "https://leakosintapi.com/"
    assert settings.leakosint_lang == "ru"
    assert settings.leakosint_limit == 100
    assert settings.message_limit == 3500
    assert settings.watermark == DEFAULT_WATERMARK
    assert settings.watermark == "This tool is created by Arshdeep singh, for educational purposes only."


def test_values_trimmed(clean_env):
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "  tg  ")
    clean_env.setenv("LEAKOSINT_API_TOKEN", "lk\n")
    clean_env.setenv("LEAKOSINT_LANG", " EN ")

    settings = load_settings()
    assert settings.telegram_bot_token == "tg"
    assert settings.leakosint_api_token == "lk"
    assert settings.leakosint_lang == "en"


def test_numeric_limit(clean_env):
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "tg")
    clean_env.setenv("LEAKOSINT_API_TOKEN", "lk")
    clean_env.setenv("LEAKOSINT_LIMIT", "250")
    assert load_settings().leakosint_limit == 250


def test_reads_dotenv(clean_env, tmp_path):
    (tmp_path / ".env").write_text("TELEGRAM_BOT_TOKEN=tg\nLEAKOSINT_API_TOKEN=lk\n")
    settings = load_settings()
    assert settings.telegram_bot_token == "tg"


def test_missing_telegram_token(clean_env):
    clean_env.setenv("LEAKOSINT_API_TOKEN", "lk")
    with pytest.raises(ConfigError, match="TELEGRAM_BOT_TOKEN"):
        load_settings()


def test_telegram_token_optional_for_cli(clean_env):
    clean_env.setenv("LEAKOSINT_API_TOKEN", "lk")
    assert load_settings(require_telegram=False).telegram_bot_token is None


def test_missing_leakosint_token(clean_env):
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "tg")
    with pytest.raises(ConfigError, match="LEAKOSINT_API_TOKEN"):
        load_settings()


def test_invalid_language(clean_env):
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "tg")
    clean_env.setenv("LEAKOSINT_API_TOKEN", "lk")
    clean_env.setenv("LEAKOSINT_LANG", "de")
    with pytest.raises(ConfigError):
        load_settings()


def test_non_numeric_limit(clean_env):
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "tg")
    clean_env.setenv("LEAKOSINT_API_TOKEN", "lk")
    clean_env.setenv("LEAKOSINT_LIMIT", "lots")
    with pytest.raises(ConfigError):
        load_settings()
