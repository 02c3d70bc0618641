"""leakbot configuration management."""

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger("leakbot.config")

LANGUAGES = ("ru", "en")

DEFAULT_WATERMARK = "This tool is created by Arshdeep singh, for educational purposes only."


class ConfigError(Exception):
    """Missing or invalid configuration. Fatal at startup."""
    pass


class LeakBotSettings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    # Telegram
    telegram_bot_token: Optional[str] = Field(default=None, description="Telegram bot token")

    # LeakOSINT
    leakosint_api_token: Optional[str] = Field(default=None, description="LeakOSINT API token")
    leakosint_api_url: str = Field(default="https://leakosintapi.com/", description="LeakOSINT endpoint")
    leakosint_lang: str = Field(default="ru", description="Default result language (ru/en)")
    leakosint_limit: int = Field(default=100, ge=1, description="Max results requested per search")
    leakosint_timeout: float = Field(default=30.0, gt=0, description="Search request timeout (seconds)")

    # Delivery
    message_limit: int = Field(default=3500, ge=100, le=4000, description="Max characters per chunk")
    watermark: str = Field(default=DEFAULT_WATERMARK, description="Attribution appended to every message")

    model_config = {"env_file": ".env", "extra": "ignore", "str_strip_whitespace": True}

    @field_validator("leakosint_lang")
    @classmethod
    def _check_lang(cls, value: str) -> str:
        value = value.lower()
        if value not in LANGUAGES:
            raise ValueError(f"must be one of {', '.join(LANGUAGES)}")
        return value


def load_settings(require_telegram: bool = True) -> LeakBotSettings:
    """Load settings from environment.

    Raises ConfigError when a required credential is missing or a value
    does not validate. ``require_telegram=False`` is used by the one-shot
    CLI search, which never talks to Telegram.
    """
    try:
        settings = LeakBotSettings()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if require_telegram and not settings.telegram_bot_token:
        raise ConfigError("Missing TELEGRAM_BOT_TOKEN in environment or .env")
    if not settings.leakosint_api_token:
        raise ConfigError("Missing LEAKOSINT_API_TOKEN in environment or .env")

    if not settings.leakosint_api_url.startswith("https://"):
        logger.warning(
            "⚠️ LEAKOSINT_API_URL is not HTTPS — the API token will be sent in clear text."
        )

    return settings
