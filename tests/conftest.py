"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import pytest

from leakbot.config import LeakBotSettings
from leakbot.session import SessionController
from leakbot.state import ConversationState


@pytest.fixture
def settings():
    """Settings built in-process, ignoring the environment's .env file."""
    return LeakBotSettings(
        _env_file=None,
        telegram_bot_token="123456:test-token",
        leakosint_api_token="leak-test-token",
        leakosint_api_url="https://leakosint.test/",
        leakosint_lang="ru",
        leakosint_limit=100,
        message_limit=3500,
        watermark="test watermark",
    )


@pytest.fixture
def state():
    return ConversationState("ru")


@pytest.fixture
def notifier():
    """Recording stand-in for the Telegram channel."""
    return AsyncMock()


@pytest.fixture
def search_client():
    return AsyncMock()


@pytest.fixture
def controller(settings, state, search_client, notifier):
    return SessionController(
        settings=settings,
        state=state,
        search_client=search_client,
        notifier=notifier,
    )
