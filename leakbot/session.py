"""Session controller: dispatch inbound events to bot behaviour.

Transport-agnostic: events arrive as small dataclasses and replies leave
through a ``Notifier``. The Telegram adapter implements ``Notifier`` and
turns Updates into events; tests substitute an AsyncMock.
"""

import logging
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .communication.errors import classify_error
from .communication.formatting import escape_html, format_search_result
from .communication.outbound import with_watermark
from .config import LeakBotSettings
from .search import LeakOsintClient
from .state import ConversationState

logger = logging.getLogger("leakbot.session")

START_COMMAND = "/start"

ACTION_GENERATE_TOKEN = "generate_token"
ACTION_CHANGE_LANGUAGE = "change_language"

# (label, callback action) pairs; one inner list per keyboard row
Buttons = list[list[tuple[str, str]]]


@dataclass
class TextEvent:
    chat_id: Optional[int]
    text: str
    sender_id: Optional[int] = None
    username: Optional[str] = None


@dataclass
class CallbackEvent:
    chat_id: Optional[int]
    action: str
    callback_id: str
    sender_id: Optional[int] = None
    username: Optional[str] = None


class Notifier(ABC):
    """Outbound side of a chat channel."""

    @abstractmethod
    async def send_text(
        self,
        chat_id: int,
        text: str,
        parse_mode: Optional[str] = None,
        buttons: Optional[Buttons] = None,
    ) -> None:
        ...

    @abstractmethod
    async def send_typing(self, chat_id: int) -> None:
        ...

    @abstractmethod
    async def answer_callback(self, callback_id: str, text: Optional[str] = None) -> None:
        ...


def generate_ephemeral_token() -> str:
    """48 hex chars of fresh randomness. Shown once, never stored."""
    return secrets.token_hex(24)


def _owner_label(sender_id: Optional[int], username: Optional[str]) -> str:
    if username:
        return f"@{username}"
    return f"user {sender_id}"


class SessionController:
    """Handles one text message or callback at a time per call.

    Multiple calls may be in flight concurrently (one asyncio task per
    update); the only shared mutable thing they touch is ``state``.
    """

    def __init__(
        self,
        settings: LeakBotSettings,
        state: ConversationState,
        search_client: LeakOsintClient,
        notifier: Notifier,
    ):
        self.settings = settings
        self.state = state
        self.search_client = search_client
        self.notifier = notifier

    def _wm(self, text: str) -> str:
        return with_watermark(text, self.settings.watermark)

    # ── Text messages ────────────────────────────────────────

    async def handle_text(self, event: TextEvent) -> None:
        """Greeting for /start, search for anything else, nothing for blanks."""
        if event.chat_id is None:
            logger.debug("Dropping text event without chat id")
            return

        query = (event.text or "").strip()
        if not query:
            return

        if query == START_COMMAND:
            await self._send_greeting(event.chat_id)
            return

        await self._run_search(event.chat_id, query)

    async def _send_greeting(self, chat_id: int) -> None:
        lang = self.state.get().upper()
        buttons = [[
            ("Generate API Token", ACTION_GENERATE_TOKEN),
            (f"Change Language ({lang})", ACTION_CHANGE_LANGUAGE),
        ]]
        await self.notifier.send_text(
            chat_id,
            self._wm("👋 Hi! Send me a query and I will search LeakOSINT for matching database entries."),
            buttons=buttons,
        )

    async def _run_search(self, chat_id: int, query: str) -> None:
        try:
            await self.notifier.send_typing(chat_id)
        except Exception as e:
            logger.debug(f"Typing indicator failed for chat {chat_id}: {e}")

        lang = self.state.get()
        logger.info(f"[search] chat={chat_id} lang={lang}: {query[:100]}")

        try:
            result = await self.search_client.search(query, lang)
            blocks = format_search_result(result, limit=self.settings.message_limit)
            for block in blocks:
                await self.notifier.send_text(chat_id, self._wm(block), parse_mode="HTML")
        except Exception as e:
            # Covers delivery too: a rejected block ends this result with one error reply
            logger.error(f"Search failed for chat {chat_id}: {type(e).__name__}: {e}")
            await self.notifier.send_text(
                chat_id,
                self._wm(f"⚠️ Unable to fetch LeakOSINT data: {classify_error(e)}"),
            )

    # ── Inline button callbacks ──────────────────────────────

    async def handle_callback(self, event: CallbackEvent) -> None:
        """Dispatch an inline-button press."""
        if event.chat_id is None:
            logger.debug(f"Dropping callback {event.action!r} without chat id")
            return

        if event.action == ACTION_GENERATE_TOKEN:
            await self._issue_token(event)
        elif event.action == ACTION_CHANGE_LANGUAGE:
            await self._toggle_language(event)
        else:
            logger.warning(f"Unknown callback action: {event.action!r}")
            await self._safe_answer(event.callback_id)

    async def _issue_token(self, event: CallbackEvent) -> None:
        token = generate_ephemeral_token()
        owner = escape_html(_owner_label(event.sender_id, event.username))
        reply = self._wm(
            f"🔑 Generated API token for {owner}:\n<code>{token}</code>\n"
            "Save it now; it will not be shown again."
        )
        await self._safe_answer(event.callback_id, "Token generated")
        await self.notifier.send_text(event.chat_id, reply, parse_mode="HTML")

    async def _toggle_language(self, event: CallbackEvent) -> None:
        lang = self.state.toggle().upper()
        await self._safe_answer(event.callback_id, f"Language set to {lang}")
        await self.notifier.send_text(
            event.chat_id,
            self._wm(f"🌐 LeakOSINT language changed to {lang}"),
        )

    async def _safe_answer(self, callback_id: str, text: Optional[str] = None) -> None:
        """Acknowledge a callback. Failures are logged and never surfaced."""
        try:
            await self.notifier.answer_callback(callback_id, text)
        except Exception as e:
            logger.error(f"Failed to answer callback {callback_id}: {type(e).__name__}: {e}")
