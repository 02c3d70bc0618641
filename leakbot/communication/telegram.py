"""Telegram channel adapter."""

import asyncio
import logging
from typing import Optional

from telegram import BotCommand, InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from ..session import Buttons, CallbackEvent, Notifier, SessionController, TextEvent


logger = logging.getLogger("leakbot.telegram")


def _build_keyboard(buttons: Optional[Buttons]) -> Optional[InlineKeyboardMarkup]:
    if not buttons:
        return None
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(label, callback_data=action) for label, action in row]
        for row in buttons
    ])


class TelegramChannel(Notifier):
    """Telegram bot adapter for leakbot.

    Maps Updates to session events and implements the Notifier side on
    top of ``Application.bot``.
    """

    def __init__(self, bot_token: str):
        self.bot_token = bot_token
        self.app: Optional[Application] = None
        self.controller: Optional[SessionController] = None

    def bind(self, controller: SessionController) -> None:
        self.controller = controller

    def _register_handlers(self):
        """Register all Telegram handlers on self.app."""
        # /start included: the controller recognises it as the greeting
        self.app.add_handler(MessageHandler(filters.TEXT, self._handle_message))
        # Callback query handler
        self.app.add_handler(CallbackQueryHandler(self._handle_callback))
        # Error handler
        self.app.add_error_handler(self._handle_error)

    async def start(self):
        """Start the Telegram bot."""
        if self.controller is None:
            raise RuntimeError("TelegramChannel.start() called before bind()")

        self.app = (
            Application.builder()
            .token(self.bot_token)
            .concurrent_updates(256)
            .build()
        )

        self._register_handlers()

        logger.info("Starting Telegram bot...")
        logger.debug(f"Token prefix: {self.bot_token[:10]}")
        # Retry initialization (getMe) on transient network timeouts
        for attempt in range(5):
            try:
                await self.app.initialize()
                break
            except Exception as e:
                if attempt < 4:
                    delay = [2, 5, 10, 15][attempt]
                    logger.warning(f"Telegram init failed (attempt {attempt + 1}/5): {type(e).__name__}: {e}. Retrying in {delay}s...")
                    await asyncio.sleep(delay)
                else:
                    raise
        await self.app.start()
        await self.app.updater.start_polling(
            drop_pending_updates=True,
            allowed_updates=["message", "callback_query"],
        )

        # Register bot commands menu (the "/" button in Telegram)
        await self.app.bot.set_my_commands([
            BotCommand("start", "Welcome message"),
        ])

        logger.info("🤖 Telegram LeakOSINT bot is running...")

    async def stop(self):
        """Stop the Telegram bot."""
        if self.app:
            await self.app.updater.stop()
            await self.app.stop()
            await self.app.shutdown()
            logger.info("Telegram bot stopped.")

    # ── Inbound ──────────────────────────────────────────────

    async def _handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle incoming text messages (including /start)."""
        msg = update.message
        if not msg or msg.text is None:
            return

        user = msg.from_user
        await self.controller.handle_text(TextEvent(
            chat_id=msg.chat.id if msg.chat else None,
            text=msg.text,
            sender_id=user.id if user else None,
            username=user.username if user else None,
        ))

    async def _handle_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle inline button callbacks."""
        query = update.callback_query
        if not query:
            return

        chat = query.message.chat if query.message else None
        user = query.from_user
        await self.controller.handle_callback(CallbackEvent(
            chat_id=chat.id if chat else None,
            action=query.data or "",
            callback_id=query.id,
            sender_id=user.id if user else None,
            username=user.username if user else None,
        ))

    async def _handle_error(self, update: object, context: ContextTypes.DEFAULT_TYPE):
        """Handle errors in update processing."""
        error = context.error
        # Log with full context for debugging
        if update:
            logger.error(f"Telegram error processing update {type(update).__name__}: {type(error).__name__}: {error}", exc_info=error)
        else:
            logger.error(f"Telegram error (no update): {type(error).__name__}: {error}", exc_info=error)
        # Check if polling is still alive after error
        if self.app and self.app.updater and self.app.updater.running:
            logger.debug("Polling still running after error")
        else:
            logger.critical("POLLING STOPPED after error — bot will not receive new messages!")

    # ── Outbound (Notifier) ──────────────────────────────────

    async def send_text(
        self,
        chat_id: int,
        text: str,
        parse_mode: Optional[str] = None,
        buttons: Optional[Buttons] = None,
    ) -> None:
        await self.app.bot.send_message(
            chat_id=chat_id,
            text=text,
            parse_mode=parse_mode,
            reply_markup=_build_keyboard(buttons),
        )

    async def send_typing(self, chat_id: int) -> None:
        await self.app.bot.send_chat_action(chat_id, "typing")

    async def answer_callback(self, callback_id: str, text: Optional[str] = None) -> None:
        await self.app.bot.answer_callback_query(callback_id, text=text)
