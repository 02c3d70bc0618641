"""leakbot main entry point."""

import asyncio
import logging
import os

from .communication.telegram import TelegramChannel
from .config import ConfigError, load_settings
from .search import LeakOsintClient
from .session import SessionController
from .state import ConversationState

_log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_log_file = os.path.expanduser("~/leakbot.log")

logger = logging.getLogger("leakbot")


def setup_logging(level: int = logging.INFO):
    """Console + ~/leakbot.log. Called once by the entry points."""
    logging.basicConfig(
        level=level,
        format=_log_format,
        handlers=[
            logging.StreamHandler(),                          # stderr (console)
            logging.FileHandler(_log_file, encoding="utf-8"), # ~/leakbot.log
        ],
    )
    # httpx logs every request URL at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_controller(settings, notifier) -> SessionController:
    """Wire state + search client + notifier into a controller."""
    return SessionController(
        settings=settings,
        state=ConversationState(settings.leakosint_lang),
        search_client=LeakOsintClient.from_settings(settings),
        notifier=notifier,
    )


async def run():
    """Main run loop."""
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.critical(str(e))
        raise

    telegram = TelegramChannel(settings.telegram_bot_token)
    telegram.bind(build_controller(settings, telegram))

    try:
        await telegram.start()
        logger.info(f"Default language: {settings.leakosint_lang}, result limit: {settings.leakosint_limit}")

        # Keep alive
        logger.info("leakbot is running. Press Ctrl+C to stop.")
        while True:
            await asyncio.sleep(1)

    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    except Exception as e:
        logger.critical(f"Fatal error: {type(e).__name__}: {e}", exc_info=True)
        raise
    finally:
        await telegram.stop()


def main():
    """Entry point."""
    setup_logging()
    asyncio.run(run())


if __name__ == "__main__":
    main()
