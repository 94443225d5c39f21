"""
Scoutbase Bot - entry point.

Telegram client for the Scoutbase recruiting backend: athletes, coaches
and scouts register, fill in a profile and find each other.
"""

import asyncio
import logging
import sys
from aiogram.exceptions import TelegramConflictError, TelegramUnauthorizedError
from adapters.telegram.loader import bot, dp, session_store
from adapters.telegram.handlers import routers
from adapters.telegram.middleware import ThrottlingMiddleware, SessionMiddleware
from config.features import features
from config.settings import settings

logger = logging.getLogger(__name__)

APP_LOGGERS = ("adapters", "core", "infrastructure", "__main__")
NOISY_LOGGERS = ("httpx", "httpcore")

MAX_POLLING_ATTEMPTS = 5
RETRY_DELAY = 10  # seconds


def setup_logging() -> None:
    """Console + bot.log; app loggers go to DEBUG in debug mode"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("bot.log", encoding="utf-8"),
        ],
    )
    if features.DEBUG_MODE or settings.debug:
        for name in APP_LOGGERS:
            logging.getLogger(name).setLevel(logging.DEBUG)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_dispatcher() -> None:
    # Throttle first so dropped updates never reach the session lookup
    throttle = ThrottlingMiddleware()
    sessions = SessionMiddleware(session_store)
    for observer in (dp.message, dp.callback_query):
        observer.middleware(throttle)
        observer.middleware(sessions)

    for router in routers:
        dp.include_router(router)
    logger.info(f"{len(routers)} routers registered (throttle + session middleware)")


async def poll() -> None:
    """Long polling; conflicts and unexpected errors get a few delayed retries"""
    for attempt in range(1, MAX_POLLING_ATTEMPTS + 1):
        try:
            await dp.start_polling(bot)
            return
        except TelegramUnauthorizedError:
            logger.error("Bot token was revoked or is invalid.")
            sys.exit(1)
        except TelegramConflictError:
            if attempt == MAX_POLLING_ATTEMPTS:
                logger.error("Another instance keeps polling with this token. Stop it and restart.")
                sys.exit(1)
            logger.warning(f"Another instance is polling, retry {attempt}/{MAX_POLLING_ATTEMPTS} in {RETRY_DELAY}s")
        except Exception as e:
            if attempt == MAX_POLLING_ATTEMPTS:
                raise
            logger.error(f"Polling stopped: {e}. Retry {attempt}/{MAX_POLLING_ATTEMPTS} in {RETRY_DELAY}s")
        await asyncio.sleep(RETRY_DELAY)


async def main():
    logger.info("=== Scoutbase Bot Starting ===")
    logger.info(f"Backend: {settings.scoutbase_api_url} ({settings.env})")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    setup_dispatcher()

    try:
        await bot.delete_webhook(drop_pending_updates=True)
    except TelegramUnauthorizedError:
        logger.error("Invalid bot token! Check TELEGRAM_BOT_TOKEN env var.")
        sys.exit(1)

    try:
        await poll()
    finally:
        await bot.session.close()
        logger.info("Bot session closed.")


if __name__ == "__main__":
    setup_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (Ctrl+C)")
