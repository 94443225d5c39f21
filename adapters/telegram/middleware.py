"""
Middleware for Telegram bot.

- ThrottlingMiddleware: sliding-window rate limit per user
- SessionMiddleware: injects the chat's Session into handler data
"""

import time
import logging
from collections import deque
from typing import Any, Awaitable, Callable, Deque, Dict, Optional

from aiogram import BaseMiddleware
from aiogram.types import Message, CallbackQuery, TelegramObject

from core.domain.constants import (
    RATE_LIMIT_COMMANDS,
    RATE_LIMIT_SEARCH,
    RATE_LIMIT_INTERVAL_SECONDS,
)
from core.services.session_service import SessionStore
from locales import t

logger = logging.getLogger(__name__)

Handler = Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]]


def chat_key(event: TelegramObject) -> Optional[int]:
    """Session key for an incoming event: the chat it happened in"""
    if isinstance(event, Message):
        return event.chat.id
    if isinstance(event, CallbackQuery):
        if event.message is not None:
            return event.message.chat.id
        return event.from_user.id
    return None


class ThrottlingMiddleware(BaseMiddleware):
    """
    Keeps the last request times per user and drops an update once the
    user has hit the limit inside the interval. Search submissions are
    counted in their own, smaller window.
    """

    def __init__(
        self,
        default_limit: int = RATE_LIMIT_COMMANDS,
        search_limit: int = RATE_LIMIT_SEARCH,
        interval: float = RATE_LIMIT_INTERVAL_SECONDS,
    ):
        self.default_limit = default_limit
        self.search_limit = search_limit
        self.interval = interval
        # {(user_id, bucket): deque of monotonic timestamps}, idle windows dropped
        self._hits: Dict[tuple, Deque[float]] = {}
        self._last_sweep = 0.0

    def _bucket(self, event: TelegramObject) -> tuple:
        if isinstance(event, CallbackQuery) and event.data == "search_run":
            return "search", self.search_limit
        return "default", self.default_limit

    def allow(self, user_id: int, bucket: str, limit: int, now: float) -> bool:
        self._sweep(now)
        hits = self._hits.setdefault((user_id, bucket), deque())
        while hits and hits[0] <= now - self.interval:
            hits.popleft()
        if len(hits) >= limit:
            return False
        hits.append(now)
        return True

    def _sweep(self, now: float) -> None:
        """Once per interval, forget users whose window has emptied"""
        if now - self._last_sweep < self.interval:
            return
        self._last_sweep = now
        cutoff = now - self.interval
        for key in [k for k, hits in self._hits.items() if not hits or hits[-1] <= cutoff]:
            del self._hits[key]

    def tracked(self) -> int:
        return len(self._hits)

    async def __call__(self, handler: Handler, event: TelegramObject, data: Dict[str, Any]) -> Any:
        user = event.from_user if isinstance(event, (Message, CallbackQuery)) else None
        if user is None:
            return await handler(event, data)

        bucket, limit = self._bucket(event)
        if self.allow(user.id, bucket, limit, time.monotonic()):
            return await handler(event, data)

        logger.warning(f"Rate limit hit for user {user.id} ({bucket}, limit={limit})")
        await event.answer(t("too_many_requests"))
        return None


class SessionMiddleware(BaseMiddleware):
    """
    Looks up the chat's Session once per update and injects
    `data["session"]` (Session or None) so screens never refetch the token.
    """

    def __init__(self, sessions: SessionStore):
        self.sessions = sessions

    async def __call__(self, handler: Handler, event: TelegramObject, data: Dict[str, Any]) -> Any:
        key = chat_key(event)
        data["session"] = self.sessions.get(key) if key is not None else None
        return await handler(event, data)
