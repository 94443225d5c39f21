"""
Screen navigation.

Handler modules register a renderer per Route with @screen; anything that
needs to move the user elsewhere calls navigate(). Screens other than the
public ones refuse to render without a session.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional

from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from config.features import features
from core.domain.models import Route, Session
from adapters.telegram.loader import session_store
from locales import t

logger = logging.getLogger(__name__)

ScreenRenderer = Callable[[Message, FSMContext, Optional[Session], Route], Awaitable[None]]

PUBLIC_ROUTES = {Route.LANDING, Route.LOGIN, Route.REGISTER}

_screens: Dict[Route, ScreenRenderer] = {}


def screen(*routes: Route):
    """Register the decorated coroutine as the renderer for `routes`"""
    def decorator(func: ScreenRenderer) -> ScreenRenderer:
        for route in routes:
            _screens[route] = func
        return func
    return decorator


def registered_routes():
    return set(_screens)


async def navigate(
    message: Message,
    state: FSMContext,
    route: Route,
    session: Optional[Session] = None,
) -> None:
    """Render `route` in the chat of `message`"""
    renderer = _screens.get(route)
    if renderer is None:
        raise LookupError(f"No screen registered for {route.value}")

    if session is None:
        session = session_store.get(message.chat.id)
    if route not in PUBLIC_ROUTES and session is None:
        await expire_session(message, state)
        return

    logger.debug(f"chat {message.chat.id} -> {route.value}")
    await renderer(message, state, session, route)


async def expire_session(message: Message, state: FSMContext) -> None:
    """Forget the session, tell the user, and send them back to login"""
    session_store.invalidate(message.chat.id)
    await state.clear()
    await message.answer(t("session_expired"))
    await asyncio.sleep(features.SESSION_EXPIRED_REDIRECT_SECONDS)
    await navigate(message, state, Route.LOGIN)
