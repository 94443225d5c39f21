"""
Start handler - /start, landing screen, home screen and menu navigation.
"""

import logging
from html import escape
from typing import Optional

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext

from config.features import features
from config.settings import settings
from core.domain.constants import FEATURED_ARTICLES, get_article
from core.domain.errors import ScoutbaseError
from core.domain.models import Route, Session
from adapters.telegram.loader import auth_service, session_store
from adapters.telegram.keyboards import get_landing_keyboard, get_home_keyboard
from adapters.telegram.navigation import screen, navigate
from locales import t

logger = logging.getLogger(__name__)
router = Router()

NAV_ROUTES = {
    "nav_register": Route.REGISTER,
    "nav_login": Route.LOGIN,
    "nav_home": Route.HOME,
    "nav_profile": Route.PROFILE,
    "nav_search_athlete": Route.SEARCH_ATHLETE,
    "nav_search_coach": Route.SEARCH_COACH,
}


# === SCREENS ===

@screen(Route.LANDING)
async def show_landing(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    await message.answer(t("landing"), reply_markup=get_landing_keyboard())


@screen(Route.HOME)
async def show_home(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    """Static featured content, for users with a role and a complete profile"""
    try:
        target = await auth_service.home_route(session)
    except ScoutbaseError as e:
        await message.answer(t("error", error=str(e)))
        return
    if target != Route.HOME:
        await navigate(message, state, target, session)
        return

    if session and session.name:
        header = t("home_greeting", name=escape(session.name))
    else:
        header = t("home_header")
    lines = [header, ""]
    for article in FEATURED_ARTICLES:
        lines.append(f"<b>{escape(article.title)}</b>\n{escape(article.description)}\n")

    await message.answer(
        "\n".join(lines).rstrip(),
        reply_markup=get_home_keyboard(FEATURED_ARTICLES, search_enabled=features.SEARCH_ENABLED),
    )


# === COMMANDS ===

@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext, session: Optional[Session] = None):
    """Fresh start: home for a logged-in chat, landing otherwise"""
    await state.clear()
    route = Route.HOME if session else Route.LANDING
    await navigate(message, state, route, session)


@router.message(Command("home"))
async def cmd_home(message: Message, state: FSMContext, session: Optional[Session] = None):
    await state.clear()
    await navigate(message, state, Route.HOME, session)


@router.message(Command("profile"))
async def cmd_profile(message: Message, state: FSMContext, session: Optional[Session] = None):
    await state.clear()
    await navigate(message, state, Route.PROFILE, session)


@router.message(Command("status"))
async def cmd_status(message: Message):
    """Backend and session overview (admin only)"""
    if message.from_user.id not in settings.admin_telegram_ids:
        await message.answer(t("admin_only"))
        return

    flags = "\n".join(f"  {key}: {value}" for key, value in features.to_dict().items())
    await message.answer(t(
        "status",
        backend=escape(settings.scoutbase_api_url),
        env=escape(settings.env),
        sessions=len(session_store),
        flags=escape(flags),
    ))


# === CALLBACKS ===

@router.callback_query(F.data.in_(NAV_ROUTES.keys()))
async def menu_navigation(callback: CallbackQuery, state: FSMContext, session: Optional[Session] = None):
    """Every nav_* button: leave the current screen and open the target"""
    await state.clear()
    await callback.answer()
    await navigate(callback.message, state, NAV_ROUTES[callback.data], session)


@router.callback_query(F.data.startswith("article_"))
async def article_selected(callback: CallbackQuery):
    try:
        article = get_article(int(callback.data.removeprefix("article_")))
    except ValueError:
        article = None
    if article is None:
        await callback.answer()
        return
    await callback.answer(t("article_selected", title=article.title), show_alert=True)


# === FALLBACK (must stay last) ===

@router.message()
async def fallback(message: Message):
    await message.answer(t("unknown_command"))
