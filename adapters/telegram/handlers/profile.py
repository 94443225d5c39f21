"""
Profile handler - view own profile, jump to edit, replace picture, logout.
"""

import logging
from typing import Optional

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from config.features import features
from core.domain.constants import EDIT_PROFILE_ROUTES
from core.domain.errors import ScoutbaseError, SessionExpiredError
from core.domain.models import Route, Session
from adapters.telegram.loader import auth_service, profile_service
from adapters.telegram.keyboards import get_profile_keyboard, get_back_to_home_keyboard
from adapters.telegram.cards import render_profile_card
from adapters.telegram.media import has_image, download_image
from adapters.telegram.navigation import screen, navigate, expire_session
from adapters.telegram.states import ProfilePictureStates
from locales import t

logger = logging.getLogger(__name__)
router = Router()


@screen(Route.PROFILE)
async def show_profile(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    """Session check against the backend, then the role-specific card"""
    try:
        session = await auth_service.refresh(message.chat.id)
    except SessionExpiredError:
        await expire_session(message, state)
        return

    try:
        record = await profile_service.load(session)
    except ScoutbaseError as e:
        logger.warning(f"Profile load failed for user {session.user_id}: {e}")
        record = None

    if record is None:
        await message.answer(t("profile_load_failed"), reply_markup=get_back_to_home_keyboard())
        return

    text = f"{t('profile_header')}\n\n{render_profile_card(session.role, record)}"
    await message.answer(
        text,
        reply_markup=get_profile_keyboard(editable=profile_service.is_editable(session.role)),
    )


# === EDIT ===

@router.callback_query(F.data == "profile_edit")
async def edit_profile(callback: CallbackQuery, state: FSMContext, session: Optional[Session] = None):
    if session is None:
        await callback.answer()
        await expire_session(callback.message, state)
        return

    route = EDIT_PROFILE_ROUTES.get(session.role)
    if route is None:
        await callback.answer(t("profile_not_editable"), show_alert=True)
        return
    await callback.answer()
    await navigate(callback.message, state, route, session)


# === PICTURE ===

@router.callback_query(F.data == "profile_picture")
async def change_picture(callback: CallbackQuery, state: FSMContext, session: Optional[Session] = None):
    await callback.answer()
    if session is None:
        await expire_session(callback.message, state)
        return
    await state.set_state(ProfilePictureStates.waiting_photo)
    await callback.message.answer(t("picture_prompt"), reply_markup=get_back_to_home_keyboard())


@router.message(ProfilePictureStates.waiting_photo)
async def picture_received(message: Message, state: FSMContext, session: Optional[Session] = None):
    if session is None:
        await expire_session(message, state)
        return
    if not has_image(message):
        await message.answer(t("form_not_image"), reply_markup=get_back_to_home_keyboard())
        return

    image = await download_image(message)
    try:
        result = await profile_service.replace_picture(session, image)
    except ScoutbaseError as e:
        await state.clear()
        await message.answer(t("error", error=str(e)))
        return

    if not result.ok:
        await message.answer(result.message or t("picture_update_failed"))
        return

    await state.clear()
    await message.answer(t("picture_updated"))
    await navigate(message, state, Route.PROFILE, session)


# === LOGOUT ===

async def _logout(message: Message, state: FSMContext):
    """Server logout; the local session is gone and landing shown either way"""
    await state.clear()
    result = await auth_service.logout(message.chat.id)
    if not result.ok and features.STRICT_LOGOUT:
        await message.answer(t("logout_failed"))
    else:
        await message.answer(t("logged_out"))
    await navigate(message, state, Route.LANDING)


@router.callback_query(F.data == "logout")
async def logout_button(callback: CallbackQuery, state: FSMContext):
    await callback.answer()
    await _logout(callback.message, state)


@router.message(Command("logout"))
async def cmd_logout(message: Message, state: FSMContext):
    await _logout(message, state)
