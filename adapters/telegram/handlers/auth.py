"""
Auth handlers - registration and login, one field per message.

Registration:  name -> email -> password -> account + auto-login
Login:         email -> password

After either, the user is routed by role/profile state (see AuthService).
"""

import logging
from typing import Optional

from aiogram import Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import Message
from aiogram.fsm.context import FSMContext

from core.domain.errors import AuthError, ScoutbaseError, ValidationError
from core.domain.models import Route, Session
from adapters.telegram.loader import auth_service
from adapters.telegram.navigation import screen, navigate
from adapters.telegram.states import RegisterStates, LoginStates
from locales import t

logger = logging.getLogger(__name__)
router = Router()


async def _forget_password(message: Message) -> None:
    """Remove the password from the chat history"""
    try:
        await message.delete()
    except TelegramBadRequest as e:
        logger.debug(f"Could not delete password message: {e}")


# === REGISTER ===

@screen(Route.REGISTER)
async def show_register(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    await state.clear()
    await state.set_state(RegisterStates.waiting_name)
    await message.answer(f"{t('register_header')}\n\n{t('register_name')}")


@router.message(RegisterStates.waiting_name)
async def register_name(message: Message, state: FSMContext):
    await state.update_data(name=(message.text or "").strip())
    await state.set_state(RegisterStates.waiting_email)
    await message.answer(t("register_email"))


@router.message(RegisterStates.waiting_email)
async def register_email(message: Message, state: FSMContext):
    await state.update_data(email=(message.text or "").strip())
    await state.set_state(RegisterStates.waiting_password)
    await message.answer(t("register_password"))


@router.message(RegisterStates.waiting_password)
async def register_password(message: Message, state: FSMContext):
    password = message.text or ""
    await _forget_password(message)
    data = await state.get_data()
    await state.clear()

    status = await message.answer(t("working"))
    try:
        route = await auth_service.sign_up(
            message.chat.id, data.get("name", ""), data.get("email", ""), password
        )
    except ValidationError:
        await status.edit_text(t("fill_all_fields"))
        await navigate(message, state, Route.REGISTER)
        return
    except ScoutbaseError as e:
        logger.warning(f"Registration failed for chat {message.chat.id}: {e}")
        await status.edit_text(t("error", error=str(e)))
        await navigate(message, state, Route.REGISTER)
        return

    await status.delete()
    await navigate(message, state, route)


# === LOGIN ===

@screen(Route.LOGIN)
async def show_login(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    await state.clear()
    await state.set_state(LoginStates.waiting_email)
    await message.answer(f"{t('login_header')}\n\n{t('login_email')}")


@router.message(LoginStates.waiting_email)
async def login_email(message: Message, state: FSMContext):
    await state.update_data(email=(message.text or "").strip())
    await state.set_state(LoginStates.waiting_password)
    await message.answer(t("login_password"))


@router.message(LoginStates.waiting_password)
async def login_password(message: Message, state: FSMContext):
    password = message.text or ""
    await _forget_password(message)
    data = await state.get_data()
    await state.clear()

    status = await message.answer(t("working"))
    try:
        route = await auth_service.sign_in(message.chat.id, data.get("email", ""), password)
    except ValidationError:
        await status.edit_text(t("login_both_required"))
        await navigate(message, state, Route.LOGIN)
        return
    except AuthError as e:
        await status.edit_text(t("login_failed", error=str(e)))
        await navigate(message, state, Route.LOGIN)
        return
    except ScoutbaseError as e:
        logger.warning(f"Post-login routing failed for chat {message.chat.id}: {e}")
        await status.edit_text(t("error", error=str(e)))
        await navigate(message, state, Route.LOGIN)
        return

    if route == Route.HOME:
        await status.edit_text(t("login_success"))
    else:
        await status.delete()
    await navigate(message, state, route)
