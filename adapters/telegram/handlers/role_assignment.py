"""
Role assignment handler - pick Athlete, Coach or Scout once after signup.
"""

import logging
from typing import Optional

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.fsm.context import FSMContext

from core.domain.errors import ValidationError
from core.domain.models import Role, Route, Session
from adapters.telegram.loader import role_service
from adapters.telegram.keyboards import get_role_keyboard
from adapters.telegram.navigation import screen, navigate, expire_session
from adapters.telegram.states import RoleStates
from locales import t

logger = logging.getLogger(__name__)
router = Router()


@screen(Route.ROLE_ASSIGNMENT)
async def show_role_assignment(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    await state.set_state(RoleStates.choosing)
    await state.update_data(role=None)
    await message.answer(t("role_header"), reply_markup=get_role_keyboard())


@router.callback_query(RoleStates.choosing, F.data.startswith("role_") & (F.data != "role_assign"))
async def select_role(callback: CallbackQuery, state: FSMContext):
    """Single choice: tapping a role replaces the previous pick"""
    role = Role.parse(callback.data.removeprefix("role_"))
    if role is None:
        await callback.answer()
        return

    await state.update_data(role=role.value)
    await callback.message.edit_text(
        f"{t('role_header')}\n\n{t('role_selected', role=role.value)}",
        reply_markup=get_role_keyboard(role),
    )
    await callback.answer()


@router.callback_query(RoleStates.choosing, F.data == "role_assign")
async def assign_role(callback: CallbackQuery, state: FSMContext, session: Optional[Session] = None):
    if session is None:
        await callback.answer()
        await expire_session(callback.message, state)
        return

    data = await state.get_data()
    role = Role.parse(data.get("role"))
    try:
        result = await role_service.assign(session, role)
    except ValidationError as e:
        await callback.answer(str(e), show_alert=True)
        return

    if not result.ok:
        # Stay on the picker so the user can try again
        await callback.answer(result.message or t("role_failed"), show_alert=True)
        return

    await callback.answer()
    await state.clear()
    await callback.message.edit_text(t("role_assigned", role=role.value))
    await navigate(callback.message, state, result.data, session)
