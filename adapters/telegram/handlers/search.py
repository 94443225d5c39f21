"""
Search handler - filter panel for athletes/coaches, results as cards.

Tap a filter -> type a value -> back to the panel. Only filled-in filters
are sent; one request per tap on Search.
"""

import logging
from html import escape
from typing import Any, Dict, Optional

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.fsm.context import FSMContext

from config.features import features
from core.domain.errors import ScoutbaseError
from core.domain.forms import SEARCH_FORMS
from core.domain.models import Role, Route, Session
from adapters.telegram.loader import search_service, profile_service
from adapters.telegram.keyboards import (
    get_search_filters_keyboard,
    get_result_keyboard,
    get_back_to_home_keyboard,
)
from adapters.telegram.cards import render_profile_card
from adapters.telegram.navigation import screen
from adapters.telegram.states import SearchStates
from locales import t

logger = logging.getLogger(__name__)
router = Router()

SEARCH_ROLES = {
    Route.SEARCH_ATHLETE: Role.ATHLETE,
    Route.SEARCH_COACH: Role.COACH,
}
KIND_LABELS = {
    Role.ATHLETE: "Athletes",
    Role.COACH: "Coaches",
}


def _panel_text(role: Role, filters: Dict[str, str]) -> str:
    text = t("search_header", kind=KIND_LABELS[role])
    form = SEARCH_FORMS[role]
    lines = [
        f"• {f.label}: {escape(filters[f.name])}"
        for f in form.input_fields
        if filters.get(f.name)
    ]
    if lines:
        text += t("search_filters", filters="\n".join(lines))
    return text


async def _show_panel(message: Message, state: FSMContext, edit: bool = False):
    data = await state.get_data()
    role = Role(data["role"])
    filters = data.get("filters", {})
    text = _panel_text(role, filters)
    keyboard = get_search_filters_keyboard(SEARCH_FORMS[role], filters)

    await state.set_state(SearchStates.choosing_filter)
    if edit:
        await message.edit_text(text, reply_markup=keyboard)
    else:
        await message.answer(text, reply_markup=keyboard)


@screen(*SEARCH_ROLES.keys())
async def show_search(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    if not features.SEARCH_ENABLED:
        await message.answer(t("search_disabled"), reply_markup=get_back_to_home_keyboard())
        return

    await state.clear()
    await state.update_data(role=SEARCH_ROLES[route].value, filters={})
    await _show_panel(message, state)


# === FILTERS ===

@router.callback_query(SearchStates.choosing_filter, F.data.startswith("filter_"))
async def choose_filter(callback: CallbackQuery, state: FSMContext):
    data = await state.get_data()
    name = callback.data.removeprefix("filter_")
    field = SEARCH_FORMS[Role(data["role"])].get(name)
    if field is None:
        await callback.answer()
        return

    await state.update_data(pending=name)
    await state.set_state(SearchStates.entering_value)
    await callback.answer()
    await callback.message.answer(t("search_filter_prompt", label=field.label))


@router.message(SearchStates.entering_value)
async def filter_entered(message: Message, state: FSMContext):
    data = await state.get_data()
    filters = dict(data.get("filters", {}))
    value = (message.text or "").strip()
    if value:
        filters[data["pending"]] = value
    else:
        filters.pop(data["pending"], None)

    await state.update_data(filters=filters, pending=None)
    await _show_panel(message, state)


@router.callback_query(SearchStates.choosing_filter, F.data == "search_clear")
async def clear_filters(callback: CallbackQuery, state: FSMContext):
    await state.update_data(filters={})
    await callback.answer()
    await _show_panel(callback.message, state, edit=True)


# === RESULTS ===

@router.callback_query(SearchStates.choosing_filter, F.data == "search_run")
async def run_search(callback: CallbackQuery, state: FSMContext):
    data = await state.get_data()
    role = Role(data["role"])
    await callback.answer(t("search_running"))

    try:
        result = await search_service.search(role, data.get("filters", {}))
    except ScoutbaseError as e:
        logger.warning(f"Search failed: {e}")
        await callback.message.answer(str(e))
        return

    if result.empty:
        await callback.message.answer(t("search_no_results"))
    else:
        await callback.message.answer(t("search_results", count=len(result.items)))
        for item in result.items:
            await callback.message.answer(
                render_profile_card(role, item),
                reply_markup=get_result_keyboard(item.get("user_id")),
            )
    await _show_panel(callback.message, state)


def _parse_user_id(raw: str) -> Any:
    return int(raw) if raw.isdigit() else raw


@router.callback_query(F.data.startswith("contact_"))
async def reveal_contact(callback: CallbackQuery):
    user_id = _parse_user_id(callback.data.removeprefix("contact_"))
    result = await profile_service.fetch_email(user_id)
    if not result.ok:
        await callback.answer(result.message or t("contact_failed"), show_alert=True)
        return
    await callback.answer()
    await callback.message.answer(t("contact_email", email=escape(result.data)))
