"""
Profile form handler - create and edit role profiles field by field.

Create:  each input field in order -> optional picture -> review -> submit
Edit:    same walk over the editable fields, prefilled from the stored profile
Scout:   nothing to fill in, a single "Create Profile" button

FSM data: mode ("create"/"edit"), role, values, field_index, image, resume.
"""

import logging
from html import escape
from typing import Any, Dict, Optional

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext

from core.domain.constants import CREATE_PROFILE_ROUTES, EDIT_PROFILE_ROUTES
from core.domain.errors import ScoutbaseError, ValidationError
from core.domain.forms import FormSchema
from core.domain.models import ImageAttachment, Role, Route, Session
from adapters.telegram.loader import profile_service
from adapters.telegram.keyboards import (
    get_form_step_keyboard,
    get_picture_keyboard,
    get_form_confirm_keyboard,
    get_scout_create_keyboard,
    get_back_to_home_keyboard,
)
from adapters.telegram.media import has_image, download_image
from adapters.telegram.navigation import screen, navigate, expire_session
from adapters.telegram.states import ProfileFormStates
from locales import t

logger = logging.getLogger(__name__)
router = Router()

CREATE = "create"
EDIT = "edit"

_CREATE_ROLES = {route: role for role, route in CREATE_PROFILE_ROUTES.items()}
_EDIT_ROLES = {route: role for role, route in EDIT_PROFILE_ROUTES.items()}


def _form(data: Dict[str, Any]) -> FormSchema:
    form = profile_service.form_for(Role(data["role"]))
    return form.editable() if data["mode"] == EDIT else form


def _image(data: Dict[str, Any]) -> Optional[ImageAttachment]:
    raw = data.get("image")
    return ImageAttachment(**raw) if raw else None


# === SCREENS ===

@screen(*CREATE_PROFILE_ROUTES.values())
async def show_create_form(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    role = _CREATE_ROLES[route]
    await state.clear()
    await state.update_data(mode=CREATE, role=role.value, values={}, field_index=0, image=None, resume=False)

    if role == Role.SCOUT:
        await state.set_state(ProfileFormStates.confirming)
        await message.answer(t("scout_create"), reply_markup=get_scout_create_keyboard())
        return

    await message.answer(t("create_header", role=role.value))
    await _ask_current(message, state)


@screen(*EDIT_PROFILE_ROUTES.values())
async def show_edit_form(message: Message, state: FSMContext, session: Optional[Session], route: Route):
    role = _EDIT_ROLES[route]
    await state.clear()

    try:
        record = await profile_service.load(session)
    except ScoutbaseError as e:
        await message.answer(t("error", error=str(e)), reply_markup=get_back_to_home_keyboard())
        return

    form = profile_service.form_for(role).editable()
    values = profile_service.prefill(form, record)
    await state.update_data(mode=EDIT, role=role.value, values=values, field_index=0, image=None, resume=False)

    await message.answer(t("edit_header"))
    await _ask_current(message, state)


# === FORM WALK ===

async def _ask_current(message: Message, state: FSMContext):
    """Prompt for the field at field_index, or move past the text fields"""
    data = await state.get_data()
    form = _form(data)
    fields = form.input_fields
    index = data["field_index"]

    if index >= len(fields):
        if data["mode"] == CREATE and form.image_field is not None and not data.get("resume"):
            await state.set_state(ProfileFormStates.waiting_picture)
            await message.answer(t("form_picture"), reply_markup=get_picture_keyboard())
        else:
            await _show_summary(message, state)
        return

    field = fields[index]
    current = data["values"].get(field.name, "")
    required = t("form_required_mark") if field.required else ""
    if field.hint:
        text = t("form_prompt_hint", label=field.label, required=required, hint=field.hint)
    else:
        text = t("form_prompt", label=field.label, required=required)
    if current:
        text += t("form_current", value=escape(current))

    await state.set_state(ProfileFormStates.entering_value)
    await message.answer(
        text,
        reply_markup=get_form_step_keyboard(can_skip=not field.required, can_keep=bool(current)),
    )


async def _advance(message: Message, state: FSMContext):
    """Next field; when fixing missing fields, jump to the next missing one"""
    data = await state.get_data()
    form = _form(data)

    if data.get("resume"):
        missing = form.missing(data["values"])
        if missing:
            names = [f.name for f in form.input_fields]
            await state.update_data(field_index=names.index(missing[0]))
        else:
            await state.update_data(field_index=len(form.input_fields))
    else:
        await state.update_data(field_index=data["field_index"] + 1)
    await _ask_current(message, state)


@router.message(ProfileFormStates.entering_value)
async def field_entered(message: Message, state: FSMContext):
    if not message.text:
        await message.answer(t("form_text_expected"))
        return

    data = await state.get_data()
    field = _form(data).input_fields[data["field_index"]]
    values = dict(data["values"])
    values[field.name] = message.text.strip()
    await state.update_data(values=values)
    await _advance(message, state)


@router.callback_query(ProfileFormStates.entering_value, F.data.in_({"form_skip", "form_keep"}))
async def field_skipped(callback: CallbackQuery, state: FSMContext):
    """Skip and Clear leave an optional field empty, Keep leaves the current value"""
    data = await state.get_data()
    if callback.data == "form_skip":
        field = _form(data).input_fields[data["field_index"]]
        values = dict(data["values"])
        values[field.name] = ""
        await state.update_data(values=values)
    await callback.answer()
    await _advance(callback.message, state)


# === PICTURE ===

@router.message(ProfileFormStates.waiting_picture)
async def picture_received(message: Message, state: FSMContext):
    if not has_image(message):
        await message.answer(t("form_not_image"), reply_markup=get_picture_keyboard())
        return

    image = await download_image(message)
    await state.update_data(image=image.model_dump())
    await message.answer(t("form_picture_received", filename=escape(image.filename)))
    await _show_summary(message, state)


@router.callback_query(ProfileFormStates.waiting_picture, F.data == "picture_skip")
async def picture_skipped(callback: CallbackQuery, state: FSMContext):
    await state.update_data(image=None)
    await callback.answer()
    await _show_summary(callback.message, state)


# === REVIEW / SUBMIT ===

async def _show_summary(message: Message, state: FSMContext):
    data = await state.get_data()
    form = _form(data)
    lines = []
    for f in form.input_fields:
        value = data["values"].get(f.name) or t("not_available")
        lines.append(f"{f.label}: {escape(value)}")
    image = _image(data)
    if image is not None:
        lines.append(t("form_picture_received", filename=escape(image.filename)))

    await state.set_state(ProfileFormStates.confirming)
    await message.answer(
        t("form_summary", summary="\n".join(lines)),
        reply_markup=get_form_confirm_keyboard(),
    )


@router.callback_query(ProfileFormStates.confirming, F.data == "form_submit")
async def form_submit(callback: CallbackQuery, state: FSMContext, session: Optional[Session] = None):
    if session is None:
        await callback.answer()
        await expire_session(callback.message, state)
        return

    data = await state.get_data()
    role = Role(data["role"])
    await callback.answer()

    try:
        if data["mode"] == CREATE:
            result = await profile_service.create(session, data["values"], _image(data))
            success = t("profile_created", role=role.value)
        else:
            result = await profile_service.update(session, data["values"])
            success = t("profile_updated")
    except ValidationError as e:
        form = _form(data)
        labels = [form.get(name).label for name in e.missing if form.get(name)]
        await callback.message.answer(t("form_missing", fields=", ".join(labels)) if labels else str(e))
        if e.missing:
            names = [f.name for f in form.input_fields]
            await state.update_data(field_index=names.index(e.missing[0]), resume=True)
            await _ask_current(callback.message, state)
        return
    except ScoutbaseError as e:
        await callback.message.answer(t("error", error=str(e)))
        return

    if not result.ok:
        # Stay on the review step so the user can submit again
        await callback.message.answer(result.message, reply_markup=get_form_confirm_keyboard())
        return

    await state.clear()
    await callback.message.answer(success)
    await navigate(callback.message, state, Route.PROFILE, session)


@router.callback_query(StateFilter(ProfileFormStates), F.data == "form_cancel")
async def form_cancel(callback: CallbackQuery, state: FSMContext, session: Optional[Session] = None):
    await state.clear()
    await callback.answer(t("form_cancelled"))
    await navigate(callback.message, state, Route.HOME, session)
