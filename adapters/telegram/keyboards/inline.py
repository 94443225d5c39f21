"""
Inline keyboards for Telegram bot.
"""

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from aiogram.utils.keyboard import InlineKeyboardBuilder
from typing import Dict, Iterable, Optional

from core.domain.forms import FormSchema
from core.domain.models import Article, Role, UserId
from locales import t


# === LANDING / HOME ===

def get_landing_keyboard() -> InlineKeyboardMarkup:
    """Register (primary) and login"""
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_register"), callback_data="nav_register")
    builder.button(text=t("btn_login"), callback_data="nav_login")
    builder.adjust(1)
    return builder.as_markup()


def get_home_keyboard(articles: Iterable[Article], search_enabled: bool = True) -> InlineKeyboardMarkup:
    """Featured articles, then the main menu"""
    builder = InlineKeyboardBuilder()
    for article in articles:
        builder.button(text=f"📰 {article.title}", callback_data=f"article_{article.id}")
    builder.adjust(1)

    menu = [InlineKeyboardButton(text=t("btn_profile"), callback_data="nav_profile")]
    if search_enabled:
        menu.append(InlineKeyboardButton(text=t("btn_search_athletes"), callback_data="nav_search_athlete"))
        menu.append(InlineKeyboardButton(text=t("btn_search_coaches"), callback_data="nav_search_coach"))
    builder.row(*menu)
    return builder.as_markup()


def get_back_to_home_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_home"), callback_data="nav_home")
    return builder.as_markup()


# === ROLE ASSIGNMENT ===

def get_role_keyboard(selected: Optional[Role] = None) -> InlineKeyboardMarkup:
    """Single-choice role picker - tapping a role replaces the selection"""
    emoji_map = {Role.ATHLETE: "⚾", Role.COACH: "🧢", Role.SCOUT: "🔭"}

    builder = InlineKeyboardBuilder()
    for role in Role:
        prefix = "✓ " if role == selected else ""
        builder.button(text=f"{prefix}{emoji_map[role]} {role.value}", callback_data=f"role_{role.value}")
    builder.adjust(3)

    if selected is not None:
        builder.row(InlineKeyboardButton(text=t("btn_assign_role"), callback_data="role_assign"))
    return builder.as_markup()


# === PROFILE FORM ===

def get_form_step_keyboard(can_skip: bool = False, can_keep: bool = False) -> InlineKeyboardMarkup:
    """
    Per-field keyboard. A field with a current value offers Keep, and Clear
    when it is optional; an empty optional field offers Skip.
    """
    builder = InlineKeyboardBuilder()
    if can_keep:
        builder.button(text=t("btn_keep"), callback_data="form_keep")
        if can_skip:
            builder.button(text=t("btn_clear"), callback_data="form_skip")
    elif can_skip:
        builder.button(text=t("btn_skip"), callback_data="form_skip")
    builder.button(text=t("btn_cancel"), callback_data="form_cancel")
    builder.adjust(2)
    return builder.as_markup()


def get_picture_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_skip"), callback_data="picture_skip")
    builder.button(text=t("btn_cancel"), callback_data="form_cancel")
    builder.adjust(2)
    return builder.as_markup()


def get_form_confirm_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_submit"), callback_data="form_submit")
    builder.button(text=t("btn_cancel"), callback_data="form_cancel")
    builder.adjust(2)
    return builder.as_markup()


def get_scout_create_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_create_profile"), callback_data="form_submit")
    return builder.as_markup()


# === PROFILE VIEW ===

def get_profile_keyboard(editable: bool = True) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    if editable:
        builder.button(text=t("btn_edit_profile"), callback_data="profile_edit")
        builder.button(text=t("btn_change_picture"), callback_data="profile_picture")
    builder.button(text=t("btn_home"), callback_data="nav_home")
    builder.button(text=t("btn_logout"), callback_data="logout")
    builder.adjust(2)
    return builder.as_markup()


# === SEARCH ===

def get_search_filters_keyboard(form: FormSchema, filters: Dict[str, str]) -> InlineKeyboardMarkup:
    """One button per filter (✓ when set), then search / clear / home"""
    builder = InlineKeyboardBuilder()
    for f in form.input_fields:
        prefix = "✓ " if filters.get(f.name) else ""
        builder.button(text=f"{prefix}{f.label}", callback_data=f"filter_{f.name}")
    builder.adjust(2)

    builder.row(InlineKeyboardButton(text=t("btn_search"), callback_data="search_run"))
    row = []
    if filters:
        row.append(InlineKeyboardButton(text=t("btn_clear_filters"), callback_data="search_clear"))
    row.append(InlineKeyboardButton(text=t("btn_home"), callback_data="nav_home"))
    builder.row(*row)
    return builder.as_markup()


def get_result_keyboard(user_id: Optional[UserId]) -> Optional[InlineKeyboardMarkup]:
    """Contact reveal for a search result (None when the record has no owner id)"""
    if user_id in (None, ""):
        return None
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_contact"), callback_data=f"contact_{user_id}")
    return builder.as_markup()
