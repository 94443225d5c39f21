"""
Telegram bot loader - initializes bot, dispatcher, and services.
"""

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.enums import ParseMode
from config.settings import settings

# Infrastructure
from infrastructure.api import HttpScoutbaseApi

# Core services
from core.services import (
    SessionStore,
    AuthService,
    RoleService,
    ProfileService,
    SearchService,
)


# === BOT INITIALIZATION ===
bot = Bot(token=settings.telegram_bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
storage = MemoryStorage()
dp = Dispatcher(storage=storage)


# === BACKEND ===
scoutbase_api = HttpScoutbaseApi(settings.scoutbase_api_url)


# === SESSIONS ===
session_store = SessionStore()


# === BUSINESS SERVICES ===
auth_service = AuthService(api=scoutbase_api, sessions=session_store)
role_service = RoleService(api=scoutbase_api)
profile_service = ProfileService(api=scoutbase_api)
search_service = SearchService(api=scoutbase_api)
