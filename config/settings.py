from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from typing import Annotated, List
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Telegram
    telegram_bot_token: str = ""

    # Scoutbase backend (all endpoints hang off this prefix)
    scoutbase_api_url: str = "http://10.0.2.2:8000/scoutbase"

    # App Settings
    # Comma list in the env (ADMIN_TELEGRAM_IDS=1,2), not JSON
    admin_telegram_ids: Annotated[List[int], NoDecode] = []

    # Environment
    env: str = "development"
    debug: bool = False

    @field_validator('admin_telegram_ids', mode='before')
    @classmethod
    def parse_admin_ids(cls, v):
        if isinstance(v, str):
            return [int(x.strip()) for x in v.split(",") if x.strip()]
        if isinstance(v, int):
            return [v]
        if isinstance(v, list):
            return v
        return []

    @field_validator('scoutbase_api_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SCOUTBASE_API_URL == scoutbase_api_url
    )


# Create settings instance
settings = Settings()
