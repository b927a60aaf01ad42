"""Application settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from the environment and `.env`."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "local"
    database_url: str = "sqlite+aiosqlite:///./notices.db"
    sql_echo: bool = False

    jwt_secret_key: str = "local-development-secret-key-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 15

    # Namespace for per-user dismissal rows in the property store.
    dismissed_notice_key_prefix: str = "user.dismissedNotices."

    log_level: str = "INFO"


settings = Settings()
