import tempfile
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./dev.db"
    SQL_ECHO: bool = False
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    SESSION_TTL_HOURS: int = 24
    PICKUP_ESTIMATE_MINUTES: int = 30
    SESSION_PURGE_INTERVAL_SECONDS: int = 300
    LOCKS_DIR: str = tempfile.gettempdir()
    USER_LOCK_TIMEOUT_SECONDS: float = 10
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
