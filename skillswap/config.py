from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./skillswap.db"

    # Cookie signing / auth sessions
    SECRET_KEY: str = "skillswap-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "skillswap_session"
    SESSION_MAX_AGE_HOURS: int = 24
    SESSION_COOKIE_SECURE: bool = False
    # "database" keeps auth sessions in the auth_sessions table,
    # "memory" keeps them in-process (single worker only).
    SESSION_BACKEND: str = "database"

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:5000",
        "http://127.0.0.1:5000",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
