from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = Field(default="development")
    APP_SECRET: str = Field(default="please-change-me")
    LOG_LEVEL: str = Field(default="INFO")

    DATABASE_URL: str | None = Field(default=None)
    DB_POOL_SIZE: int = Field(default=10)
    DB_MAX_OVERFLOW: int = Field(default=20)
    DB_ECHO: bool = Field(default=False)

    SMTP_HOST: str | None = Field(default=None)
    SMTP_PORT: int = Field(default=587)
    SMTP_USER: str | None = Field(default=None)
    SMTP_PASSWORD: str | None = Field(default=None)
    SMTP_USE_TLS: bool = Field(default=True)
    SMTP_TIMEOUT_SECONDS: int = Field(default=10)
    EMAIL_FROM: str | None = Field(default=None)
    CONTACT_RECEIVER_EMAIL: str | None = Field(default=None)

    UPLOAD_DIR: str = Field(default="public/images")
    UPLOAD_URL_PREFIX: str = Field(default="/images")

    SITE_NAME: str = Field(default="Autohaus")
    CURRENCY: str = Field(default="USD")

    def database_url(self) -> str:
        if not self.DATABASE_URL:
            raise RuntimeError("DATABASE_URL environment variable is not set")
        return self.DATABASE_URL

    @property
    def receiver_email(self) -> str | None:
        """Where lead notifications go: the configured receiver, else the SMTP account."""
        return self.CONTACT_RECEIVER_EMAIL or self.SMTP_USER

    @property
    def sender_email(self) -> str | None:
        return self.EMAIL_FROM or self.SMTP_USER


@lru_cache
def get_settings() -> Settings:
    return Settings()
