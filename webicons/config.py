"""Конфигурация webicons."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки webicons.

    Переменные окружения:
      METADATA_SOURCE  — путь к metadata.json или http(s) URL
      METADATA_TIMEOUT — таймаут загрузки удалённого конфига, секунды
      FAVICON_PATH     — файл для /favicon.ico
      LOG_LEVEL        — уровень логирования
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "webicons"
    log_level: str = "info"

    metadata_source: str = "./config/metadata.json"
    metadata_timeout: float = 10.0

    favicon_path: str = "./favicons/favicon.ico"


@lru_cache
def get_settings() -> Settings:
    # Cached settings for app lifetime. Metadata itself is reloaded per request.
    return Settings()
