"""Application configuration via pydantic-settings.

All values loaded from .env file at the project root.
The .env file takes precedence over OS-level environment variables
so stale system env vars never shadow the project config.
No hardcoded secrets anywhere.
"""

from datetime import timedelta
from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Resolve .env from project root (two levels up from this file: fightstation/core/config.py → project root)
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Central application settings. .env file wins over OS env vars."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Override source priority: .env file > OS env vars > defaults."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)

    # --- Storage ---
    redis_url: str = "redis://localhost:6379/0"

    # --- Translation provider (LibreTranslate-compatible) ---
    translate_api_url: str = "https://libretranslate.com"
    translate_api_key: str = ""
    translate_timeout_seconds: float = 10.0
    translate_batch_concurrency: int = 8
    detect_min_length: int = 10

    # --- Translation cache ---
    translation_cache_key: str = "@fight_station_translations"
    translation_cache_ttl_days: int = 7

    # --- Locale ---
    language_storage_key: str = "@fight_station_language"
    default_language: str = "en"

    # --- App ---
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def translation_cache_ttl(self) -> timedelta:
        return timedelta(days=self.translation_cache_ttl_days)


settings = Settings()
