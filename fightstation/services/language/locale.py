"""Current-language providers for the translation service.

The translation service only ever reads the current language. The stored
preference is the user's explicit choice saved under
"@fight_station_language"; without one, the device language applies when
the caller knows it, and the configured default otherwise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from fightstation.core.config import settings
from fightstation.core.exceptions import StorageConnectionError, UnsupportedLanguageError
from fightstation.db.redis import RedisClient
from fightstation.services.language.catalog import (
    is_supported,
    primary_subtag,
    resolve_device_language,
)

logger = structlog.get_logger(__name__)


class LocalePreference(ABC):
    """Read-only source of the user's current two-letter language code."""

    @abstractmethod
    async def current_language(self) -> str:
        ...


class StaticLocale(LocalePreference):
    """Fixed language. Used for tests and request-scoped overrides."""

    def __init__(self, language: str) -> None:
        self._language = language

    async def current_language(self) -> str:
        return self._language


class StoredLocalePreference(LocalePreference):
    """Language preference persisted in key-value storage."""

    def __init__(
        self,
        storage: RedisClient,
        storage_key: str = settings.language_storage_key,
        default_language: str = settings.default_language,
    ) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._default_language = default_language

    def _unsaved_language(self, device_language: str | None) -> str:
        if device_language:
            return resolve_device_language(device_language)
        return self._default_language

    async def current_language(self, device_language: str | None = None) -> str:
        """Saved preference, else the device language, else the default.

        device_language accepts raw locale tags and Accept-Language values;
        an unsupported device language resolves to "en".
        """
        try:
            saved = await self._storage.get(self._storage_key)
        except StorageConnectionError as e:
            logger.warning("locale_load_failed", error=str(e))
            return self._unsaved_language(device_language)

        if saved and is_supported(saved):
            return saved
        if saved:
            logger.warning("locale_saved_value_unsupported", language=saved)
        return self._unsaved_language(device_language)

    async def set_language(self, code: str) -> str:
        """Persist a new preference. Returns the normalized code.

        Region and script subtags are dropped, so "de-AT" and "pl_PL" are
        saved as "de" and "pl".

        Raises:
            UnsupportedLanguageError: if code is not in the supported catalog.
            StorageConnectionError: if the preference cannot be saved.
        """
        normalized = primary_subtag(code)
        if not is_supported(normalized):
            raise UnsupportedLanguageError(f"Unsupported language: {code!r}")
        await self._storage.set(self._storage_key, normalized)
        logger.info("locale_updated", language=normalized)
        return normalized
