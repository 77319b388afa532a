"""Translation service: the public contract calling screens use.

translate_text() does exactly these things in order:
1. Empty / whitespace-only text → return it untranslated
2. Resolve target: explicit argument > current locale > "en"
3. Target "en" → return untranslated (content is assumed to be English)
4. Cache hit → return cached translation
5. Cache miss → ask the gateway; on success write the cache, on failure
   return the original text untranslated (failures are never cached)

Nothing here raises to the caller. A failed translation looks exactly like
"no translation needed".
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import structlog

from fightstation.core.config import settings
from fightstation.services.language.catalog import FALLBACK_LANGUAGE
from fightstation.services.language.locale import LocalePreference
from fightstation.services.translation.cache import CacheStore
from fightstation.services.translation.gateway import TranslationGateway

logger = structlog.get_logger(__name__)

ENGLISH = "en"


@dataclass(frozen=True)
class TranslationResult:
    translation: str
    is_translated: bool


@dataclass(frozen=True)
class BatchTranslationResult:
    translations: list[str] = field(default_factory=list)
    is_translated: list[bool] = field(default_factory=list)


class TranslationService:
    """Cache-first translation with silent fallback to the original text."""

    def __init__(
        self,
        cache: CacheStore,
        gateway: TranslationGateway,
        locale: LocalePreference | None = None,
        batch_concurrency: int = settings.translate_batch_concurrency,
    ) -> None:
        self._cache = cache
        self._gateway = gateway
        self._locale = locale
        self._batch_concurrency = batch_concurrency

    async def _current_language(self) -> str:
        if self._locale is None:
            return FALLBACK_LANGUAGE
        return await self._locale.current_language() or FALLBACK_LANGUAGE

    async def translate_text(
        self, text: str, target_language: str | None = None
    ) -> TranslationResult:
        """Translate text, consulting the cache before the provider."""
        if not text or not text.strip():
            return TranslationResult(translation=text, is_translated=False)

        target = target_language or await self._current_language()

        if target == ENGLISH:
            return TranslationResult(translation=text, is_translated=False)

        cached = await self._cache.get(text, target)
        if cached is not None:
            logger.debug("translation_cache_hit", target_language=target, text_len=len(text))
            return TranslationResult(translation=cached, is_translated=True)

        outcome = await self._gateway.translate(text, target)
        if not outcome.ok:
            logger.info(
                "translation_fallback_to_original",
                target_language=target,
                text_len=len(text),
                error=outcome.error,
            )
            return TranslationResult(translation=text, is_translated=False)

        await self._cache.set(text, target, outcome.translated_text)
        return TranslationResult(translation=outcome.translated_text, is_translated=True)

    async def translate_batch(
        self, texts: list[str], target_language: str | None = None
    ) -> BatchTranslationResult:
        """Translate every element independently, preserving input order.

        Elements run concurrently, at most batch_concurrency at a time
        (0 means no cap). Duplicate strings are not coalesced.
        """
        semaphore = (
            asyncio.Semaphore(self._batch_concurrency)
            if self._batch_concurrency > 0
            else None
        )

        async def _translate_one(text: str) -> TranslationResult:
            if semaphore is None:
                return await self.translate_text(text, target_language)
            async with semaphore:
                return await self.translate_text(text, target_language)

        results = await asyncio.gather(*(_translate_one(text) for text in texts))
        return BatchTranslationResult(
            translations=[r.translation for r in results],
            is_translated=[r.is_translated for r in results],
        )

    async def detect_language(self, text: str) -> str | None:
        """Best-ranked language code for text, or None when unknown."""
        return await self._gateway.detect_language(text)

    async def needs_translation(self, text: str) -> bool:
        """True only when a language was detected and differs from the locale."""
        detected = await self._gateway.detect_language(text)
        if not detected:
            return False
        return detected != await self._current_language()

    async def clear_translation_cache(self) -> None:
        await self._cache.clear()
