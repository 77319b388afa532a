"""Translation gateway: single point of contact with the remote providers.

LibreTranslateGateway talks to a LibreTranslate-compatible HTTP API:
  POST {base}/translate  {"q", "source": "auto", "target", "format": "text"}
  POST {base}/detect     {"q"}

Expected failures (network errors, non-2xx, malformed JSON, timeouts) are
never raised to the caller. translate() returns a failed GatewayOutcome and
detect_language() returns None. One attempt per call, no retries.
Every request has a per-call timeout.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from fightstation.core.config import settings
from fightstation.core.exceptions import TranslationProviderError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GatewayOutcome:
    """Uniform result of a translate call: either a translation or an error."""

    translated_text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.translated_text is not None

    @classmethod
    def success(cls, translated_text: str) -> "GatewayOutcome":
        return cls(translated_text=translated_text)

    @classmethod
    def failure(cls, error: str) -> "GatewayOutcome":
        return cls(error=error)


class TranslationGateway(ABC):
    """Abstract base class for translation/detection providers."""

    @abstractmethod
    async def translate(self, text: str, target_language: str) -> GatewayOutcome:
        """Translate text into target_language with source auto-detection.

        Args:
            text: The text to translate.
            target_language: ISO 639-1 code to translate into.

        Returns:
            GatewayOutcome with the translation, or a failed outcome.
        """
        ...

    @abstractmethod
    async def detect_language(self, text: str) -> str | None:
        """Return the best-ranked language code for text, or None."""
        ...


class LibreTranslateGateway(TranslationGateway):
    """LibreTranslate-compatible HTTP provider."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = settings.translate_api_url,
        api_key: str = settings.translate_api_key,
        timeout_seconds: float = settings.translate_timeout_seconds,
        detect_min_length: int = settings.detect_min_length,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._detect_min_length = detect_min_length
        logger.info("translation_gateway_initialized", base_url=self._base_url)

    def _payload(self, **fields: Any) -> dict[str, Any]:
        if self._api_key:
            fields["api_key"] = self._api_key
        return fields

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        """POST JSON and return the decoded body.

        Raises:
            TranslationProviderError: on timeout, transport error, non-2xx
                status or an undecodable body.
        """
        url = f"{self._base_url}{path}"
        try:
            response = await asyncio.wait_for(
                self._client.post(url, json=payload),
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
            return response.json()
        except asyncio.TimeoutError as e:
            raise TranslationProviderError(
                f"{path} timed out after {self._timeout_seconds}s"
            ) from e
        except httpx.HTTPStatusError as e:
            raise TranslationProviderError(
                f"{path} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TranslationProviderError(f"{path} request failed: {e}") from e
        except ValueError as e:
            raise TranslationProviderError(f"{path} returned malformed JSON") from e

    async def translate(self, text: str, target_language: str) -> GatewayOutcome:
        payload = self._payload(
            q=text,
            source="auto",
            target=target_language,
            format="text",
        )
        try:
            data = await self._post("/translate", payload)
        except TranslationProviderError as e:
            logger.warning(
                "translation_provider_failed",
                target_language=target_language,
                text_len=len(text),
                error=e.message,
            )
            return GatewayOutcome.failure(e.message)

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            logger.warning(
                "translation_provider_bad_response",
                target_language=target_language,
                text_len=len(text),
            )
            return GatewayOutcome.failure("response missing translatedText")

        logger.debug(
            "translation_provider_ok",
            target_language=target_language,
            text_len=len(text),
        )
        return GatewayOutcome.success(translated)

    async def detect_language(self, text: str) -> str | None:
        if not text or len(text.strip()) < self._detect_min_length:
            return None

        try:
            data = await self._post("/detect", self._payload(q=text))
        except TranslationProviderError as e:
            logger.warning("language_detection_failed", text_len=len(text), error=e.message)
            return None

        if not isinstance(data, list) or not data:
            return None
        best = data[0]
        language = best.get("language") if isinstance(best, dict) else None
        if not isinstance(language, str) or not language:
            logger.warning("language_detection_bad_response", text_len=len(text))
            return None

        logger.debug(
            "language_detected",
            language=language,
            confidence=best.get("confidence"),
            text_len=len(text),
        )
        return language
