"""Shared pytest fixtures for the translation service test suite.

Provides:
  - mock_storage: in-memory stand-in for RedisClient
  - mock_gateway: recording TranslationGateway with configurable replies
  - clock: controllable UTC clock for TTL tests
  - cache_store: CacheStore over mock_storage and clock
  - translation_service: TranslationService wired to the above, locale "de"

All external service calls are mocked in every test. No real Redis or
translation provider is contacted.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from fightstation.core.exceptions import StorageConnectionError
from fightstation.services.language.locale import StaticLocale
from fightstation.services.translation.cache import CacheStore
from fightstation.services.translation.gateway import GatewayOutcome, TranslationGateway
from fightstation.services.translation.service import TranslationService


# ---------------------------------------------------------------------------
# Mock storage
# ---------------------------------------------------------------------------


class MockStorageClient:
    """In-memory mock of RedisClient for testing.

    Every call yields to the event loop once so concurrent callers
    interleave the way they would against a real server.
    """

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self.fail = False
        self.get_calls = 0
        self.set_calls = 0
        self.delete_calls = 0

    def _check(self, op: str) -> None:
        if self.fail:
            raise StorageConnectionError(f"Redis {op} failed: connection refused")

    async def get(self, key: str) -> str | None:
        await asyncio.sleep(0)
        self.get_calls += 1
        self._check("GET")
        return self._store.get(key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.sleep(0)
        self.set_calls += 1
        self._check("SET")
        self._store[key] = value

    async def delete(self, key: str) -> int:
        await asyncio.sleep(0)
        self.delete_calls += 1
        self._check("DELETE")
        return 1 if self._store.pop(key, None) is not None else 0

    @property
    def total_calls(self) -> int:
        return self.get_calls + self.set_calls + self.delete_calls


# ---------------------------------------------------------------------------
# Mock gateway
# ---------------------------------------------------------------------------


class MockGateway(TranslationGateway):
    """Recording gateway. Replies come from `translations`, else a prefix rule."""

    def __init__(
        self,
        translations: dict[str, str] | None = None,
        detected: str | None = None,
        fail: bool = False,
    ) -> None:
        self.translations = dict(translations or {})
        self.detected = detected
        self.fail = fail
        self.translate_calls: list[tuple[str, str]] = []
        self.detect_calls: list[str] = []

    async def translate(self, text: str, target_language: str) -> GatewayOutcome:
        self.translate_calls.append((text, target_language))
        await asyncio.sleep(0)
        if self.fail:
            return GatewayOutcome.failure("provider unavailable")
        translated = self.translations.get(text, f"[{target_language}] {text}")
        return GatewayOutcome.success(translated)

    async def detect_language(self, text: str) -> str | None:
        self.detect_calls.append(text)
        if not text or len(text.strip()) < 10:
            return None
        return self.detected


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_storage() -> MockStorageClient:
    return MockStorageClient()


@pytest.fixture
def mock_gateway() -> MockGateway:
    return MockGateway()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_store(mock_storage: MockStorageClient, clock: FakeClock) -> CacheStore:
    return CacheStore(
        storage=mock_storage,
        storage_key="@fight_station_translations",
        ttl=timedelta(days=7),
        clock=clock,
    )


@pytest.fixture
def translation_service(
    cache_store: CacheStore, mock_gateway: MockGateway
) -> TranslationService:
    return TranslationService(
        cache=cache_store,
        gateway=mock_gateway,
        locale=StaticLocale("de"),
        batch_concurrency=8,
    )
