"""Persistent translation cache with time-based expiry.

The whole cache lives in one JSON blob under a single storage key
("@fight_station_translations" by default), keyed by a lossy prefix-based
cache key. Because the key is only a bucket, every lookup re-checks the
full source text before accepting a hit.

The blob is loaded on every access, pruned of expired entries on load,
and rewritten in full on every write. Writes are serialized behind an
asyncio.Lock so concurrent set() calls in one process never drop each
other's entries.

Storage failures never propagate: they are logged and the caller sees an
empty cache for that call.
"""

from __future__ import annotations

import asyncio
import json
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import structlog

from fightstation.core.config import settings
from fightstation.core.exceptions import StorageConnectionError
from fightstation.db.redis import RedisClient

logger = structlog.get_logger(__name__)

KEY_PREFIX_LENGTH = 50

_WHITESPACE_RUN = re.compile(r"\s+")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def derive_key(text: str, target_language: str) -> str:
    """Build the cache key: target language plus the first 50 chars of text.

    Whitespace runs in the prefix collapse to a single "_". Distinct texts
    sharing a prefix map to the same key. The prefix counts code points, so
    for text with astral characters (emoji) in its first 50 characters the
    key differs from one cut at 50 UTF-16 code units. Such entries miss
    instead of matching; they are never returned for the wrong text.
    """
    prefix = _WHITESPACE_RUN.sub("_", text[:KEY_PREFIX_LENGTH])
    return f"{target_language}:{prefix}"


@dataclass(frozen=True)
class CacheEntry:
    """One previously resolved translation."""

    source_text: str
    target_language: str
    translated_text: str
    recorded_at: datetime

    def matches(self, text: str, target_language: str) -> bool:
        return self.source_text == text and self.target_language == target_language

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.source_text,
            "targetLang": self.target_language,
            "translation": self.translated_text,
            "timestamp": int(self.recorded_at.timestamp() * 1000),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CacheEntry:
        """Parse a stored entry. Raises KeyError/TypeError/ValueError on bad data."""
        timestamp_ms = data["timestamp"]
        if not isinstance(timestamp_ms, (int, float)) or isinstance(timestamp_ms, bool):
            raise TypeError(f"timestamp must be a number, got {type(timestamp_ms).__name__}")
        source_text = data["text"]
        target_language = data["targetLang"]
        translated_text = data["translation"]
        for value in (source_text, target_language, translated_text):
            if not isinstance(value, str):
                raise TypeError("cache entry text fields must be strings")
        return cls(
            source_text=source_text,
            target_language=target_language,
            translated_text=translated_text,
            recorded_at=datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc),
        )


class CacheStore:
    """TTL-bounded (text, target_language) -> translation lookup.

    One instance per process; the FastAPI lifespan creates it and keeps it
    on app.state so every request shares the same write lock.
    """

    def __init__(
        self,
        storage: RedisClient,
        storage_key: str = settings.translation_cache_key,
        ttl: timedelta = settings.translation_cache_ttl,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._ttl = ttl
        self._clock = clock
        self._write_lock = asyncio.Lock()

    async def load(self) -> dict[str, CacheEntry]:
        """Read the persisted table and drop expired entries.

        Returns an empty table when the blob is missing, unreadable or
        corrupt. Individual malformed entries are skipped.
        """
        try:
            raw = await self._storage.get(self._storage_key)
        except StorageConnectionError as e:
            logger.error("translation_cache_load_failed", error=str(e))
            return {}

        if raw is None:
            return {}

        try:
            data = json.loads(raw)
        except (ValueError, TypeError) as e:
            logger.warning("translation_cache_corrupt", error=str(e))
            return {}

        if not isinstance(data, dict):
            logger.warning("translation_cache_corrupt", error="top-level value is not an object")
            return {}

        cutoff = self._clock() - self._ttl
        table: dict[str, CacheEntry] = {}
        expired = 0
        for key, item in data.items():
            try:
                entry = CacheEntry.from_dict(item)
            except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
                logger.debug("translation_cache_entry_skipped", key=key, error=str(e))
                continue
            if entry.recorded_at > cutoff:
                table[key] = entry
            else:
                expired += 1

        if expired:
            logger.debug("translation_cache_pruned", expired=expired, remaining=len(table))
        return table

    async def get(self, text: str, target_language: str) -> str | None:
        """Return the cached translation, or None on miss, expiry or collision."""
        table = await self.load()
        key = derive_key(text, target_language)
        entry = table.get(key)
        if entry is None:
            return None
        if not entry.matches(text, target_language):
            logger.debug("translation_cache_key_collision", key=key)
            return None
        return entry.translated_text

    async def set(self, text: str, target_language: str, translated_text: str) -> None:
        """Insert or overwrite the entry for text and persist the whole table."""
        async with self._write_lock:
            table = await self.load()
            key = derive_key(text, target_language)
            table[key] = CacheEntry(
                source_text=text,
                target_language=target_language,
                translated_text=translated_text,
                recorded_at=self._clock(),
            )
            payload = json.dumps(
                {k: entry.to_dict() for k, entry in table.items()},
                ensure_ascii=False,
            )
            try:
                await self._storage.set(self._storage_key, payload)
            except StorageConnectionError as e:
                logger.error("translation_cache_save_failed", key=key, error=str(e))
                return
        logger.debug("translation_cache_saved", key=key, entries=len(table))

    async def clear(self) -> None:
        """Delete the persisted blob."""
        async with self._write_lock:
            try:
                await self._storage.delete(self._storage_key)
            except StorageConnectionError as e:
                logger.error("translation_cache_clear_failed", error=str(e))
                return
        logger.info("translation_cache_cleared")

    async def size(self) -> int:
        """Number of live (unexpired) entries."""
        return len(await self.load())
