"""Unit tests for the language catalog and locale preference.

Tests:
  - catalog lookups for known and unknown codes
  - device locale tags and Accept-Language values normalize to a supported code or "en"
  - script heuristic recognizes unambiguous scripts only
  - StoredLocalePreference reads, validates and persists the saved language
  - storage failures fall back to the default language
  - region subtags are dropped before saving a preference
"""

from __future__ import annotations

import pytest

from fightstation.core.exceptions import UnsupportedLanguageError
from fightstation.services.language.catalog import (
    SUPPORTED_LANGUAGES,
    get_language_name,
    get_language_native_name,
    guess_script_language,
    is_supported,
    resolve_device_language,
)
from fightstation.services.language.locale import StaticLocale, StoredLocalePreference
from tests.conftest import MockStorageClient

LANGUAGE_KEY = "@fight_station_language"


class TestCatalog:
    def test_catalog_has_twenty_unique_codes(self) -> None:
        codes = [lang.code for lang in SUPPORTED_LANGUAGES]
        assert len(codes) == 20
        assert len(set(codes)) == 20
        assert codes[0] == "en"

    def test_known_code_names(self) -> None:
        assert get_language_name("de") == "German"
        assert get_language_native_name("de") == "Deutsch"
        assert get_language_native_name("lt") == "Lietuvių"

    def test_unknown_code_returns_code(self) -> None:
        assert get_language_name("xx") == "xx"
        assert get_language_native_name("xx") == "xx"

    def test_is_supported(self) -> None:
        assert is_supported("pl") is True
        assert is_supported("ja") is False
        assert is_supported(None) is False

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("de-AT", "de"),
            ("PL", "pl"),
            ("sr_Latn_RS", "sr"),
            ("ja-JP", "en"),
            ("fr-CA,fr;q=0.9,en;q=0.8", "fr"),
            ("", "en"),
            (None, "en"),
        ],
    )
    def test_resolve_device_language(self, tag: str | None, expected: str) -> None:
        assert resolve_device_language(tag) == expected


class TestScriptHeuristic:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("今日はいい練習だった", "ja"),
            ("今天训练很好", "zh"),
            ("오늘 훈련 좋았어", "ko"),
            ("ซ้อมชกวันนี้", "th"),
            ("تدريب جيد اليوم", "ar"),
            ("Хорошая тренировка", "ru"),
            ("Great session today", None),
            ("", None),
        ],
    )
    def test_guess_script_language(self, text: str, expected: str | None) -> None:
        assert guess_script_language(text) == expected


@pytest.mark.asyncio
class TestStaticLocale:
    async def test_returns_fixed_language(self) -> None:
        assert await StaticLocale("fr").current_language() == "fr"


@pytest.mark.asyncio
class TestStoredLocalePreference:
    async def test_default_when_nothing_saved(self, mock_storage: MockStorageClient) -> None:
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="en")
        assert await locale.current_language() == "en"

    async def test_saved_language_is_returned(self, mock_storage: MockStorageClient) -> None:
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="en")
        assert await locale.set_language(" DE ") == "de"
        assert mock_storage._store[LANGUAGE_KEY] == "de"
        assert await locale.current_language() == "de"

    async def test_unsupported_language_rejected(self, mock_storage: MockStorageClient) -> None:
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="en")
        with pytest.raises(UnsupportedLanguageError):
            await locale.set_language("tlh")
        assert LANGUAGE_KEY not in mock_storage._store

    async def test_unsupported_saved_value_falls_back(self, mock_storage: MockStorageClient) -> None:
        mock_storage._store[LANGUAGE_KEY] = "tlh"
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="fr")
        assert await locale.current_language() == "fr"

    async def test_storage_failure_falls_back(self, mock_storage: MockStorageClient) -> None:
        mock_storage._store[LANGUAGE_KEY] = "de"
        mock_storage.fail = True
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="en")
        assert await locale.current_language() == "en"

    @pytest.mark.parametrize("tag, expected", [("de-AT", "de"), ("pl_PL", "pl"), ("sr-Latn-RS", "sr")])
    async def test_region_tag_saved_as_primary_language(
        self, mock_storage: MockStorageClient, tag: str, expected: str
    ) -> None:
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="en")
        assert await locale.set_language(tag) == expected
        assert mock_storage._store[LANGUAGE_KEY] == expected

    async def test_unsupported_region_tag_rejected(self, mock_storage: MockStorageClient) -> None:
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="en")
        with pytest.raises(UnsupportedLanguageError):
            await locale.set_language("pt-BR")
        assert LANGUAGE_KEY not in mock_storage._store

    async def test_device_language_used_when_nothing_saved(
        self, mock_storage: MockStorageClient
    ) -> None:
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="de")
        assert await locale.current_language(device_language="fi-FI,fi;q=0.9") == "fi"
        assert await locale.current_language(device_language="ja-JP") == "en"
        assert await locale.current_language() == "de"

    async def test_saved_language_beats_device_language(
        self, mock_storage: MockStorageClient
    ) -> None:
        mock_storage._store[LANGUAGE_KEY] = "hu"
        locale = StoredLocalePreference(mock_storage, LANGUAGE_KEY, default_language="en")
        assert await locale.current_language(device_language="fr-FR") == "hu"
