"""Supported UI languages and lightweight offline language helpers."""

import re
from dataclasses import dataclass

FALLBACK_LANGUAGE = "en"


@dataclass(frozen=True)
class Language:
    code: str
    name: str
    native_name: str


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("en", "English", "English"),
    Language("de", "German", "Deutsch"),
    Language("fr", "French", "Français"),
    Language("es", "Spanish", "Español"),
    Language("it", "Italian", "Italiano"),
    Language("ru", "Russian", "Русский"),
    Language("pl", "Polish", "Polski"),
    Language("lt", "Lithuanian", "Lietuvių"),
    Language("lv", "Latvian", "Latviešu"),
    Language("et", "Estonian", "Eesti"),
    Language("fi", "Finnish", "Suomi"),
    Language("sv", "Swedish", "Svenska"),
    Language("sr", "Serbian", "Српски"),
    Language("hr", "Croatian", "Hrvatski"),
    Language("sl", "Slovenian", "Slovenščina"),
    Language("bg", "Bulgarian", "Български"),
    Language("ro", "Romanian", "Română"),
    Language("cs", "Czech", "Čeština"),
    Language("sk", "Slovak", "Slovenčina"),
    Language("hu", "Hungarian", "Magyar"),
)

_BY_CODE = {language.code: language for language in SUPPORTED_LANGUAGES}

# Scripts that identify a language on their own. Kana is checked before
# Han so Japanese text with kanji is not reported as Chinese.
_SCRIPT_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("ja", re.compile(r"[\u3040-\u30ff]")),
    ("zh", re.compile(r"[\u4e00-\u9fff]")),
    ("ko", re.compile(r"[\uac00-\ud7af]")),
    ("th", re.compile(r"[\u0e00-\u0e7f]")),
    ("ar", re.compile(r"[\u0600-\u06ff]")),
    ("ru", re.compile(r"[\u0400-\u04ff]")),
)


def is_supported(code: str | None) -> bool:
    return code is not None and code in _BY_CODE


def get_language_name(code: str) -> str:
    """English display name, or the code itself when unknown."""
    language = _BY_CODE.get(code)
    return language.name if language else code


def get_language_native_name(code: str) -> str:
    """Display name in the language itself, or the code when unknown."""
    language = _BY_CODE.get(code)
    return language.native_name if language else code


def primary_subtag(code: str) -> str:
    """Reduce a locale tag ("de-AT", "pl_PL", "de-AT,de;q=0.9") to its language."""
    first = code.split(",", 1)[0].split(";", 1)[0]
    return first.strip().replace("_", "-").split("-", 1)[0].lower()


def resolve_device_language(code: str | None) -> str:
    """Normalize a locale tag ("de-AT", "PL") to a supported code, else "en"."""
    if not code:
        return FALLBACK_LANGUAGE
    primary = primary_subtag(code)
    return primary if is_supported(primary) else FALLBACK_LANGUAGE


def guess_script_language(text: str) -> str | None:
    """Guess a language from its writing system alone.

    Only unambiguous scripts are recognized; Latin-script text returns None.
    Cyrillic maps to "ru" even though other languages share the script.
    """
    if not text:
        return None
    for code, pattern in _SCRIPT_PATTERNS:
        if pattern.search(text):
            return code
    return None
