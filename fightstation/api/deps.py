"""Shared FastAPI dependencies: service injection.

The httpx client, cache store, locale preference and translation service
are created once during the FastAPI lifespan and stored on app.state.
All route handlers retrieve them via Depends(), never by direct import.
"""

from fastapi import Request

from fightstation.services.language.locale import StoredLocalePreference
from fightstation.services.translation.cache import CacheStore
from fightstation.services.translation.service import TranslationService


def get_translation_service(request: Request) -> TranslationService:
    """Return the singleton TranslationService from app state."""
    return request.app.state.translation_service


def get_cache_store(request: Request) -> CacheStore:
    """Return the singleton CacheStore from app state.

    Shared with the TranslationService so both use the same write lock.
    """
    return request.app.state.cache_store


def get_locale_preference(request: Request) -> StoredLocalePreference:
    """Return the stored locale preference from app state."""
    return request.app.state.locale_preference
