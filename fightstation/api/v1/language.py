"""Supported-language catalog and locale preference endpoints."""

from fastapi import APIRouter, Depends, Header

from fightstation.api.deps import get_locale_preference
from fightstation.schemas.translation import (
    LanguageInfo,
    LanguagesResponse,
    LocaleResponse,
    LocaleUpdate,
)
from fightstation.services.language.catalog import SUPPORTED_LANGUAGES
from fightstation.services.language.locale import StoredLocalePreference

router = APIRouter(tags=["language"])


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages() -> LanguagesResponse:
    return LanguagesResponse(
        languages=[
            LanguageInfo(code=lang.code, name=lang.name, native_name=lang.native_name)
            for lang in SUPPORTED_LANGUAGES
        ]
    )


@router.get("/locale", response_model=LocaleResponse)
async def get_locale(
    accept_language: str | None = Header(default=None),
    locale: StoredLocalePreference = Depends(get_locale_preference),
) -> LocaleResponse:
    """Saved language, else the Accept-Language primary tag, else the default."""
    return LocaleResponse(
        language=await locale.current_language(device_language=accept_language)
    )


@router.put("/locale", response_model=LocaleResponse)
async def update_locale(
    body: LocaleUpdate,
    locale: StoredLocalePreference = Depends(get_locale_preference),
) -> LocaleResponse:
    """Save the user's language. Unsupported codes are rejected with 400."""
    language = await locale.set_language(body.language)
    return LocaleResponse(language=language)
