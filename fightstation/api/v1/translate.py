"""Translation endpoints used by feed, comment and profile screens."""

from fastapi import APIRouter, Depends

from fightstation.api.deps import get_cache_store, get_translation_service
from fightstation.schemas.translation import (
    BatchTranslateRequest,
    BatchTranslateResponse,
    CacheClearResponse,
    CacheStatsResponse,
    DetectRequest,
    DetectResponse,
    NeedsTranslationResponse,
    TranslateRequest,
    TranslateResponse,
)
from fightstation.services.language.catalog import (
    get_language_name,
    get_language_native_name,
    guess_script_language,
)
from fightstation.services.translation.cache import CacheStore
from fightstation.services.translation.service import TranslationService

router = APIRouter(tags=["translation"])


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    body: TranslateRequest,
    service: TranslationService = Depends(get_translation_service),
) -> TranslateResponse:
    """Translate one text. Falls back to the original text on any failure."""
    result = await service.translate_text(body.text, body.target_language)
    return TranslateResponse(
        translation=result.translation,
        is_translated=result.is_translated,
    )


@router.post("/translate/batch", response_model=BatchTranslateResponse)
async def translate_batch(
    body: BatchTranslateRequest,
    service: TranslationService = Depends(get_translation_service),
) -> BatchTranslateResponse:
    """Translate many texts; output lists follow input order."""
    result = await service.translate_batch(body.texts, body.target_language)
    return BatchTranslateResponse(
        translations=result.translations,
        is_translated=result.is_translated,
    )


@router.post("/detect", response_model=DetectResponse)
async def detect(
    body: DetectRequest,
    service: TranslationService = Depends(get_translation_service),
) -> DetectResponse:
    """Detect the language of a text via the provider."""
    language = await service.detect_language(body.text)
    return DetectResponse(
        language=language,
        language_name=get_language_name(language) if language else None,
        native_name=get_language_native_name(language) if language else None,
        script_hint=guess_script_language(body.text),
    )


@router.post("/needs-translation", response_model=NeedsTranslationResponse)
async def needs_translation(
    body: DetectRequest,
    service: TranslationService = Depends(get_translation_service),
) -> NeedsTranslationResponse:
    return NeedsTranslationResponse(
        needs_translation=await service.needs_translation(body.text)
    )


@router.delete("/translate/cache", response_model=CacheClearResponse)
async def clear_cache(
    service: TranslationService = Depends(get_translation_service),
) -> CacheClearResponse:
    """Drop every cached translation (settings screen)."""
    await service.clear_translation_cache()
    return CacheClearResponse(cleared=True)


@router.get("/translate/cache", response_model=CacheStatsResponse)
async def cache_stats(
    cache: CacheStore = Depends(get_cache_store),
) -> CacheStatsResponse:
    return CacheStatsResponse(entries=await cache.size())
