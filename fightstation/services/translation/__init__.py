"""Translation services: cache store, provider gateway and the public service."""

from fightstation.services.translation.cache import CacheEntry, CacheStore, derive_key
from fightstation.services.translation.gateway import (
    GatewayOutcome,
    LibreTranslateGateway,
    TranslationGateway,
)
from fightstation.services.translation.service import (
    BatchTranslationResult,
    TranslationResult,
    TranslationService,
)

__all__ = [
    "BatchTranslationResult",
    "CacheEntry",
    "CacheStore",
    "GatewayOutcome",
    "LibreTranslateGateway",
    "TranslationGateway",
    "TranslationResult",
    "TranslationService",
    "derive_key",
]
