"""FastAPI application entrypoint.

All routes prefixed /v1. Auto-generated OpenAPI docs at /docs.

One httpx.AsyncClient, one CacheStore and one TranslationService are
created during the lifespan and stored on app.state for injection via
Depends(). The CacheStore must stay a singleton: its write lock is what
keeps concurrent cache writes from overwriting each other.
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fightstation.api.v1.health import router as health_router
from fightstation.api.v1.language import router as language_router
from fightstation.api.v1.translate import router as translate_router
from fightstation.core.config import settings
from fightstation.core.exceptions import FightStationError
from fightstation.db.redis import close_redis, get_redis
from fightstation.services.language.locale import StoredLocalePreference
from fightstation.services.translation.cache import CacheStore
from fightstation.services.translation.gateway import LibreTranslateGateway
from fightstation.services.translation.service import TranslationService


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    Builds the translation stack and attaches it to app.state.
    Retrieved in request handlers via Depends() in fightstation/api/deps.py.
    """
    # --- Startup ---
    logger.info("app_startup", env=settings.app_env)

    storage = await get_redis()
    http_client = httpx.AsyncClient(timeout=settings.translate_timeout_seconds)

    cache_store = CacheStore(storage=storage)
    locale_preference = StoredLocalePreference(storage=storage)
    gateway = LibreTranslateGateway(client=http_client)

    app.state.http_client = http_client
    app.state.cache_store = cache_store
    app.state.locale_preference = locale_preference
    app.state.translation_service = TranslationService(
        cache=cache_store,
        gateway=gateway,
        locale=locale_preference,
    )

    logger.info("app_translation_ready", provider=settings.translate_api_url)
    yield

    # --- Shutdown ---
    logger.info("app_shutdown")

    await http_client.aclose()
    await close_redis()


app = FastAPI(
    title="Fight Station Translation API",
    description="Cached translation of user-generated content for the Fight Station app.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: permissive for development, locked down in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if not settings.is_production else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FightStationError)
async def fightstation_error_handler(request: Request, exc: FightStationError) -> JSONResponse:
    """Structured error response for all Fight Station exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


# Mount all v1 routers
app.include_router(health_router, prefix="/v1")
app.include_router(translate_router, prefix="/v1")
app.include_router(language_router, prefix="/v1")
