"""Translation and locale request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    """POST /v1/translate request body."""

    model_config = ConfigDict(from_attributes=True)

    text: str
    target_language: str | None = Field(default=None, min_length=2, max_length=8)


class TranslateResponse(BaseModel):
    """POST /v1/translate response body."""

    model_config = ConfigDict(from_attributes=True)

    translation: str
    is_translated: bool


class BatchTranslateRequest(BaseModel):
    """POST /v1/translate/batch request body."""

    model_config = ConfigDict(from_attributes=True)

    texts: list[str]
    target_language: str | None = Field(default=None, min_length=2, max_length=8)


class BatchTranslateResponse(BaseModel):
    """POST /v1/translate/batch response body."""

    model_config = ConfigDict(from_attributes=True)

    translations: list[str]
    is_translated: list[bool]


class DetectRequest(BaseModel):
    """POST /v1/detect and POST /v1/needs-translation request body."""

    text: str


class DetectResponse(BaseModel):
    """POST /v1/detect response body."""

    language: str | None
    language_name: str | None = None
    native_name: str | None = None
    script_hint: str | None = None


class NeedsTranslationResponse(BaseModel):
    needs_translation: bool


class CacheClearResponse(BaseModel):
    cleared: bool


class CacheStatsResponse(BaseModel):
    entries: int


class LanguageInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    native_name: str


class LanguagesResponse(BaseModel):
    """GET /v1/languages response body."""

    languages: list[LanguageInfo]


class LocaleUpdate(BaseModel):
    """PUT /v1/locale request body."""

    language: str = Field(min_length=2, max_length=35)


class LocaleResponse(BaseModel):
    language: str
