"""Custom exception classes for structured error handling."""

from typing import Any


class FightStationError(Exception):
    """Base exception for all Fight Station errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class StorageConnectionError(FightStationError):
    def __init__(self, message: str = "Key-value storage unavailable") -> None:
        super().__init__(code="STORAGE_CONNECTION_ERROR", message=message, status_code=503)


class TranslationProviderError(FightStationError):
    def __init__(self, message: str = "Translation provider request failed") -> None:
        super().__init__(code="TRANSLATION_PROVIDER_ERROR", message=message, status_code=502)


class UnsupportedLanguageError(FightStationError):
    def __init__(self, message: str = "Unsupported language") -> None:
        super().__init__(code="UNSUPPORTED_LANGUAGE", message=message, status_code=400)
