"""Data models for deepl_bindings.

This package contains the enumerations, request payloads, decoded responses and configuration
dataclasses used throughout the library.
"""

from __future__ import annotations

from deepl_bindings.models.config_models import (
    DEFAULT_TIMEOUT,
    FREE_SERVER_URL,
    PRO_SERVER_URL,
    ClientSettings,
)
from deepl_bindings.models.document_models import (
    DocumentHandle,
    DocumentTranslationStartRequest,
    DocumentTranslationStatus,
)
from deepl_bindings.models.language_models import DocumentStatus, Formality, Language
from deepl_bindings.models.translation_models import (
    TextResult,
    TranslationRequest,
    TranslationResponse,
    UsageResponse,
)

__all__: list[str] = [
    "DEFAULT_TIMEOUT",
    "FREE_SERVER_URL",
    "PRO_SERVER_URL",
    "ClientSettings",
    "DocumentHandle",
    "DocumentStatus",
    "DocumentTranslationStartRequest",
    "DocumentTranslationStatus",
    "Formality",
    "Language",
    "TextResult",
    "TranslationRequest",
    "TranslationResponse",
    "UsageResponse",
]
