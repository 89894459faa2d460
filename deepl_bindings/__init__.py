"""Asynchronous bindings for the DeepL translation API.

Example:
    async with DeepLClient(auth_key) as client:
        response = await client.translate_text(TranslationRequest(text="Hallo Welt!", target_lang=Language.EN))
"""

from deepl_bindings.config import ConfigLoader
from deepl_bindings.core import MAX_BODY_SIZE, STATUS_QUOTA_EXCEEDED, DeepLClient
from deepl_bindings.exceptions import (
    ApiError,
    AuthFailedError,
    BodySizeExceededError,
    DeepLError,
    DocumentTranslationError,
    InvalidRequestError,
    MalformedResponseError,
    NotFoundError,
    QuotaExceededError,
    RequestEntityTooLargeError,
    TooManyRequestsError,
    TransportError,
    TransportTimeoutError,
    UnexpectedStatusError,
    UnknownLanguageError,
    WrongRequestError,
)
from deepl_bindings.handlers import AsyncHttp
from deepl_bindings.models import (
    FREE_SERVER_URL,
    PRO_SERVER_URL,
    ClientSettings,
    DocumentHandle,
    DocumentStatus,
    DocumentTranslationStartRequest,
    DocumentTranslationStatus,
    Formality,
    Language,
    TextResult,
    TranslationRequest,
    TranslationResponse,
    UsageResponse,
)
from deepl_bindings.utils import LoggerUtils
from deepl_bindings.version import VERSION as __version__

__all__: list[str] = [
    "FREE_SERVER_URL",
    "MAX_BODY_SIZE",
    "PRO_SERVER_URL",
    "STATUS_QUOTA_EXCEEDED",
    "ApiError",
    "AsyncHttp",
    "AuthFailedError",
    "BodySizeExceededError",
    "ClientSettings",
    "ConfigLoader",
    "DeepLClient",
    "DeepLError",
    "DocumentHandle",
    "DocumentStatus",
    "DocumentTranslationError",
    "DocumentTranslationStartRequest",
    "DocumentTranslationStatus",
    "Formality",
    "InvalidRequestError",
    "Language",
    "LoggerUtils",
    "MalformedResponseError",
    "NotFoundError",
    "QuotaExceededError",
    "RequestEntityTooLargeError",
    "TextResult",
    "TooManyRequestsError",
    "TransportError",
    "TransportTimeoutError",
    "TranslationRequest",
    "TranslationResponse",
    "UnexpectedStatusError",
    "UnknownLanguageError",
    "UsageResponse",
    "WrongRequestError",
    "__version__",
]
