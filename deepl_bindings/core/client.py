"""Client for the DeepL REST API.

`DeepLClient` exposes one coroutine per API function. Each call validates and encodes its
request, performs a single HTTP exchange through `AsyncHttp`, classifies error statuses and decodes
the success body into a typed result. Nothing is retried and no polling loop is run; a caller
waiting for a document must call `get_document_status` again with its own delay.
"""

from __future__ import annotations

import json
from json import JSONDecodeError
from typing import TYPE_CHECKING, Any, Final, Self

from deepl_bindings.core.decoder import decode_json
from deepl_bindings.core.encoder import (
    encode_document_handle,
    encode_document_upload,
    encode_translation,
)
from deepl_bindings.core.error_mapper import raise_for_api_error
from deepl_bindings.exceptions import DocumentTranslationError, MalformedResponseError
from deepl_bindings.handlers.async_comm import AsyncHttp
from deepl_bindings.models.config_models import DEFAULT_TIMEOUT
from deepl_bindings.models.document_models import DocumentHandle, DocumentTranslationStatus
from deepl_bindings.models.language_models import DocumentStatus
from deepl_bindings.models.translation_models import TranslationResponse, UsageResponse
from deepl_bindings.utils.logger_utils import LoggerUtils
from deepl_bindings.utils.url_utils import UrlUtils
from deepl_bindings.version import VERSION

if TYPE_CHECKING:
    import logging

    import aiohttp
    from aiohttp.client import ClientResponse

    from deepl_bindings.core.encoder import EncodedForm
    from deepl_bindings.handlers.async_comm import HTTPMethod
    from deepl_bindings.models.config_models import ClientSettings
    from deepl_bindings.models.document_models import DocumentTranslationStartRequest
    from deepl_bindings.models.translation_models import TranslationRequest

__all__: list[str] = ["DeepLClient"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

AUTH_SCHEME: Final[str] = "DeepL-Auth-Key"
USER_AGENT: Final[str] = f"deepl-bindings/{VERSION}"

TRANSLATE_FUNCTION_URI: Final[str] = "translate"
USAGE_FUNCTION_URI: Final[str] = "usage"
DOCUMENT_FUNCTION_URI: Final[str] = "document"
DOCUMENT_RESULT_SUB_URI: Final[str] = "result"

UNSPECIFIED_DOCUMENT_ERROR: Final[str] = "an unspecified error occurred during translation"


async def _read_success_body(resp: ClientResponse) -> bytes:
    await raise_for_api_error(resp)
    return await resp.read()


class DeepLClient:
    """Access to the DeepL API functions.

    The client keeps no state between calls apart from the HTTP session, so one instance can be
    shared by concurrent coroutines. Use it as an async context manager or call `close()`.

    Args:
        auth_key (str): Authentication key, sent as 'Authorization: DeepL-Auth-Key <key>'.
        server_url (str | None): Base URL of the API. If omitted, the free or pro endpoint is
            chosen from the key type.
        timeout (float): Total timeout of each request in seconds. 0 or less disables it.
        http (AsyncHttp | None): Transport to use. A private one is created if omitted.

    Raises:
        ValueError: If the auth key is empty or the server URL is invalid.
    """

    def __init__(
        self,
        auth_key: str,
        *,
        server_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http: AsyncHttp | None = None,
    ) -> None:
        if not auth_key:
            msg = "auth_key must not be empty"
            raise ValueError(msg)
        self.__auth_key: str = auth_key
        self._server_url: str = UrlUtils.select_server_url(auth_key, server_url)
        self.timeout: float = timeout
        self._http: AsyncHttp = http if http is not None else AsyncHttp()
        logger.debug("%s initialized for '%s'", self.__class__.__name__, self._server_url)

    @classmethod
    def from_settings(cls, settings: ClientSettings, *, http: AsyncHttp | None = None) -> Self:
        """Build a client from loaded configuration settings."""
        return cls(
            settings.DEEPL.AUTH_KEY,
            server_url=settings.DEEPL.SERVER_URL or None,
            timeout=settings.DEEPL.TIMEOUT,
            http=http,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._http.close()
        logger.debug("'%s' process termination", self.__class__.__name__)

    @property
    def server_url(self) -> str:
        return self._server_url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(server_url={self._server_url!r})"

    def _headers(self, content_type: str | None = None) -> dict[str, str]:
        headers: dict[str, str] = {
            "Authorization": f"{AUTH_SCHEME} {self.__auth_key}",
            "User-Agent": USER_AGENT,
        }
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    async def _api_request(
        self,
        method: HTTPMethod,
        uri: str,
        *,
        form: EncodedForm | None = None,
        multipart: aiohttp.FormData | None = None,
        params: dict[str, str] | None = None,
    ) -> bytes:
        """Call an API function and return the body of its 200 response.

        Args:
            method (HTTPMethod): HTTP method.
            uri (str): Function path relative to the server URL, without a leading slash.
            form (EncodedForm | None): Url-encoded body.
            multipart (aiohttp.FormData | None): Multipart body; aiohttp supplies its content type and boundary.
            params (dict[str, str] | None): Query string parameters.

        Raises:
            ApiError: If the server answered with an error status.
            TransportError: If the HTTP exchange failed.
        """
        data: Any = None
        content_type: str | None = None
        if form is not None:
            data = form.body
            content_type = form.content_type
        elif multipart is not None:
            data = multipart

        return await self._http.request(
            method,
            url=f"{self._server_url}{uri}",
            handler=_read_success_body,
            headers=self._headers(content_type),
            params=params,
            data=data,
            total_timeout=self.timeout,
        )

    async def translate_text(self, request: TranslationRequest) -> TranslationResponse:
        """Translate text.

        Args:
            request (TranslationRequest): Text, languages and options.

        Returns:
            TranslationResponse: One TextResult per translated text, in request order.

        Raises:
            InvalidRequestError: If the request is incomplete or too large. Nothing is sent.
            UnknownLanguageError: If a language string is not supported. Nothing is sent.
            ApiError: If the server rejected the request.
            TransportError: If the HTTP exchange failed.
            MalformedResponseError: If the response body could not be decoded.
        """
        form: EncodedForm = encode_translation(request)
        logger.debug("'source_lang': '%s', 'target_lang': '%s'", request.source_lang, request.target_lang)

        body: bytes = await self._api_request("POST", TRANSLATE_FUNCTION_URI, form=form)
        response: TranslationResponse = decode_json(body, TranslationResponse)
        logger.info("translation completed (%s > %s)", request.source_lang or "auto", request.target_lang)
        return response

    async def get_usage(self) -> UsageResponse:
        """Retrieve the character usage of the current billing period.

        Raises:
            ApiError: If the server rejected the request.
            TransportError: If the HTTP exchange failed.
            MalformedResponseError: If the response body could not be decoded.
        """
        body: bytes = await self._api_request("GET", USAGE_FUNCTION_URI)
        usage: UsageResponse = decode_json(body, UsageResponse)
        logger.debug("usage: %s/%s characters", usage.character_count, usage.character_limit)
        return usage

    async def translate_document_upload(self, request: DocumentTranslationStartRequest) -> DocumentHandle:
        """Upload a document and start its translation.

        Returns:
            DocumentHandle: Id and key of the started job. Keep it to query and download the document.

        Raises:
            InvalidRequestError: If the file, filename or target language is missing. Nothing is sent.
            UnknownLanguageError: If a language string is not supported. Nothing is sent.
            ApiError: If the server rejected the upload.
            TransportError: If the HTTP exchange failed.
            MalformedResponseError: If the response body could not be decoded.
        """
        multipart: aiohttp.FormData = encode_document_upload(request)
        logger.debug("uploading '%s' (%d bytes)", request.filename, len(request.file))

        body: bytes = await self._api_request("POST", DOCUMENT_FUNCTION_URI, multipart=multipart)
        handle: DocumentHandle = decode_json(body, DocumentHandle)
        logger.info("document translation started: %s", handle.document_id)
        return handle

    async def get_document_status(self, handle: DocumentHandle) -> DocumentTranslationStatus:
        """Query the state of a document job. Does not change anything on the server.

        Returns:
            DocumentTranslationStatus: The reported state while it is queued, translating or done.

        Raises:
            InvalidRequestError: If the handle id or key is blank. Nothing is sent.
            DocumentTranslationError: If the server reports that the translation failed.
            ApiError: If the server rejected the request.
            TransportError: If the HTTP exchange failed.
            MalformedResponseError: If the response body could not be decoded.
        """
        form: EncodedForm = encode_document_handle(handle)
        uri: str = f"{DOCUMENT_FUNCTION_URI}/{UrlUtils.path_segment(handle.document_id)}"

        body: bytes = await self._api_request("POST", uri, form=form)
        try:
            status: DocumentTranslationStatus = decode_json(body, DocumentTranslationStatus)
        except MalformedResponseError:
            message: str | None = self._failure_from_raw_status(body)
            if message is None:
                raise
            raise DocumentTranslationError(message, handle) from None

        logger.debug("document %s: %s", handle.document_id, status)
        if status.status == DocumentStatus.ERROR:
            raise DocumentTranslationError(status.error_message or UNSPECIFIED_DOCUMENT_ERROR, handle)
        return status

    @staticmethod
    def _failure_from_raw_status(body: bytes) -> str | None:
        """Look for a failure report in a status body that did not decode.

        A filename that does not match the file content (e.g. a .txt name for a Word file) can
        produce such bodies. Returns the error message, a generic message when only the 'error'
        status is present, or None when the body reports no failure.
        """
        try:
            payload: Any = json.loads(body)
        except (JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(payload, dict):
            return None

        error_message: Any = payload.get("error_message")
        if isinstance(error_message, str) and error_message:
            return error_message
        if payload.get("status") == DocumentStatus.ERROR:
            return UNSPECIFIED_DOCUMENT_ERROR
        return None

    async def translate_document_download(self, handle: DocumentHandle) -> bytes:
        """Download a translated document.

        The job should have reached 'done'; the server rejects earlier downloads.

        Returns:
            bytes: Content of the translated document.

        Raises:
            InvalidRequestError: If the handle id or key is blank. Nothing is sent.
            ApiError: If the server rejected the request.
            TransportError: If the HTTP exchange failed.
        """
        form: EncodedForm = encode_document_handle(handle)
        uri: str = f"{DOCUMENT_FUNCTION_URI}/{UrlUtils.path_segment(handle.document_id)}/{DOCUMENT_RESULT_SUB_URI}"

        content: bytes = await self._api_request("POST", uri, form=form)
        logger.info("document %s downloaded (%d bytes)", handle.document_id, len(content))
        return content
