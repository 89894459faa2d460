"""Exception hierarchy raised by the DeepL client.

Every error derives from DeepLError. Four families exist and are never conflated:
request validation (raised before any network I/O), transport failures, classified API error
responses, and malformed success responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from deepl_bindings.models.document_models import DocumentHandle

__all__: list[str] = [
    "ApiError",
    "AuthFailedError",
    "BodySizeExceededError",
    "DeepLError",
    "DocumentTranslationError",
    "InvalidRequestError",
    "MalformedResponseError",
    "NotFoundError",
    "QuotaExceededError",
    "RequestEntityTooLargeError",
    "TooManyRequestsError",
    "TransportError",
    "TransportTimeoutError",
    "UnexpectedStatusError",
    "UnknownLanguageError",
    "WrongRequestError",
]


class DeepLError(Exception):
    """Base class of every error raised by this library."""


class InvalidRequestError(DeepLError):
    """A request failed client-side validation. No network call was made.

    Attributes:
        field (str): Name of the offending request field.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field: str = field


class BodySizeExceededError(InvalidRequestError):
    """The encoded request body is larger than the API accepts."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__("body", f"body size {size} should not exceed maximum of {limit}")
        self.size: int = size
        self.limit: int = limit


class UnknownLanguageError(DeepLError, ValueError):
    """A language code outside the supported set was specified."""

    def __init__(self, code: str) -> None:
        super().__init__(f"could not find API language: {code!r}")
        self.code: str = code


class TransportError(DeepLError):
    """The HTTP exchange itself failed (DNS, refused connection, reset, payload error)."""


class TransportTimeoutError(TransportError):
    """The server did not answer within the configured timeout."""


class MalformedResponseError(DeepLError):
    """The server answered 200 but the body did not match the expected structure."""


class ApiError(DeepLError):
    """The server answered with a non-success status code.

    Attributes:
        status_code (int): HTTP status returned by the server.
        message (str | None): Message decoded from the error body, if any.
    """

    status_code: ClassVar[int] = 0
    description: ClassVar[str] = ""

    def __init__(self, message: str | None = None) -> None:
        self.message: str | None = message
        super().__init__(self._format())

    def _format(self) -> str:
        text: str = f"server returned status code {self.status_code} ({self.description})"
        if self.message is not None:
            text += f": {self.message!r}"
        return text


class WrongRequestError(ApiError):
    """400: the request was rejected, typically because of a wrong parameter."""

    status_code = 400
    description = "wrong request"


class AuthFailedError(ApiError):
    """403: authorization failed, normally because of an invalid auth key."""

    status_code = 403
    description = "authorization failed"


class NotFoundError(ApiError):
    """404: the requested resource (e.g. a document id) does not exist."""

    status_code = 404
    description = "not found"


class RequestEntityTooLargeError(ApiError):
    """413: the request size exceeds the current limit."""

    status_code = 413
    description = "request entity too large"


class TooManyRequestsError(ApiError):
    """429: too many requests were sent in a short amount of time."""

    status_code = 429
    description = "too many requests"


class QuotaExceededError(ApiError):
    """456: the character quota of the billing period has been reached."""

    status_code = 456
    description = "quota exceeded"


class UnexpectedStatusError(ApiError):
    """Any status code without a dedicated error kind. The body is not decoded."""

    description = "unexpected status code"

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code  # type: ignore[misc]
        super().__init__()

    def _format(self) -> str:
        return f"server returned unexpected status code: {self.status_code}"


class DocumentTranslationError(DeepLError):
    """The server reported that translating an uploaded document failed.

    Attributes:
        handle (DocumentHandle | None): Handle of the failed document job.
    """

    def __init__(self, message: str, handle: DocumentHandle | None = None) -> None:
        super().__init__(message)
        self.handle: DocumentHandle | None = handle
