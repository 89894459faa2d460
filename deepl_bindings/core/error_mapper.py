"""Classification of API responses by status code.

A 200 response passes through untouched. Known error statuses are turned into their ApiError
subclass carrying the message from the JSON error body; any other status becomes an
UnexpectedStatusError without reading the body.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from json import JSONDecodeError
from typing import TYPE_CHECKING, Final, Protocol

from deepl_bindings.exceptions import (
    ApiError,
    AuthFailedError,
    NotFoundError,
    QuotaExceededError,
    RequestEntityTooLargeError,
    TooManyRequestsError,
    UnexpectedStatusError,
    WrongRequestError,
)
from deepl_bindings.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

__all__: list[str] = ["API_ERRORS", "STATUS_QUOTA_EXCEEDED", "decode_error_message", "raise_for_api_error"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

# Not part of the HTTP status registry, DeepL uses it for "quota exceeded".
STATUS_QUOTA_EXCEEDED: Final[int] = 456

API_ERRORS: Final[dict[int, type[ApiError]]] = {
    HTTPStatus.BAD_REQUEST: WrongRequestError,
    HTTPStatus.FORBIDDEN: AuthFailedError,
    HTTPStatus.NOT_FOUND: NotFoundError,
    HTTPStatus.REQUEST_ENTITY_TOO_LARGE: RequestEntityTooLargeError,
    HTTPStatus.TOO_MANY_REQUESTS: TooManyRequestsError,
    STATUS_QUOTA_EXCEEDED: QuotaExceededError,
}


class _Response(Protocol):
    @property
    def status(self) -> int: ...

    async def read(self) -> bytes: ...


def _body_preview(body: bytes, limit: int = 200) -> str:
    preview: str = body.decode("utf-8", errors="replace").strip().replace("\n", "\\n")
    if len(preview) > limit:
        return f"{preview[:limit]}..."
    return preview


def decode_error_message(body: bytes) -> str | None:
    """Extract the message of a JSON error body of the form {"message": "..."}.

    Returns:
        str | None: The message, or None if the body is not such an object.
    """
    try:
        payload = json.loads(body)
    except (JSONDecodeError, UnicodeDecodeError):
        logger.debug("Error body is not valid JSON: '%s'", _body_preview(body))
        return None

    message = payload.get("message") if isinstance(payload, dict) else None
    if not isinstance(message, str):
        logger.debug("Error body carries no message: '%s'", _body_preview(body))
        return None
    return message


async def raise_for_api_error(resp: _Response) -> None:
    """Raise the ApiError matching the response status, if it is not 200.

    Args:
        resp: Response exposing `status` and an awaitable `read()`.

    Raises:
        ApiError: The subclass registered for the status, or UnexpectedStatusError.
    """
    if resp.status == HTTPStatus.OK:
        return

    error_cls: type[ApiError] | None = API_ERRORS.get(resp.status)
    if error_cls is None:
        logger.info("Unexpected status code %s", resp.status)
        raise UnexpectedStatusError(resp.status)

    message: str | None = decode_error_message(await resp.read())
    logger.info("API error %s: %s", resp.status, message)
    raise error_cls(message)
