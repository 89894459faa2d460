"""Asynchronous HTTP transport.

This module provides the `AsyncHttp` class, a thin wrapper around an aiohttp session.
It performs one request per call, hands the live response to a caller-supplied handler and
releases the response when the handler returns or raises. Failures of the exchange itself
(timeouts, refused or reset connections, broken payloads) are raised as `TransportError`;
status codes are left to the caller to interpret.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Literal, Self, TypeAlias, TypeVar

import aiohttp
from aiohttp.client import ClientSession

from deepl_bindings.exceptions import TransportError, TransportTimeoutError
from deepl_bindings.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Awaitable, Callable, Mapping

    from aiohttp.client import ClientResponse


__all__: list[str] = ["AsyncHttp", "HTTPMethod"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod: TypeAlias = Literal["GET", "POST"]

CONNECT_TIMEOUT: Final[float] = 1.0

T = TypeVar("T")


class AsyncHttp:
    """Asynchronous HTTP client owning a reusable aiohttp session.

    The session is created on first use, so an instance may be built outside a running event loop.
    One instance may serve concurrent requests from several coroutines.
    """

    def __init__(self) -> None:
        """Initialize the AsyncHttp client without opening a session."""
        logger.debug("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = None

    async def __aenter__(self) -> Self:
        logger.debug("%s entering context", self.__class__.__name__)
        self.initialize_session(suppress_already_log=True)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        logger.debug("%s exiting context", self.__class__.__name__)
        await self.close()

    def initialize_session(self, *, suppress_already_log: bool = False) -> None:
        """Create the aiohttp session if there is none or the previous one was closed.

        Must be called from a coroutine, aiohttp binds the session to the running loop.

        Args:
            suppress_already_log (bool): If True, do not log when the session is already initialized.
        """
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession()
            logger.debug("%s session initialized", self.__class__.__name__)
        elif not suppress_already_log:
            logger.debug("%s session already initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        """Get the current aiohttp session."""
        if self.__session is None or self.__session.closed:
            msg = "Session is not initialized or has been closed"
            raise RuntimeError(msg)
        return self.__session

    @property
    def closed(self) -> bool:
        return self.__session is None or self.__session.closed

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session and not self.__session.closed:
            await self.__session.close()
            logger.debug("%s session closed", self.__class__.__name__)
        self.__session = None

    @staticmethod
    def build_timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        """Translate a total timeout in seconds into an aiohttp timeout.

        A value of 0 or less disables the timeout. Below CONNECT_TIMEOUT only the total timeout
        is applied, otherwise connecting is limited to CONNECT_TIMEOUT as well.
        """
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if total_timeout < CONNECT_TIMEOUT:
            return aiohttp.ClientTimeout(total=total_timeout)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

    async def request(
        self,
        method: HTTPMethod,
        *,
        url: str,
        handler: Callable[[ClientResponse], Awaitable[T]],
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        data: Any = None,
        total_timeout: float = 10.0,
    ) -> T:
        """Perform one HTTP request and pass the response to `handler`.

        The response is released when `handler` returns or raises, exactly once per call.
        Errors raised by `handler` propagate unchanged.

        Args:
            method (HTTPMethod): The HTTP method to use.
            url (str): The URL to send the request to.
            handler (Callable[[ClientResponse], Awaitable[T]]): Coroutine consuming the response.
            headers (Mapping[str, str] | None): Extra request headers.
            params (Mapping[str, str] | None): Query string parameters.
            data (Any): Request body (bytes, str or an aiohttp payload such as FormData).
            total_timeout (float): Total timeout for the request in seconds.
        Returns:
            T: Whatever `handler` returns.
        Raises:
            TransportTimeoutError: If the server does not respond in time.
            TransportError: If the connection fails or breaks down.
        """
        logger.debug("[%s] url=%s timeout=%s", method, url, total_timeout)
        self.initialize_session(suppress_already_log=True)

        try:
            async with self.session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                data=data,
                timeout=self.build_timeout(total_timeout),
            ) as resp:
                logger.debug("[%s] url=%s status=%s", method, url, resp.status)
                return await handler(resp)

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise TransportTimeoutError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = f"Could not connect to the server: {err}"
            raise TransportError(msg) from err
        except (aiohttp.ClientError, ConnectionResetError) as err:
            logger.debug(err)
            msg = f"The connection to the server failed: {err}"
            raise TransportError(msg) from err
