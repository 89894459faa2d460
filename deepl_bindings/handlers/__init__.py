"""Transport handlers for deepl_bindings.

This package provides the aiohttp based HTTP transport used by the client.
"""

from deepl_bindings.handlers.async_comm import AsyncHttp

__all__: list[str] = ["AsyncHttp"]
