from __future__ import annotations

from typing import Final
from urllib.parse import quote, urlsplit

from deepl_bindings.models.config_models import FREE_SERVER_URL, PRO_SERVER_URL

__all__: list[str] = ["UrlUtils"]

FREE_KEY_SUFFIX: Final[str] = ":fx"


class UrlUtils:
    """Helpers for endpoint URLs and auth keys."""

    @staticmethod
    def is_free_account_key(auth_key: str) -> bool:
        """Check whether an auth key belongs to a DeepL API Free account.

        Free account keys end with ':fx'.
        """
        return auth_key.endswith(FREE_KEY_SUFFIX)

    @staticmethod
    def normalize_server_url(url: str) -> str:
        """Validate a server URL and make sure it ends with a slash.

        Args:
            url (str): Base URL of the API, e.g. 'https://api-free.deepl.com/v2/'.

        Returns:
            str: The URL with a trailing slash, so that function names can be appended.

        Raises:
            ValueError: If the URL is not an absolute http(s) URL with a host.
        """
        parts = urlsplit(url.strip())
        if parts.scheme not in ("http", "https") or not parts.netloc:
            msg: str = f"Invalid server URL: '{url}'"
            raise ValueError(msg)
        if parts.query or parts.fragment:
            msg = f"Server URL must not contain a query or fragment: '{url}'"
            raise ValueError(msg)
        normalized: str = url.strip()
        return normalized if normalized.endswith("/") else f"{normalized}/"

    @staticmethod
    def select_server_url(auth_key: str, server_url: str | None = None) -> str:
        """Return the validated server URL, defaulting to the endpoint matching the key type."""
        if not server_url:
            server_url = FREE_SERVER_URL if UrlUtils.is_free_account_key(auth_key) else PRO_SERVER_URL
        return UrlUtils.normalize_server_url(server_url)

    @staticmethod
    def path_segment(value: str) -> str:
        """Quote a value for use as a single URL path segment."""
        return quote(value, safe="")
