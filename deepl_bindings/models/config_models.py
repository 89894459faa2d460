"""Configuration data models for the DeepL client.

Each dataclass mirrors one section of the INI configuration file; field names match the INI keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

__all__: list[str] = ["DEFAULT_TIMEOUT", "FREE_SERVER_URL", "PRO_SERVER_URL", "ClientSettings"]

PRO_SERVER_URL: Final[str] = "https://api.deepl.com/v2/"
FREE_SERVER_URL: Final[str] = "https://api-free.deepl.com/v2/"
DEFAULT_TIMEOUT: Final[float] = 10.0


@dataclass
class DeepL:
    AUTH_KEY: str = ""
    SERVER_URL: str = ""  # Empty selects the endpoint matching the key type.
    TIMEOUT: float = DEFAULT_TIMEOUT


@dataclass
class Logging:
    LEVEL: str = "WARNING"
    FILE: str = ""


@dataclass
class ClientSettings:
    DEEPL: DeepL = field(default_factory=DeepL)
    LOGGING: Logging = field(default_factory=Logging)
