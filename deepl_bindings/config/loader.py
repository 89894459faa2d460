"""Configuration file loader and validator.

Reads client settings from an optional INI file, applies the DEEPL_AUTH_KEY environment variable
and keyword overrides, and validates the result. Raises exceptions for any issue encountered.
"""

from __future__ import annotations

import configparser
import logging
import os
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from deepl_bindings.models.config_models import ClientSettings
from deepl_bindings.utils.logger_utils import LoggerUtils
from deepl_bindings.utils.url_utils import UrlUtils

if TYPE_CHECKING:
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "AUTH_KEY_ENV_VAR",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

AUTH_KEY_ENV_VAR: Final[str] = "DEEPL_AUTH_KEY"


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration contains an invalid type."""


class ConfigLoader:
    """Handles loading and validation of client settings.

    Precedence, lowest first: dataclass defaults, INI file, DEEPL_AUTH_KEY environment variable,
    keyword overrides.

    Args:
        config_filename (str | Path | None): INI file to load. If None, no file is read.
        auth_key (str | None): Override for DEEPL.AUTH_KEY.
        server_url (str | None): Override for DEEPL.SERVER_URL.
        timeout (float | None): Override for DEEPL.TIMEOUT.
        log_level (str | None): Override for LOGGING.LEVEL.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(
        self,
        *,
        config_filename: str | Path | None = None,
        auth_key: str | None = None,
        server_url: str | None = None,
        timeout: float | None = None,
        log_level: str | None = None,
    ) -> None:
        self.config = ClientSettings()

        if config_filename is not None:
            self._read_file(Path(config_filename))

        env_key: str = os.getenv(AUTH_KEY_ENV_VAR, "")
        if env_key:
            logger.debug("Using auth key from '%s'", AUTH_KEY_ENV_VAR)
            self.config.DEEPL.AUTH_KEY = env_key

        # Apply keyword overrides
        if auth_key is not None:
            self.config.DEEPL.AUTH_KEY = auth_key
        if server_url is not None:
            self.config.DEEPL.SERVER_URL = server_url
        if timeout is not None:
            self.config.DEEPL.TIMEOUT = float(timeout)
        if log_level is not None:
            self.config.LOGGING.LEVEL = log_level

        self._validate_settings()

    def _read_file(self, config_path: Path) -> None:
        msg: str
        if not config_path.exists():
            msg = f"Configuration file '{config_path}' not found."
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser(interpolation=None)
        try:
            parser.read(config_path, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_path}': {err}"
            raise ConfigFormatError(msg) from None

        self._convert_settings(parser)

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Copy every defined INI value into the matching ClientSettings field.

        Args:
            parser (ConfigParser): Parsed INI data.

        Raises:
            ConfigFormatError: If a value cannot be parsed or coerced to the expected type.
        """
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            for key in fields(getattr(self.config, section.name)):
                if not parser.has_option(section.name, key.name):
                    logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                    continue
                formatted_value = formatter.apply_format(section, key)
                setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate server URL, timeout and logging level.

        Raises:
            ConfigValueError: If validation fails for any setting.
        """
        if self.config.DEEPL.SERVER_URL:
            try:
                self.config.DEEPL.SERVER_URL = UrlUtils.normalize_server_url(self.config.DEEPL.SERVER_URL)
            except ValueError as err:
                msg: str = f"Invalid value for DEEPL.SERVER_URL: {err}"
                raise ConfigValueError(msg) from None

        if self.config.DEEPL.TIMEOUT < 0:
            msg = f"DEEPL.TIMEOUT must not be negative: {self.config.DEEPL.TIMEOUT}"
            raise ConfigValueError(msg)

        level: str = self.config.LOGGING.LEVEL.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown logging level for LOGGING.LEVEL: '{self.config.LOGGING.LEVEL}'"
            raise ConfigValueError(msg)
        self.config.LOGGING.LEVEL = level

        if not self.config.DEEPL.AUTH_KEY:
            logger.warning("No auth key configured. Set DEEPL.AUTH_KEY or '%s'.", AUTH_KEY_ENV_VAR)

    def apply_logging(self) -> None:
        """Configure library logging from the LOGGING section."""
        LoggerUtils.configure(self.config.LOGGING.FILE, level=self.config.LOGGING.LEVEL)  # type: ignore[arg-type]
        LoggerUtils.set_level(self.config.LOGGING.LEVEL)  # type: ignore[arg-type]


class _ConfigFormatter:
    """Converts INI string values to the types declared in ClientSettings."""

    def __init__(self, config: ClientSettings, parser: ConfigParser) -> None:
        self.config: ClientSettings = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert an INI value to the type of the current field value.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigTypeError: If the field has a type no formatter handles.
        """
        formatters: dict[type, Callable[[str, str], Any]] = {
            float: self.parse_as_float,
            str: self.parse_as_string,
        }

        field_type: type = type(getattr(getattr(self.config, section.name), key.name))
        formatter: Callable[[str, str], Any] | None = formatters.get(field_type)
        if formatter is None:
            msg = f"Unsupported type for {section.name}.{key.name}: {field_type.__name__}"
            raise ConfigTypeError(msg)

        try:
            return formatter(section.name, key.name)
        except ValueError as err:
            msg = f"Invalid value for {section.name}.{key.name}: {err}"
            raise ConfigValueError(msg) from err

    def _raw(self, section: str, key: str) -> str:
        value: str = self.parser.get(section, key).strip()
        for char in ("'", '"'):
            if len(value) >= 2 and value.startswith(char) and value.endswith(char):
                return value[1:-1]
        return value

    def parse_as_string(self, section: str, key: str) -> str:
        """Return the INI string with one pair of surrounding quotes removed."""
        return self._raw(section, key)

    def parse_as_float(self, section: str, key: str) -> float:
        """Convert INI string to float."""
        return float(self._raw(section, key))


