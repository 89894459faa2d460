"""Utility modules for deepl_bindings.

This package provides the logging helper shared by every module of the library and
helpers for endpoint URLs.
"""

from deepl_bindings.utils.logger_utils import LoggerUtils, LogLevel
from deepl_bindings.utils.url_utils import UrlUtils

__all__: list[str] = ["LogLevel", "LoggerUtils", "UrlUtils"]
