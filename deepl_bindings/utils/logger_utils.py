from __future__ import annotations

import logging
import sys
from logging import Formatter, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, NamedTuple, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LogLevel", "LoggerUtils"]

LevelType: TypeAlias = Literal[
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

_LOG_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2MB
_LOG_BACKUP_COUNT: Final[int] = 2  # Number of backup files to keep

DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING
DEFAULT_NAMESPACE: Final[str] = "DeepLBindings"


class LogLevel(NamedTuple):
    """Represents a logging level with both name and numeric value.

    Attributes:
        name (str): The name of the logging level (e.g., 'INFO', 'DEBUG').
        value (int): The numeric value of the logging level.
    """

    name: str
    value: int


class LoggerUtils:
    """Logging helpers for the library namespace.

    Library modules obtain their loggers through ``get_logger`` so that every record lands below
    a single namespace logger. Nothing is printed unless the application opts in by calling
    ``configure``; until then the namespace logger only carries a NullHandler.

    Attributes:
        _LOGGER_NAMESPACE (str): The namespace for the logger.
        _configured (bool): Indicates whether handlers have been attached by ``configure``.
    """

    _LOGGER_NAMESPACE: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False

    @classmethod
    def namespace_logger(cls) -> logging.Logger:
        """Return the logger at the root of the library namespace."""
        root_logger: logging.Logger = logging.getLogger(cls._LOGGER_NAMESPACE)
        if not any(isinstance(h, NullHandler) for h in root_logger.handlers):
            root_logger.addHandler(NullHandler())
        return root_logger

    @classmethod
    def configure(
        cls,
        filename: str | Path = "",
        *,
        level: LevelType = "INFO",
        use_null_console: bool = False,
    ) -> None:
        """Attach console and file handlers to the namespace logger.

        Calling this more than once does nothing; use ``set_level`` to adjust verbosity afterwards.

        Args:
            filename (str | Path): Absolute path of the log file. If empty, no file logging is performed.
            level (LevelType): Initial logging level of the namespace logger.
            use_null_console (bool): If True, no console handler is attached.
        """
        if cls._configured:
            return

        root_logger: logging.Logger = cls.namespace_logger()
        cls.set_level(level)

        if not (use_null_console or sys.stderr is None):
            cls._console_logging(root_logger)

        filename = str(filename)  # Unify with str type.
        if filename.strip():
            cls._file_logging(root_logger, filename)

        cls._configured = True

    @staticmethod
    def _console_logging(root_logger: logging.Logger) -> None:
        """Configure log output to console.

        Console output is set to WARNING level or above, messages are kept minimal.
        """
        if any(type(h) is StreamHandler for h in root_logger.handlers):
            root_logger.warning("Console logging is already configured.")
            return

        console_handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)

    @staticmethod
    def _file_logging(root_logger: logging.Logger, filename: str) -> None:
        """Configure log output to a size-rotated UTF-8 file.

        Args:
            root_logger (logging.Logger): Namespace logger receiving the handler.
            filename (str): Absolute path to the log file.
        """
        if any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers):
            root_logger.warning("File logging is already configured.")
            return

        try:
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=_LOG_FILE_SIZE,
                backupCount=_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except (FileNotFoundError, PermissionError):
            root_logger.error("Incorrect log file name: %s\nLogging to the file is not performed.", filename)
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            Formatter("%(asctime)s %(levelname)-8s %(process)5d %(lineno)4d %(name)-48s\t%(funcName)s\t%(message)s")
        )
        root_logger.addHandler(file_handler)

    @classmethod
    def set_level(cls, level: LevelType) -> None:
        """Set the logging level of the namespace logger.

        If an unknown level is specified, the default level is used and a warning is logged.

        Args:
            level (LevelType): The logging level to set.
        """
        root_logger: logging.Logger = cls.namespace_logger()
        level_map: dict[str, int] = logging.getLevelNamesMapping()
        try:
            root_logger.setLevel(level_map[level.upper()])
        except KeyError:
            root_logger.setLevel(DEFAULT_LOG_LEVEL)
            root_logger.warning("Unknown logging level '%s' specified.\nLogging level set to 'WARNING'.", level)

    @classmethod
    def get_level(cls) -> LogLevel:
        """Get the effective logging level of the namespace logger.

        Returns:
            LogLevel: A named tuple containing the logging level name and its numeric value.
        """
        level_value: int = cls.namespace_logger().getEffectiveLevel()
        return LogLevel(name=logging.getLevelName(level_value), value=level_value)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Get a logger below the library namespace.

        Args:
            name (str | None): The name of the logger.
                               If None, the namespace logger itself is returned.
        Returns:
            logging.Logger: The logger instance.
        """
        root_logger: logging.Logger = LoggerUtils.namespace_logger()
        if not name:
            return root_logger
        return logging.getLogger(f"{LoggerUtils._LOGGER_NAMESPACE}.{name}")
