"""
Logging Configuration and Utilities

Console and rotating-file logging for the FileMove service, with optional
JSON output for log shippers.

Author: FileMove Project
License: MIT
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from pythonjsonlogger import jsonlogger

ROOT_LOGGER_NAME = "filemove"

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Record attributes written by each handler; the file also gets call sites
CONSOLE_FIELDS = ("asctime", "name", "levelname", "message")
FILE_FIELDS = ("asctime", "name", "levelname", "module", "funcName", "lineno", "message")


class LevelColorFormatter(logging.Formatter):
    """Text formatter that wraps the level name in an ANSI color."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Copy so other handlers still see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def _text_format(fields) -> str:
    head = "[%(asctime)s] %(levelname)s - %(name)s"
    if "lineno" in fields:
        head += " - %(module)s:%(funcName)s:%(lineno)d"
    return head + " - %(message)s"


def build_formatter(fields, json_format: bool = False, color: bool = False) -> logging.Formatter:
    """
    Formatter for the given record fields.

    JSON output carries each field as its own key. Text output uses the
    bracketed timestamp layout, optionally with a colored level name.
    """
    if json_format:
        return jsonlogger.JsonFormatter(" ".join(f"%({field})s" for field in fields))
    formatter_class = LevelColorFormatter if color else logging.Formatter
    return formatter_class(_text_format(fields), datefmt=DATE_FORMAT)


def _resolve_level(log_level) -> tuple:
    name = str(getattr(log_level, "value", log_level)).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return name, level


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_file_path: str = "logs/filemove.log",
    log_rotation_size: int = 10485760,  # 10MB
    log_retention_count: int = 5,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure application logging.

    Installs a console handler and, optionally, a rotating file handler on
    the ``filemove`` logger. Calling it again replaces the handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Enable file logging
        log_file_path: Path to log file
        log_rotation_size: Max log file size before rotation (bytes)
        log_retention_count: Number of backup log files to keep
        json_format: Emit JSON records on every handler

    Returns:
        Configured logger instance
    """
    level_name, level = _resolve_level(log_level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [(
        logging.StreamHandler(sys.stdout),
        build_formatter(CONSOLE_FIELDS, json_format, color=True),
    )]

    if log_to_file:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(
            str(log_path),
            maxBytes=log_rotation_size,
            backupCount=log_retention_count,
            encoding='utf-8'
        )
        handlers.append((rotating, build_formatter(FILE_FIELDS, json_format)))

    for handler, formatter in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {level_name} level")
    if log_to_file:
        logger.info(f"File logging enabled: {log_file_path}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, placed under the ``filemove`` hierarchy.

    Module names already inside the package are used as-is.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
