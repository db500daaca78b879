# src/moneybank/shared/logging_conf.py
"""
Logging Configuration - Root Logger Setup for Bank Applications

Installs the root log handlers for programs embedding the bank: a stdout
stream and/or a size-rotated moneybank.log file, both using one format.
Calling setup_logging again replaces the handlers installed before.

Files that USE this module:
- moneybank.app (bootstrap configures logging from settings)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "moneybank.log"
STDOUT_ENV_VAR = "MONEYBANK_LOG_STDOUT"

PathLike = Union[str, Path]


def _resolve_level(level: Union[int, str]) -> int:
    """Accept a numeric level or a case-insensitive level name."""
    if not isinstance(level, str):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _log_file_path(log_file: Optional[PathLike], log_dir: Optional[PathLike]) -> Optional[Path]:
    # log_dir wins over log_file when both are given
    if log_dir:
        return Path(log_dir) / LOG_FILE_NAME
    if log_file:
        return Path(log_file)
    return None


def _stdout_enabled(log_to_stdout: Optional[bool]) -> bool:
    if log_to_stdout is not None:
        return log_to_stdout
    return os.environ.get(STDOUT_ENV_VAR, "true").lower() == "true"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[PathLike] = None,
    log_dir: Optional[PathLike] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stdout: Optional[bool] = None,
) -> List[logging.Handler]:
    """
    Configure the root logger for a bank application.

    Args:
        level: Logging level or level name such as "debug" (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files (file is named moneybank.log)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)
        log_to_stdout: Force stdout logging on/off; defaults to the
                       MONEYBANK_LOG_STDOUT environment variable

    Returns:
        The handlers installed on the root logger

    Raises:
        ValueError: If level is an unknown level name
    """
    numeric_level = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    file_path = _log_file_path(log_file, log_dir)
    if file_path is not None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(file_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )

    # stdout is also the fallback when every other output is disabled
    if _stdout_enabled(log_to_stdout) or not handlers:
        handlers.insert(0, logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)

    logging.getLogger(__name__).info(
        "Logging configured: %s, level=%s",
        f"file={file_path}" if file_path is not None else "stdout",
        logging.getLevelName(numeric_level),
    )
    return handlers
