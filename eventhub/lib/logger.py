"""Logging setup driven by the hub settings file."""

from __future__ import annotations

import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from eventhub.constants import LOG_FILE_BACKUP_COUNT, LOG_FILE_MAX_BYTES, PACKAGE_NAME
from eventhub.lib.get_platform import get_platform

if TYPE_CHECKING:
    from eventhub.lib.preference_manager import HubPreferences

FILE_HANDLER_NAME = f"{PACKAGE_NAME}-file"
CONSOLE_HANDLER_NAME = f"{PACKAGE_NAME}-console"


def get_log_directory() -> Path:
    """Per-user log directory for the current platform.

    Raises:
        OSError: If the platform is not recognised
    """
    platform = get_platform()
    if platform == "unknown":
        raise OSError("Unsupported OS. Can't determine logs folder.")
    if platform == "windows":
        return Path.home() / "AppData" / "Local" / PACKAGE_NAME / "Logs"
    return Path.home() / ".config" / PACKAGE_NAME / "logs"


def prune_log_files(log_dir: Path, keep: int) -> list[Path]:
    """Delete the oldest ``*.log`` files in ``log_dir`` so at most ``keep`` are left.

    Returns the deleted paths.
    """
    by_age = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    stale = by_age[: max(len(by_age) - keep, 0)]
    for path in stale:
        path.unlink()
    return stale


def log_level_from_name(name: str) -> int:
    """Map a level name such as "warning" to its logging constant, INFO if unknown."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


class PaddedLevelFormatter(logging.Formatter):
    """Pads the level name so file log messages line up."""

    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def _replace_root_handler(root: logging.Logger, handler: logging.Handler) -> None:
    for existing in list(root.handlers):
        if existing.get_name() == handler.get_name():
            root.removeHandler(existing)
            existing.close()
    root.addHandler(handler)


def configure_logger(
    log_level: int = logging.INFO, log_dir: Path | None = None, max_log_files: int = 5
) -> Path:
    """Send root logger output (where the hub logs) to the console and a rotating file.

    Calling it again swaps the previously installed handlers instead of stacking
    new ones. Handlers installed by other code are left alone.

    Args:
        log_level: Level for the root logger and both handlers.
        log_dir: Directory for log files. Defaults to ``get_log_directory()``.
        max_log_files: Log files kept in ``log_dir``, including the new one.

    Returns:
        Path of the new log file.
    """
    log_dir = log_dir if log_dir is not None else get_log_directory()
    log_dir.mkdir(parents=True, exist_ok=True)
    prune_log_files(log_dir, keep=max(max_log_files - 1, 0))

    log_file = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT
    )
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setFormatter(
        PaddedLevelFormatter("[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S")
    )

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    root = logging.getLogger()
    for handler in (file_handler, console_handler):
        handler.setLevel(log_level)
        _replace_root_handler(root, handler)
    root.setLevel(log_level)

    logging.debug(f"Logging to {log_file}")
    return log_file


def setup_logging(preferences: HubPreferences, log_dir: Path | None = None) -> Path:
    """Configure logging from the ``log_level`` and ``max_log_files`` settings."""
    max_log_files = preferences.get_or_default("max_log_files")
    if isinstance(max_log_files, bool) or not isinstance(max_log_files, int):
        logging.warning(f"Ignoring invalid max_log_files value {max_log_files!r}")
        max_log_files = preferences.DEFAULTS["max_log_files"]

    return configure_logger(
        log_level_from_name(preferences.get_or_default("log_level")),
        log_dir=log_dir,
        max_log_files=max_log_files,
    )
