# src/todo_repository/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

PACKAGE_LOGGER = "todo_repository"
LOG_FILE_NAME = "todo.log"

# Per-key store traces are only interesting in the log file.
_QUIET_ON_CONSOLE = ("todo_repository.storage.",)


class _PackageConsoleFilter(logging.Filter):
    """
    Console gate:
    - package records pass, except quiet modules below WARNING
    - everything else (third party, py.warnings) only at ERROR+
    """

    def __init__(self, package: str = PACKAGE_LOGGER, quiet: Iterable[str] = _QUIET_ON_CONSOLE) -> None:
        super().__init__()
        self._package = package
        self._quiet = tuple(quiet)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name != self._package and not name.startswith(self._package + "."):
            return record.levelno >= logging.ERROR
        if name.startswith(self._quiet):
            return record.levelno >= logging.WARNING
        return True


def level_from_name(name: str | None, default: int = logging.INFO) -> int:
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else default


def set_package_level(level: int | str) -> logging.Logger:
    """Apply level to the package logger only; the root logger is left alone."""
    if isinstance(level, str):
        level = level_from_name(level)
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(level)
    return pkg


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install root handlers for an application embedding this package:
    a filtered stderr handler and a UTF-8 file handler (todo.log).

    Replaces any handlers already on the root logger. Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_PackageConsoleFilter())

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)
    to_file.setFormatter(fmt)

    root.addHandler(console)
    root.addHandler(to_file)
    logging.captureWarnings(True)
    return log_file
