"""Environment-driven settings: snapshot location, display width, cwd."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

log = logging.getLogger(__name__)

SNAPSHOT_ENV = "MDSHELL_SNAPSHOT"
WIDTH_ENV = "MDSHELL_WIDTH"
CWD_ENV = "MDSHELL_CWD"


def _config_dir() -> Path:
    return Path.home() / ".mdshell"


def snapshot_path() -> Path:
    """Return the snapshot file path, from MDSHELL_SNAPSHOT or the default."""
    value = os.environ.get(SNAPSHOT_ENV)
    if value:
        return Path(value).expanduser()
    return _config_dir() / "snapshot.json"


def working_directory() -> str:
    return os.environ.get(CWD_ENV) or "/"


def _stdout_is_tty() -> bool:
    return sys.stdout.isatty()


def display_width() -> int | None:
    """Return the output width in columns, or None when it is unknown.

    MDSHELL_WIDTH wins when it holds a non-negative integer. Otherwise the
    terminal width is used, but only when stdout is a terminal.
    """
    raw = os.environ.get(WIDTH_ENV)
    if raw:
        try:
            width = int(raw)
        except ValueError:
            width = -1
        if width >= 0:
            return width
        log.warning("ignoring invalid %s=%r", WIDTH_ENV, raw)
    if not _stdout_is_tty():
        return None
    return shutil.get_terminal_size().columns
