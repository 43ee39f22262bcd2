"""Scan options and persistent JSON config helpers.

``ScanOptions`` carries the exclusion defaults explicitly instead of relying
on module state. The user config file can override those defaults; all access
is defensive, so malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from collections.abc import Collection
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "projecttree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

IGNORE_FILENAME = "reporules.ignore"

DEFAULT_EXCLUDE: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "coverage",
    ".idea",
    ".vscode",
    "__pycache__",
    ".gradle",
    "target",
)


@dataclass(frozen=True)
class ScanOptions:
    """Options for one directory scan.

    ``exclude_names=None`` merges ``default_exclude`` with the patterns from the
    project ignore file. Any explicit collection replaces that merge entirely.
    ``max_depth=None`` means unbounded.
    """

    max_depth: int | None = None
    exclude_names: Collection[str] | None = None
    include_files: bool = True
    count_lines: bool = False
    default_exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    ignore_filename: str = IGNORE_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_default_exclude() -> tuple[str, ...]:
    """Return the configured default exclusion names.

    Only a JSON list of non-empty strings is accepted; anything else falls
    back to ``DEFAULT_EXCLUDE``.
    """
    value = load_config().get("default_exclude")
    if not isinstance(value, list):
        return DEFAULT_EXCLUDE
    if not all(isinstance(item, str) and item for item in value):
        return DEFAULT_EXCLUDE
    return tuple(value)


def load_max_depth() -> int | None:
    """Return the configured default scan depth, or ``None`` for unbounded.

    Booleans and non-positive integers are treated as invalid.
    """
    value = load_config().get("max_depth")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value <= 0:
        return None
    return value
