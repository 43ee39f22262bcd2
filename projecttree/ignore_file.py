"""Project-local ignore file reader.

Each non-blank line that does not start with ``#`` becomes one exclusion
token. Tokens are exact basenames, not gitignore globs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import IGNORE_FILENAME

logger = logging.getLogger(__name__)


def parse_ignore_lines(content: str) -> list[str]:
    """Return trimmed patterns in file order, skipping blanks and full-line comments.

    Inline ``#`` text is kept as part of the pattern.
    """
    patterns: list[str] = []
    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return patterns


def read_ignore_file(directory: Path, filename: str = IGNORE_FILENAME) -> list[str]:
    """Read ``directory / filename`` and return its patterns.

    A missing file yields ``[]``. Any other read failure is logged as a
    warning and also yields ``[]``.
    """
    ignore_path = Path(directory) / filename
    if not ignore_path.is_file():
        return []
    try:
        content = ignore_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s file: %s", filename, exc)
        return []
    return parse_ignore_lines(content)
