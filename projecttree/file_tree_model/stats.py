"""Aggregate counts over a flat entry list."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .types import Entry, EntryKind, TreeStats


def compute_stats(entries: Sequence[Entry]) -> TreeStats:
    """Count files, directories and known lines.

    Entries without a line count contribute zero. The average is rounded half
    up and is 0 when there are no files.
    """
    total_files = sum(1 for entry in entries if entry.kind is EntryKind.FILE)
    total_dirs = sum(1 for entry in entries if entry.kind is EntryKind.DIRECTORY)
    total_lines = sum(entry.line_count or 0 for entry in entries)
    average_lines = math.floor(total_lines / total_files + 0.5) if total_files else 0
    return TreeStats(
        total_files=total_files,
        total_dirs=total_dirs,
        total_lines=total_lines,
        average_lines=average_lines,
    )


__all__ = ["compute_stats"]
