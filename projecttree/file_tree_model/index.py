"""Scanned project index: one disk walk, many in-memory views."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from pathlib import Path

from ..config import ScanOptions
from .fs import scan_directory
from .hierarchy import subtree, to_hierarchical
from .patterns import deduplicate_file_patterns
from .query import by_prefix, filter_entries, group_by_pattern, match_entries
from .rendering import render_tree
from .stats import compute_stats
from .types import Entry, EntryKind, SkippedPath, TreeNode, TreeStats


class ProjectTree:
    """Immutable snapshot of a directory tree plus query/projection helpers.

    The directory is scanned once in ``__init__``. Every method afterwards
    reads the stored entries only; construct a new ``ProjectTree`` to pick up
    filesystem changes.
    """

    def __init__(self, root: str | os.PathLike[str], options: ScanOptions | None = None) -> None:
        self._options = options or ScanOptions()
        result = scan_directory(root, self._options)
        self._root = result.root
        self._entries = result.entries
        self._skipped = result.skipped

    def __repr__(self) -> str:
        return f"ProjectTree(root={str(self._root)!r}, entries={len(self._entries)})"

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def root_path(self) -> Path:
        return self._root

    @property
    def options(self) -> ScanOptions:
        return self._options

    @property
    def entries(self) -> tuple[Entry, ...]:
        """All entries in scan order (parents before children, siblings unsorted)."""
        return self._entries

    @property
    def skipped(self) -> tuple[SkippedPath, ...]:
        """Paths the scan could not fully process."""
        return self._skipped

    def files(self) -> list[Entry]:
        return [entry for entry in self._entries if entry.kind is EntryKind.FILE]

    def directories(self) -> list[Entry]:
        return [entry for entry in self._entries if entry.kind is EntryKind.DIRECTORY]

    def by_prefix(self, prefix: str) -> list[Entry]:
        return by_prefix(self._entries, prefix)

    def filter(self, predicate: Callable[[Entry], bool]) -> list[Entry]:
        return filter_entries(self._entries, predicate)

    def match(self, pattern: str | re.Pattern[str]) -> list[Entry]:
        return match_entries(self._entries, pattern)

    def group_by_pattern(self, pattern: str | re.Pattern[str]) -> dict[str, list[Entry]]:
        return group_by_pattern(self._entries, pattern)

    def deduplicated_paths(self) -> list[str]:
        """Relative file paths with repeated structural patterns collapsed."""
        return deduplicate_file_patterns(entry.relative_path for entry in self.files())

    def to_hierarchical(self) -> TreeNode:
        return to_hierarchical(self._root, self._entries)

    def subtree(self, relative_path: str) -> TreeNode | None:
        return subtree(self._entries, relative_path)

    def to_tree_string(self, max_depth: int | None = None) -> str:
        return render_tree(self.to_hierarchical(), max_depth)

    def stats(self) -> TreeStats:
        return compute_stats(self._entries)


__all__ = ["ProjectTree"]
