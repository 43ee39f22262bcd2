"""Domain datatypes for the flat file index and its tree projections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


class SkipReason(str, Enum):
    """Why a path contributed nothing (or less than usual) to a scan."""

    STAT_FAILED = "stat_failed"
    LIST_FAILED = "list_failed"
    READ_FAILED = "read_failed"
    SYMLINK_CYCLE = "symlink_cycle"


@dataclass(frozen=True)
class Entry:
    """One file or directory discovered during a scan.

    ``relative_path`` is relative to the scan root and always uses ``/``.
    ``depth`` is 0 for immediate children of the root. ``line_count`` is only
    set for files when line counting was requested and the read succeeded.
    """

    absolute_path: Path
    relative_path: str
    name: str
    kind: EntryKind
    depth: int
    parent_path: Path
    line_count: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "path": str(self.absolute_path),
            "relative_path": self.relative_path,
            "name": self.name,
            "type": self.kind.value,
            "depth": self.depth,
        }
        if self.line_count is not None:
            data["lines"] = self.line_count
        return data


@dataclass(frozen=True)
class SkippedPath:
    """Audit record for a path the scanner could not fully process."""

    path: Path
    reason: SkipReason
    detail: str = ""


@dataclass(frozen=True)
class ScanResult:
    """Entries in scan order plus the paths skipped along the way."""

    root: Path
    entries: tuple[Entry, ...]
    skipped: tuple[SkippedPath, ...] = ()


@dataclass
class TreeNode:
    """Hierarchical projection node built fresh for each projection call.

    ``children`` is a list (possibly empty) for directories and ``None`` for
    files.
    """

    name: str
    path: Path
    kind: EntryKind
    line_count: int | None = None
    children: list[TreeNode] | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def count_nodes(self) -> int:
        """Return the number of nodes in this subtree, including this one."""
        return 1 + sum(child.count_nodes() for child in self.children or ())

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "name": self.name,
            "path": str(self.path),
            "type": self.kind.value,
        }
        if self.line_count is not None:
            data["lines"] = self.line_count
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class TreeStats:
    total_files: int
    total_dirs: int
    total_lines: int
    average_lines: int

    def to_dict(self) -> dict[str, int]:
        return {
            "total_files": self.total_files,
            "total_dirs": self.total_dirs,
            "total_lines": self.total_lines,
            "average_lines": self.average_lines,
        }


@dataclass(frozen=True)
class PatternGroup:
    """Relative paths sharing one derived structural pattern."""

    pattern: str
    paths: tuple[str, ...] = field(default_factory=tuple)


__all__ = [
    "EntryKind",
    "SkipReason",
    "Entry",
    "SkippedPath",
    "ScanResult",
    "TreeNode",
    "TreeStats",
    "PatternGroup",
]
