"""Filesystem scanning into a flat, scan-ordered entry list.

The scan is one depth-first pass. Per-entry failures never abort it: they are
recorded as ``SkippedPath`` items and the affected path contributes nothing
(or, for unreadable file content, no line count). Only a root directory that
cannot be listed raises.
"""

from __future__ import annotations

import logging
import os
import stat as stat_module
from dataclasses import dataclass
from pathlib import Path

from ..config import ScanOptions
from ..ignore_file import read_ignore_file
from .types import Entry, EntryKind, ScanResult, SkippedPath, SkipReason

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One surviving directory child plus the stat data the scanner needs."""

    name: str
    path: Path
    is_dir: bool
    identity: tuple[int, int]


LINE_COUNT_CHUNK_BYTES = 1024 * 1024


def count_lines(path: Path) -> int:
    """Return the number of ``\\n``-delimited segments in ``path``.

    Counts raw ``\\n`` bytes, so lone ``\\r`` never ends a segment and the
    file's encoding does not matter. An empty file counts as one segment; a
    trailing newline adds one. Raises ``OSError`` when the file cannot be read.
    """
    newlines = 0
    with path.open("rb") as handle:
        while True:
            chunk = handle.read(LINE_COUNT_CHUNK_BYTES)
            if not chunk:
                break
            newlines += chunk.count(b"\n")
    return newlines + 1


def resolve_root(root: str | os.PathLike[str]) -> Path:
    """Return ``root`` as an absolute path, resolving relative paths against cwd."""
    return Path(root).resolve()


def resolve_exclude_names(root: Path, options: ScanOptions) -> frozenset[str]:
    """Return the effective set of excluded basenames for a scan of ``root``.

    An explicit ``options.exclude_names`` replaces the defaults and the ignore
    file. Otherwise the defaults are merged with the ignore-file patterns.
    """
    if options.exclude_names is not None:
        return frozenset(options.exclude_names)
    custom = read_ignore_file(root, options.ignore_filename)
    return frozenset(options.default_exclude) | frozenset(custom)


def list_directory_children(
    directory: Path,
    exclude_names: frozenset[str],
) -> tuple[list[DirectoryChild], list[SkippedPath], OSError | None]:
    """List non-excluded children of ``directory`` in listing order.

    Returns ``(children, skipped, scan_error)``. ``scan_error`` is set when the
    directory itself cannot be listed. Children whose stat fails are reported
    in ``skipped`` and left out of ``children``.
    """
    children: list[DirectoryChild] = []
    skipped: list[SkippedPath] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if name in exclude_names:
                    continue
                child_path = Path(child.path)
                try:
                    child_stat = os.stat(child_path)
                except OSError as exc:
                    logger.debug("Skipping %s: stat failed (%s)", child_path, exc)
                    skipped.append(SkippedPath(child_path, SkipReason.STAT_FAILED, str(exc)))
                    continue
                children.append(
                    DirectoryChild(
                        name=name,
                        path=child_path,
                        is_dir=stat_module.S_ISDIR(child_stat.st_mode),
                        identity=(child_stat.st_dev, child_stat.st_ino),
                    )
                )
    except OSError as exc:
        return [], skipped, exc
    return children, skipped, None


def scan_directory(root: str | os.PathLike[str], options: ScanOptions | None = None) -> ScanResult:
    """Walk ``root`` once and return its entries in pre-order scan order.

    Siblings keep directory-listing order. Excluded names are never descended
    into. Raises ``OSError`` if ``root`` itself cannot be listed.
    """
    options = options or ScanOptions()
    root = resolve_root(root)
    exclude_names = resolve_exclude_names(root, options)
    max_depth = options.max_depth

    root_children, root_skipped, root_error = list_directory_children(root, exclude_names)
    if root_error is not None:
        raise root_error

    entries: list[Entry] = []
    skipped: list[SkippedPath] = list(root_skipped)
    root_stat = os.stat(root)
    root_identity = (root_stat.st_dev, root_stat.st_ino)

    def line_count_for(path: Path) -> int | None:
        try:
            return count_lines(path)
        except OSError as exc:
            logger.debug("No line count for %s: %s", path, exc)
            skipped.append(SkippedPath(path, SkipReason.READ_FAILED, str(exc)))
            return None

    def walk(directory: Path, children: list[DirectoryChild], depth: int, ancestors: frozenset[tuple[int, int]]) -> None:
        """Record ``children`` at ``depth`` and descend into their subdirectories."""
        for child in children:
            if child.is_dir or options.include_files:
                line_count = None
                if not child.is_dir and options.count_lines:
                    line_count = line_count_for(child.path)
                entries.append(
                    Entry(
                        absolute_path=child.path,
                        relative_path=child.path.relative_to(root).as_posix(),
                        name=child.name,
                        kind=EntryKind.DIRECTORY if child.is_dir else EntryKind.FILE,
                        depth=depth,
                        parent_path=directory,
                        line_count=line_count,
                    )
                )

            if not child.is_dir:
                continue
            if max_depth is not None and depth + 1 >= max_depth:
                continue
            if child.identity in ancestors:
                logger.debug("Not descending into %s: it links back to an ancestor", child.path)
                skipped.append(SkippedPath(child.path, SkipReason.SYMLINK_CYCLE))
                continue

            grandchildren, child_skipped, scan_error = list_directory_children(child.path, exclude_names)
            skipped.extend(child_skipped)
            if scan_error is not None:
                logger.debug("Skipping contents of %s: %s", child.path, scan_error)
                skipped.append(SkippedPath(child.path, SkipReason.LIST_FAILED, str(scan_error)))
                continue
            walk(child.path, grandchildren, depth + 1, ancestors | {child.identity})

    if max_depth is None or max_depth > 0:
        walk(root, root_children, 0, frozenset({root_identity}))
    return ScanResult(root=root, entries=tuple(entries), skipped=tuple(skipped))


__all__ = [
    "DirectoryChild",
    "count_lines",
    "resolve_root",
    "resolve_exclude_names",
    "list_directory_children",
    "scan_directory",
]
