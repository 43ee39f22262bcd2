"""Structural path patterns for collapsing repeated layouts.

A monorepo with fifty ``extensions/<name>/package.json`` files says the same
thing fifty times. These helpers group such paths under one wildcarded
pattern and keep a few representatives per large group.
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import PatternGroup

DEDUP_THRESHOLD = 10
DEDUP_KEEP = 3


def extract_path_pattern(relative_path: str) -> str:
    """Wildcard the first variable directory of ``relative_path``.

    ``extensions/discord/package.json`` -> ``extensions/*/package.json``
    ``modules/api/src/config.ts`` -> ``modules/*/src/config.ts``
    Paths with one or two segments are returned unchanged.
    """
    parts = relative_path.split("/")
    if len(parts) <= 2:
        return relative_path
    first, middle, last = parts[0], parts[1:-1], parts[-1]
    if len(middle) == 1:
        return f"{first}/*/{last}"
    return f"{first}/*/{'/'.join(middle[1:])}/{last}"


def group_paths_by_pattern(paths: Iterable[str]) -> list[PatternGroup]:
    """Group paths by ``extract_path_pattern`` in first-occurrence order."""
    grouped: dict[str, list[str]] = {}
    for path in paths:
        grouped.setdefault(extract_path_pattern(path), []).append(path)
    return [PatternGroup(pattern=pattern, paths=tuple(members)) for pattern, members in grouped.items()]


def deduplicate_file_patterns(
    paths: Iterable[str],
    threshold: int = DEDUP_THRESHOLD,
    keep: int = DEDUP_KEEP,
) -> list[str]:
    """Keep root-level paths plus at most ``keep`` paths per large pattern group.

    Groups with fewer than ``threshold`` members are kept whole. Root-level
    paths come first, followed by nested paths group by group.
    """
    path_list = list(paths)
    root_paths = [path for path in path_list if "/" not in path]
    nested_paths = [path for path in path_list if "/" in path]

    kept: list[str] = []
    for group in group_paths_by_pattern(nested_paths):
        if len(group.paths) >= threshold:
            kept.extend(group.paths[:keep])
        else:
            kept.extend(group.paths)
    return root_paths + kept


__all__ = [
    "DEDUP_THRESHOLD",
    "DEDUP_KEEP",
    "extract_path_pattern",
    "group_paths_by_pattern",
    "deduplicate_file_patterns",
]
