"""Read-only queries over a flat entry list.

Every function takes the entries as a sequence and returns new containers;
the entries themselves are shared, never copied or mutated.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from .types import Entry

_GLOB_TOKEN_RE = re.compile(r"\*\*|\*|\.")


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a glob-like pattern to a regex tested against relative paths.

    ``.`` is literal, ``**`` spans separators and ``*`` stays within one path
    segment. The result is anchored at the end only, so ``*.py`` matches a
    ``.py`` file at any depth. Other characters pass through as regex syntax.
    """

    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "**":
            return ".*"
        if token == "*":
            return "[^/]*"
        return r"\."

    return re.compile(_GLOB_TOKEN_RE.sub(replace, pattern) + "$")


def by_prefix(entries: Sequence[Entry], prefix: str) -> list[Entry]:
    """Return entries whose relative path starts with ``prefix``.

    This is a plain string test, not segment-aware: ``"src/a"`` also matches
    ``"src/ab/x.py"``. An empty prefix returns every entry.
    """
    if prefix == "":
        return list(entries)
    return [entry for entry in entries if entry.relative_path.startswith(prefix)]


def filter_entries(entries: Sequence[Entry], predicate: Callable[[Entry], bool]) -> list[Entry]:
    return [entry for entry in entries if predicate(entry)]


def match_entries(entries: Sequence[Entry], pattern: str | re.Pattern[str]) -> list[Entry]:
    """Return entries whose relative path matches a glob string or compiled regex.

    Compiled patterns are searched (not full-matched) against the relative path.
    """
    regex = glob_to_regex(pattern) if isinstance(pattern, str) else pattern
    return [entry for entry in entries if regex.search(entry.relative_path)]


def group_by_pattern(entries: Sequence[Entry], pattern: str | re.Pattern[str]) -> dict[str, list[Entry]]:
    """Group entries by the first capture group of ``pattern``.

    Entries with no match, or with an empty or unset first group, are left
    out. Keys keep first-occurrence order.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    groups: dict[str, list[Entry]] = {}
    if regex.groups < 1:
        return groups
    for entry in entries:
        match = regex.search(entry.relative_path)
        if match is None:
            continue
        key = match.group(1)
        if not key:
            continue
        groups.setdefault(key, []).append(entry)
    return groups


__all__ = [
    "glob_to_regex",
    "by_prefix",
    "filter_entries",
    "match_entries",
    "group_by_pattern",
]
