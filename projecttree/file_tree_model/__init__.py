"""Domain model for scanned project trees.

This package contains the non-UI tree primitives:
- entry/node datatypes and scan audit records
- the single-pass filesystem scanner
- prefix, predicate, glob/regex and grouping queries over the flat index
- hierarchical projection, text rendering and statistics
"""

from __future__ import annotations

from .fs import (
    DirectoryChild,
    count_lines,
    list_directory_children,
    resolve_exclude_names,
    scan_directory,
)
from .hierarchy import subtree, to_hierarchical
from .index import ProjectTree
from .patterns import deduplicate_file_patterns, extract_path_pattern, group_paths_by_pattern
from .query import by_prefix, filter_entries, glob_to_regex, group_by_pattern, match_entries
from .rendering import format_node_label, render_tree
from .stats import compute_stats
from .types import (
    Entry,
    EntryKind,
    PatternGroup,
    ScanResult,
    SkippedPath,
    SkipReason,
    TreeNode,
    TreeStats,
)

__all__ = [
    "Entry",
    "EntryKind",
    "PatternGroup",
    "ScanResult",
    "SkippedPath",
    "SkipReason",
    "TreeNode",
    "TreeStats",
    "DirectoryChild",
    "count_lines",
    "list_directory_children",
    "resolve_exclude_names",
    "scan_directory",
    "ProjectTree",
    "by_prefix",
    "filter_entries",
    "glob_to_regex",
    "group_by_pattern",
    "match_entries",
    "to_hierarchical",
    "subtree",
    "render_tree",
    "format_node_label",
    "compute_stats",
    "extract_path_pattern",
    "group_paths_by_pattern",
    "deduplicate_file_patterns",
]
