"""Flat-index to tree projection.

Projection runs in two phases: attach every node to its parent through a
path-keyed map, then sort every children list. Attachment order is not the
display order, so the sort pass always runs.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .types import Entry, EntryKind, TreeNode


def _node_for(entry: Entry) -> TreeNode:
    return TreeNode(
        name=entry.name,
        path=entry.absolute_path,
        kind=entry.kind,
        line_count=entry.line_count,
        children=[] if entry.is_dir else None,
    )


def _sort_key(node: TreeNode) -> tuple[bool, str]:
    """Sort directories before files and then by name."""
    return (not node.is_dir, node.name)


def sort_children(node: TreeNode) -> None:
    """Recursively sort ``node``'s children in display order."""
    if node.children is None:
        return
    node.children.sort(key=_sort_key)
    for child in node.children:
        sort_children(child)


def _attach(root_node: TreeNode, entries: Sequence[Entry]) -> TreeNode:
    """Attach ``entries`` below ``root_node`` and sort the result."""
    nodes: dict[Path, TreeNode] = {root_node.path: root_node}
    # A parent path is a strict prefix of its children's paths, so it sorts first.
    for entry in sorted(entries, key=lambda item: str(item.absolute_path)):
        node = _node_for(entry)
        nodes[entry.absolute_path] = node
        parent = nodes.get(entry.parent_path)
        if parent is not None and parent.children is not None:
            parent.children.append(node)
    sort_children(root_node)
    return root_node


def to_hierarchical(root: Path, entries: Sequence[Entry]) -> TreeNode:
    """Project all ``entries`` into one tree rooted at the scan root."""
    root_node = TreeNode(name=root.name or str(root), path=root, kind=EntryKind.DIRECTORY, children=[])
    return _attach(root_node, entries)


def normalize_relative_path(relative_path: str) -> str:
    """Normalize user input like ``./src/api/`` to ``src/api``."""
    normalized = relative_path.strip().replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.strip("/")


def subtree(entries: Sequence[Entry], relative_path: str) -> TreeNode | None:
    """Project the entry at ``relative_path`` and everything below it.

    Returns ``None`` when no entry has that relative path, which keeps a
    missing path distinct from an existing empty directory.
    """
    target_path = normalize_relative_path(relative_path)
    if not target_path:
        return None
    target = next((entry for entry in entries if entry.relative_path == target_path), None)
    if target is None:
        return None

    descendant_prefix = target_path + "/"
    descendants = [entry for entry in entries if entry.relative_path.startswith(descendant_prefix)]
    return _attach(_node_for(target), descendants)


__all__ = [
    "sort_children",
    "to_hierarchical",
    "normalize_relative_path",
    "subtree",
]
