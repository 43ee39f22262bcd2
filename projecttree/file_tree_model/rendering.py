"""Plain-text tree rendering with box-drawing connectors."""

from __future__ import annotations

from .types import TreeNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
SPACE_INDENT = "    "


def format_node_label(node: TreeNode) -> str:
    """Return ``name/`` for directories and ``name (N lines)`` for counted files."""
    if node.is_dir:
        return f"{node.name}/"
    if node.line_count is not None:
        return f"{node.name} ({node.line_count} lines)"
    return node.name


def render_tree(node: TreeNode, max_depth: int | None = None) -> str:
    """Render ``node`` and its descendants, one line per node.

    The first line is the bare root name. The root's children are depth 1;
    with ``max_depth`` set, deeper nodes are omitted entirely, so
    ``max_depth=0`` renders the root name alone.
    """
    lines = [node.name]

    def render_children(parent: TreeNode, prefix: str, depth: int) -> None:
        if not parent.children:
            return
        if max_depth is not None and depth > max_depth:
            return
        last_index = len(parent.children) - 1
        for index, child in enumerate(parent.children):
            is_last = index == last_index
            lines.append(f"{prefix}{LAST_BRANCH if is_last else BRANCH}{format_node_label(child)}")
            render_children(child, prefix + (SPACE_INDENT if is_last else PIPE_INDENT), depth + 1)

    render_children(node, "", 1)
    return "\n".join(lines) + "\n"


__all__ = [
    "format_node_label",
    "render_tree",
]
