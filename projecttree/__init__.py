"""Public package surface for projecttree.

Exports the ``ProjectTree`` index and its scan options, plus ``main`` for
programmatic CLI invocation. Most implementation lives in
``projecttree.file_tree_model``.
"""

from __future__ import annotations

from .config import DEFAULT_EXCLUDE, ScanOptions
from .file_tree_model import Entry, EntryKind, ProjectTree, TreeNode, TreeStats, render_tree
from .ignore_file import read_ignore_file


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "DEFAULT_EXCLUDE",
    "ScanOptions",
    "Entry",
    "EntryKind",
    "ProjectTree",
    "TreeNode",
    "TreeStats",
    "render_tree",
    "read_ignore_file",
    "main",
]
