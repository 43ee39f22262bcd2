"""Command-line front door for projecttree.

Parses CLI options, scans the target directory once, then prints one view of
the resulting index: the rendered tree (default), a subtree, a query result,
pattern groups, collapsed paths, or statistics.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path

from .config import ScanOptions, load_default_exclude, load_max_depth
from .file_tree_model import Entry, ProjectTree, render_tree
from .highlight import DEFAULT_STYLE, colorize_json

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _regex(value: str) -> re.Pattern[str]:
    """argparse type for regular expressions."""
    try:
        return re.compile(value)
    except re.error as exc:
        raise argparse.ArgumentTypeError(f"invalid regular expression {value!r}: {exc}") from exc


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projecttree",
        description="Index a directory tree once and print views of it.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")

    scan = parser.add_argument_group("scan")
    scan.add_argument("--max-depth", type=_positive_int, default=None, help="Maximum directory depth to scan.")
    scan.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="NAME",
        help="Exact name to exclude (repeatable). Replaces the default and ignore-file exclusions.",
    )
    scan.add_argument("--dirs-only", action="store_true", help="Record directories only.")
    scan.add_argument("--lines", action="store_true", help="Count lines in files.")

    views = parser.add_argument_group("views").add_mutually_exclusive_group()
    views.add_argument("--subtree", metavar="PATH", help="Render only the subtree at relative PATH.")
    views.add_argument("--prefix", metavar="PREFIX", help="List entries whose relative path starts with PREFIX.")
    views.add_argument("--match", metavar="GLOB", help="List entries matching a glob (anchored at the end).")
    views.add_argument("--regex", type=_regex, metavar="RE", help="List entries whose relative path matches RE.")
    views.add_argument("--group", type=_regex, metavar="RE", help="Group entries by the first capture group of RE.")
    views.add_argument("--dedup", action="store_true", help="List file paths with repeated layouts collapsed.")
    views.add_argument("--stats", action="store_true", help="Print file/directory/line totals (implies --lines).")
    parser.add_argument(
        "--render-depth",
        type=_positive_int,
        default=None,
        help="Maximum depth to render (default tree view and --subtree only).",
    )

    output = parser.add_argument_group("output")
    output.add_argument("--json", action="store_true", help="Print structured JSON instead of text.")
    output.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for colored JSON.")
    output.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    output.add_argument("-v", "--verbose", action="store_true", help="Log skipped paths and other diagnostics.")
    return parser


def _is_list_view(args: argparse.Namespace) -> bool:
    """Return whether ``args`` selects a view that is not rendered as a tree."""
    return any(
        (
            args.prefix is not None,
            args.match is not None,
            args.regex is not None,
            args.group is not None,
            args.dedup,
            args.stats,
        )
    )


def _entry_lines(entries: list[Entry]) -> str:
    return "".join(f"{entry.relative_path}{'/' if entry.is_dir else ''}\n" for entry in entries)


def render_view(tree: ProjectTree, args: argparse.Namespace) -> tuple[object, str]:
    """Return ``(json_payload, text)`` for the view selected by ``args``."""
    if args.subtree is not None:
        node = tree.subtree(args.subtree)
        if node is None:
            raise SystemExit(f"Path not found in index: {args.subtree}")
        return node.to_dict(), render_tree(node, args.render_depth)
    if args.prefix is not None:
        entries = tree.by_prefix(args.prefix)
        return [entry.to_dict() for entry in entries], _entry_lines(entries)
    if args.match is not None:
        entries = tree.match(args.match)
        return [entry.to_dict() for entry in entries], _entry_lines(entries)
    if args.regex is not None:
        entries = tree.match(args.regex)
        return [entry.to_dict() for entry in entries], _entry_lines(entries)
    if args.group is not None:
        groups = tree.group_by_pattern(args.group)
        payload = {key: [entry.relative_path for entry in members] for key, members in groups.items()}
        text = "".join(f"{key}:\n" + "".join(f"  {path}\n" for path in paths) for key, paths in payload.items())
        return payload, text
    if args.dedup:
        paths = tree.deduplicated_paths()
        return paths, "".join(f"{path}\n" for path in paths)
    if args.stats:
        stats = tree.stats()
        text = (
            f"files: {stats.total_files}\n"
            f"directories: {stats.total_dirs}\n"
            f"lines: {stats.total_lines}\n"
            f"average lines: {stats.average_lines}\n"
        )
        return stats.to_dict(), text
    node = tree.to_hierarchical()
    return node.to_dict(), render_tree(node, args.render_depth)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments, scan the target directory and print the chosen view.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.render_depth is not None and _is_list_view(args):
        parser.error("--render-depth only applies to the tree view and --subtree")
    configure_logging(args.verbose)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    options = ScanOptions(
        max_depth=args.max_depth if args.max_depth is not None else load_max_depth(),
        exclude_names=args.exclude,
        include_files=not args.dirs_only,
        count_lines=args.lines or args.stats,
        default_exclude=load_default_exclude(),
    )
    tree = ProjectTree(path, options)
    payload, text = render_view(tree, args)

    if not args.json:
        sys.stdout.write(text)
        return
    rendered = json.dumps(payload, indent=2) + "\n"
    if not args.no_color and sys.stdout.isatty():
        rendered = colorize_json(rendered, args.style)
    sys.stdout.write(rendered)


if __name__ == "__main__":
    main()
