"""CLI argument and view-selection behavior tests.

Verifies how ``projecttree.cli.main`` resolves the target directory, builds
scan options and prints each view.
"""

from __future__ import annotations

import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from projecttree import cli


def _build_project(root: Path) -> None:
    (root / "a").mkdir()
    (root / "a" / "x.ts").write_text("\n".join("x" for _ in range(10)), encoding="utf-8")
    (root / "a" / "y.ts").write_text("\n".join("y" for _ in range(5)), encoding="utf-8")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "ignored.ts").write_text("", encoding="utf-8")


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self._config_tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve() / "project"
        self.root.mkdir()
        _build_project(self.root)
        self.config_path = Path(self._config_tmp.name) / "config.json"
        self._config = mock.patch("projecttree.config.CONFIG_PATH", self.config_path)
        self._config.start()

    def tearDown(self) -> None:
        self._config.stop()
        self._config_tmp.cleanup()
        self._tmp.cleanup()

    def _run(self, *argv: str) -> str:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main([str(self.root), *argv])
        return stdout.getvalue()

    def test_default_view_renders_tree(self) -> None:
        output = self._run("--lines")
        self.assertEqual(
            output,
            f"{self.root.name}\n└── a/\n    ├── x.ts (10 lines)\n    └── y.ts (5 lines)\n",
        )

    def test_defaults_to_current_working_directory(self) -> None:
        stdout = io.StringIO()
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root / "a")
            with mock.patch("sys.stdout", stdout):
                cli.main([])
        finally:
            os.chdir(previous_cwd)
        self.assertEqual(stdout.getvalue(), "a\n├── x.ts\n└── y.ts\n")

    def test_stats_view_counts_lines(self) -> None:
        output = self._run("--stats")
        self.assertEqual(output, "files: 2\ndirectories: 1\nlines: 15\naverage lines: 8\n")

    def test_match_and_prefix_views_list_relative_paths(self) -> None:
        self.assertEqual(sorted(self._run("--match", "*.ts").splitlines()), ["a/x.ts", "a/y.ts"])
        self.assertEqual(sorted(self._run("--prefix", "a").splitlines()), ["a/", "a/x.ts", "a/y.ts"])
        self.assertEqual(self._run("--regex", r"\.md$"), "")

    def test_group_view_json(self) -> None:
        payload = json.loads(self._run("--group", r"^([^/]+)/", "--json"))
        self.assertEqual(list(payload), ["a"])
        self.assertEqual(sorted(payload["a"]), ["a/x.ts", "a/y.ts"])

    def test_subtree_json_and_missing_subtree(self) -> None:
        payload = json.loads(self._run("--subtree", "a", "--json", "--lines"))
        self.assertEqual(payload["name"], "a")
        self.assertEqual([child["name"] for child in payload["children"]], ["x.ts", "y.ts"])
        self.assertEqual(payload["children"][0]["lines"], 10)

        with self.assertRaises(SystemExit) as raised:
            self._run("--subtree", "missing")
        self.assertIn("missing", str(raised.exception))

    def test_explicit_exclude_replaces_defaults(self) -> None:
        output = self._run("--exclude", "a", "--dirs-only")
        self.assertEqual(output, f"{self.root.name}\n└── node_modules/\n")

    def test_render_depth_limits_tree(self) -> None:
        self.assertEqual(self._run("--render-depth", "1"), f"{self.root.name}\n└── a/\n")
        self.assertEqual(self._run("--subtree", "a", "--render-depth", "1"), "a\n├── x.ts\n└── y.ts\n")

    def test_render_depth_is_rejected_for_list_views(self) -> None:
        for view in (["--stats"], ["--prefix", "a"], ["--match", "*.ts"], ["--dedup"]):
            stderr = io.StringIO()
            with self.subTest(view=view), mock.patch("sys.stderr", stderr), self.assertRaises(SystemExit) as raised:
                self._run(*view, "--render-depth", "1")
            self.assertEqual(raised.exception.code, 2)
            self.assertIn("--render-depth only applies", stderr.getvalue())

    def test_json_is_colorized_only_on_tty(self) -> None:
        stdout = io.StringIO()
        stdout.isatty = lambda: True  # type: ignore[method-assign]
        with mock.patch("sys.stdout", stdout):
            cli.main([str(self.root), "--stats", "--json"])
        self.assertIn("\x1b[", stdout.getvalue())

        stdout = io.StringIO()
        stdout.isatty = lambda: True  # type: ignore[method-assign]
        with mock.patch("sys.stdout", stdout):
            cli.main([str(self.root), "--stats", "--json", "--no-color"])
        self.assertEqual(json.loads(stdout.getvalue())["total_files"], 2)

    def test_missing_path_exits(self) -> None:
        with self.assertRaises(SystemExit) as raised:
            cli.main([str(self.root / "nope")])
        self.assertIn("Path not found", str(raised.exception))

    def test_invalid_regex_is_an_argument_error(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()), self.assertRaises(SystemExit) as raised:
            cli.main([str(self.root), "--regex", "("])
        self.assertEqual(raised.exception.code, 2)

    def test_configured_max_depth_is_used_when_flag_missing(self) -> None:
        self.config_path.write_text('{"max_depth": 1}', encoding="utf-8")
        self.assertEqual(self._run(), f"{self.root.name}\n└── a/\n")


if __name__ == "__main__":
    unittest.main()
