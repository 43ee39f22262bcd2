"""Tests for persisted config loading and sanitization."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from projecttree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("projecttree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_default_exclude(), config.DEFAULT_EXCLUDE)
                self.assertIsNone(config.load_max_depth())

    def test_valid_values_are_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("projecttree.config.CONFIG_PATH", config_path):
                config_path.write_text(json.dumps({"default_exclude": ["vendor", ".git"], "max_depth": 4}), encoding="utf-8")

                self.assertEqual(config.load_default_exclude(), ("vendor", ".git"))
                self.assertEqual(config.load_max_depth(), 4)

    def test_malformed_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("projecttree.config.CONFIG_PATH", config_path):
                config_path.write_text(json.dumps({"default_exclude": ["ok", 3], "max_depth": True}), encoding="utf-8")
                self.assertEqual(config.load_default_exclude(), config.DEFAULT_EXCLUDE)
                self.assertIsNone(config.load_max_depth())

                config_path.write_text(json.dumps({"default_exclude": "vendor", "max_depth": 0}), encoding="utf-8")
                self.assertEqual(config.load_default_exclude(), config.DEFAULT_EXCLUDE)
                self.assertIsNone(config.load_max_depth())

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_scan_options_default_to_merging_builtin_excludes(self) -> None:
        options = config.ScanOptions()
        self.assertIsNone(options.exclude_names)
        self.assertIsNone(options.max_depth)
        self.assertTrue(options.include_files)
        self.assertFalse(options.count_lines)
        self.assertIn("node_modules", options.default_exclude)
        self.assertEqual(options.ignore_filename, "reporules.ignore")


if __name__ == "__main__":
    unittest.main()
