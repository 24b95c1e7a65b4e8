"""Config file loading and theme-location precedence tests."""

from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from iconls import config


class ConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "iconls" / "config.json"
        self._patches = [
            mock.patch.object(config, "CONFIG_PATH", self.config_path),
            mock.patch.dict(os.environ),
        ]
        for patcher in self._patches:
            patcher.start()
        os.environ.pop(config.THEME_ENV_VAR, None)

    def tearDown(self) -> None:
        for patcher in reversed(self._patches):
            patcher.stop()
        self._tmp.cleanup()

    def write_config(self, data: object) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(json.dumps(data), encoding="utf-8")

    def test_missing_or_malformed_config_loads_empty(self) -> None:
        self.assertEqual(config.load_config(), {})

        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{broken", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

        self.config_path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_theme_path_is_read_from_config_file(self) -> None:
        self.write_config({"theme_path": "  /opt/themes/mine  "})

        self.assertEqual(config.load_theme_path(), Path("/opt/themes/mine"))

    def test_blank_or_non_string_theme_path_is_ignored(self) -> None:
        for value in ("   ", 42, None):
            with self.subTest(value=value):
                self.write_config({"theme_path": value})
                self.assertIsNone(config.load_theme_path())

    def test_explicit_location_wins(self) -> None:
        os.environ[config.THEME_ENV_VAR] = "/from/env"
        self.write_config({"theme_path": "/from/config"})

        self.assertEqual(config.resolve_theme_location("/explicit"), Path("/explicit"))

    def test_environment_beats_config_file(self) -> None:
        os.environ[config.THEME_ENV_VAR] = "/from/env"
        self.write_config({"theme_path": "/from/config"})

        self.assertEqual(config.resolve_theme_location(), Path("/from/env"))

    def test_config_file_beats_bundled_theme(self) -> None:
        self.write_config({"theme_path": "/from/config"})

        self.assertEqual(config.resolve_theme_location(), Path("/from/config"))

    def test_falls_back_to_bundled_theme(self) -> None:
        location = config.resolve_theme_location()

        self.assertEqual(location, config.bundled_theme_location())
        self.assertTrue((location / "theme.json").is_file())

    def test_debug_flag_reads_environment(self) -> None:
        os.environ.pop(config.DEBUG_ENV_VAR, None)
        self.assertFalse(config.debug_enabled())

        os.environ[config.DEBUG_ENV_VAR] = "1"
        self.assertTrue(config.debug_enabled())


if __name__ == "__main__":
    unittest.main()
