"""Tests for settings.json persistence of aliases and window size."""

import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import config


class SettingsPersistenceTests(unittest.TestCase):
    def test_defaults_when_file_missing(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            settings_path = Path(tmp_dir) / "settings.json"
            with patch.object(config, "_SETTINGS_PATH", settings_path):
                loaded = config.load_app_settings()

            self.assertEqual(loaded["aliases"], [])
            self.assertIsNone(loaded["window_width"])
            self.assertIsNone(loaded["window_height"])

    def test_save_and_reload_aliases(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            settings_path = Path(tmp_dir) / "settings.json"
            aliases = [{"address": "addr-1", "alias": "alice"}, {"address": "addr-2", "alias": "bob"}]
            with patch.object(config, "_SETTINGS_PATH", settings_path):
                config.save_app_settings({"aliases": aliases})
                loaded = config.load_app_settings()

            self.assertEqual(loaded["aliases"], aliases)

    def test_saving_window_size_keeps_aliases(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            settings_path = Path(tmp_dir) / "settings.json"
            with patch.object(config, "_SETTINGS_PATH", settings_path):
                config.save_app_settings({"aliases": [{"address": "addr-1", "alias": "alice"}]})
                config.save_app_settings({"window_width": "640", "window_height": 480})
                loaded = config.load_app_settings()

            self.assertEqual(loaded["window_width"], 640)
            self.assertEqual(loaded["window_height"], 480)
            self.assertEqual(len(loaded["aliases"]), 1)

    def test_invalid_alias_items_are_ignored(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            settings_path = Path(tmp_dir) / "settings.json"
            settings_path.write_text(
                json.dumps(
                    {
                        "aliases": [
                            {"address": " addr-1 ", "alias": " alice "},
                            {"address": "addr-2"},
                            {"address": "addr-3", "alias": "alice"},
                            {"address": "addr-1", "alias": "again"},
                            "not-a-dict",
                        ],
                        "window_width": "wide",
                    }
                ),
                encoding="utf-8",
            )
            with patch.object(config, "_SETTINGS_PATH", settings_path):
                loaded = config.load_app_settings()

            self.assertEqual(loaded["aliases"], [{"address": "addr-1", "alias": "alice"}])
            self.assertIsNone(loaded["window_width"])

    def test_non_positive_window_size_is_not_stored(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            settings_path = Path(tmp_dir) / "settings.json"
            with patch.object(config, "_SETTINGS_PATH", settings_path):
                config.save_app_settings({"window_width": 0, "window_height": -5})
                loaded = config.load_app_settings()

            self.assertIsNone(loaded["window_width"])
            self.assertIsNone(loaded["window_height"])

    def test_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            settings_path = Path(tmp_dir) / "settings.json"
            settings_path.write_text("{not json", encoding="utf-8")
            with patch.object(config, "_SETTINGS_PATH", settings_path):
                with self.assertLogs("config", level="WARNING"):
                    loaded = config.load_app_settings()

            self.assertEqual(loaded["aliases"], [])


if __name__ == "__main__":
    unittest.main()
