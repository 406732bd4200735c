"""Tests for the JSON configuration wrapper."""

import json
from pathlib import Path
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config_manager import ConfigManager


class ConfigManagerTests(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.path = Path(self._tmpdir.name) / "config.json"
        self.path.write_text(json.dumps({
            "experiment_settings": {"N_values": [4, 8], "runs": 2},
            "timeout_settings": {"time_limit": 5.0},
        }))

    def tearDown(self):
        self._tmpdir.cleanup()

    def test_getters(self):
        mgr = ConfigManager(self.path)
        self.assertEqual(mgr.get_experiment_settings(), {"N_values": [4, 8], "runs": 2})
        self.assertEqual(mgr.get_timeout_settings(), {"time_limit": 5.0})
        self.assertEqual(mgr.get_render_settings(), {"queen": "Q", "empty": "_"})

    def test_update_setting_persists(self):
        mgr = ConfigManager(self.path)
        mgr.update_setting("render_settings", "queen", "W")
        reloaded = ConfigManager(self.path)
        self.assertEqual(reloaded.get_render_settings(), {"queen": "W", "empty": "_"})

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(Path(self._tmpdir.name) / "missing.json")

    def test_shipped_config_loads(self):
        mgr = ConfigManager(ROOT / "config.json")
        self.assertIn(8, mgr.get_experiment_settings()["N_values"])


if __name__ == "__main__":
    unittest.main()
