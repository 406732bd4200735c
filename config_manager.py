"""Configuration management for the N-Queens enumeration suite.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize benchmark settings, the sequential time limit and the glyphs
used when boards are rendered.

File format (high-level)
------------------------
- experiment_settings: board sizes, repetitions, output directory, workers.
- timeout_settings: per-run limit for sequential enumeration.
- render_settings: queen and empty-cell glyphs.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist the suite configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or copy the config.json shipped with the project"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return benchmark settings (N values, runs, output dir, processes)."""
        return self.config.get("experiment_settings", {})

    def get_timeout_settings(self):
        return self.config.get("timeout_settings", {})

    def get_render_settings(self):
        """Return rendering glyphs, defaulting to ``Q`` and ``_``."""
        render = {"queen": "Q", "empty": "_"}
        render.update(self.config.get("render_settings", {}))
        return render

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
