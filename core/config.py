# core/config.py

"""Configuration management."""
import json
import sys
from pathlib import Path
from typing import Optional, Set

from core.data_structures import DEFAULT_PROGRESS_INTERVAL
from utils.i18n import translator as t

CONFIG_FILE_NAME = '.file_sweep_config.json'


class Config:
    """Application configuration manager."""

    def __init__(self, config_file: Optional[Path] = None, load: bool = True):
        self.config_file = Path(config_file) if config_file else Path.home() / CONFIG_FILE_NAME
        self.default_config = {
            'language': 'en',
            'exclusive_filenames': [],
            'exclusive_file_stems': [],
            'exclusive_extensions': [],
            'exclude_directories': [],
            'quit_directory_on_match': False,
            'progress_interval': DEFAULT_PROGRESS_INTERVAL,
        }
        self.config = self.load_config() if load else dict(self.default_config)

    def load_config(self) -> dict:
        """Load configuration from file."""
        config = dict(self.default_config)
        if not self.config_file.exists():
            return config
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            print(t.get('config_unreadable', self.config_file, e), file=sys.stderr)
            return config
        if not isinstance(loaded, dict):
            print(t.get('config_unreadable', self.config_file, type(loaded).__name__), file=sys.stderr)
            return config
        for key, value in loaded.items():
            if key in self.default_config and not self._valid_value(key, value):
                print(t.get('config_unreadable', self.config_file, f"invalid value for '{key}': {value!r}"),
                      file=sys.stderr)
                continue
            config[key] = value
        return config

    def _valid_value(self, key: str, value) -> bool:
        default = self.default_config[key]
        if isinstance(default, bool):
            return isinstance(value, bool)
        if isinstance(default, int):
            return isinstance(value, int) and not isinstance(value, bool) and value > 0
        if isinstance(default, list):
            return isinstance(value, str) or (
                isinstance(value, list) and all(isinstance(item, str) for item in value))
        return isinstance(value, type(default))

    def save_config(self):
        """Save configuration to file."""
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2, ensure_ascii=False)
        except OSError as e:
            print(t.get('config_unwritable', self.config_file, e), file=sys.stderr)

    def get(self, key: str, default=None):
        """Get configuration value."""
        return self.config.get(key, default)

    def set(self, key: str, value):
        """Set configuration value."""
        self.config[key] = value

    def get_set(self, key: str) -> Set[str]:
        """Get a list-valued setting as a set of strings."""
        value = self.config.get(key) or []
        if isinstance(value, str):
            value = [value]
        elif not isinstance(value, (list, tuple, set, frozenset)):
            return set()
        return {str(item) for item in value}
