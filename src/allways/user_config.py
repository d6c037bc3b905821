"""
allways User Configuration

Hierarchical config system with global defaults + local overrides:
- Global: ~/.allways/config.json (cross-project settings)
- Local: .allways/config.json (project-specific overrides)

Config structure:
{
  "run": {
    "workers": 1               // Parallel workers for multi-file runs
  },
  "logging": {
    "level": "WARNING",        // Console log level
    "file": false              // Write .allways/logs/allways.log
  }
}
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from allways.exceptions import ConfigError
from allways.logging_config import logger
from allways.paths import get_paths


DEFAULT_LOG_LEVEL = "WARNING"

DEFAULT_CONFIG = {
    "run": {
        "workers": 1,
    },
    "logging": {
        "level": DEFAULT_LOG_LEVEL,
        "file": False,
    },
}


class UserConfig:
    """
    Manages hierarchical user configuration.

    Load order (with override):
    1. Default config (hardcoded)
    2. Global config (~/.allways/config.json)
    3. Local config (.allways/config.json)
    """

    def __init__(
        self,
        project_root: Optional[Path] = None,
        global_config_path: Optional[Path] = None,
    ):
        """
        Initialize config manager.

        Args:
            project_root: Project root directory (defaults to CWD)
            global_config_path: Override for the global config file location
        """
        paths = get_paths(project_root)
        self.project_root = paths.project_root
        self.global_config_path = global_config_path or paths.global_config
        self.local_config_path = paths.local_config

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)
        for path in (self.global_config_path, self.local_config_path):
            try:
                overrides = self._read_json(path)
            except ConfigError as e:
                logger.warning(f"Ignoring config: {e}")
                continue
            if overrides:
                config = self._deep_merge(config, overrides)
                logger.debug(f"Loaded config from {path}")
        return config

    def _read_json(self, path: Path) -> Dict[str, Any]:
        """
        Raises:
            ConfigError: If the file exists but is unreadable or not a JSON object
        """
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"{path} is unreadable: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be an object")
        return data

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries, with override taking precedence.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by dot-separated key.

        Example:
            config.get("run.workers")  # -> 1
        """
        value: Any = self._config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    @property
    def workers(self) -> int:
        try:
            workers = int(self.get("run.workers", 1))
        except (TypeError, ValueError):
            logger.warning(f"Invalid run.workers value {self.get('run.workers')!r}, using 1")
            return 1
        return max(1, workers)

    @property
    def log_level(self) -> str:
        level = str(self.get("logging.level", DEFAULT_LOG_LEVEL)).upper()
        try:
            logger.level(level)
        except ValueError:
            logger.warning(f"Invalid logging.level value {self.get('logging.level')!r}, using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return level

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)
