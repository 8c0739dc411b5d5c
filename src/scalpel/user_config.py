"""
Scalpel User Configuration

Hierarchical config system with global defaults + local overrides:
- Global: ~/.scalpel/config.json (cross-project settings)
- Local: .scalpel/config.json (project-specific overrides)

Config structure:
{
  "editor": {
    "allowed_directories": ["src", "/abs/path"],  // Default: project root
    "context_lines": 3,                           // Unified diff context
    "include_file_diff": true,                    // Whole-file diff in edit outcomes
    "formatter_timeout": 30                       // Seconds
  },
  "formatters": {
    "python": {"command": "ruff", "args": ["format", "-"]}
  }
}
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from pydantic import ValidationError

from scalpel.exceptions import ConfigError
from scalpel.logging_config import logger
from scalpel.paths import ScalpelPaths
from scalpel.schemas import EditorConfig


# Default configuration
DEFAULT_CONFIG = {
    "editor": {
        "allowed_directories": [],
        "context_lines": 3,
        "include_file_diff": True,
        "formatter_timeout": 30,
    },
    "formatters": {},
}


class UserConfig:
    """
    Manages hierarchical user configuration.

    Load order (with override):
    1. Default config (hardcoded)
    2. Global config (~/.scalpel/config.json)
    3. Local config (.scalpel/config.json)
    """

    def __init__(self, project_root: Optional[Path] = None, paths: Optional[ScalpelPaths] = None):
        """
        Initialize config manager.

        Args:
            project_root: Project root directory (defaults to CWD)
            paths: Path layout override (mainly for tests)
        """
        self.paths = paths or ScalpelPaths(project_root)
        self.project_root = self.paths.project_root
        self.global_config_path = self.paths.global_config
        self.local_config_path = self.paths.local_config

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration with hierarchical override.

        Unreadable files are logged and skipped.
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        for label, path in (("global", self.global_config_path), ("local", self.local_config_path)):
            if not path.exists():
                continue
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    config = self._deep_merge(config, json.load(f))
                logger.debug(f"Loaded {label} config from {path}")
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to load {label} config: {e}")

        return config

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

        Examples:
            config.get("editor.context_lines")  # 3
        """
        value = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def editor_config(self, extra_allowed: Optional[Iterable[str]] = None) -> EditorConfig:
        """
        Build the EditorConfig value handed to EditFacade.

        Relative allowed directories are resolved against the project root.
        With no directory configured, the project root itself is allowed.

        Args:
            extra_allowed: Directories to allow on top of the configured ones

        Raises:
            ConfigError: If the editor section holds invalid values
        """
        editor = dict(self.get("editor", {}))

        allowed = list(editor.get("allowed_directories") or [str(self.project_root)])
        allowed.extend(extra_allowed or [])
        editor["allowed_directories"] = [
            str(self._resolve_dir(d)) for d in allowed
        ]

        try:
            return EditorConfig(formatters=self.get("formatters", {}), **editor)
        except (TypeError, ValidationError) as e:
            raise ConfigError(f"Invalid editor configuration: {e}") from e

    def _resolve_dir(self, directory: str) -> Path:
        path = Path(directory).expanduser()
        if not path.is_absolute():
            path = self.project_root / path
        return path.resolve()
