"""
Scalpel Path Configuration

Centralized path management for Scalpel data files.
All paths are relative to the project root (current working directory).

Directory Structure:
.scalpel/
├── config.json          # Local config overrides
└── logs/                # Log files (opt-in)
"""

from pathlib import Path
from typing import Optional


class ScalpelPaths:
    """
    Centralized path configuration for Scalpel.

    All paths are lazily resolved relative to project_root.
    Default project_root is current working directory.
    """

    SCALPEL_DIR = ".scalpel"
    CONFIG_NAME = "config.json"
    LOGS_DIR = "logs"

    def __init__(self, project_root: Optional[Path] = None, home: Optional[Path] = None):
        """
        Initialize paths configuration.

        Args:
            project_root: Root directory for the project. Defaults to CWD.
            home: Home directory holding the global config. Defaults to ~.
        """
        self._project_root = project_root
        self._home = home

    @property
    def project_root(self) -> Path:
        """Get the project root directory."""
        if self._project_root is None:
            return Path.cwd()
        return self._project_root

    @property
    def scalpel_dir(self) -> Path:
        """Get the .scalpel directory path."""
        return self.project_root / self.SCALPEL_DIR

    @property
    def global_dir(self) -> Path:
        home = self._home if self._home is not None else Path.home()
        return home / self.SCALPEL_DIR

    @property
    def local_config(self) -> Path:
        return self.scalpel_dir / self.CONFIG_NAME

    @property
    def global_config(self) -> Path:
        return self.global_dir / self.CONFIG_NAME

    @property
    def logs_dir(self) -> Path:
        """Get the logs directory path."""
        return self.scalpel_dir / self.LOGS_DIR

    def ensure_dirs(self) -> None:
        """Create all necessary directories if they don't exist."""
        self.scalpel_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(exist_ok=True)


_paths: Optional[ScalpelPaths] = None


def get_paths(project_root: Optional[Path] = None) -> ScalpelPaths:
    """
    Get the paths instance.

    Args:
        project_root: Optional project root. If given, returns a fresh instance
            for that root instead of the shared one.
    """
    global _paths
    if project_root is not None:
        return ScalpelPaths(project_root)
    if _paths is None:
        _paths = ScalpelPaths()
    return _paths
