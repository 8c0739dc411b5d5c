"""
PathGuard: allow-list gate for every path the editor reads or writes.

The allow-list is an explicit value given at construction, so tests can
build guards over synthetic directories.
"""

from pathlib import Path
from typing import Iterable, List

from scalpel.exceptions import AccessDeniedError
from scalpel.logging_config import logger


class PathGuard:
    """
    Reject paths outside the allowed directories.

    Paths are resolved (symlinks and ".." included) before the containment
    check, and containment is decided per path component, so "/srv/app"
    does not admit "/srv/application". An empty allow-list admits nothing.
    """

    def __init__(self, allowed_directories: Iterable[str]):
        self.allowed_directories: List[Path] = [
            Path(d).expanduser().resolve() for d in allowed_directories
        ]

    def is_allowed(self, path: str) -> bool:
        resolved = Path(path).expanduser().resolve()
        return any(
            resolved == root or root in resolved.parents
            for root in self.allowed_directories
        )

    def check(self, path: str) -> Path:
        """
        Approve a path.

        Returns:
            The resolved path

        Raises:
            AccessDeniedError: If the path is outside every allowed directory
        """
        if not self.is_allowed(path):
            logger.warning(f"Blocked access to {path}")
            raise AccessDeniedError(path, [str(d) for d in self.allowed_directories])
        return Path(path).expanduser().resolve()
