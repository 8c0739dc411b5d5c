"""
FileStore: text reads and atomic writes.
"""

import os
import shutil
import tempfile
from pathlib import Path

from scalpel.exceptions import StorageError
from scalpel.logging_config import logger


class FileStore:
    """
    Read and write UTF-8 text without translating line endings.

    Writes go to a temp file in the target directory and are renamed over
    the target, so readers never observe a half-written file.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, file_path: str) -> str:
        """
        Read a file's full content.

        Raises:
            StorageError: If the file cannot be read or decoded
        """
        try:
            with open(file_path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {file_path}: {e}")
            raise StorageError(file_path, "read", str(e)) from e

    def write(self, file_path: str, content: str) -> None:
        """
        Write content atomically using temp file + rename.

        Missing parent directories are created. An existing file keeps its
        permission bits.

        Raises:
            StorageError: If any step fails; the target is left untouched
        """
        path = Path(file_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=str(path.parent),
                prefix=f".{path.name}.",
                suffix=".tmp"
            )
        except OSError as e:
            logger.error(f"Failed to create temp file for {file_path}: {e}")
            raise StorageError(file_path, "write", str(e)) from e

        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
            if path.exists():
                shutil.copymode(str(path), temp_path)
            os.replace(temp_path, str(path))
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            logger.error(f"Failed during atomic write of {file_path}: {e}")
            raise StorageError(file_path, "write", str(e)) from e

        logger.debug(f"Atomic write completed: {file_path}")
