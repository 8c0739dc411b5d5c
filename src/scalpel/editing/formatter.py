"""
Formatters: pluggable post-edit formatting keyed by file extension.
"""

import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from scalpel.exceptions import FormatError
from scalpel.logging_config import logger
from .config import EXTENSION_LANGUAGES, FORMATTERS


class Formatter(Protocol):
    """Anything that can reformat a whole file's content."""

    def format(self, content: str, language_hint: str) -> str:
        ...


def language_for_path(file_path: str) -> Optional[str]:
    """Language hint for a file extension, or None when unsupported."""
    return EXTENSION_LANGUAGES.get(Path(file_path).suffix.lower())


class ExternalFormatter:
    """
    Pipe content through an external formatter (black, prettier).

    The formatter table maps a language hint to a command that reads the
    source on stdin and writes the formatted source to stdout.
    """

    def __init__(
        self,
        formatters: Optional[Dict[str, Dict[str, Any]]] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize formatter with optional overrides.

        Args:
            formatters: Entries merged over the default FORMATTERS table
            timeout: Seconds before a formatter run is abandoned
        """
        self.formatters = {**FORMATTERS, **(formatters or {})}
        self.timeout = timeout

    def format(self, content: str, language_hint: str) -> str:
        """
        Format content with the command configured for language_hint.

        Args:
            content: Source text
            language_hint: Key into the formatter table ("python", "typescript", ...)

        Returns:
            Formatted content

        Raises:
            FormatError: If no formatter is configured or available, or it fails
        """
        formatter_config = self.formatters.get(language_hint)
        if not formatter_config:
            raise FormatError(language_hint, "no formatter configured")

        command = formatter_config["command"]
        if not shutil.which(command):
            raise FormatError(language_hint, f"'{command}' not found in PATH")

        full_command = [command] + list(formatter_config.get("args", []))

        try:
            result = subprocess.run(
                full_command,
                input=content,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise FormatError(language_hint, f"timeout after {self.timeout}s") from e
        except OSError as e:
            raise FormatError(language_hint, str(e)) from e

        if result.returncode != 0:
            raise FormatError(language_hint, (result.stderr or result.stdout).strip())

        logger.debug(f"Formatted {language_hint} content with {command}")
        return result.stdout
