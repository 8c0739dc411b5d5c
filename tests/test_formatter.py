"""
Unit tests for ExternalFormatter and extension mapping.
"""

import shutil
import sys

import pytest

from scalpel.editing import ExternalFormatter, language_for_path
from scalpel.exceptions import FormatError


class TestLanguageForPath:

    def test_known_extensions(self):
        assert language_for_path("src/app.py") == "python"
        assert language_for_path("web/App.TSX") == "typescript"
        assert language_for_path("conf.yml") == "yaml"

    def test_unknown_extension(self):
        assert language_for_path("notes.txt") is None


class TestExternalFormatter:

    def test_unconfigured_language(self):
        with pytest.raises(FormatError):
            ExternalFormatter().format("x", "cobol")

    def test_missing_command(self):
        formatter = ExternalFormatter({"python": {"command": "definitely-not-a-formatter-xyz", "args": []}})
        with pytest.raises(FormatError):
            formatter.format("x = 1\n", "python")

    def test_pipes_content_through_command(self):
        # The interpreter running the tests doubles as an "upper-casing formatter"
        formatter = ExternalFormatter({
            "shout": {
                "command": sys.executable,
                "args": ["-c", "import sys; sys.stdout.write(sys.stdin.read().upper())"],
            }
        })
        assert formatter.format("hello\n", "shout") == "HELLO\n"

    def test_nonzero_exit_raises(self):
        formatter = ExternalFormatter({
            "broken": {"command": sys.executable, "args": ["-c", "import sys; sys.exit(3)"]}
        })
        with pytest.raises(FormatError):
            formatter.format("x", "broken")

    @pytest.mark.skipif(shutil.which("black") is None, reason="black not available")
    def test_black(self):
        assert ExternalFormatter().format("x=1\n", "python") == "x = 1\n"

    def test_non_ascii_content_survives(self):
        formatter = ExternalFormatter({
            "echo": {
                "command": sys.executable,
                "args": ["-c", "import sys; sys.stdout.buffer.write(sys.stdin.buffer.read())"],
            }
        })
        assert formatter.format("naïve = 'café ✓'\n", "echo") == "naïve = 'café ✓'\n"
