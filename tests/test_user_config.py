"""
Unit tests for hierarchical UserConfig and EditorConfig construction.
"""

import json

import pytest

from scalpel.exceptions import ConfigError
from scalpel.paths import ScalpelPaths
from scalpel.user_config import UserConfig


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


@pytest.fixture
def paths(temp_dir):
    project = temp_dir / "project"
    project.mkdir()
    return ScalpelPaths(project_root=project, home=temp_dir / "home")


class TestUserConfig:

    def test_defaults_allow_project_root(self, paths):
        config = UserConfig(paths=paths).editor_config()
        assert config.allowed_directories == [str(paths.project_root.resolve())]
        assert config.context_lines == 3
        assert config.include_file_diff is True

    def test_local_overrides_global(self, paths):
        _write(paths.global_config, {"editor": {"context_lines": 5, "include_file_diff": False}})
        _write(paths.local_config, {"editor": {"context_lines": 1}})

        user_config = UserConfig(paths=paths)

        assert user_config.get("editor.context_lines") == 1
        assert user_config.get("editor.include_file_diff") is False
        assert user_config.get("editor.missing", "fallback") == "fallback"

    def test_relative_allowed_directories(self, paths):
        _write(paths.local_config, {"editor": {"allowed_directories": ["src"]}})

        config = UserConfig(paths=paths).editor_config(extra_allowed=["/opt/shared"])

        assert config.allowed_directories[0] == str((paths.project_root / "src").resolve())
        assert len(config.allowed_directories) == 2

    def test_formatter_overrides(self, paths):
        _write(paths.local_config, {"formatters": {"python": {"command": "ruff", "args": ["format", "-"]}}})
        config = UserConfig(paths=paths).editor_config()
        assert config.formatters["python"]["command"] == "ruff"

    def test_broken_file_is_skipped(self, paths):
        paths.local_config.parent.mkdir(parents=True)
        paths.local_config.write_text("{not json")
        assert UserConfig(paths=paths).get("editor.context_lines") == 3

    def test_invalid_values_raise(self, paths):
        _write(paths.local_config, {"editor": {"context_lines": -1}})
        with pytest.raises(ConfigError):
            UserConfig(paths=paths).editor_config()
