"""
Pytest configuration for the Scalpel test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Temporary directory fixtures with sample files
- An EditFacade allowed to touch the temporary directory
"""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

from scalpel.logging_config import reset_logging, setup_logging


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for machine-mode operation."""
    os.environ.setdefault("SCALPEL_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    reset_logging()
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False)


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="scalpel_test_")).resolve()
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_project(temp_dir):
    """
    Create a temporary project directory with sample files.

    Returns:
        Path to the temp directory containing sample files.
    """
    (temp_dir / "greeting.txt").write_text("Hello world!\nGoodbye.\n")
    (temp_dir / "sample.py").write_text('''def hello():
    """Say hello."""
    return "hello"

def world():
    """Say world."""
    return "world"
''')
    yield temp_dir


@pytest.fixture
def facade(temp_project):
    """EditFacade whose allow-list is the temp project."""
    from scalpel.editing import EditFacade
    from scalpel.schemas import EditorConfig

    return EditFacade(EditorConfig(allowed_directories=[str(temp_project)]))
