"""
Pytest configuration for the allways test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Isolation from the user's global/local allways config
- Temp project fixtures with sample package modules
"""

import os
from pathlib import Path

import pytest

from allways.cli.config import CLIConfig
from allways.logging_config import setup_logging
from allways.paths import AllwaysPaths


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Plain output and no console logs for every test run."""
    os.environ.setdefault("ALLWAYS_MACHINE_MODE", "1")


# ============================================================================
# LOGGING / CONFIG FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)
    yield
    CLIConfig.set_machine_mode(None)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep ~/.allways and the real CWD out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(AllwaysPaths, "GLOBAL_DIR", home / ".allways")
    monkeypatch.chdir(tmp_path)
    return home


# ============================================================================
# SAMPLE PROJECT FIXTURES
# ============================================================================

SAMPLE_INIT = '''"""Sample package."""

from ._foo import bar
from ._x import y as z
from . import _private


def foo():
    ...
'''


@pytest.fixture
def temp_package(tmp_path) -> Path:
    """
    Create a package directory with an __init__.py that has no allways block.

    Returns:
        Path to the __init__.py file.
    """
    package = tmp_path / "pkg"
    package.mkdir()
    init = package / "__init__.py"
    init.write_text(SAMPLE_INIT, encoding="utf-8")
    return init


@pytest.fixture
def write_module(tmp_path):
    """
    Factory writing a module file with exact bytes (no newline translation).

    Usage:
        path = write_module("mod.py", "import os\\n")
    """
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
