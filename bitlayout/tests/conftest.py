"""Unit tests configuration file."""

import os

import pytest

FIXTURE_DIR = os.path.join(os.path.dirname(os.path.realpath(__file__)), "fixtures")


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def fixture_file():
    """Return the path of a declaration file under tests/fixtures."""

    def _path(name: str) -> str:
        return os.path.join(FIXTURE_DIR, name)

    return _path


@pytest.fixture
def record_bin(tmp_path):
    """A zeroed binary file sized for the Status fixture."""
    path = tmp_path / "record.bin"
    path.write_bytes(bytes(6))
    return path
