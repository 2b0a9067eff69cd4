"""
PyElectron Comlink test configuration and fixtures

Fakes just enough of Electron's IPC objects for the adapter to bind to.
"""

import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Generator
from unittest.mock import MagicMock

import pytest


class BrowserWindow:
    """Fake host window; matched by class name, not identity."""

    def __init__(self):
        self.web_contents = MagicMock(name="webContents")


class FakeTransport:
    """Transport handle recording calls, like Electron's ipcMain/ipcRenderer."""

    def __init__(self):
        self.on = MagicMock(name="on")
        self.remove_listener = MagicMock(name="remove_listener")
        self.send = MagicMock(name="send")


@pytest.fixture
def browser_window() -> BrowserWindow:
    return BrowserWindow()


@pytest.fixture
def ipc_main() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def ipc_renderer() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def renderer_window() -> SimpleNamespace:
    """Renderer window whose user agent identifies Electron."""
    return SimpleNamespace(navigator=SimpleNamespace(user_agent="Electron"))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_dir = Path(tempfile.mkdtemp(prefix="pyelectron_comlink_test_"))
    try:
        yield temp_dir
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")


def pytest_collection_modifyitems(config, items):
    """Mark loopback tests as integration tests."""
    for item in items:
        if "loopback" in str(item.path):
            item.add_marker(pytest.mark.integration)
