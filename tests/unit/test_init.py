"""
Unit tests for package initialization

Tests version metadata, public exports and the create_adapter helper.
"""

import json
import logging

import pytest

import pyelectron_comlink
from pyelectron_comlink import MessageAdapter, ProcessContext, create_adapter, create_loopback


class TestVersionInfo:
    """Test version information and constants."""

    def test_version_string_format(self):
        parts = pyelectron_comlink.__version__.split('-')[0].split('.')
        assert len(parts) >= 3
        for part in parts[:3]:
            assert part.isdigit()

    def test_version_info_tuple(self):
        version_info = pyelectron_comlink.VERSION_INFO
        assert isinstance(version_info, tuple)
        assert all(isinstance(part, int) for part in version_info)

    def test_package_metadata(self):
        assert pyelectron_comlink.__license__ == "MIT"


class TestPublicAPI:
    """Test the names exported from the package."""

    def test_all_exports_exist(self):
        for name in pyelectron_comlink.__all__:
            assert hasattr(pyelectron_comlink, name), name


class TestCreateAdapter:
    """Test create_adapter."""

    def test_uses_environment(self, monkeypatch):
        monkeypatch.setenv("PYELECTRON_COMLINK_PREFIX", "env--")
        browser_window, ipc_main, _, ipc_renderer = create_loopback()

        endpoint = create_adapter(browser_window, ipc_main)

        assert isinstance(endpoint, MessageAdapter)
        assert endpoint.context is ProcessContext.HOST
        assert endpoint.config.outbound_channel == "env--message"

    def test_uses_config_file(self, temp_dir, monkeypatch):
        for variable in ("PYELECTRON_COMLINK_PREFIX", "PYELECTRON_COMLINK_MARKER",
                         "PYELECTRON_COMLINK_LOG_LEVEL"):
            monkeypatch.delenv(variable, raising=False)
        config_file = temp_dir / "comlink.json"
        config_file.write_text(json.dumps({"log_level": "DEBUG"}))
        _, _, renderer_window, ipc_renderer = create_loopback()

        endpoint = create_adapter(renderer_window, ipc_renderer, config_file=config_file)

        assert endpoint.context is ProcessContext.UI
        assert logging.getLogger("pyelectron_comlink.ipc.adapter").level == logging.DEBUG

    def test_outside_electron(self):
        with pytest.raises(pyelectron_comlink.ContextError):
            create_adapter(object(), object())
