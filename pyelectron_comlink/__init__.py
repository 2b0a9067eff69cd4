"""
PyElectron Comlink - Electron IPC as a message endpoint

PyElectron Comlink lets an RPC-over-message-channel library talk across
Electron's host/renderer boundary by presenting ipcMain, webContents and
ipcRenderer as one symmetric endpoint with add_event_listener,
remove_event_listener and post_message.
"""

__version__ = "0.1.0"
__author__ = "PyElectron Team"
__email__ = "team@pyelectron.dev"
__license__ = "MIT"

from pathlib import Path
from typing import Any, Optional, Union

from pyelectron_comlink.ipc.adapter import MessageAdapter
from pyelectron_comlink.ipc.capability import patch_capability, is_capability_stub
from pyelectron_comlink.ipc.context import ProcessContext, detect_context
from pyelectron_comlink.ipc.listeners import MessageEvent
from pyelectron_comlink.ipc.loopback import create_loopback

from pyelectron_comlink.utils.config import AdapterConfig, load_config
from pyelectron_comlink.utils.errors import (
    ComlinkError,
    ContextError,
    ConfigError,
    TransportError,
    UnsupportedOperationError,
    CapabilityNotImplementedError,
)
from pyelectron_comlink.utils.logging import set_level

VERSION_INFO = tuple(int(part) for part in __version__.split('.') if part.isdigit())

__all__ = [
    # Adapter
    "MessageAdapter",
    "MessageEvent",
    "ProcessContext",
    "detect_context",
    "create_adapter",

    # Capability shim
    "patch_capability",
    "is_capability_stub",

    # Loopback transport
    "create_loopback",

    # Configuration
    "AdapterConfig",
    "load_config",

    # Exceptions
    "ComlinkError",
    "ContextError",
    "ConfigError",
    "TransportError",
    "UnsupportedOperationError",
    "CapabilityNotImplementedError",

    # Version info
    "__version__",
    "VERSION_INFO",
]


def create_adapter(window: Any, ipc: Any,
                   config_file: Optional[Union[str, Path]] = None) -> MessageAdapter:
    """
    Create a message adapter using configuration from file and environment.

    Args:
        window: BrowserWindow (host process) or renderer window object (UI process)
        ipc: ipcMain (host process) or ipcRenderer (UI process)
        config_file: Optional JSON configuration file

    Returns:
        MessageAdapter instance

    Example:
        >>> endpoint = pyelectron_comlink.create_adapter(main_window, ipc_main)
        >>> endpoint.post_message("ping")
    """
    config = load_config(config_file)
    set_level(config.log_level)
    return MessageAdapter(window, ipc, config=config)
