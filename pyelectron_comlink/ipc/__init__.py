"""
PyElectron Comlink IPC

This package adapts Electron-style named-channel IPC to the
message endpoint interface used by RPC-over-message-channel libraries.
"""

from .adapter import MessageAdapter
from .capability import patch_capability, is_capability_stub
from .context import ProcessContext, detect_context, is_host_window, is_renderer_window
from .listeners import ListenerRegistry, MessageEvent
from .loopback import BrowserWindow, IpcMain, IpcRenderer, RendererWindow, create_loopback
from .transport import Transport, call_transport, frame_channel

__all__ = [
    'MessageAdapter',
    'patch_capability',
    'is_capability_stub',
    'ProcessContext',
    'detect_context',
    'is_host_window',
    'is_renderer_window',
    'ListenerRegistry',
    'MessageEvent',
    'BrowserWindow',
    'IpcMain',
    'IpcRenderer',
    'RendererWindow',
    'create_loopback',
    'Transport',
    'call_transport',
    'frame_channel',
]
