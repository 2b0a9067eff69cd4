"""
PyElectron Comlink Loopback Transport

An in-process stand-in for Electron's IPC objects. A BrowserWindow's
webContents and its renderer's ipcRenderer are wired to each other and to a
shared ipcMain, so a host adapter and a UI adapter can talk inside one
interpreter. Delivery is synchronous and in registration order.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from pyelectron_comlink.utils.logging import get_logger

logger = get_logger(__name__)

Callback = Callable[[Dict[str, Any], Any], Any]

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 Electron/30.0.0"


class ChannelEmitter:
    """Named-channel emitter with the listener API of Node's EventEmitter."""

    def __init__(self, name: str):
        self.name = name
        self._listeners: Dict[str, List[Tuple[Callback, bool]]] = {}

    def on(self, channel: str, callback: Callback) -> "ChannelEmitter":
        """Register callback for every message on channel."""
        self._listeners.setdefault(channel, []).append((callback, False))
        return self

    def once(self, channel: str, callback: Callback) -> "ChannelEmitter":
        """Register callback for the next message on channel only."""
        self._listeners.setdefault(channel, []).append((callback, True))
        return self

    def remove_listener(self, channel: str, callback: Callback) -> "ChannelEmitter":
        """Remove the most recent registration of callback on channel."""
        entries = self._listeners.get(channel, [])
        for index in range(len(entries) - 1, -1, -1):
            if entries[index][0] is callback:
                del entries[index]
                break
        if not entries:
            self._listeners.pop(channel, None)
        return self

    removeListener = remove_listener

    def remove_all_listeners(self, channel: Optional[str] = None) -> "ChannelEmitter":
        """Remove every listener on channel, or on all channels."""
        if channel is None:
            self._listeners.clear()
        else:
            self._listeners.pop(channel, None)
        return self

    def _discard(self, channel: str, entry: Tuple[Callback, bool]):
        entries = self._listeners.get(channel, [])
        for index, candidate in enumerate(entries):
            if candidate is entry:
                del entries[index]
                break
        if not entries:
            self._listeners.pop(channel, None)

    def listener_count(self, channel: str) -> int:
        return len(self._listeners.get(channel, []))

    def emit(self, channel: str, event: Dict[str, Any], payload: Any) -> bool:
        """
        Deliver payload to the listeners of channel.

        Returns:
            bool: True if at least one listener was registered
        """
        entries = list(self._listeners.get(channel, []))
        if not entries:
            return False

        for entry in entries:
            callback, once = entry
            if once:
                self._discard(channel, entry)
            try:
                callback(dict(event), payload)
            except Exception as e:
                logger.error(f"Error in {self.name} listener on '{channel}': {e}")

        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(channels={len(self._listeners)})"


class IpcMain(ChannelEmitter):
    """Host-side receiver for messages sent by every renderer."""

    def __init__(self):
        super().__init__("ipcMain")


class WebContents:
    """Host-side handle delivering messages to one renderer."""

    _next_id = 1

    def __init__(self, ipc_main: IpcMain):
        self.id = WebContents._next_id
        WebContents._next_id += 1
        self.ipc_main = ipc_main
        self.ipc_renderer = IpcRenderer(self)

    def send(self, channel: str, payload: Any):
        """Send payload to the renderer on channel."""
        self.ipc_renderer.emit(channel, {'sender': self.ipc_main, 'channel': channel}, payload)

    def __repr__(self) -> str:
        return f"WebContents(id={self.id})"


class IpcRenderer(ChannelEmitter):
    """UI-side handle, both receiving from and sending to the host."""

    def __init__(self, web_contents: WebContents):
        super().__init__("ipcRenderer")
        self.web_contents = web_contents

    def send(self, channel: str, payload: Any):
        """Send payload to ipcMain on channel."""
        self.web_contents.ipc_main.emit(
            channel, {'sender': self.web_contents, 'channel': channel}, payload
        )


class BrowserWindow:
    """Host-side window owning the webContents of one renderer."""

    def __init__(self, ipc_main: IpcMain, title: str = "PyElectron Comlink"):
        self.title = title
        self.web_contents = WebContents(ipc_main)

    def __repr__(self) -> str:
        return f"BrowserWindow(title='{self.title}', web_contents={self.web_contents.id})"


@dataclass
class Navigator:
    """Renderer navigator exposing the user agent string."""

    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class RendererWindow:
    """Renderer-side window object as seen from a UI process."""

    navigator: Navigator


def create_loopback(ipc_main: Optional[IpcMain] = None,
                    user_agent: str = DEFAULT_USER_AGENT
                    ) -> Tuple[BrowserWindow, IpcMain, RendererWindow, IpcRenderer]:
    """
    Create a connected host/UI transport pair.

    Args:
        ipc_main: Existing ipcMain to attach another window to
        user_agent: User agent reported by the renderer window

    Returns:
        (browser_window, ipc_main, renderer_window, ipc_renderer)
    """
    ipc_main = ipc_main or IpcMain()
    browser_window = BrowserWindow(ipc_main)
    renderer_window = RendererWindow(navigator=Navigator(user_agent=user_agent))

    logger.debug(f"Loopback created for {browser_window.web_contents!r}")
    return browser_window, ipc_main, renderer_window, browser_window.web_contents.ipc_renderer
