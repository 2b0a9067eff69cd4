"""
PyElectron Comlink Message Adapter

This module wraps Electron-style IPC (ipcMain / webContents on the host
side, ipcRenderer on the UI side) in the symmetric message endpoint an
RPC-over-message-channel library expects: add_event_listener,
remove_event_listener and post_message.
"""

from typing import Any, Optional, Sequence

from pyelectron_comlink.ipc.context import ProcessContext, content_channel, detect_context
from pyelectron_comlink.ipc.listeners import Listener, ListenerRegistry
from pyelectron_comlink.ipc.transport import call_transport, frame_channel, resolve_operation
from pyelectron_comlink.utils.config import DEFAULT_PREFIX, AdapterConfig
from pyelectron_comlink.utils.errors import ContextError, UnsupportedOperationError
from pyelectron_comlink.utils.logging import get_logger

logger = get_logger(__name__)


class MessageAdapter:
    """
    Message endpoint bound to one side of an Electron IPC pair.

    In the host process, build it from a BrowserWindow and ipcMain: messages
    go out through the window's webContents and come in on ipcMain. In a UI
    process, build it from the renderer window object and ipcRenderer, which
    serves both directions.

    Example:
        >>> endpoint = MessageAdapter(main_window, ipc_main)
        >>> endpoint.add_event_listener("message", on_message)
        >>> endpoint.post_message({"id": 1, "type": "GET"})
    """

    PREFIX = DEFAULT_PREFIX

    def __init__(self, window: Any = None, ipc: Any = None,
                 config: Optional[AdapterConfig] = None):
        """
        Bind the adapter to the transport for the detected process.

        Args:
            window: BrowserWindow in the host process, or the renderer
                window object (exposing navigator.user_agent) in a UI process
            ipc: ipcMain in the host process, ipcRenderer in a UI process
            config: Optional adapter configuration

        Raises:
            ContextError: If neither process shape is recognised, or no
                transport handle was supplied
        """
        self.config = config or AdapterConfig()
        self.listeners = ListenerRegistry()
        self.context = detect_context(window, self.config)

        if ipc is None:
            raise ContextError(
                "No IPC channel supplied for adapter",
                details={'context': self.context.value}
            )

        if self.context is ProcessContext.HOST:
            self.outbound = content_channel(window, self.config)
            self.inbound = ipc
        else:
            self.outbound = self.inbound = ipc

        logger.debug(f"Message adapter bound in {self.context.value} context")

    @property
    def is_host(self) -> bool:
        """True when bound in the host process (sending through webContents)."""
        return self.context is ProcessContext.HOST

    def add_event_listener(self, channel: str, fn: Listener) -> None:
        """
        Bind an event listener to an IPC channel.

        Args:
            channel: Channel name, framed with the adapter prefix on the wire
            fn: Callable receiving a MessageEvent whose ``data`` is the payload
        """
        subscribe = resolve_operation(self.inbound, 'on')
        wrapper = self.listeners.get(fn) or self.listeners.make_wrapper(fn)

        # Stored only once the transport accepted the subscription
        subscribe(frame_channel(channel, self.config.prefix), wrapper)
        self.listeners.store(fn, wrapper)
        logger.debug(f"Listener added on channel '{channel}'")

    def remove_event_listener(self, channel: str, fn: Listener) -> None:
        """
        Unbind an event listener from an IPC channel.

        Unknown or already removed listeners are ignored. The registry is
        keyed by listener alone: a listener bound under two channel names
        is forgotten as soon as it is removed from either of them.

        Args:
            channel: Channel name the listener was added under
            fn: The listener passed to add_event_listener
        """
        wrapper = self.listeners.get(fn)
        if wrapper is None:
            return

        call_transport(self.inbound, 'remove_listener', frame_channel(channel, self.config.prefix), wrapper)
        self.listeners.pop(fn)
        logger.debug(f"Listener removed from channel '{channel}'")

    def post_message(self, message: Any, transfer_list: Optional[Sequence[Any]] = None) -> None:
        """
        Send a message to the other process.

        Args:
            message: Payload handed to the transport unchanged
            transfer_list: Objects to transfer ownership of; not supported
                by Electron IPC, only an empty sequence is accepted

        Raises:
            UnsupportedOperationError: If transfer_list is not empty
        """
        if transfer_list:
            logger.warning(f"Rejected post_message with {len(transfer_list)} transferable(s)")
            raise UnsupportedOperationError(
                "transferList is not supported",
                details={'transferables': len(transfer_list)}
            )

        call_transport(self.outbound, 'send', self.config.outbound_channel, message)

    # Browser-style names used by RPC libraries written against MessagePort
    addEventListener = add_event_listener
    removeEventListener = remove_event_listener
    postMessage = post_message

    def __repr__(self) -> str:
        return f"MessageAdapter(context='{self.context.value}', listeners={len(self.listeners)})"
