"""
PyElectron Comlink Transport Contract

This module describes the named-channel IPC handles the adapter borrows
(ipcMain, ipcRenderer, webContents) and resolves their operations, which
may follow either Python or JavaScript spelling.
"""

from typing import Any, Callable, Dict, Protocol, Tuple, runtime_checkable

from pyelectron_comlink.utils.errors import TransportError

TransportCallback = Callable[[Any, Any], Any]

# Accepted spellings for each transport operation, in lookup order
OPERATIONS: Dict[str, Tuple[str, ...]] = {
    'on': ('on',),
    'remove_listener': ('remove_listener', 'removeListener'),
    'send': ('send',),
}


@runtime_checkable
class Transport(Protocol):
    """Named-channel IPC handle consumed by the adapter."""

    def on(self, channel: str, callback: TransportCallback) -> Any:
        """Register a persistent callback invoked as callback(event, payload)."""
        ...

    def remove_listener(self, channel: str, callback: TransportCallback) -> Any:
        """Unregister a callback previously passed to on()."""
        ...

    def send(self, channel: str, payload: Any) -> Any:
        """Fire-and-forget delivery of payload on channel."""
        ...


def resolve_operation(handle: Any, operation: str) -> Callable:
    """
    Find the callable implementing a transport operation on a handle.

    Args:
        handle: Transport handle
        operation: One of 'on', 'remove_listener', 'send'

    Returns:
        Bound callable

    Raises:
        TransportError: If the handle exposes none of the accepted spellings
    """
    spellings = OPERATIONS[operation]
    for name in spellings:
        method = getattr(handle, name, None)
        if callable(method):
            return method

    raise TransportError(
        f"Transport handle does not support '{operation}'",
        details={'handle_type': type(handle).__name__, 'accepted': list(spellings)}
    )


def call_transport(handle: Any, operation: str, *args: Any) -> Any:
    """Invoke a transport operation on a handle."""
    return resolve_operation(handle, operation)(*args)


def frame_channel(name: str, prefix: str) -> str:
    """Return the transport channel name for a caller-supplied name."""
    return prefix + name
