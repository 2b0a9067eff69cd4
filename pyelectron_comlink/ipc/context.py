"""
PyElectron Comlink Context Detection

Decides whether an adapter is being built in the host process (around a
BrowserWindow) or in a UI process (around a renderer window object).

Detection is structural: the two sides of a process boundary never share
class objects, so types are matched by name and windows by the shape of
their attributes rather than with isinstance().
"""

from enum import Enum
from typing import Any, Callable, Optional, Sequence, Tuple

from pyelectron_comlink.utils.config import AdapterConfig
from pyelectron_comlink.utils.errors import ContextError

_MISSING = object()


class ProcessContext(Enum):
    """Process roles an adapter can be bound in."""

    HOST = "host"
    UI = "ui"


def _lookup(obj: Any, names: Sequence[str]) -> Any:
    """Return the first attribute or mapping key of obj found under names."""
    for name in names:
        value = getattr(obj, name, _MISSING)
        if value is not _MISSING:
            return value
        if hasattr(obj, 'get') and hasattr(obj, 'keys'):
            value = obj.get(name, _MISSING)
            if value is not _MISSING:
                return value
    return _MISSING


def _type_names(obj: Any) -> Tuple[str, ...]:
    return tuple(cls.__name__ for cls in type(obj).__mro__)


def is_host_window(obj: Any, config: AdapterConfig) -> bool:
    """True if obj looks like a top-level host window with a content channel."""
    if obj is None:
        return False
    if not set(_type_names(obj)) & set(config.host_window_types):
        return False
    channel = _lookup(obj, config.content_attributes)
    return channel is not _MISSING and channel is not None


def is_renderer_window(obj: Any, config: AdapterConfig) -> bool:
    """True if obj exposes a navigator whose user agent carries the platform marker."""
    if obj is None:
        return False
    navigator = _lookup(obj, ('navigator',))
    if navigator is _MISSING or navigator is None:
        return False
    user_agent = _lookup(navigator, ('user_agent', 'userAgent'))
    return isinstance(user_agent, str) and config.platform_marker in user_agent


# Evaluated in order, first match wins
DETECTORS: Tuple[Tuple[ProcessContext, Callable[[Any, AdapterConfig], bool]], ...] = (
    (ProcessContext.HOST, is_host_window),
    (ProcessContext.UI, is_renderer_window),
)


def detect_context(obj: Any, config: Optional[AdapterConfig] = None) -> ProcessContext:
    """
    Classify the process an adapter is being created in.

    Args:
        obj: A BrowserWindow (host process) or renderer window object (UI process)
        config: Adapter configuration carrying marker strings and type names

    Returns:
        ProcessContext

    Raises:
        ContextError: If obj matches neither shape
    """
    config = config or AdapterConfig()
    for context, predicate in DETECTORS:
        if predicate(obj, config):
            return context

    raise ContextError(
        "Cannot create adapter outside of an Electron context",
        details={'window_type': type(obj).__name__}
    )


def content_channel(window: Any, config: Optional[AdapterConfig] = None) -> Any:
    """Return the content delivery channel (webContents) of a host window."""
    config = config or AdapterConfig()
    channel = _lookup(window, config.content_attributes)
    if channel is _MISSING or channel is None:
        raise ContextError(
            "Host window does not expose a content channel",
            details={'window_type': type(window).__name__,
                     'attributes': list(config.content_attributes)}
        )
    return channel
