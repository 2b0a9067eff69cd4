"""
PyElectron Comlink Listener Registry

Maps caller-supplied listeners to the wrappers actually registered with
the transport, so that a listener can be removed by its original identity.
"""

from typing import Any, Callable, Dict, Optional, Tuple

Listener = Callable[["MessageEvent"], Any]
Wrapper = Callable[[Any, Any], Any]


class MessageEvent(dict):
    """
    Event handed to endpoint listeners.

    Holds the transport's event metadata fields plus ``data``. Fields can be
    read as keys or as attributes (``event["data"]`` or ``event.data``).
    """

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    @classmethod
    def merge(cls, raw_event: Any, payload: Any) -> "MessageEvent":
        """
        Copy transport event metadata and attach the payload as ``data``.

        Args:
            raw_event: Mapping, object with attributes, or None
            payload: Message payload delivered by the transport

        Returns:
            MessageEvent; raw_event itself is left unchanged
        """
        if raw_event is None:
            fields: Dict[str, Any] = {}
        elif hasattr(raw_event, 'keys'):
            fields = dict(raw_event)
        elif hasattr(raw_event, '__dict__'):
            fields = {k: v for k, v in vars(raw_event).items() if not k.startswith('_')}
        else:
            fields = {}

        event = cls(fields)
        event['data'] = payload
        return event


class ListenerRegistry:
    """
    Identity-keyed mapping from listener to transport wrapper.

    Listeners are never compared with ``==``. A bound method is keyed by the
    identity of its receiver and its function, since ``obj.handler`` builds a
    new method object on every access; any other callable is keyed by its
    own identity, so unhashable callables work too. Each entry keeps a
    reference to its listener so the ids in its key cannot be reused while
    registered. The channel a listener was bound under is not recorded.
    """

    def __init__(self):
        self._entries: Dict[Tuple[int, int], Tuple[Listener, Wrapper]] = {}

    @staticmethod
    def _key(listener: Listener) -> Tuple[int, int]:
        receiver = getattr(listener, '__self__', None)
        function = getattr(listener, '__func__', None)
        if receiver is not None and function is not None:
            return id(receiver), id(function)
        return id(listener), 0

    def __contains__(self, listener: Listener) -> bool:
        return self._key(listener) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, listener: Listener) -> Optional[Wrapper]:
        """Return the wrapper registered for listener, or None."""
        entry = self._entries.get(self._key(listener))
        return entry[1] if entry else None

    @staticmethod
    def make_wrapper(listener: Listener) -> Wrapper:
        """
        Build a transport callback for listener without registering it.

        The wrapper adapts the transport's ``(event, payload)`` callback
        signature to a single MessageEvent argument.
        """
        def wrapper(raw_event: Any = None, payload: Any = None) -> Any:
            return listener(MessageEvent.merge(raw_event, payload))

        wrapper.__wrapped__ = listener
        return wrapper

    def store(self, listener: Listener, wrapper: Wrapper) -> Wrapper:
        """Record wrapper for listener unless one is already registered."""
        return self._entries.setdefault(self._key(listener), (listener, wrapper))[1]

    def wrap(self, listener: Listener) -> Wrapper:
        """Return the wrapper for listener, creating and storing it on first use."""
        wrapper = self.get(listener)
        if wrapper is None:
            wrapper = self.store(listener, self.make_wrapper(listener))
        return wrapper

    def pop(self, listener: Listener) -> Optional[Wrapper]:
        """Remove listener and return its wrapper, or None if it was not registered."""
        entry = self._entries.pop(self._key(listener), None)
        return entry[1] if entry else None
