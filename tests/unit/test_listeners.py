"""
Unit tests for the listener registry and message events
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from pyelectron_comlink.ipc.listeners import ListenerRegistry, MessageEvent


class Handler:
    def __init__(self):
        self.events = []

    def handle(self, event):
        self.events.append(event)


class TestMessageEvent:
    """Test event reshaping."""

    def test_merge_mapping(self):
        meta = {"sender": "main", "channel": "x"}
        event = MessageEvent.merge(meta, "payload")

        assert event == {"sender": "main", "channel": "x", "data": "payload"}
        assert "data" not in meta

    def test_merge_object(self):
        meta = SimpleNamespace(sender="main", _private=1)
        event = MessageEvent.merge(meta, {"foo": "bar"})

        assert event == {"sender": "main", "data": {"foo": "bar"}}
        assert not hasattr(meta, "data")

    def test_merge_none(self):
        assert MessageEvent.merge(None, 1) == {"data": 1}

    def test_payload_overrides_data_field(self):
        event = MessageEvent.merge({"data": "stale"}, "fresh")
        assert event.data == "fresh"

    def test_attribute_access(self):
        event = MessageEvent.merge({"sender": "main"}, 3)

        assert event.sender == "main"
        assert event.data == 3
        with pytest.raises(AttributeError):
            event.missing


class TestListenerRegistry:
    """Test identity-keyed listener mapping."""

    def setup_method(self):
        self.registry = ListenerRegistry()

    def test_starts_empty(self):
        assert len(self.registry) == 0
        assert self.registry.get(print) is None

    def test_wrap_is_idempotent(self):
        fn = MagicMock()

        first = self.registry.wrap(fn)
        second = self.registry.wrap(fn)

        assert first is second
        assert len(self.registry) == 1
        assert fn in self.registry

    def test_wrapper_reshapes_call(self):
        fn = MagicMock()
        wrapper = self.registry.wrap(fn)

        wrapper({"sender": 1}, "hello")

        fn.assert_called_once_with({"sender": 1, "data": "hello"})
        assert isinstance(fn.call_args.args[0], MessageEvent)

    def test_wrapper_returns_listener_result(self):
        wrapper = self.registry.wrap(lambda event: event.data * 2)
        assert wrapper({}, 21) == 42

    def test_pop(self):
        fn = MagicMock()
        wrapper = self.registry.wrap(fn)

        assert self.registry.pop(fn) is wrapper
        assert fn not in self.registry
        assert self.registry.pop(fn) is None

    def test_bound_method_from_separate_lookups(self):
        """Each handler.handle lookup is a new object but the same registration."""
        handler = Handler()
        first, second = handler.handle, handler.handle
        assert first is not second

        wrapper = self.registry.wrap(first)

        assert second in self.registry
        assert self.registry.wrap(second) is wrapper
        assert len(self.registry) == 1
        assert self.registry.pop(handler.handle) is wrapper
        assert first not in self.registry

    def test_bound_methods_of_different_objects(self):
        one, other = Handler(), Handler()

        self.registry.wrap(one.handle)

        assert one.handle in self.registry
        assert other.handle not in self.registry

    def test_store_keeps_first_wrapper(self):
        fn = MagicMock()
        first = self.registry.make_wrapper(fn)

        assert fn not in self.registry
        assert self.registry.store(fn, first) is first
        assert self.registry.store(fn, self.registry.make_wrapper(fn)) is first
        assert len(self.registry) == 1

    def test_unhashable_listener(self):
        class Unhashable:
            __hash__ = None

            def __call__(self, event):
                pass

        listener = Unhashable()
        self.registry.wrap(listener)

        assert listener in self.registry
