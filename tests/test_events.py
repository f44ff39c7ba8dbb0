import pytest
from ventemit.core.events import EventRegistry, InvalidListenerError


def on_emit():
    pass


def test_register_adds_event():
    registry = EventRegistry()
    registry.register("on_emit", on_emit)
    assert registry.has_event("on_emit") is True

def test_register_returns_registry():
    registry = EventRegistry()
    result = registry.register("on_emit", on_emit)
    assert result is registry

def test_register_same_listener_twice():
    registry = EventRegistry()
    registry.register("on_emit", on_emit)
    registry.register("on_emit", on_emit)
    assert len(registry.listeners_of("on_emit")) == 1

def test_register_non_callable_raises():
    registry = EventRegistry()
    with pytest.raises(InvalidListenerError):
        registry.register("on_throw", "on_throw")
    assert registry.has_event("on_throw") is False

def test_invalid_listener_is_type_error():
    registry = EventRegistry()
    with pytest.raises(TypeError):
        registry.on("on_throw", None)

def test_on_alias():
    registry = EventRegistry()
    assert registry.on("on_emit", on_emit) is registry
    registry.on("on_emit", on_emit)
    assert registry.include("on_emit") is True
    assert len(registry.listeners("on_emit")) == 1

def test_register_once():
    registry = EventRegistry()
    assert registry.register_once("on_emit", on_emit) is registry
    registry.once("on_emit", on_emit)
    assert registry.has_event("on_emit")
    assert len(registry.listeners_of("on_emit")) == 1
    assert registry.listeners_of("on_emit")[0].once is True

def test_has_event_false_for_unknown():
    registry = EventRegistry()
    assert registry.has_event("on_emit") is False
    assert "on_emit" not in registry

def test_listeners_of():
    registry = EventRegistry()
    registry.register("on_emit", on_emit)
    listeners = registry.listeners_of("on_emit")
    assert isinstance(listeners, list)
    assert len(listeners) == 1
    assert listeners[0].callback is on_emit

def test_listeners_of_unknown_is_none():
    registry = EventRegistry()
    assert registry.listeners_of("on_emit") is None

def test_unregister():
    registry = EventRegistry()
    registry.register("on_emit", on_emit)
    result = registry.unregister("on_emit", on_emit)
    assert result is registry
    assert len(registry.listeners_of("on_emit")) == 0
    # key is kept
    assert registry.has_event("on_emit") is True

def test_off_alias():
    registry = EventRegistry()
    registry.register("on_emit", on_emit)
    assert registry.off("on_emit", on_emit) is registry
    assert registry.listeners("on_emit") == []

def test_unregister_all():
    registry = EventRegistry()
    registry.register("on_emit", on_emit)
    result = registry.unregister_all("on_emit")
    assert result is registry
    assert registry.has_event("on_emit") is False
    assert registry.listeners_of("on_emit") is None

def test_off_all_alias():
    registry = EventRegistry()
    registry.register("on_emit", on_emit)
    assert registry.off_all("on_emit") is registry
    assert registry.include("on_emit") is False

def test_dispatch():
    registry = EventRegistry()
    count = []
    registry.on("on_count", lambda: count.append(1))
    assert len(count) == 0
    result = registry.dispatch("on_count")
    assert result is registry
    assert len(count) == 1
    registry.dispatch("on_count")
    assert len(count) == 2

def test_dispatch_with_multiple_arguments():
    registry = EventRegistry()
    total = []
    registry.on("on_count", lambda a, b, c: total.append(a + b + c))
    registry.dispatch("on_count", 1, 2, 3)
    assert sum(total) == 6

def test_dispatch_once_listener():
    registry = EventRegistry()
    count = []
    registry.once("on_count", lambda: count.append(1))
    registry.dispatch("on_count")
    registry.dispatch("on_count")
    assert len(count) == 1
    assert len(registry.listeners_of("on_count")) == 0

def test_dispatch_listener_returning_true():
    registry = EventRegistry()
    count = []

    def listener():
        count.append(1)
        return True

    registry.register("on_count", listener)
    registry.dispatch("on_count")
    assert len(count) == 1
    assert len(registry.listeners_of("on_count")) == 0

def test_trigger_and_emit_aliases():
    registry = EventRegistry()
    total = []
    registry.on("on_count", lambda a, b, c: total.append(a + b + c))
    assert registry.trigger("on_count", 1, 2, 3) is registry
    assert registry.emit("on_count", 1, 2, 3) is registry
    assert total == [6, 6]

def test_dispatch_unknown_event_is_noop():
    registry = EventRegistry()
    assert registry.dispatch("never_registered", 1, 2) is registry
    assert registry.has_event("never_registered") is False
