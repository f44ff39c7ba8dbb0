"""
Decorator Utilities for ventemit.

Lets a class declare its event listeners next to the methods themselves.
"""
import inspect
from typing import Any, Callable, List, Tuple
from loguru import logger

from .events import EventRegistry


def subscribe_event(*event_names: str, once: bool = False):
    """
    Decorator to mark a function as an event listener.

    Args:
        *event_names: Events to listen to
        once: Remove the listener after its first invocation

    Usage:
        class Watcher:
            @subscribe_event("file.created", "file.deleted")
            def on_file_event(self, path):
                pass

        bind_listeners(registry, Watcher())
    """
    def decorator(func):
        func._subscribed_events = list(event_names)
        func._subscribe_once = once
        return func
    return decorator


def bind_listeners(registry: EventRegistry, obj: Any) -> List[Tuple[str, Callable]]:
    """
    Register every method of obj decorated with @subscribe_event.

    Each attribute access creates a new bound method object, so keep the
    returned pairs and hand them to unbind_listeners() to undo the binding.

    Returns:
        (event name, bound method) pairs that were registered.
    """
    bound = []
    for name, method in inspect.getmembers(obj, predicate=inspect.ismethod):
        if not hasattr(method, "_subscribed_events"):
            continue
        for event in method._subscribed_events:
            registry.register(event, method, method._subscribe_once)
            bound.append((event, method))
            logger.debug(f"{obj.__class__.__name__}.{name} bound to: {event}")
    return bound


def unbind_listeners(registry: EventRegistry, bindings: List[Tuple[str, Callable]]) -> None:
    """Remove listeners previously registered by bind_listeners()."""
    for event, method in bindings:
        registry.unregister(event, method)
