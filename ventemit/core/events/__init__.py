"""
Event System - Synchronous Pub/Sub.

Provides:
- EventRegistry: Named event channels with ordered, deduplicated listeners
- Signal: Single-channel observer view over an EventRegistry
- Events: Event name constants dispatched by ventemit itself

Usage:
    from ventemit.core.events import EventRegistry

    registry = EventRegistry()
    registry.register("file.created", on_file_created)
    registry.dispatch("file.created", "/foo/bar.txt")
"""
from .registry import EventRegistry, ListenerEntry, InvalidListenerError
from .observer import Signal
from .constants import Events


__all__ = ["EventRegistry", "ListenerEntry", "InvalidListenerError", "Signal", "Events"]
