"""
EventRegistry - Named Event Channels.

Keeps an ordered list of listeners per event name and calls them
synchronously, in registration order, when the event is dispatched.

Usage:
    registry = EventRegistry()

    registry.register("file.saved", on_saved)
    registry.register_once("app.ready", on_ready)

    registry.dispatch("file.saved", "/foo/bar.txt")
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Set
from loguru import logger


class InvalidListenerError(TypeError):
    """Raised when a non-callable value is registered as a listener."""
    pass


@dataclass(frozen=True, eq=False)
class ListenerEntry:
    """
    A single registration: the callback and whether it fires only once.

    Entries compare by identity so that two registrations of equal
    callables are never confused with each other.
    """
    callback: Callable[..., Any]
    once: bool = False


def _describe(callback: Callable) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class EventRegistry:
    """
    Synchronous publish/subscribe registry.

    Each event name maps to a list of ListenerEntry objects. A name stays
    known to the registry until unregister_all() is called for it, even
    when its last listener has been removed.

    Listeners are removed after dispatch when registered with once=True or
    when they return exactly True.
    """

    def __init__(self, name: str = "EventRegistry"):
        self.name = name
        self._events: Dict[str, List[ListenerEntry]] = {}
        self._mutations = 0

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r} events={len(self._events)}>"

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event: str) -> bool:
        return self.has_event(event)

    # --- Registration ---

    def register(self, event: str, callback: Callable[..., Any], once: bool = False) -> "EventRegistry":
        """
        Add a listener to an event.

        Args:
            event: Event name
            callback: Callable invoked with the dispatch arguments
            once: Remove the listener after its first invocation

        Returns:
            The registry, for chaining.

        Raises:
            InvalidListenerError: If callback is not callable.
        """
        if not callable(callback):
            raise InvalidListenerError(
                f"listener for '{event}' must be callable, got {type(callback).__name__}"
            )

        entries = self._events.get(event)
        if entries is None:
            entries = self._events[event] = []

        for entry in entries:
            if entry.callback is callback:
                logger.debug(f"{self.name}: {_describe(callback)} already listening to {event}")
                return self

        entries.append(ListenerEntry(callback, once))
        self._mutations += 1
        logger.debug(f"{self.name}: subscribed {_describe(callback)} to {event} (once={once})")
        return self

    def register_once(self, event: str, callback: Callable[..., Any]) -> "EventRegistry":
        """Add a listener that is removed after its first invocation."""
        return self.register(event, callback, True)

    # --- Inspection ---

    def has_event(self, event: str) -> bool:
        """True if the event name is known, whether or not it has listeners."""
        return event in self._events

    def listeners_of(self, event: str) -> Optional[List[ListenerEntry]]:
        """
        Get the live listener list of an event.

        Returns:
            The list of entries (possibly empty), or None if the event
            name is unknown.
        """
        return self._events.get(event)

    def listener_count(self, event: str) -> int:
        return len(self._events.get(event, ()))

    def event_names(self) -> List[str]:
        return list(self._events)

    # --- Removal ---

    def unregister(self, event: str, callback: Callable[..., Any]) -> "EventRegistry":
        """
        Remove a listener from an event.

        The event name stays registered even if no listeners remain.
        Unknown events are ignored.
        """
        entries = self._events.get(event)
        if not entries:
            return self

        # In-place: callers may hold the live list from listeners_of()
        kept = [entry for entry in entries if entry.callback is not callback]
        if len(kept) != len(entries):
            entries[:] = kept
            self._mutations += 1
            logger.debug(f"{self.name}: unsubscribed {_describe(callback)} from {event}")
        return self

    def unregister_all(self, event: str) -> "EventRegistry":
        """Forget an event and all of its listeners."""
        if self._events.pop(event, None) is not None:
            self._mutations += 1
            logger.debug(f"{self.name}: removed all listeners of {event}")
        return self

    # --- Dispatch ---

    def dispatch(self, event: str, *args: Any, **kwargs: Any) -> "EventRegistry":
        """
        Call every listener of an event, in registration order.

        Iterates over a snapshot of the listeners taken when dispatch
        starts. A listener removed by an earlier one in the same pass is
        skipped; one added during the pass waits for the next dispatch.
        Exceptions raised by listeners propagate to the caller.

        Args:
            event: Event name
            *args, **kwargs: Passed through to every listener

        Returns:
            The registry, for chaining.
        """
        entries = self._events.get(event)
        if not entries:
            return self

        snapshot = list(entries)
        logger.debug(f"{self.name}: dispatching {event} to {len(snapshot)} listener(s)")

        # Snapshot entries stay referenced, so their ids are stable for the pass
        live = {id(entry) for entry in snapshot}
        seen = self._mutations

        for entry in snapshot:
            if seen != self._mutations:
                live = self._live_ids(event)
                seen = self._mutations
            if id(entry) not in live:
                continue

            result = entry.callback(*args, **kwargs)

            if entry.once or result is True:
                reason = "once" if entry.once else "returned True"
                logger.debug(f"{self.name}: dropping {_describe(entry.callback)} from {event} ({reason})")
                before = self._mutations
                self.unregister(event, entry.callback)
                if seen == before and self._mutations == before + 1:
                    live.discard(id(entry))
                    seen = self._mutations

        return self

    def _live_ids(self, event: str) -> Set[int]:
        return {id(entry) for entry in self._events.get(event, ())}

    # Aliases kept from the EventEmitter-style API
    add_listener = register
    on = register
    once = register_once
    include = has_event
    listeners = listeners_of
    remove_listener = unregister
    off = unregister
    remove_all_listeners = unregister_all
    off_all = unregister_all
    emit = dispatch
    trigger = dispatch
