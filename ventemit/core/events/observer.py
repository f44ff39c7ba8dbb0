from typing import Any, Callable, List, Optional

from .registry import EventRegistry, ListenerEntry


class Signal:
    """
    A single named channel on an EventRegistry (Synchronous).
    Allows subscribers to connect to this signal and receive notifications.
    Equivalent to Qt's Signal or C#'s event.

    Signals sharing a registry and a name share their subscribers.
    """
    def __init__(self, name: str = "Signal", registry: Optional[EventRegistry] = None):
        self.name = name
        self.registry = registry if registry is not None else EventRegistry(name)

    def __repr__(self) -> str:
        return f"<Signal {self.name!r} receivers={len(self.receivers)}>"

    @property
    def receivers(self) -> List[ListenerEntry]:
        return self.registry.listeners_of(self.name) or []

    def connect(self, callback: Callable, once: bool = False) -> "Signal":
        """Connect a callback function to this signal."""
        self.registry.register(self.name, callback, once)
        return self

    def disconnect(self, callback: Callable) -> "Signal":
        """Disconnect a callback function from this signal."""
        self.registry.unregister(self.name, callback)
        return self

    def disconnect_all(self) -> "Signal":
        self.registry.unregister_all(self.name)
        return self

    def emit(self, *args: Any, **kwargs: Any) -> "Signal":
        """Broadcast arguments to all subscribers synchronously."""
        self.registry.dispatch(self.name, *args, **kwargs)
        return self
