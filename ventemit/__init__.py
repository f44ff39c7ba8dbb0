"""
ventemit - Synchronous Event Emitter

Named event channels with ordered listeners, once-listeners and
self-removing listeners, dispatched in-line on the caller's thread.
"""

from ventemit.core.events import (
    EventRegistry,
    ListenerEntry,
    InvalidListenerError,
    Signal,
    Events,
)
from ventemit.core.config import ConfigManager, AppConfig, GeneralSettings, RegistrySettings
from ventemit.core.decorators import subscribe_event, bind_listeners, unbind_listeners
from ventemit.core.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    "EventRegistry",
    "ListenerEntry",
    "InvalidListenerError",
    "Signal",
    "Events",
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "RegistrySettings",
    "subscribe_event",
    "bind_listeners",
    "unbind_listeners",
    "setup_logging",
]
