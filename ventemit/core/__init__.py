"""
ventemit Core.

Provides:
- EventRegistry: Synchronous pub/sub over named event channels
- Signal: Single-channel observer view over a registry
- ConfigManager: Configuration with persistence and change events
- subscribe_event / bind_listeners: Declarative listener registration

Usage:
    from ventemit.core import EventRegistry

    registry = EventRegistry()
    registry.register("scan.completed", on_scan_completed)
    registry.dispatch("scan.completed", results)
"""
from .events import EventRegistry, ListenerEntry, InvalidListenerError, Signal, Events
from .config import ConfigManager, AppConfig, GeneralSettings, RegistrySettings
from .decorators import subscribe_event, bind_listeners, unbind_listeners
from .logging import setup_logging

__all__ = [
    # Events
    "EventRegistry",
    "ListenerEntry",
    "InvalidListenerError",
    "Signal",
    "Events",

    # Configuration
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "RegistrySettings",

    # Decorators
    "subscribe_event",
    "bind_listeners",
    "unbind_listeners",

    # Logging
    "setup_logging",
]
