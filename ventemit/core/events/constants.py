"""
Event Name Constants.

Event names dispatched by ventemit itself.

Usage:
    from ventemit.core.events import Events

    config.events.register(Events.CONFIG_CHANGED, on_config_changed)
"""


class Events:
    """
    Standard event names dispatched by the package's own components.

    Example:
        >>> from ventemit.core.events import Events
        >>> registry.register(Events.CONFIG_SAVED, handler)
    """

    # Config events - ConfigManager
    CONFIG_CHANGED = "config.changed"
    CONFIG_LOADED = "config.loaded"
    CONFIG_SAVED = "config.saved"
    CONFIG_ERROR = "config.error"
