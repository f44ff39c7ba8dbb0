"""
Configuration - Settings with Persistence and Change Events.

Settings are pydantic models persisted as JSON, or as TOML when the file
path ends in `.toml`. Every change is dispatched on an EventRegistry.

Usage:
    config = ConfigManager("config.toml", registry=registry)
    config.on_changed.connect(on_config_changed)

    config.update("general", "debug_mode", False)
    config.setup_logging()
"""
from typing import Any, List, Optional
import json
import os
import tomllib
import tomli_w
from pydantic import BaseModel, ConfigDict, Field
from loguru import logger
from .events import EventRegistry, Events, Signal
from .logging import setup_logging

# --- Settings Models ---
class GeneralSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    debug_mode: bool = True
    log_dir: str = "logs"
    log_to_file: bool = False

class RegistrySettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = "EventRegistry"

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    registry: RegistrySettings = Field(default_factory=RegistrySettings)

# --- Manager ---
class ConfigManager:
    """
    Manages configuration with persistence and reactivity.

    Changes are dispatched on `events` (Events.CONFIG_CHANGED with
    section, key, value); `on_changed` is the same channel as a Signal.
    """
    def __init__(self, filepath: str = "config.json", registry: Optional[EventRegistry] = None):
        self.filepath = filepath
        self._data = AppConfig()
        self.events = registry if registry is not None else EventRegistry("ConfigEvents")
        self.on_changed = Signal(Events.CONFIG_CHANGED, self.events)
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and dispatch change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if not hasattr(section_obj, key):
            raise ValueError(f"Invalid key: {key} in section {section}")

        setattr(section_obj, key, value)
        self._save()
        self.events.dispatch(Events.CONFIG_CHANGED, section, key, getattr(section_obj, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def create_registry(self) -> EventRegistry:
        """Build a fresh EventRegistry named after the registry settings."""
        return EventRegistry(self._data.registry.name)

    def setup_logging(self) -> List[int]:
        """Configure loguru sinks from the general settings."""
        general = self._data.general
        return setup_logging(
            debug_mode=general.debug_mode,
            log_dir=general.log_dir,
            log_to_file=general.log_to_file,
        )

    @property
    def is_toml(self) -> bool:
        return self.filepath.endswith('.toml')

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.is_toml:
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self.events.dispatch(Events.CONFIG_ERROR, self.filepath, e)
                self._save()
                return
            self.events.dispatch(Events.CONFIG_LOADED, self._data)
        else:
            self._save()

    def _save(self):
        """Persist current config in the format of the config file."""
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            if self.is_toml:
                with open(self.filepath, "wb") as f:
                    tomli_w.dump(self._data.model_dump(), f)
            else:
                with open(self.filepath, "w", encoding="utf-8") as f:
                    json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
            self.events.dispatch(Events.CONFIG_ERROR, self.filepath, e)
            return
        self.events.dispatch(Events.CONFIG_SAVED, self.filepath)
