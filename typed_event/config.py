from typing import Any, Optional
import json
import os
import tomllib
from pydantic import BaseModel, ConfigDict, Field
from loguru import logger
from .events import TypedEvent, as_subscribable, make_typed_event_controller

# --- Settings Models ---
class LoggingSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    debug_mode: bool = True
    log_dir: Optional[str] = "logs"
    rotation: str = "10 MB"
    retention: str = "1 week"

class AppConfig(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

class ConfigChange(BaseModel):
    """Payload of ConfigManager.on_changed."""
    section: str
    key: str
    value: Any = None

# --- Manager ---
class ConfigManager:
    """
    Manages configuration with persistence and reactivity.

    JSON files are read and written; TOML files are read-only. Observers
    subscribe through `on_changed`; only the manager can fire it.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self._changed = make_typed_event_controller("ConfigChanged")
        self._on_changed = as_subscribable(self._changed)
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    @property
    def on_changed(self) -> TypedEvent[ConfigChange]:
        return self._on_changed

    @property
    def read_only(self) -> bool:
        return self.filepath.endswith('.toml')

    def update(self, section: str, key: str, value: Any):
        """
        Set one value and notify observers.

        The payload carries the value as stored, after Pydantic coercion.

        Raises:
            ValueError: Unknown section or key
            ValidationError: Value rejected by the settings model
        """
        section_obj = self._section(section, key)
        setattr(section_obj, key, value)
        stored = getattr(section_obj, key)
        self._save()
        self._changed.fire(ConfigChange(section=section, key=key, value=stored))

    def get(self, section: str, key: str) -> Any:
        return getattr(self._section(section, key), key)

    def _section(self, section: str, key: str) -> BaseModel:
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")
        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")
        return section_obj

    def _load(self):
        if not os.path.isfile(self.filepath):
            self._save()
            return
        try:
            self._data = AppConfig.model_validate(self._read())
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config from {self.filepath}: {e}")
            self._save()

    def _read(self) -> dict:
        if self.read_only:
            with open(self.filepath, "rb") as f:
                return tomllib.load(f)
        with open(self.filepath, "r", encoding="utf-8") as f:
            return json.load(f)

    def _save(self):
        if self.read_only:
            logger.debug(f"Not saving read-only TOML config {self.filepath}")
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
