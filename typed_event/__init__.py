"""
typed_event - Typed Synchronous Events

A small observer primitive: events that observers subscribe to and that
their owner fires with a single payload. Observers hold the subscribe-only
TypedEvent capability; producers hold the TypedEventController.
"""

# Events
from typed_event.events import (
    Listener,
    TypedEvent,
    TypedEventController,
    make_typed_event_controller,
    SubscribableView,
    as_subscribable,
    guarded,
)
from typed_event.decorators import listens_to

# Ambient
from typed_event.config import ConfigManager, AppConfig, LoggingSettings, ConfigChange
from typed_event.logging import setup_logging, configure_logging

__version__ = "0.1.0"

__all__ = [
    # Events
    "Listener",
    "TypedEvent",
    "TypedEventController",
    "make_typed_event_controller",
    "SubscribableView",
    "as_subscribable",
    "guarded",
    "listens_to",
    # Ambient
    "ConfigManager",
    "AppConfig",
    "LoggingSettings",
    "ConfigChange",
    "setup_logging",
    "configure_logging",
]
