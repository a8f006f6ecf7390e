"""
Decorator Utilities for typed events.

Provides syntactic sugar for registering listeners.
"""
from typing import Callable, TypeVar

from .events.channel import TypedEvent

F = TypeVar('F', bound=Callable)


def listens_to(*events: TypedEvent):
    """
    Decorator registering a function as a listener on one or more events.

    Registration happens at decoration time, in argument order. The function
    is returned unchanged.

    Args:
        *events: Events (or subscribable views) to listen to

    Usage:
        @listens_to(downloader.finished, uploader.finished)
        def on_finished(path):
            pass
    """
    if not events:
        raise ValueError("listens_to() requires at least one event")

    def decorator(func: F) -> F:
        for event in events:
            event.add_listener(func)
        return func
    return decorator
