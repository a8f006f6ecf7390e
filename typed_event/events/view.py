"""
Subscribe-only views over typed events.

TypedEvent is a static narrowing only: at runtime a controller annotated as
TypedEvent still has fire(). SubscribableView hides it for real, so it is what
an owner should hand to parties that must only observe.

Usage:
    class Downloader:
        def __init__(self):
            self._finished = make_typed_event_controller("finished")
            self.finished = as_subscribable(self._finished)
"""
from typing import Generic, TypeVar

from .channel import Listener, TypedEvent, TypedEventController

T = TypeVar('T')


class SubscribableView(Generic[T]):
    """Proxy exposing only the registration operations of an event."""

    __slots__ = ('_event',)

    def __init__(self, event: TypedEvent[T]):
        self._event = event

    def add_listener(self, listener: Listener[T]) -> None:
        self._event.add_listener(listener)

    def add_passthrough_listener(self, controller: TypedEventController[T]) -> None:
        self._event.add_passthrough_listener(controller)

    def __repr__(self) -> str:
        return f"<SubscribableView of {self._event!r}>"


def as_subscribable(event: TypedEvent[T]) -> SubscribableView[T]:
    """Wrap an event so the holder can subscribe but never fire."""
    if isinstance(event, SubscribableView):
        return event
    return SubscribableView(event)
