"""
Event System - Typed Synchronous Events.

Provides:
- TypedEvent: subscribe-only capability (add_listener, add_passthrough_listener)
- TypedEventController: TypedEvent plus fire()
- make_typed_event_controller: factory for new events
- as_subscribable / SubscribableView: runtime subscribe-only proxy
- guarded: opt-in listener fault containment

Usage:
    from typed_event.events import make_typed_event_controller, as_subscribable

    progress = make_typed_event_controller("progress")
    public = as_subscribable(progress)

    public.add_listener(lambda pct: print(f"{pct}%"))
    progress.fire(50)
"""
from .channel import Listener, TypedEvent, TypedEventController, make_typed_event_controller
from .view import SubscribableView, as_subscribable
from .guards import guarded


__all__ = [
    "Listener",
    "TypedEvent",
    "TypedEventController",
    "make_typed_event_controller",
    "SubscribableView",
    "as_subscribable",
    "guarded",
]
