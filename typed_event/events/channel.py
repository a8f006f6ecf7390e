"""
Typed Event Channel.

A synchronous observer primitive split into two capabilities over one
listener registry:

- TypedEvent: subscribe only (add_listener, add_passthrough_listener)
- TypedEventController: subscribe + fire

Usage:
    clicked: TypedEventController[int] = make_typed_event_controller("clicked")

    clicked.add_listener(lambda x: print(f"clicked {x}"))
    clicked.fire(42)

Listeners run in registration order on the caller's stack. The first listener
to raise aborts the firing and the exception reaches the caller unchanged.
"""
from typing import Callable, Generic, List, Protocol, TypeVar, runtime_checkable
from loguru import logger

T = TypeVar('T')

Listener = Callable[[T], None]


@runtime_checkable
class TypedEvent(Protocol[T]):
    """
    An event to which listeners may subscribe to be notified of every future
    occurrence.

    Holders of this type can observe the event but cannot fire it.
    """

    def add_listener(self, listener: Listener[T]) -> None:
        """
        Subscribe a listener to the event.

        Registering the same listener twice means it is notified twice per
        occurrence.
        """
        ...

    def add_passthrough_listener(self, controller: 'TypedEventController[T]') -> None:
        """
        Subscribe another controller so each occurrence of this event is
        re-fired on it with the same payload.
        """
        ...


@runtime_checkable
class TypedEventController(TypedEvent[T], Protocol[T]):
    """An event that is raised by calling its fire() method."""

    def fire(self, data: T) -> None:
        """Declare an occurrence of the event carrying `data`."""
        ...


class _TypedEventChannel(Generic[T]):
    """Concrete channel implementing both TypedEvent and TypedEventController."""

    def __init__(self, name: str = "TypedEvent"):
        self.name = name
        self._listeners: List[Listener[T]] = []

    def add_listener(self, listener: Listener[T]) -> None:
        self._listeners.append(listener)
        logger.debug(f"Listener added to '{self.name}': {_describe(listener)}")

    def add_passthrough_listener(self, controller: TypedEventController[T]) -> None:
        self.add_listener(controller.fire)

    def fire(self, data: T) -> None:
        # Snapshot: listeners added while firing wait for the next occurrence
        for listener in list(self._listeners):
            listener(data)

    def __repr__(self) -> str:
        return f"<TypedEvent '{self.name}' listeners={len(self._listeners)}>"


def make_typed_event_controller(name: str = "TypedEvent") -> TypedEventController[T]:
    """
    Create a new event with no listeners.

    The payload type is fixed by annotation at the call site:

        saved: TypedEventController[str] = make_typed_event_controller("saved")

    Args:
        name: Label used in log records and repr only

    Returns:
        The controller view; pass it (or as_subscribable(it)) to observers.
    """
    return _TypedEventChannel(name)


def _describe(listener: Callable) -> str:
    owner = getattr(listener, '__self__', None)
    if isinstance(owner, _TypedEventChannel):
        return f"passthrough -> '{owner.name}'"
    return getattr(listener, '__qualname__', None) or getattr(listener, '__name__', None) or repr(listener)
