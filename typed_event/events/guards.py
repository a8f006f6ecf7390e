"""
Listener fault containment.

Channels never catch listener errors. Wrap a listener with guarded() when a
failure in it must not stop the listeners registered after it:

    event.add_listener(guarded(refresh_thumbnails))
    event.add_listener(update_status_bar)  # still runs if refresh fails
"""
import functools
from typing import Optional, TypeVar
from loguru import logger

from .channel import Listener

T = TypeVar('T')


def guarded(listener: Listener[T], name: Optional[str] = None) -> Listener[T]:
    """
    Return a listener that logs exceptions raised by `listener` instead of
    propagating them.

    Only Exception subclasses are contained; KeyboardInterrupt and SystemExit
    still propagate.

    Args:
        listener: Callable taking the event payload
        name: Label for the error record (defaults to the listener's name)
    """
    label = name or getattr(listener, '__qualname__', None) or getattr(listener, '__name__', None) or repr(listener)

    @functools.wraps(listener)
    def wrapper(data: T) -> None:
        try:
            listener(data)
        except Exception as e:
            logger.opt(exception=e).error(f"Error in listener '{label}': {e}")

    return wrapper
