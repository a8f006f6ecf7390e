import pytest
from unittest.mock import MagicMock
from typed_event.events import (
    SubscribableView,
    TypedEvent,
    TypedEventController,
    as_subscribable,
    make_typed_event_controller,
)


def test_view_has_no_fire():
    view = as_subscribable(make_typed_event_controller("clicked"))

    assert not hasattr(view, "fire")
    assert isinstance(view, TypedEvent)
    assert not isinstance(view, TypedEventController)
    with pytest.raises(AttributeError):
        view.fire(1)  # type: ignore[attr-defined]


def test_view_cannot_grow_attributes():
    view = as_subscribable(make_typed_event_controller())
    with pytest.raises(AttributeError):
        view.fire = lambda data: None  # type: ignore[attr-defined]


def test_listener_added_through_view_is_notified():
    controller = make_typed_event_controller("clicked")
    view = as_subscribable(controller)
    handler = MagicMock()

    view.add_listener(handler)
    controller.fire("payload")

    handler.assert_called_once_with("payload")


def test_view_shares_registry_order_with_controller():
    controller = make_typed_event_controller()
    view = as_subscribable(controller)
    log = []

    controller.add_listener(lambda d: log.append("controller"))
    view.add_listener(lambda d: log.append("view"))
    controller.fire(None)

    assert log == ["controller", "view"]


def test_passthrough_through_view():
    source = make_typed_event_controller("A")
    target = make_typed_event_controller("B")
    handler = MagicMock()

    as_subscribable(source).add_passthrough_listener(target)
    as_subscribable(target).add_listener(handler)
    source.fire(3)

    handler.assert_called_once_with(3)


def test_wrapping_view_is_idempotent():
    view = as_subscribable(make_typed_event_controller())
    assert as_subscribable(view) is view
    assert isinstance(view, SubscribableView)


def test_repr_mentions_channel():
    view = as_subscribable(make_typed_event_controller("saved"))
    assert "saved" in repr(view)
