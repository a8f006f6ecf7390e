import pytest
from typed_event.events import guarded, make_typed_event_controller


def test_guarded_listener_lets_others_run(caplog):
    """Ensure error in a guarded listener doesnt block others"""
    event = make_typed_event_controller("err_evt")
    results = []

    def buggy_listener(data):
        raise ValueError("Bug")

    event.add_listener(guarded(buggy_listener))
    event.add_listener(results.append)

    event.fire("ok")

    assert results == ["ok"]
    assert "Bug" in caplog.text
    assert "buggy_listener" in caplog.text


def test_guarded_passes_payload():
    received = []
    wrapper = guarded(received.append)

    wrapper(5)

    assert received == [5]


def test_guarded_custom_name(caplog):
    def failing(data):
        raise RuntimeError("boom")

    guarded(failing, name="thumbnail refresh")(None)

    assert "thumbnail refresh" in caplog.text


def test_guarded_keeps_metadata():
    def on_saved(data):
        """Docs."""

    wrapper = guarded(on_saved)

    assert wrapper.__name__ == "on_saved"
    assert wrapper.__doc__ == "Docs."


def test_guarded_does_not_swallow_keyboard_interrupt():
    def interrupt(data):
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        guarded(interrupt)(None)
