import pytest

from nikola.events import Event, EventBus, EventType
from nikola.input import GamepadState, InputState


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def state(bus):
    return InputState(bus)


def test_registers_listeners(bus, state):
    assert bus.listener_count(EventType.KEY_PRESSED) == 1
    assert bus.listener_count(EventType.MOUSE_SCROLL_WHEEL) == 1
    assert bus.listener_count(EventType.JOYSTICK_DISCONNECTED) == 1


def test_key_press_lifecycle(bus, state):
    assert bus.dispatch(Event(EventType.KEY_PRESSED, key_pressed="A")) is True
    assert state.key_pressed("A") and state.key_down("A")
    state.update()
    assert not state.key_pressed("A")
    assert state.key_down("A")
    bus.dispatch(Event(EventType.KEY_RELEASED, key_released="A"))
    assert state.key_released("A") and state.key_up("A")
    state.update()
    assert not state.key_released("A")


def test_mouse_buttons(bus, state):
    bus.dispatch(Event(EventType.MOUSE_BUTTON_PRESSED, mouse_button_pressed=1))
    assert state.button_pressed(1) and state.button_down(1)
    assert state.button_up(0)
    state.update()
    bus.dispatch(Event(EventType.MOUSE_BUTTON_RELEASED, mouse_button_released=1))
    assert state.button_released(1) and state.button_up(1)


def test_mouse_motion_and_scroll(bus, state):
    bus.dispatch(
        Event(
            EventType.MOUSE_MOVED,
            mouse_pos_x=10.0,
            mouse_pos_y=20.0,
            mouse_offset_x=1.5,
            mouse_offset_y=-2.5,
        )
    )
    assert state.mouse_position() == (10.0, 20.0)
    assert state.mouse_offset() == (1.5, -2.5)
    bus.dispatch(Event(EventType.MOUSE_SCROLL_WHEEL, mouse_scroll_value=-1.0))
    assert state.mouse_scroll_value() == -1.0


def test_cursor_enter_leave(bus, state):
    assert state.cursor_on_screen() is False
    bus.dispatch(Event(EventType.MOUSE_ENTER))
    assert state.cursor_on_screen() is True
    bus.dispatch(Event(EventType.MOUSE_LEAVE))
    assert state.cursor_on_screen() is False


def test_cursor_show_dispatches(bus, state):
    shown = []
    bus.listen(EventType.MOUSE_CURSOR_SHOWN, lambda e, d, l: shown.append(e.cursor_shown) or True)
    state.cursor_show(False)
    state.cursor_show(True)
    assert shown == [False, True]


def test_joystick_connection(bus, state):
    bus.dispatch(Event(EventType.JOYSTICK_CONNECTED, joystick_id=2))
    assert state.gamepad_connected(2)
    assert not state.gamepad_connected(3)
    bus.dispatch(Event(EventType.JOYSTICK_DISCONNECTED, joystick_id=2))
    assert not state.gamepad_connected(2)


def test_gamepad_buttons_and_axes(bus):
    pads = {0: GamepadState(name="Pad", buttons=frozenset({4}), axes=(0.25, -0.5, 1.0))}
    state = InputState(bus, lambda jid: pads.get(jid))
    state.update()
    assert state.gamepad_button_pressed(0, 4)
    assert state.gamepad_button_down(0, 4)
    assert state.gamepad_button_up(0, 5)
    assert state.gamepad_name(0) == "Pad"
    assert state.gamepad_name(1) is None
    assert state.gamepad_axis_value(0, 0) == (0.25, -0.5)
    assert state.gamepad_axis_value(0, 2) == (1.0, 0.0)

    pads[0] = GamepadState(name="Pad")
    state.update()
    assert state.gamepad_button_released(0, 4)
    assert not state.gamepad_button_down(0, 4)