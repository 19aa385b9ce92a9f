"""Keyboard, mouse and gamepad state fed by the event bus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Hashable, Optional

from nikola.events import Event, EventBus, EventType

__all__ = ["GamepadState", "InputState", "JOYSTICK_ID_LAST"]

JOYSTICK_ID_LAST = 15


@dataclass(frozen=True)
class GamepadState:
    """A snapshot of one gamepad: its name, pressed buttons and axis values."""

    name: Optional[str] = None
    buttons: frozenset = field(default_factory=frozenset)
    axes: tuple = ()


GamepadSource = Callable[[int], Optional[GamepadState]]

_KEY_EVENTS = (EventType.KEY_PRESSED, EventType.KEY_RELEASED)
_MOUSE_EVENTS = (
    EventType.MOUSE_MOVED,
    EventType.MOUSE_ENTER,
    EventType.MOUSE_LEAVE,
    EventType.MOUSE_BUTTON_PRESSED,
    EventType.MOUSE_BUTTON_RELEASED,
    EventType.MOUSE_SCROLL_WHEEL,
)
_JOYSTICK_EVENTS = (EventType.JOYSTICK_CONNECTED, EventType.JOYSTICK_DISCONNECTED)


class InputState:
    """Current and previous input state, updated from events once per frame."""

    def __init__(self, bus: EventBus, gamepad_source: Optional[GamepadSource] = None) -> None:
        self._bus = bus
        self._gamepad_source: GamepadSource = gamepad_source or (lambda jid: None)

        self._current_keys: set = set()
        self._previous_keys: frozenset = frozenset()
        self._current_buttons: set = set()
        self._previous_buttons: frozenset = frozenset()

        self._mouse_position = (0.0, 0.0)
        self._mouse_offset = (0.0, 0.0)
        self._scroll_value = 0.0
        self._cursor_entered = False

        self._connected_joysticks: set[int] = set()
        self._current_gamepad: dict[int, frozenset] = {}
        self._previous_gamepad: dict[int, frozenset] = {}

        for type in _KEY_EVENTS:
            bus.listen(type, self._on_key, self)
        for type in _MOUSE_EVENTS:
            bus.listen(type, self._on_mouse, self)
        for type in _JOYSTICK_EVENTS:
            bus.listen(type, self._on_joystick, self)

    # Event callbacks

    def _on_key(self, event: Event, dispatcher: object, listener: object) -> bool:
        if event.type is EventType.KEY_PRESSED:
            self._current_keys.add(event.key_pressed)
        elif event.type is EventType.KEY_RELEASED:
            self._current_keys.discard(event.key_released)
        else:
            return False
        return True

    def _on_mouse(self, event: Event, dispatcher: object, listener: object) -> bool:
        if event.type is EventType.MOUSE_MOVED:
            self._mouse_position = (event.mouse_pos_x, event.mouse_pos_y)
            self._mouse_offset = (event.mouse_offset_x, event.mouse_offset_y)
        elif event.type is EventType.MOUSE_ENTER:
            self._cursor_entered = True
        elif event.type is EventType.MOUSE_LEAVE:
            self._cursor_entered = False
        elif event.type is EventType.MOUSE_BUTTON_PRESSED:
            self._current_buttons.add(event.mouse_button_pressed)
        elif event.type is EventType.MOUSE_BUTTON_RELEASED:
            self._current_buttons.discard(event.mouse_button_released)
        elif event.type is EventType.MOUSE_SCROLL_WHEEL:
            self._scroll_value = event.mouse_scroll_value
        else:
            return False
        return True

    def _on_joystick(self, event: Event, dispatcher: object, listener: object) -> bool:
        if event.type is EventType.JOYSTICK_CONNECTED:
            self._connected_joysticks.add(event.joystick_id)
        elif event.type is EventType.JOYSTICK_DISCONNECTED:
            self._connected_joysticks.discard(event.joystick_id)
        else:
            return False
        return True

    # Frame update

    def update(self) -> None:
        """Move the current state to the previous one and poll the gamepads."""
        self._previous_keys = frozenset(self._current_keys)
        self._previous_buttons = frozenset(self._current_buttons)
        self._previous_gamepad = dict(self._current_gamepad)

        for jid in range(JOYSTICK_ID_LAST):
            state = self._gamepad_source(jid)
            self._current_gamepad[jid] = frozenset(state.buttons) if state else frozenset()

    # Keyboard

    def key_pressed(self, key: Hashable) -> bool:
        """True on the frame the key went down."""
        return key not in self._previous_keys and key in self._current_keys

    def key_released(self, key: Hashable) -> bool:
        """True on the frame the key came up."""
        return key in self._previous_keys and key not in self._current_keys

    def key_down(self, key: Hashable) -> bool:
        return key in self._current_keys

    def key_up(self, key: Hashable) -> bool:
        return key not in self._current_keys

    # Mouse

    def button_pressed(self, button: Hashable) -> bool:
        return button not in self._previous_buttons and button in self._current_buttons

    def button_released(self, button: Hashable) -> bool:
        return button in self._previous_buttons and button not in self._current_buttons

    def button_down(self, button: Hashable) -> bool:
        return button in self._current_buttons

    def button_up(self, button: Hashable) -> bool:
        return button not in self._current_buttons

    def mouse_position(self) -> tuple[float, float]:
        return self._mouse_position

    def mouse_offset(self) -> tuple[float, float]:
        return self._mouse_offset

    def mouse_scroll_value(self) -> float:
        return self._scroll_value

    def cursor_show(self, show: bool) -> None:
        """Ask the window to show or hide the cursor."""
        self._bus.dispatch(Event(EventType.MOUSE_CURSOR_SHOWN, cursor_shown=show))

    def cursor_on_screen(self) -> bool:
        return self._cursor_entered

    # Gamepads

    def gamepad_connected(self, id: int) -> bool:
        return id in self._connected_joysticks

    def gamepad_axis_value(self, id: int, axis: int) -> tuple[float, float]:
        """The pair of axis values starting at ``axis``; zeros when unavailable."""
        state = self._gamepad_source(id)
        axes = state.axes if state else ()

        def value(index: int) -> float:
            return float(axes[index]) if 0 <= index < len(axes) else 0.0

        return value(axis), value(axis + 1)

    def gamepad_button_pressed(self, id: int, button: Hashable) -> bool:
        return (
            button not in self._previous_gamepad.get(id, frozenset())
            and button in self._current_gamepad.get(id, frozenset())
        )

    def gamepad_button_released(self, id: int, button: Hashable) -> bool:
        return (
            button in self._previous_gamepad.get(id, frozenset())
            and button not in self._current_gamepad.get(id, frozenset())
        )

    def gamepad_button_down(self, id: int, button: Hashable) -> bool:
        return button in self._current_gamepad.get(id, frozenset())

    def gamepad_button_up(self, id: int, button: Hashable) -> bool:
        return button not in self._current_gamepad.get(id, frozenset())

    def gamepad_name(self, id: int) -> Optional[str]:
        state = self._gamepad_source(id)
        return state.name if state else None