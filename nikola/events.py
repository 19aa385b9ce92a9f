"""A typed event bus: listeners per event type, dispatched in registration order."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional

__all__ = ["EventType", "Event", "EventBus", "EventFireFn"]


class EventType(Enum):
    """Every kind of event the engine dispatches."""

    APP_QUIT = auto()

    WINDOW_MOVED = auto()
    WINDOW_MAXIMIZED = auto()
    WINDOW_MINIMIZED = auto()
    WINDOW_FOCUSED = auto()
    WINDOW_FRAMEBUFFER_RESIZED = auto()
    WINDOW_RESIZED = auto()
    WINDOW_CLOSED = auto()
    WINDOW_FULLSCREEN = auto()

    KEY_PRESSED = auto()
    KEY_RELEASED = auto()

    MOUSE_MOVED = auto()
    MOUSE_ENTER = auto()
    MOUSE_LEAVE = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_SCROLL_WHEEL = auto()
    MOUSE_CURSOR_SHOWN = auto()

    JOYSTICK_CONNECTED = auto()
    JOYSTICK_DISCONNECTED = auto()


@dataclass(frozen=True)
class Event:
    """An event and the payload that belongs to its type."""

    type: EventType

    window_new_pos_x: int = 0
    window_new_pos_y: int = 0
    window_has_focus: bool = False
    window_framebuffer_width: int = 0
    window_framebuffer_height: int = 0
    window_new_width: int = 0
    window_new_height: int = 0
    window_is_fullscreen: bool = False

    key_pressed: Any = None
    key_released: Any = None

    mouse_button_pressed: Any = None
    mouse_button_released: Any = None
    mouse_pos_x: float = 0.0
    mouse_pos_y: float = 0.0
    mouse_offset_x: float = 0.0
    mouse_offset_y: float = 0.0
    mouse_scroll_value: float = 0.0
    cursor_shown: bool = False

    joystick_id: int = 0


EventFireFn = Callable[[Event, Any, Any], bool]


class EventBus:
    """Holds listeners per event type and calls them on dispatch."""

    def __init__(self) -> None:
        self._pools: defaultdict[EventType, list[tuple[EventFireFn, Any]]] = defaultdict(list)

    def listen(self, type: EventType, func: EventFireFn, listener: Any = None) -> None:
        """Register ``func`` to be called with ``listener`` for events of ``type``."""
        self._pools[type].append((func, listener))

    def dispatch(self, event: Event, dispatcher: Any = None) -> bool:
        """Call the listeners of the event's type in order.

        Stops at the first callback that returns True and reports True;
        reports False when no callback consumed the event.
        """
        for func, listener in list(self._pools.get(event.type, ())):
            if func(event, dispatcher, listener):
                return True
        return False

    def listener_count(self, type: EventType) -> int:
        """Number of callbacks registered for ``type``."""
        return len(self._pools.get(type, ()))

    def reset(self) -> None:
        """Drop every registered callback."""
        self._pools.clear()