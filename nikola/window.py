"""Application window: creation hints, tracked state and event forwarding."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable, Optional

from nikola.clock import Clock
from nikola.events import Event, EventBus, EventType
from nikola.input import InputState
from nikola.logger import LogLevel, log

__all__ = ["WindowFlags", "WindowState", "Window", "window_hints"]


class WindowFlags(IntFlag):
    """Options that shape how a window is opened."""

    NONE = 0
    RESIZABLE = 1 << 0
    FOCUS_ON_CREATE = 1 << 1
    FOCUS_ON_SHOW = 1 << 2
    MINIMIZE = 1 << 3
    MAXIMIZE = 1 << 4
    DISABLE_DECORATIONS = 1 << 5
    CENTER_MOUSE = 1 << 6
    HIDE_CURSOR = 1 << 7
    FULLSCREEN = 1 << 8
    GFX_HARDWARE = 1 << 9
    GFX_SOFTWARE = 1 << 10


def window_hints(flags: int) -> dict[str, Any]:
    """Translate window flags into creation hints.

    The ``maximized`` key is present only when a minimize or maximize flag
    is given; ``context_version`` and ``core_profile`` only for hardware
    graphics.
    """
    flags = WindowFlags(flags)
    hints: dict[str, Any] = {
        "samples": 4,
        "resizable": WindowFlags.RESIZABLE in flags,
        "focused": False,
        "focus_on_show": False,
        "decorated": WindowFlags.DISABLE_DECORATIONS not in flags,
        "center_cursor": WindowFlags.CENTER_MOUSE in flags,
        "cursor_shown": WindowFlags.HIDE_CURSOR not in flags,
        "fullscreen": WindowFlags.FULLSCREEN in flags,
    }
    if WindowFlags.FOCUS_ON_CREATE in flags:
        hints["focused"] = True
    if WindowFlags.FOCUS_ON_SHOW in flags:
        hints["focus_on_show"] = True
        hints["focused"] = True
    if WindowFlags.MINIMIZE in flags:
        hints["maximized"] = False
    if WindowFlags.MAXIMIZE in flags:
        hints["maximized"] = True
    if WindowFlags.GFX_HARDWARE in flags:
        hints["context_version"] = (4, 6)
        hints["core_profile"] = True
    return hints


@dataclass
class WindowState:
    """What is known about a window, kept current by its native events."""

    bus: EventBus
    width: int
    height: int
    flags: WindowFlags = WindowFlags.NONE

    refresh_rate: float = 0.0

    is_fullscreen: bool = False
    is_focused: bool = False
    is_cursor_shown: bool = True

    position_x: int = 0
    position_y: int = 0

    mouse_position_x: float = 0.0
    mouse_position_y: float = 0.0
    last_mouse_position_x: float = 0.0
    last_mouse_position_y: float = 0.0
    mouse_offset_x: float = 0.0
    mouse_offset_y: float = 0.0

    def handle_move(self, x: int, y: int) -> bool:
        self.position_x = x
        self.position_y = y
        return self.bus.dispatch(
            Event(EventType.WINDOW_MOVED, window_new_pos_x=x, window_new_pos_y=y)
        )

    def handle_maximize(self, maximized: bool) -> bool:
        type = EventType.WINDOW_MAXIMIZED if maximized else EventType.WINDOW_MINIMIZED
        return self.bus.dispatch(Event(type))

    def handle_focus(self, focused: bool) -> bool:
        self.is_focused = bool(focused)
        return self.bus.dispatch(
            Event(EventType.WINDOW_FOCUSED, window_has_focus=self.is_focused)
        )

    def handle_framebuffer_resize(self, width: int, height: int) -> bool:
        self.width = width
        self.height = height
        return self.bus.dispatch(
            Event(
                EventType.WINDOW_FRAMEBUFFER_RESIZED,
                window_framebuffer_width=width,
                window_framebuffer_height=height,
            )
        )

    def handle_resize(self, width: int, height: int) -> bool:
        self.width = width
        self.height = height
        return self.bus.dispatch(
            Event(EventType.WINDOW_RESIZED, window_new_width=width, window_new_height=height)
        )

    def handle_close(self) -> bool:
        return self.bus.dispatch(Event(EventType.WINDOW_CLOSED))

    def handle_key(self, key: Any, pressed: bool) -> bool:
        if pressed:
            return self.bus.dispatch(Event(EventType.KEY_PRESSED, key_pressed=key))
        return self.bus.dispatch(Event(EventType.KEY_RELEASED, key_released=key))

    def handle_mouse_button(self, button: Any, pressed: bool) -> bool:
        if pressed:
            return self.bus.dispatch(
                Event(EventType.MOUSE_BUTTON_PRESSED, mouse_button_pressed=button)
            )
        return self.bus.dispatch(
            Event(EventType.MOUSE_BUTTON_RELEASED, mouse_button_released=button)
        )

    def handle_cursor_pos(self, x: float, y: float) -> bool:
        """Record the cursor position and accumulate the movement offset.

        The vertical offset grows as the cursor moves up the screen.
        """
        self.mouse_position_x = x
        self.mouse_position_y = y

        offset_x = x - self.last_mouse_position_x
        offset_y = self.last_mouse_position_y - y

        self.last_mouse_position_x = x
        self.last_mouse_position_y = y

        self.mouse_offset_x += offset_x
        self.mouse_offset_y += offset_y

        return self.bus.dispatch(
            Event(
                EventType.MOUSE_MOVED,
                mouse_pos_x=float(x),
                mouse_pos_y=float(y),
                mouse_offset_x=self.mouse_offset_x,
                mouse_offset_y=self.mouse_offset_y,
            )
        )

    def handle_cursor_enter(self, entered: bool) -> bool:
        type = EventType.MOUSE_ENTER if entered else EventType.MOUSE_LEAVE
        return self.bus.dispatch(Event(type))

    def handle_scroll(self, xoffset: float, yoffset: float) -> bool:
        return self.bus.dispatch(
            Event(EventType.MOUSE_SCROLL_WHEEL, mouse_scroll_value=float(yoffset))
        )

    def handle_joystick(self, jid: int, connected: bool) -> bool:
        type = EventType.JOYSTICK_CONNECTED if connected else EventType.JOYSTICK_DISCONNECTED
        return self.bus.dispatch(Event(type, joystick_id=jid))

    def aspect_ratio(self) -> float:
        """Width over height, as a float division would give it."""
        if self.height == 0:
            return math.copysign(math.inf, self.width) if self.width else math.nan
        return self.width / self.height


Backend = Callable[[str, int, int, dict], Any]


def _open_pyglet_window(title: str, width: int, height: int, hints: dict) -> Any:
    import pyglet

    style = (
        pyglet.window.Window.WINDOW_STYLE_DEFAULT
        if hints["decorated"]
        else pyglet.window.Window.WINDOW_STYLE_BORDERLESS
    )
    config_args: dict[str, Any] = {
        "sample_buffers": 1,
        "samples": hints["samples"],
        "double_buffer": True,
    }
    if "context_version" in hints:
        major, minor = hints["context_version"]
        config_args.update(
            major_version=major,
            minor_version=minor,
            forward_compatible=hints.get("core_profile", False),
        )

    window_args = dict(
        width=width, height=height, caption=title, resizable=hints["resizable"], style=style
    )
    try:
        handle = pyglet.window.Window(config=pyglet.gl.Config(**config_args), **window_args)
    except pyglet.window.NoSuchConfigException:
        handle = pyglet.window.Window(**window_args)

    if hints.get("maximized"):
        handle.maximize()
    if hints["center_cursor"]:
        handle.set_mouse_position(width // 2, height // 2)
    if hints["focused"]:
        handle.activate()
    return handle


def _refresh_rate(handle: Any) -> float:
    try:
        mode = handle.screen.get_mode()
    except (AttributeError, NotImplementedError):
        return 0.0
    rate = getattr(mode, "rate", None) if mode is not None else None
    return float(rate) if rate else 0.0


class Window:
    """An open window whose native events are forwarded onto the event bus."""

    def __init__(
        self,
        title: str,
        width: int,
        height: int,
        flags: int = WindowFlags.NONE,
        bus: Optional[EventBus] = None,
        *,
        input_state: Optional[InputState] = None,
        clock: Optional[Clock] = None,
        backend: Optional[Backend] = None,
    ) -> None:
        self.bus = bus if bus is not None else EventBus()
        self.input = input_state
        self.clock = clock

        hints = window_hints(flags)
        self.state = WindowState(self.bus, width, height, WindowFlags(flags))
        self.state.is_focused = hints["focused"]
        self.state.is_cursor_shown = hints["cursor_shown"]
        self.state.is_fullscreen = hints["fullscreen"]

        open_handle = backend or _open_pyglet_window
        handle = open_handle(title, width, height, hints)
        if handle is None:
            raise RuntimeError(f"Could not open window {title!r}")
        self.handle = handle

        self.state.refresh_rate = _refresh_rate(handle)
        self.state.position_x, self.state.position_y = handle.get_location()

        self._connect_handlers()
        if backend is None:
            self._watch_controllers()
        self.bus.listen(EventType.MOUSE_CURSOR_SHOWN, self._on_cursor_shown, self)

        self.make_current()

        if self.state.is_fullscreen:
            self.set_fullscreen(True)
        if not self.state.is_cursor_shown:
            handle.set_exclusive_mouse(True)

        log(
            LogLevel.INFO,
            'Window: {t = "%s", w = %i, h = %i} was successfully opened',
            title,
            width,
            height,
        )

    def _connect_handlers(self) -> None:
        state = self.state
        handle = self.handle

        def on_move(x, y):
            state.handle_move(x, y)

        def on_resize(width, height):
            state.handle_resize(width, height)
            framebuffer_size = getattr(handle, "get_framebuffer_size", None)
            fb_width, fb_height = framebuffer_size() if framebuffer_size else (width, height)
            state.handle_framebuffer_resize(fb_width, fb_height)

        def on_activate():
            state.handle_focus(True)

        def on_deactivate():
            state.handle_focus(False)

        def on_close():
            state.handle_close()

        def on_key_press(symbol, modifiers):
            state.handle_key(symbol, True)

        def on_key_release(symbol, modifiers):
            state.handle_key(symbol, False)

        def on_mouse_press(x, y, button, modifiers):
            state.handle_mouse_button(button, True)

        def on_mouse_release(x, y, button, modifiers):
            state.handle_mouse_button(button, False)

        def on_mouse_motion(x, y, dx, dy):
            state.handle_cursor_pos(x, state.height - y)

        def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
            state.handle_cursor_pos(x, state.height - y)

        def on_mouse_enter(x, y):
            state.handle_cursor_enter(True)

        def on_mouse_leave(x, y):
            state.handle_cursor_enter(False)

        def on_mouse_scroll(x, y, scroll_x, scroll_y):
            state.handle_scroll(scroll_x, scroll_y)

        handle.push_handlers(
            on_move=on_move,
            on_resize=on_resize,
            on_activate=on_activate,
            on_deactivate=on_deactivate,
            on_close=on_close,
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_mouse_press=on_mouse_press,
            on_mouse_release=on_mouse_release,
            on_mouse_motion=on_mouse_motion,
            on_mouse_drag=on_mouse_drag,
            on_mouse_enter=on_mouse_enter,
            on_mouse_leave=on_mouse_leave,
            on_mouse_scroll=on_mouse_scroll,
        )

    def _watch_controllers(self) -> None:
        try:
            import pyglet

            manager = pyglet.input.ControllerManager()
        except (AttributeError, NotImplementedError, OSError):
            return

        ids: dict[int, int] = {}

        def joystick_id(controller) -> int:
            return ids.setdefault(id(controller), len(ids))

        def on_connect(controller):
            self.state.handle_joystick(joystick_id(controller), True)

        def on_disconnect(controller):
            self.state.handle_joystick(joystick_id(controller), False)

        manager.push_handlers(on_connect=on_connect, on_disconnect=on_disconnect)
        self._controller_manager = manager

    @staticmethod
    def _on_cursor_shown(event: Event, dispatcher: Any, listener: Any) -> bool:
        if event.type is not EventType.MOUSE_CURSOR_SHOWN:
            return False
        listener.handle.set_exclusive_mouse(not event.cursor_shown)
        return True

    def close(self) -> None:
        self.handle.close()
        log(LogLevel.INFO, "Window was successfully closed")

    def poll_events(self) -> None:
        """Advance input and clock by a frame, then process pending native events."""
        if self.input is not None:
            self.input.update()
        if self.clock is not None:
            self.clock.update()
        self.handle.dispatch_events()

    def swap_buffers(self) -> None:
        self.handle.flip()

    def is_open(self) -> bool:
        return not self.handle.has_exit

    def is_shown(self) -> bool:
        return bool(self.handle.visible)

    def title(self) -> str:
        return self.handle.caption

    def set_title(self, title: str) -> None:
        self.handle.set_caption(title)

    def monitor_size(self) -> tuple[int, int]:
        screen = self.handle.screen
        return screen.width, screen.height

    def make_current(self) -> None:
        self.handle.switch_to()

    def set_fullscreen(self, fullscreen: bool) -> None:
        """Enter or leave fullscreen and announce it on the bus."""
        self.state.is_fullscreen = fullscreen
        if fullscreen:
            self.handle.set_fullscreen(True)
        else:
            self.handle.set_fullscreen(False, width=self.state.width, height=self.state.height)
            self.handle.set_location(self.state.position_x, self.state.position_y)

        self.bus.dispatch(
            Event(EventType.WINDOW_FULLSCREEN, window_is_fullscreen=fullscreen), self
        )

    def set_show(self, show: bool) -> None:
        self.handle.set_visible(show)

    def set_size(self, width: int, height: int) -> None:
        self.state.width = width
        self.state.height = height
        self.handle.set_size(width, height)

    def set_position(self, x: int, y: int) -> None:
        self.state.position_x = x
        self.state.position_y = y
        self.handle.set_location(x, y)