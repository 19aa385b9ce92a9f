# nikola

A compact core for real-time 3D applications, built on pyglet for windowing and
OpenGL access.

## Modules

- `nikola.events`: `EventType`, the frozen `Event` dataclass and `EventBus`.
  `EventBus.listen(type, func, listener=None)` registers a callback
  `func(event, dispatcher, listener)`. `dispatch(event, dispatcher=None)` calls
  the callbacks for the event's type in registration order. It stops at the
  first one that returns true and reports `True`. Otherwise it reports `False`.
  `listener_count(type)` counts the callbacks for a type, and `reset()` drops
  them all.
- `nikola.logger`: `log(level, msg, *args, bus=None)` prints a printf-style
  message in the `LogLevel`'s colour and returns the formatted text.
  `ERROR` and `FATAL` go to stderr and the rest to stdout. A `FATAL` message
  dispatches `EventType.APP_QUIT` on `bus` when one is given.
  `check(condition, expr, msg)` reports a failed assertion with `log_assert` and
  raises `NikolaAssertionError`.
- `nikola.memory`: `MemoryTracker` hands out `bytearray` blocks through
  `allocate`, `reallocate` and `blocks_allocate`, and counts them with `free`,
  `allocations_count`, `frees_count` and `allocation_bytes`. The functions
  `memory_set`, `memory_zero` and `memory_copy` work on the first `size` bytes of
  a block. They raise `NikolaAssertionError` on a missing block or an
  out-of-range size.
- `nikola.clock`: `Clock(time_func=None)`. Call `update()` once per frame.
  `delta_time()` is the time since the previous frame. `fps()` is refreshed
  each time at least a second has passed. `time()` is the time since the clock
  started, or the value of your own `time_func`.
- `nikola.input`: `InputState(bus, gamepad_source=None)` listens on the bus for
  key, mouse and joystick events. `gamepad_source(jid)` may return a
  `GamepadState` (name, pressed buttons, axes) for each polled gamepad.
- `nikola.core`: `init()` creates an `EventBus` and an `InputState` and returns
  them in a `Core` (`core.bus`, `core.input`). `shutdown(core)` removes every
  listener from the bus.
- `nikola.window`: `Window(title, width, height, flags=WindowFlags.NONE,
  bus=None, *, input_state=None, clock=None, backend=None)` opens a pyglet window.
  It forwards the window's native events to the bus through a `WindowState`.
  `window_hints(flags)` shows how `WindowFlags` become creation hints. Other
  methods: `poll_events`, `swap_buffers`, `is_open`, `is_shown`, `title`,
  `set_title`, `monitor_size`, `make_current`, `set_fullscreen`, `set_show`,
  `set_size`, `set_position` and `close`.
- `nikola.gfx_types`: graphics enums and description dataclasses. They include
  `LayoutType`, `TextureFormat`, `ContextFlags`, `BufferDesc`, `TextureDesc` and
  `CubemapDesc`. The module also maps them to OpenGL values (`gl_compare_func`,
  `gl_blend_mode`, `texture_gl_format` and so on) and computes vertex layouts
  with `calc_stride` and `attribute_formats`. `clear_bits_for` gives the clear
  mask a set of context flags selects.
- `nikola.gfx_context`: `GfxContext(desc, gl=None)` sets up OpenGL state for a
  window described by a `GfxContextDesc`. It offers `set_state`, `clear`,
  `apply_pipeline`, `present` and `shutdown`, and it is also a context manager.
  `GfxBuffer(gfx, desc)` creates a GPU buffer with `update` and `destroy`. The
  context needs OpenGL 4.2 or newer.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Getting started

```python
from nikola.core import init, shutdown
from nikola.events import Event, EventType

core = init()

def on_close(event, dispatcher, listener):
    print("window closed")
    return True

core.bus.listen(EventType.WINDOW_CLOSED, on_close)
assert core.bus.dispatch(Event(EventType.WINDOW_CLOSED)) is True

shutdown(core)
```

## Input queries

`InputState.update()` marks the start of a frame. The current key, mouse-button
and gamepad-button sets become the previous ones. After that, `key_pressed(key)`
is true only on the frame a key goes down, and `key_released(key)` only on the
frame it comes up. `key_down` and `key_up` report the key's current state. Mouse
buttons (`button_*`) and gamepad buttons (`gamepad_button_*`) have the same four
queries.

```python
from nikola.events import Event, EventBus, EventType
from nikola.input import InputState

bus = EventBus()
state = InputState(bus)

bus.dispatch(Event(EventType.KEY_PRESSED, key_pressed="space"))
assert state.key_pressed("space")

state.update()
assert not state.key_pressed("space")
assert state.key_down("space")
```

## Vertex layouts

```python
from nikola.gfx_types import LayoutDesc, LayoutType, attribute_formats, calc_stride

layout = [LayoutDesc(LayoutType.FLOAT3), LayoutDesc(LayoutType.MAT4)]
calc_stride(layout)          # 76
[f.index for f in attribute_formats(layout)]   # [0, 1, 2, 3, 4]
[f.offset for f in attribute_formats(layout)]  # [0, 12, 28, 44, 60]
```

A matrix layout fills one attribute slot per column.

## What the package does not do

The graphics layer covers the context and buffers only. It does not compile
shaders or create textures, cubemaps or pipeline objects, and it does not issue
draw calls. `GfxContext.apply_pipeline` accepts any pipeline object together
with a description that supplies `shader`, `textures`, `cubemaps`, `depth_mask`,
`stencil_ref` and `blend_factor`. There is no command-line program.