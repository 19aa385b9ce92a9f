"""A compact real-time rendering core: events, logging, memory accounting, timing, input, windowing and an OpenGL context layer."""

__version__ = "0.1.0"

__all__ = [
    "events",
    "logger",
    "memory",
    "clock",
    "input",
    "core",
    "window",
    "gfx_types",
    "gfx_context",
]