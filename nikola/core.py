"""Start-up and shut-down of the engine's base systems."""

from __future__ import annotations

from dataclasses import dataclass

from nikola.events import EventBus
from nikola.input import InputState
from nikola.logger import LogLevel, log

__all__ = ["Core", "init", "shutdown"]


@dataclass
class Core:
    """The running base systems: the event bus and the input state."""

    bus: EventBus
    input: InputState


def init() -> Core:
    """Bring up the event and input systems."""
    bus = EventBus()
    log(LogLevel.INFO, "Event system was successfully initialized")
    input_state = InputState(bus)
    log(LogLevel.INFO, "Input system successfully initialized")
    return Core(bus=bus, input=input_state)


def shutdown(core: Core) -> None:
    """Tear down the event system."""
    core.bus.reset()
    log(LogLevel.INFO, "Event system was successfully shutdown")