"""Coloured console logging and assertion reporting."""

from __future__ import annotations

import sys
import traceback
from enum import IntEnum
from typing import Optional

from nikola.events import Event, EventBus, EventType

__all__ = ["LogLevel", "NikolaAssertionError", "log", "log_assert", "check"]

_MESSAGE_LIMIT = 32000


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


_PREFIXES = {
    LogLevel.TRACE: "[NIKOLA-TRACE]: ",
    LogLevel.DEBUG: "[NIKOLA-DEBUG]: ",
    LogLevel.INFO: "[NIKOLA-INFO]: ",
    LogLevel.WARN: "[NIKOLA-WARN]: ",
    LogLevel.ERROR: "[NIKOLA-ERROR]: ",
    LogLevel.FATAL: "[NIKOLA-FATAL]: ",
}

_COLORS = {
    LogLevel.TRACE: "1;94",
    LogLevel.DEBUG: "1;96",
    LogLevel.INFO: "1;92",
    LogLevel.WARN: "1;93",
    LogLevel.ERROR: "1;91",
    LogLevel.FATAL: "1;2;31;40",
}


class NikolaAssertionError(AssertionError):
    """Raised when an engine assertion fails."""

    def __init__(self, expr: str, msg: str) -> None:
        super().__init__(msg)
        self.expr = expr
        self.msg = msg


def log(level: LogLevel, msg: str, *args: object, bus: Optional[EventBus] = None) -> str:
    """Print a printf-style message in the level's colour and return its text.

    Errors and fatal messages go to stderr, the rest to stdout. A fatal
    message dispatches ``APP_QUIT`` on ``bus`` when one is given.
    """
    level = LogLevel(level)
    text = msg % args if args else msg
    text = text[: _MESSAGE_LIMIT - 1]

    console = sys.stderr if level in (LogLevel.ERROR, LogLevel.FATAL) else sys.stdout
    console.write(f"\033[{_COLORS[level]}m{_PREFIXES[level]}{text}\033[0m\n")

    if level is LogLevel.FATAL and bus is not None:
        bus.dispatch(Event(EventType.APP_QUIT))

    return text


def log_assert(expr: str, msg: str, file: str, line: int) -> None:
    """Report a failed assertion on stderr."""
    sys.stderr.write(f"[NIKOLA ASSERTION FAILED]: {msg}\n")
    sys.stderr.write(f"[EXPR]: {expr}\n")
    sys.stderr.write(f"[FILE]: {file}\n")
    sys.stderr.write(f"[LINE]: {line}\n")


def check(condition: object, expr: str, msg: str) -> None:
    """Report and raise :class:`NikolaAssertionError` when ``condition`` is false."""
    if condition:
        return
    caller = traceback.extract_stack(limit=2)[0]
    log_assert(expr, msg, caller.filename, caller.lineno or 0)
    raise NikolaAssertionError(expr, msg)