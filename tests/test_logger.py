import pytest

from nikola.events import EventBus, EventType
from nikola.logger import LogLevel, NikolaAssertionError, check, log, log_assert


def test_info_goes_to_stdout_with_prefix_and_colour(capsys):
    log(LogLevel.INFO, "Window was successfully closed")
    captured = capsys.readouterr()
    assert captured.out == "\033[1;92m[NIKOLA-INFO]: Window was successfully closed\033[0m\n"
    assert captured.err == ""


@pytest.mark.parametrize("level", [LogLevel.ERROR, LogLevel.FATAL])
def test_errors_go_to_stderr(capsys, level):
    log(level, "boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "boom" in captured.err


def test_arguments_are_formatted(capsys):
    text = log(LogLevel.WARN, "Could not find shader uniform with name '%s'", "u_model")
    assert text == "Could not find shader uniform with name 'u_model'"
    assert "[NIKOLA-WARN]: " + text in capsys.readouterr().out


def test_message_is_truncated(capsys):
    text = log(LogLevel.DEBUG, "x" * 40000)
    capsys.readouterr()
    assert len(text) == 32000 - 1


def test_fatal_dispatches_quit(capsys):
    bus = EventBus()
    quits = []
    bus.listen(EventType.APP_QUIT, lambda e, d, l: quits.append(e.type) or True)
    log(LogLevel.FATAL, "cannot continue", bus=bus)
    capsys.readouterr()
    assert quits == [EventType.APP_QUIT]


def test_non_fatal_does_not_dispatch(capsys):
    bus = EventBus()
    quits = []
    bus.listen(EventType.APP_QUIT, lambda e, d, l: quits.append(e) or True)
    log(LogLevel.ERROR, "recoverable", bus=bus)
    capsys.readouterr()
    assert quits == []


def test_log_assert_reports_all_fields(capsys):
    log_assert("ptr", "Cannot free an invalid pointer!", "memory.py", 12)
    lines = capsys.readouterr().err.splitlines()
    assert lines == [
        "[NIKOLA ASSERTION FAILED]: Cannot free an invalid pointer!",
        "[EXPR]: ptr",
        "[FILE]: memory.py",
        "[LINE]: 12",
    ]


def test_check_raises_and_reports(capsys):
    with pytest.raises(NikolaAssertionError) as info:
        check(False, "gfx", "Invalid GfxContext struct passed")
    assert info.value.expr == "gfx"
    assert "Invalid GfxContext struct passed" in capsys.readouterr().err


def test_check_passes_silently(capsys):
    check(True, "ok", "never shown")
    assert capsys.readouterr().err == ""