import re
from datetime import datetime

from shared_logger.formatting import format_exception, format_message, format_timestamp
from shared_logger.levels import Level


def _raise_value_error() -> None:
    raise ValueError("bad value")


def test_format_timestamp_uses_millisecond_precision() -> None:
    moment = datetime(2024, 3, 7, 9, 5, 2, 45678)

    assert format_timestamp(moment) == "2024-03-07 09:05:02.045"


def test_format_timestamp_defaults_to_now() -> None:
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", format_timestamp())


def test_format_message_shape() -> None:
    moment = datetime(2024, 12, 31, 23, 59, 59, 999999)

    line = format_message(Level.ERROR, "disk [full]", moment)

    assert line == "[2024-12-31 23:59:59.999] [ERROR] disk [full]"


def test_format_exception_lists_frames_with_tabs() -> None:
    try:
        _raise_value_error()
    except ValueError as exc:
        block = format_exception(exc)

    lines = block.split("\n")
    assert lines[0] == "ValueError: bad value"
    assert block.endswith("\n")
    frames = lines[1:-1]
    assert len(frames) == 2
    assert all(frame.startswith("\tFile ") for frame in frames)
    assert frames[-1].endswith("in _raise_value_error")


def test_format_exception_without_traceback() -> None:
    assert format_exception(RuntimeError("never raised")) == "RuntimeError: never raised\n"


def test_format_exception_keeps_description_when_notes_present() -> None:
    try:
        _raise_value_error()
    except ValueError as exc:
        exc.add_note("while loading settings")
        block = format_exception(exc)

    lines = block.split("\n")
    assert lines[0] == "ValueError: bad value"
    assert "while loading settings" not in block
    assert all(line.startswith("\tFile ") for line in lines[1:-1])


def test_format_exception_lists_outermost_frame_first() -> None:
    try:
        _raise_value_error()
    except ValueError as exc:
        frames = format_exception(exc).split("\n")[1:-1]

    assert frames[0].endswith("in test_format_exception_lists_outermost_frame_first")
    assert frames[-1].endswith("in _raise_value_error")
