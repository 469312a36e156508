"""Line and stack-trace formatting for log output."""

from __future__ import annotations

import traceback
from datetime import datetime

from shared_logger.levels import Level


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(moment: datetime | None = None) -> str:
    """Return local time as ``yyyy-MM-dd HH:mm:ss.SSS``."""
    moment = moment or datetime.now()
    return f"{moment.strftime(TIMESTAMP_FORMAT)}.{moment.microsecond // 1000:03d}"


def format_message(level: Level, message: str, moment: datetime | None = None) -> str:
    """Build the primary log line.

    Args:
        level: Severity of the message.
        message: Caller text, written as-is.
        moment: Optional timestamp; defaults to now.

    Returns:
        Line shaped as ``[timestamp] [LEVEL] message``.
    """
    return f"[{format_timestamp(moment)}] [{level.name}] {message}"


def format_exception(error: BaseException) -> str:
    """Render an error description followed by one tab-indented line per frame.

    Frames come from ``error.__traceback__`` in Python's usual order, outermost
    call first and the frame that raised last. Notes added with ``add_note()``
    are left out of the description line.
    """
    summary = traceback.TracebackException.from_exception(error)
    summary.__notes__ = None
    description = list(summary.format_exception_only())[-1].rstrip("\n")
    lines = [f"{description}\n"]
    for frame in summary.stack:
        lines.append(f'\tFile "{frame.filename}", line {frame.lineno}, in {frame.name}\n')
    return "".join(lines)
