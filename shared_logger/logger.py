"""Process-wide logger with level filtering and pluggable outputs."""

from __future__ import annotations

import sys
import threading
from typing import Dict, Tuple

from shared_logger.formatting import format_exception, format_message
from shared_logger.levels import Level
from shared_logger.outputs import ConsoleOutput, LogOutput


class Logger:
    """Filter messages by level and fan them out to registered outputs.

    One re-entrant lock guards both the fan-out and output registration, so
    writes from different threads are serialized and never interleave.
    """

    def __init__(self, min_level: Level = Level.INFO) -> None:
        self._min_level = min_level
        # Keyed by id() so registration is by identity, not equality.
        self._outputs: Dict[int, LogOutput] = {}
        self._lock = threading.RLock()
        self.add_output(ConsoleOutput())

    @property
    def min_level(self) -> Level:
        return self._min_level

    def set_min_level(self, level: Level) -> None:
        self._min_level = level

    @property
    def outputs(self) -> Tuple[LogOutput, ...]:
        with self._lock:
            return tuple(self._outputs.values())

    def add_output(self, output: LogOutput) -> None:
        with self._lock:
            self._outputs.setdefault(id(output), output)

    def remove_output(self, output: LogOutput) -> None:
        with self._lock:
            if self._outputs.get(id(output)) is output:
                del self._outputs[id(output)]

    def log(self, level: Level, message: str, error: BaseException | None = None) -> None:
        """Write a message to every output if it passes the level threshold.

        Args:
            level: Severity of the message.
            message: Text to log.
            error: Optional exception whose stack trace is written after the line.
        """
        if level.rank < self._min_level.rank:
            return

        line = format_message(level, message)
        trace = format_exception(error) if error is not None else None

        with self._lock:
            for output in list(self._outputs.values()):
                try:
                    output.write(line)
                    if trace is not None:
                        output.write(trace)
                except Exception as exc:
                    print(f"Failed to write to log output: {exc}", file=sys.stderr)

    def debug(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.DEBUG, message, error)

    def info(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.INFO, message, error)

    def warn(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.WARNING, message, error)

    def error(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.ERROR, message, error)

    def fatal(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.FATAL, message, error)


_INSTANCE: Logger | None = None
_INSTANCE_LOCK = threading.Lock()


def get_instance() -> Logger:
    """Return the shared logger instance, creating it on first use."""
    global _INSTANCE
    with _INSTANCE_LOCK:
        if _INSTANCE is None:
            _INSTANCE = Logger()
        return _INSTANCE
