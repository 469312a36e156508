"""Output destinations that receive formatted log lines."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Protocol, TextIO


class LogOutput(Protocol):
    """Destination for formatted log lines."""

    def write(self, message: str) -> None:
        """Write one formatted message; raise OSError on I/O failure."""


class ConsoleOutput:
    """Write lines to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, message: str) -> None:
        stream = self._stream or sys.stdout
        print(message, file=stream)

    def __repr__(self) -> str:
        return "ConsoleOutput()" if self._stream is None else f"ConsoleOutput(stream={self._stream!r})"


class FileOutput:
    """Append lines to a file, opening it for every write."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        """Resolve the target path and create its parent directory.

        Args:
            file_path: Path of the log file.

        Raises:
            OSError: If the parent directory cannot be created.
        """
        self.path = Path(file_path).expanduser().resolve()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, message: str) -> None:
        with self.path.open("a", encoding="utf-8", newline="") as f:
            f.write(f"{message}{os.linesep}")

    def __repr__(self) -> str:
        return f"FileOutput({str(self.path)!r})"
