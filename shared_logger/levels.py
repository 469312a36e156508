"""Severity levels used for threshold filtering."""

from __future__ import annotations

from enum import Enum


class Level(Enum):
    """Ordered log severity, lowest first."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @property
    def rank(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: "Level | str | None", default: "Level | None" = None) -> "Level":
        """Resolve a level from a Level or a case-insensitive name.

        Args:
            value: Level instance or level name such as "info" or "WARN".
            default: Level returned when the value is not recognized.

        Returns:
            Matching Level, or the default (INFO when not given).
        """
        fallback = default if default is not None else cls.INFO
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return fallback
        name = value.strip().upper()
        if name == "WARN":
            return cls.WARNING
        return cls.__members__.get(name, fallback)
