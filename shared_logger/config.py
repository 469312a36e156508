"""Logger configuration dataclass and helpers to apply it."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from shared_logger.levels import Level
from shared_logger.logger import Logger, get_instance
from shared_logger.outputs import ConsoleOutput, FileOutput


@dataclass
class LoggerConfig:
    """Logger configuration settings."""

    min_level: str = "INFO"
    console: bool = True
    files: List[str] = field(default_factory=list)


def _as_paths(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list):
        return [str(v) for v in value if v]
    return []


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def config_from_dict(raw: Dict[str, Any]) -> LoggerConfig:
    """Build a LoggerConfig instance from a raw dictionary.

    Args:
        raw: Raw config dictionary.

    Returns:
        Normalized LoggerConfig instance.
    """
    raw = raw or {}
    return LoggerConfig(
        min_level=Level.parse(raw.get("min_level")).name,
        console=_as_bool(raw.get("console"), True),
        files=_as_paths(raw.get("files")),
    )


def configure(config: LoggerConfig, logger: Logger | None = None) -> Logger:
    """Apply a config to a logger, the shared instance by default.

    Args:
        config: Settings to apply.
        logger: Optional logger; defaults to ``get_instance()``.

    Returns:
        The configured logger.

    Raises:
        OSError: If a file output's directory cannot be created.
    """
    logger = logger or get_instance()
    logger.set_min_level(Level.parse(config.min_level))

    consoles = [output for output in logger.outputs if isinstance(output, ConsoleOutput)]
    if config.console and not consoles:
        logger.add_output(ConsoleOutput())
    elif not config.console:
        for output in consoles:
            logger.remove_output(output)

    registered = {output.path for output in logger.outputs if isinstance(output, FileOutput)}
    for file_path in config.files:
        if Path(file_path).expanduser().resolve() in registered:
            continue
        output = FileOutput(file_path)
        logger.add_output(output)
        registered.add(output.path)
    return logger
