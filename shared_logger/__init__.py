"""Shared logger package facade."""

from shared_logger.config import LoggerConfig, config_from_dict, configure
from shared_logger.formatting import format_exception, format_message, format_timestamp
from shared_logger.levels import Level
from shared_logger.logger import Logger, get_instance
from shared_logger.outputs import ConsoleOutput, FileOutput, LogOutput

__all__ = [
    "ConsoleOutput",
    "FileOutput",
    "Level",
    "LogOutput",
    "Logger",
    "LoggerConfig",
    "config_from_dict",
    "configure",
    "format_exception",
    "format_message",
    "format_timestamp",
    "get_instance",
]
