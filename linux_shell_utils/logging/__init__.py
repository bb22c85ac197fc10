"""Module de logging."""

from linux_shell_utils.logging.base import Logger
from linux_shell_utils.logging.file_logger import FileLogger
from linux_shell_utils.logging.events import (
    EVENT_CONTEXT,
    CommandEvent,
    CommandEventLogger,
    CommandEventType,
)

__all__ = [
    "Logger",
    "FileLogger",
    "EVENT_CONTEXT",
    "CommandEvent",
    "CommandEventLogger",
    "CommandEventType",
]
