"""Module de validation."""

from linux_shell_utils.validation.base import DirectoryChecker
from linux_shell_utils.validation.directory import LinuxDirectoryChecker

__all__ = [
    "DirectoryChecker",
    "LinuxDirectoryChecker",
]
