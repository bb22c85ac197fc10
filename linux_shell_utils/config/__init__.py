"""Module de configuration."""

from linux_shell_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from linux_shell_utils.config.settings import (
    DEFAULT_SECTION,
    ShellSettings,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "DEFAULT_SECTION",
    "ShellSettings",
    "load_settings",
]
