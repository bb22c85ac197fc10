"""
Linux Shell Utils - Construction et exécution sûres de commandes shell.

Modules disponibles:
- commands: Construction, rendu et exécution de commandes échappées
  (CommandBuilder, SubprocessShellRunner, ExecutionPaths)
- errors: Exceptions typées (échecs de rendu, de chemins, codes retour)
- logging: Gestion des logs (Logger, FileLogger, CommandEventLogger)
- config: Chargement de configuration (TOML, JSON, ShellSettings)
- validation: Vérification de l'existence des répertoires
"""

__version__ = "1.0.0"

from linux_shell_utils.logging import (
    Logger,
    FileLogger,
    CommandEvent,
    CommandEventLogger,
    CommandEventType,
)
from linux_shell_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    ShellSettings,
    load_settings,
)
from linux_shell_utils.validation import (
    DirectoryChecker,
    LinuxDirectoryChecker,
)
from linux_shell_utils.commands import (
    CommandBuilder,
    ExecutionResult,
    ShellRunner,
    SubprocessShellRunner,
    ExecutionPaths,
    shared_paths,
    classify_exit_status,
    escape_argument,
    escape_command,
)
from linux_shell_utils.errors import (
    ShellCommandError,
    CommandNotSetError,
    InvalidArgumentCountError,
    ExecFunctionUnavailableError,
    ExecutionPathNotFoundError,
    ExecutablePathNotFoundError,
    WorkingDirectoryChangeError,
    CommandTimeoutError,
    CommandExecutionError,
    InvalidUsageError,
    CommandNotFoundError,
    NonExecutableCommandError,
    UnknownExecutionError,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "CommandEvent",
    "CommandEventLogger",
    "CommandEventType",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "ShellSettings",
    "load_settings",
    # Validation
    "DirectoryChecker",
    "LinuxDirectoryChecker",
    # Commands
    "CommandBuilder",
    "ExecutionResult",
    "ShellRunner",
    "SubprocessShellRunner",
    "ExecutionPaths",
    "shared_paths",
    "classify_exit_status",
    "escape_argument",
    "escape_command",
    # Errors
    "ShellCommandError",
    "CommandNotSetError",
    "InvalidArgumentCountError",
    "ExecFunctionUnavailableError",
    "ExecutionPathNotFoundError",
    "ExecutablePathNotFoundError",
    "WorkingDirectoryChangeError",
    "CommandTimeoutError",
    "CommandExecutionError",
    "InvalidUsageError",
    "CommandNotFoundError",
    "NonExecutableCommandError",
    "UnknownExecutionError",
]
