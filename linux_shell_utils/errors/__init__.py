"""Module de gestion des erreurs."""

from linux_shell_utils.errors.exceptions import (
    ApplicationError,
    ConfigurationError,
    ValidationError,
    ShellCommandError,
    CommandNotSetError,
    InvalidArgumentCountError,
    ExecutionPathNotFoundError,
    ExecutablePathNotFoundError,
    ExecFunctionUnavailableError,
    WorkingDirectoryChangeError,
    CommandTimeoutError,
    CommandExecutionError,
    InvalidUsageError,
    NonExecutableCommandError,
    CommandNotFoundError,
    UnknownExecutionError,
)


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ValidationError",
    "ShellCommandError",
    "CommandNotSetError",
    "InvalidArgumentCountError",
    "ExecutionPathNotFoundError",
    "ExecutablePathNotFoundError",
    "ExecFunctionUnavailableError",
    "WorkingDirectoryChangeError",
    "CommandTimeoutError",
    "CommandExecutionError",
    "InvalidUsageError",
    "NonExecutableCommandError",
    "CommandNotFoundError",
    "UnknownExecutionError",
]
