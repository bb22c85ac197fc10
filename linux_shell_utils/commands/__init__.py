"""Module de construction et d'exécution de commandes shell.

Ce module fournit des classes pour construire des lignes de commande
échappées et les exécuter via un shell.

Classes disponibles :
    CommandBuilder : Constructeur fluent de commandes échappées.
    ExecutionResult : Résultat immuable d'une exécution.
    ShellRunner : Interface abstraite du lanceur de processus.
    SubprocessShellRunner : Lanceur concret via subprocess.
    ExecutionPaths : Répertoires d'exécution et des exécutables.
"""

from linux_shell_utils.commands.base import (
    ExecutionResult,
    ShellRunner,
)
from linux_shell_utils.commands.builder import (
    DEV_NULL_REDIRECT,
    CommandBuilder,
)
from linux_shell_utils.commands.classifier import classify_exit_status
from linux_shell_utils.commands.escaping import (
    PLACEHOLDER,
    escape_argument,
    escape_command,
    unescape_allowed,
)
from linux_shell_utils.commands.paths import (
    ExecutionPaths,
    shared_paths,
    working_directory,
)
from linux_shell_utils.commands.runner import SubprocessShellRunner

__all__ = [
    # Structures de données
    "ExecutionResult",
    # Interface abstraite
    "ShellRunner",
    # Constructeur
    "CommandBuilder",
    "DEV_NULL_REDIRECT",
    # Échappement
    "PLACEHOLDER",
    "escape_command",
    "escape_argument",
    "unescape_allowed",
    # Classification
    "classify_exit_status",
    # Chemins
    "ExecutionPaths",
    "shared_paths",
    "working_directory",
    # Implémentation Linux
    "SubprocessShellRunner",
]
