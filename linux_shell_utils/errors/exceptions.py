"""
Module contenant les exceptions personnalisées de linux_shell_utils.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Chaque échec possible de la construction ou de l'exécution d'une
commande shell correspond à un type dédié.
"""
from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class ShellCommandError(ApplicationError):
    """Exception de base pour les commandes shell."""
    pass


class CommandNotSetError(ShellCommandError):
    """Levée quand la commande est rendue sans template défini."""

    def __init__(self) -> None:
        super().__init__(
            "Aucune commande valide n'a été définie ; "
            "utilisez la méthode set_command()."
        )


class InvalidArgumentCountError(ShellCommandError):
    """Levée quand le nombre d'arguments ne correspond pas au template.

    Attributes:
        expected: Nombre de marqueurs présents dans le template.
        actual: Nombre d'arguments fournis.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Le nombre d'arguments fournis [{actual}] ne correspond "
            f"pas au nombre d'arguments de la commande [{expected}]"
        )


class ExecutionPathNotFoundError(ShellCommandError, ValidationError):
    """Levée quand le répertoire d'exécution n'existe pas."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Le répertoire d'exécution {path} n'existe pas."
        )


class ExecutablePathNotFoundError(ShellCommandError, ValidationError):
    """Levée quand le répertoire des exécutables n'existe pas."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Le répertoire des exécutables {path} n'existe pas."
        )


class ExecFunctionUnavailableError(ShellCommandError):
    """Levée quand aucun processus enfant ne peut être lancé.

    Le message contient la commande rendue pour permettre
    une exécution manuelle.
    """

    def __init__(self, command: str, reason: Optional[str] = None) -> None:
        self.command = command
        detail = f" ({reason})" if reason else ""
        super().__init__(
            "La commande ne peut pas être exécutée car aucun shell "
            f"n'est disponible{detail}.\n"
            "Vous pouvez tenter de l'exécuter manuellement :\n\n"
            f"{command}"
        )


class WorkingDirectoryChangeError(ShellCommandError):
    """Levée quand le changement de répertoire courant échoue."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        detail = f" : {reason}" if reason else ""
        super().__init__(
            f"Impossible de changer le répertoire courant vers "
            f"{path}{detail}"
        )


class CommandTimeoutError(ShellCommandError):
    """Levée quand la commande dépasse le délai imparti."""

    def __init__(self, command: str, timeout: float) -> None:
        self.command = command
        self.timeout = timeout
        super().__init__(
            f"La commande a dépassé le délai de {timeout}s - [{command}]"
        )


class CommandExecutionError(ShellCommandError):
    """Exception de base pour les codes retour non nuls.

    Attributes:
        command: Commande rendue qui a été exécutée.
        exit_status: Code retour brut du processus.
    """

    description = "La commande n'a pas pu être exécutée"

    def __init__(self, command: str, exit_status: int) -> None:
        self.command = command
        self.exit_status = exit_status
        super().__init__(
            f"{self.description} (code retour {exit_status}) - [{command}]"
        )


class InvalidUsageError(CommandExecutionError):
    """Code retour 2 : la commande a été mal utilisée."""

    description = "La commande a été utilisée de manière incorrecte"


class NonExecutableCommandError(CommandExecutionError):
    """Code retour 126 : la commande n'est pas exécutable."""

    description = "La commande n'est pas exécutable"


class CommandNotFoundError(CommandExecutionError):
    """Code retour 127 : la commande est introuvable."""

    description = "La commande est introuvable"


class UnknownExecutionError(CommandExecutionError):
    """Tout autre code retour non nul."""
    pass
