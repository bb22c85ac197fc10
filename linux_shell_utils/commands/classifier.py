"""Classification des codes retour en résultats typés.

| code retour | résultat                    |
|-------------|-----------------------------|
| 0           | succès                      |
| 2           | InvalidUsageError           |
| 126         | NonExecutableCommandError   |
| 127         | CommandNotFoundError        |
| autre       | UnknownExecutionError       |
"""

from typing import Dict, Optional, Type

from linux_shell_utils.errors.exceptions import (
    CommandExecutionError,
    CommandNotFoundError,
    InvalidUsageError,
    NonExecutableCommandError,
    UnknownExecutionError,
)

EXIT_STATUS_ERRORS: Dict[int, Type[CommandExecutionError]] = {
    2: InvalidUsageError,
    126: NonExecutableCommandError,
    127: CommandNotFoundError,
}


def classify_exit_status(
    exit_status: int, command: str
) -> Optional[CommandExecutionError]:
    """Associe un code retour à son erreur typée.

    L'erreur est retournée, non levée, pour que l'appelant puisse
    la journaliser avant de la lever.

    Args:
        exit_status: Code retour du processus.
        command: Commande rendue, incluse dans le message.

    Returns:
        None si le code vaut 0, sinon l'erreur correspondante.
    """
    if exit_status == 0:
        return None
    error_type = EXIT_STATUS_ERRORS.get(exit_status, UnknownExecutionError)
    return error_type(command, exit_status)
