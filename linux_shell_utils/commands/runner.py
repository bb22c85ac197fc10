"""Lanceur de commandes shell via subprocess.

Ce module fournit SubprocessShellRunner, une implémentation concrète
de ShellRunner qui passe la commande rendue à ``/bin/sh -c``.

Seule la sortie standard est capturée ; la sortie d'erreur reste
celle du processus courant. Chaque ligne est privée de ses espaces
de fin.

Example :
    runner = SubprocessShellRunner()
    result = runner.run("hostname '-s'")
    print(result.output, result.exit_status)
"""

import os
import subprocess  # nosec B404
from typing import Optional

from linux_shell_utils.commands.base import ExecutionResult, ShellRunner
from linux_shell_utils.errors.exceptions import (
    CommandTimeoutError,
    ExecFunctionUnavailableError,
)

DEFAULT_SHELL = "/bin/sh"


class SubprocessShellRunner(ShellRunner):
    """Exécute les commandes avec subprocess.run et shell=True.

    Attributes:
        _shell: Chemin du shell utilisé pour interpréter la commande.
    """

    def __init__(self, shell: str = DEFAULT_SHELL) -> None:
        """Initialise le lanceur.

        Args:
            shell: Chemin du shell (défaut: /bin/sh).
        """
        self._shell = shell

    @property
    def shell(self) -> str:
        """Chemin du shell utilisé."""
        return self._shell

    def is_available(self) -> bool:
        """Vérifie que le shell existe et est exécutable."""
        return os.path.isfile(self._shell) and os.access(
            self._shell, os.X_OK
        )

    def run(
        self,
        command: str,
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        """Exécute la commande et capture sa sortie standard.

        Args:
            command: Commande rendue.
            timeout: Délai maximal en secondes (None = illimité).

        Returns:
            ExecutionResult avec les lignes et le code retour.

        Raises:
            CommandTimeoutError: Si le délai est dépassé.
            ExecFunctionUnavailableError: Si le shell ne peut pas
                être lancé, ou si la commande contient un octet nul.
        """
        try:
            proc = subprocess.run(  # nosec B602
                command,
                shell=True,
                executable=self._shell,
                stdout=subprocess.PIPE,
                text=True,
                errors="replace",
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandTimeoutError(command, timeout) from e
        except (OSError, ValueError) as e:
            raise ExecFunctionUnavailableError(command, str(e)) from e

        lines = tuple(
            line.rstrip() for line in (proc.stdout or "").splitlines()
        )
        return ExecutionResult(
            command=command,
            lines=lines,
            exit_status=proc.returncode,
        )
