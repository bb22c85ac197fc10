"""Répertoire d'exécution et répertoire des exécutables.

ExecutionPaths regroupe deux réglages :
    - execution_path : répertoire dans lequel le processus se place
      le temps d'une exécution ;
    - executable_path : répertoire préfixé à la commande rendue.

L'instance ``shared_paths`` est partagée par tous les CommandBuilder
qui ne reçoivent pas leur propre ExecutionPaths. Le dernier appel à
un setter l'emporte pour tout le processus ; un CommandBuilder qui a
besoin d'isolation reçoit une instance dédiée.

Les accès sont protégés par un verrou réentrant, que le
CommandBuilder conserve pendant toute la séquence changement de
répertoire / exécution / restauration.
"""

import os
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from linux_shell_utils.errors.exceptions import (
    ExecutablePathNotFoundError,
    ExecutionPathNotFoundError,
    WorkingDirectoryChangeError,
)
from linux_shell_utils.validation.base import DirectoryChecker
from linux_shell_utils.validation.directory import LinuxDirectoryChecker


class ExecutionPaths:
    """Configuration des chemins partagée entre commandes."""

    def __init__(
        self,
        directory_checker: Optional[DirectoryChecker] = None,
    ) -> None:
        """Initialise une configuration vide.

        Args:
            directory_checker: Vérificateur d'existence des
                répertoires (LinuxDirectoryChecker par défaut).
        """
        self._checker = directory_checker or LinuxDirectoryChecker()
        self._execution_path: Optional[str] = None
        self._executable_path: Optional[str] = None
        self.lock = threading.RLock()

    @property
    def directory_checker(self) -> DirectoryChecker:
        """Vérificateur de répertoires utilisé par les setters."""
        return self._checker

    @directory_checker.setter
    def directory_checker(self, checker: DirectoryChecker) -> None:
        self._checker = checker

    def get_execution_path(self) -> Optional[str]:
        """Retourne le répertoire d'exécution ou None."""
        with self.lock:
            return self._execution_path

    def set_execution_path(self, path: Optional[str] = None) -> None:
        """Définit ou efface le répertoire d'exécution.

        Args:
            path: Répertoire existant, ou None pour effacer.

        Raises:
            ExecutionPathNotFoundError: Si le répertoire n'existe pas.
        """
        if path is not None and not self._checker.is_directory(path):
            raise ExecutionPathNotFoundError(path)
        with self.lock:
            self._execution_path = path

    def get_executable_path(self) -> Optional[str]:
        """Retourne le répertoire des exécutables ou None."""
        with self.lock:
            return self._executable_path

    def set_executable_path(self, path: Optional[str] = None) -> None:
        """Définit ou efface le répertoire des exécutables.

        Args:
            path: Répertoire existant, ou None pour effacer.

        Raises:
            ExecutablePathNotFoundError: Si le répertoire n'existe pas.
        """
        if path is not None and not self._checker.is_directory(path):
            raise ExecutablePathNotFoundError(path)
        with self.lock:
            self._executable_path = path

    def clear(self) -> None:
        """Efface les deux réglages."""
        with self.lock:
            self._execution_path = None
            self._executable_path = None


shared_paths = ExecutionPaths()


@contextmanager
def working_directory(path: str) -> Iterator[str]:
    """Se place dans ``path`` le temps du bloc, puis revient.

    Le répertoire d'origine est restauré que le bloc réussisse ou
    lève une exception. Si l'entrée dans ``path`` échoue, le bloc
    n'est pas exécuté et aucune restauration n'est tentée.

    Args:
        path: Répertoire cible.

    Yields:
        Le répertoire courant d'origine.

    Raises:
        WorkingDirectoryChangeError: Si le répertoire courant est
            illisible (supprimé), ou si l'entrée ou la restauration
            échoue.
    """
    try:
        previous = os.getcwd()
        os.chdir(path)
    except OSError as e:
        raise WorkingDirectoryChangeError(path, str(e)) from e
    try:
        yield previous
    finally:
        try:
            os.chdir(previous)
        except OSError as e:
            raise WorkingDirectoryChangeError(previous, str(e)) from e
