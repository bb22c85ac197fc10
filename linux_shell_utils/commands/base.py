"""Interfaces abstraites et structures de données pour l'exécution
de commandes shell.

Ce module définit :
    - ExecutionResult : Résultat immuable d'une exécution de commande.
    - ShellRunner : Interface abstraite du lanceur de processus.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ExecutionResult:
    """Résultat de l'exécution d'une commande shell.

    Attributes:
        command: Commande rendue, telle que passée au shell.
        lines: Lignes de la sortie standard, dans l'ordre.
        exit_status: Code de retour du processus.
        previous_cwd: Répertoire courant avant l'exécution, si un
            répertoire d'exécution était configuré.
    """

    command: str
    lines: Tuple[str, ...]
    exit_status: int
    previous_cwd: Optional[str] = None

    @property
    def output(self) -> str:
        """Sortie standard, lignes jointes par des sauts de ligne."""
        return "\n".join(self.lines)

    @property
    def success(self) -> bool:
        """True si le code retour est 0."""
        return self.exit_status == 0


class ShellRunner(ABC):
    """Interface abstraite pour le lancement de commandes via un shell."""

    @abstractmethod
    def is_available(self) -> bool:
        """Indique si un processus enfant peut être lancé.

        Returns:
            True si le shell est utilisable.
        """
        pass

    @abstractmethod
    def run(
        self,
        command: str,
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        """Exécute une commande et attend sa fin.

        Les échecs de lancement (commande introuvable, non
        exécutable) sont rapportés par le code retour.

        Args:
            command: Commande complète, interprétée par le shell.
            timeout: Délai maximal en secondes.

        Returns:
            Résultat de l'exécution.
        """
        pass
