"""Interface abstraite pour la validation de répertoires."""

from abc import ABC, abstractmethod


class DirectoryChecker(ABC):
    """
    Interface abstraite pour vérifier l'existence d'un répertoire.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        Indique si le chemin existe et désigne un répertoire.

        Args:
            path: Chemin à vérifier

        Returns:
            True si le chemin est un répertoire existant
        """
        pass
