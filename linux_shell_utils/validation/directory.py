"""Vérificateur d'existence de répertoires sur le système de fichiers."""

from pathlib import Path

from linux_shell_utils.validation.base import DirectoryChecker


class LinuxDirectoryChecker(DirectoryChecker):
    """Vérifie qu'un chemin désigne un répertoire existant.

    Résout les chemins (.resolve()) pour suivre les liens symboliques
    avant la vérification. Un chemin vide n'est jamais un répertoire.
    """

    def is_directory(self, path: str) -> bool:
        """Vérifie l'existence du répertoire.

        Args:
            path: Chemin à vérifier.

        Returns:
            True si le chemin existe et est un répertoire.
        """
        if not path or not path.strip():
            return False
        return Path(path).resolve().is_dir()
