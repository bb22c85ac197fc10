"""Tests pour le module validation."""

from linux_shell_utils.validation import (
    DirectoryChecker,
    LinuxDirectoryChecker,
)


class TestLinuxDirectoryChecker:
    """Tests pour LinuxDirectoryChecker."""

    def setup_method(self):
        self.checker = LinuxDirectoryChecker()

    def test_implements_interface(self):
        """LinuxDirectoryChecker implémente DirectoryChecker."""
        assert isinstance(self.checker, DirectoryChecker)

    def test_repertoire_existant(self, tmp_path):
        """Un répertoire existant est accepté."""
        assert self.checker.is_directory(str(tmp_path)) is True

    def test_racine(self):
        """La racine est un répertoire."""
        assert self.checker.is_directory("/") is True

    def test_fichier(self, tmp_path):
        """Un fichier n'est pas un répertoire."""
        target = tmp_path / "f.txt"
        target.write_text("x")
        assert self.checker.is_directory(str(target)) is False

    def test_chemin_inexistant(self, tmp_path):
        """Un chemin inexistant est refusé."""
        assert self.checker.is_directory(str(tmp_path / "absent")) is False

    def test_chemin_vide(self):
        """Un chemin vide n'est jamais un répertoire."""
        assert self.checker.is_directory("") is False
        assert self.checker.is_directory("   ") is False

    def test_lien_symbolique(self, tmp_path):
        """Un lien vers un répertoire est suivi."""
        target = tmp_path / "cible"
        target.mkdir()
        link = tmp_path / "lien"
        link.symlink_to(target)
        assert self.checker.is_directory(str(link)) is True
