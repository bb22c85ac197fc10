"""Tests pour le chargement de configuration et ShellSettings."""

import json
import unittest
from unittest.mock import MagicMock, patch

import pytest
from pydantic import BaseModel

from linux_shell_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    ShellSettings,
    load_settings,
)
from linux_shell_utils.errors import ConfigurationError


class SampleConfig(BaseModel):
    """Modele Pydantic de test."""
    name: str
    count: int

    model_config = {"extra": "forbid"}


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def setup_method(self):
        self.loader = FileConfigLoader()

    def test_load_toml(self, tmp_path):
        """Charge un fichier TOML en dict."""
        path = tmp_path / "config.toml"
        path.write_text('[shell_command]\nenable_logging = true\n')
        assert self.loader.load(path) == {
            "shell_command": {"enable_logging": True}
        }

    def test_load_json(self, tmp_path):
        """Charge un fichier JSON en dict."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"name": "test", "count": 42}))
        assert self.loader.load(str(path))["count"] == 42

    def test_load_with_schema(self, tmp_path):
        """Avec un schema, retourne une instance du modele."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"name": "test", "count": 42}))
        result = self.loader.load(path, schema=SampleConfig)
        assert isinstance(result, SampleConfig)
        assert result.name == "test"

    def test_schema_non_basemodel(self, tmp_path):
        """Un schema qui n'est pas un BaseModel leve TypeError."""
        path = tmp_path / "config.json"
        path.write_text("{}")
        with pytest.raises(TypeError):
            self.loader.load(path, schema=dict)

    def test_fichier_absent(self, tmp_path):
        """Un fichier absent leve FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            self.loader.load(tmp_path / "absent.toml")

    def test_extension_non_supportee(self, tmp_path):
        """Une extension inconnue leve ValueError."""
        path = tmp_path / "config.yaml"
        path.write_text("a: 1")
        with pytest.raises(ValueError):
            self.loader.load(path)

    def test_validate_with_schema(self):
        """Un dict déjà extrait est validé sans passer par un fichier."""
        result = FileConfigLoader.validate_with_schema(
            {"enable_logging": True}, ShellSettings
        )
        assert isinstance(result, ShellSettings)
        assert result.enable_logging is True

    def test_validate_with_schema_non_basemodel(self):
        """Un schema qui n'est pas un BaseModel leve TypeError."""
        with pytest.raises(TypeError):
            FileConfigLoader.validate_with_schema({}, dict)


class TestShellSettings(unittest.TestCase):
    """Tests pour le modele ShellSettings."""

    def test_valeurs_par_defaut(self):
        """La journalisation est desactivee par defaut."""
        settings = ShellSettings()
        self.assertFalse(settings.enable_logging)
        self.assertIsNone(settings.execution_path)
        self.assertIsNone(settings.executable_path)
        self.assertIsNone(settings.timeout)

    def test_timeout_negatif_refuse(self):
        """Un delai negatif est invalide."""
        with self.assertRaises(Exception):
            ShellSettings(timeout=-1)

    def test_champ_inconnu_refuse(self):
        """Les champs inconnus sont refuses."""
        with self.assertRaises(Exception):
            ShellSettings(unknown=True)


class TestLoadSettings:
    """Tests pour load_settings."""

    def test_section_complete(self, tmp_path):
        """Tous les champs sont lus depuis la section."""
        path = tmp_path / "app.toml"
        path.write_text(
            "[shell_command]\n"
            "enable_logging = true\n"
            f'execution_path = "{tmp_path}"\n'
            'executable_path = "/usr/bin"\n'
            "timeout = 30\n"
        )
        settings = load_settings(path)
        assert settings.enable_logging is True
        assert settings.execution_path == str(tmp_path)
        assert settings.executable_path == "/usr/bin"
        assert settings.timeout == 30

    def test_section_absente(self, tmp_path):
        """Une section absente donne les valeurs par defaut."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"autre": {}}))
        assert load_settings(path) == ShellSettings()

    def test_section_personnalisee(self, tmp_path):
        """Le nom de section est configurable."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"shell": {"enable_logging": True}}))
        assert load_settings(path, section="shell").enable_logging

    def test_section_invalide(self, tmp_path):
        """Des donnees invalides levent ConfigurationError."""
        path = tmp_path / "app.json"
        path.write_text(
            json.dumps({"shell_command": {"timeout": "jamais"}})
        )
        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_section_non_table(self, tmp_path):
        """Une section qui n'est pas une table est refusee."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"shell_command": 3}))
        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_chargeur_injecte(self):
        """Le chargeur injecte est utilise."""
        loader = MagicMock(spec=ConfigLoader)
        loader.load.return_value = {
            "shell_command": {"enable_logging": True}
        }
        settings = load_settings("/etc/app.toml", loader=loader)
        loader.load.assert_called_once_with("/etc/app.toml")
        assert settings.enable_logging is True

    def test_validation_par_le_chargeur(self, tmp_path):
        """La section extraite est validée par validate_with_schema."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"shell_command": {"timeout": 5}}))
        with patch.object(
            FileConfigLoader,
            "validate_with_schema",
            wraps=FileConfigLoader.validate_with_schema,
        ) as mock_validate:
            settings = load_settings(path)
        mock_validate.assert_called_once_with({"timeout": 5}, ShellSettings)
        assert settings.timeout == 5
