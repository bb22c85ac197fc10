"""Paramètres de configuration du CommandBuilder.

Les paramètres sont lus dans une section dédiée d'un fichier TOML
ou JSON, par exemple :

    [shell_command]
    enable_logging = true
    execution_path = "/srv/app"
    timeout = 30
"""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError

from linux_shell_utils.config.loader import ConfigLoader, FileConfigLoader
from linux_shell_utils.errors.exceptions import ConfigurationError

DEFAULT_SECTION = "shell_command"


class ShellSettings(BaseModel):
    """Configuration validée du CommandBuilder.

    Attributes:
        enable_logging: Active l'émission des événements.
        execution_path: Répertoire courant par défaut pour l'exécution.
        executable_path: Préfixe de répertoire ajouté à la commande.
        timeout: Délai maximal d'exécution en secondes.
    """

    model_config = {"extra": "forbid"}

    enable_logging: bool = False
    execution_path: Optional[str] = None
    executable_path: Optional[str] = None
    timeout: Optional[float] = Field(default=None, gt=0)


def load_settings(
    config_path: Union[str, Path],
    section: str = DEFAULT_SECTION,
    loader: Optional[ConfigLoader] = None,
) -> ShellSettings:
    """Charge les paramètres depuis une section d'un fichier.

    Une section absente produit les valeurs par défaut.

    Args:
        config_path: Chemin du fichier .toml ou .json.
        section: Nom de la section à lire.
        loader: Chargeur injectable (FileConfigLoader par défaut).

    Returns:
        Instance de ShellSettings.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        ConfigurationError: Si la section est invalide.
    """
    raw = (loader or FileConfigLoader()).load(config_path)
    data = raw.get(section, {})
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"La section '{section}' de {config_path} doit être une table."
        )
    try:
        return FileConfigLoader.validate_with_schema(data, ShellSettings)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration invalide dans {config_path} "
            f"[{section}] : {e}"
        ) from e
