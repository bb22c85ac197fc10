"""Constructeur fluent de commandes shell sûres.

Ce module fournit la classe CommandBuilder qui assemble une ligne de
commande à partir d'un template contenant des marqueurs positionnels
``%s`` et d'une liste d'arguments, l'un et l'autre échappés au moment
de leur affectation, puis l'exécute via un shell.

Example:
    Construction et exécution d'une commande :

        from linux_shell_utils.commands import CommandBuilder

        output = (
            CommandBuilder()
            .set_command("find ./ -maxdepth 1 -name %s")
            .set_arguments(["*.txt"])
            .set_allowed_characters(["*"])
            .send_to_dev_null(False)
            .execute()
        )

    Le rendu seul, sans exécution :

        CommandBuilder("hostname %s", ["-s"]).get_command()
        # "hostname '-s'"
"""

import dataclasses
import os
from typing import Any, Dict, Iterable, List, Optional

from linux_shell_utils.commands.base import ExecutionResult, ShellRunner
from linux_shell_utils.commands.classifier import classify_exit_status
from linux_shell_utils.commands.escaping import (
    count_placeholders,
    escape_argument,
    escape_command,
    fill_placeholders,
    unescape_allowed,
)
from linux_shell_utils.commands.paths import (
    ExecutionPaths,
    shared_paths,
    working_directory,
)
from linux_shell_utils.commands.runner import SubprocessShellRunner
from linux_shell_utils.config.settings import ShellSettings
from linux_shell_utils.errors.exceptions import (
    CommandExecutionError,
    CommandNotSetError,
    ExecFunctionUnavailableError,
    InvalidArgumentCountError,
    ShellCommandError,
)
from linux_shell_utils.logging.base import Logger
from linux_shell_utils.logging.events import (
    CommandEvent,
    CommandEventLogger,
    CommandEventType,
)

DEV_NULL_REDIRECT = " > /dev/null 2>&1"


class CommandBuilder:
    """Construit, rend et exécute une commande shell échappée.

    Les setters retournent l'instance courante pour le chaînage.
    Le nombre de marqueurs et d'arguments n'est comparé qu'au rendu,
    l'ordre des affectations est donc libre.

    Attributes:
        _template: Template échappé, ou None tant qu'il n'est pas défini.
        _arguments: Arguments échappés, dans l'ordre d'insertion.
        _redirect: Suffixe de redirection (vide ou vers /dev/null).
        _allowed_characters: Caractères laissés non échappés au rendu.
        _paths: Répertoires d'exécution et des exécutables.
        _runner: Lanceur de processus.
        _timeout: Délai maximal d'exécution en secondes.
    """

    def __init__(
        self,
        command: Optional[str] = None,
        arguments: Iterable[str] = (),
        logger: Optional[Logger] = None,
        logging_enabled: bool = False,
        paths: Optional[ExecutionPaths] = None,
        runner: Optional[ShellRunner] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise le constructeur.

        Args:
            command: Template optionnel, échappé immédiatement.
            arguments: Arguments optionnels, échappés immédiatement.
            logger: Logger recevant les événements.
            logging_enabled: Active l'émission des événements.
            paths: Configuration des chemins (shared_paths par défaut).
            runner: Lanceur de processus (SubprocessShellRunner par
                défaut).
            timeout: Délai maximal d'exécution en secondes.
        """
        self._events = CommandEventLogger(logger) if logger else None
        self._logging = bool(logging_enabled)
        self._paths = paths if paths is not None else shared_paths
        self._runner = runner or SubprocessShellRunner()
        self._timeout = timeout
        self._template: Optional[str] = None
        self._arguments: List[str] = []
        self._redirect = ""
        self._allowed_characters: List[str] = []

        self.set_command(command)
        self.set_arguments(list(arguments))

    @classmethod
    def from_settings(
        cls,
        settings: ShellSettings,
        logger: Optional[Logger] = None,
        paths: Optional[ExecutionPaths] = None,
        runner: Optional[ShellRunner] = None,
    ) -> "CommandBuilder":
        """Crée un constructeur à partir de paramètres chargés.

        Les chemins configurés sont appliqués à ``paths`` (donc à
        shared_paths si aucune instance n'est fournie).

        Args:
            settings: Paramètres validés.
            logger: Logger recevant les événements.
            paths: Configuration des chemins.
            runner: Lanceur de processus.

        Returns:
            Nouveau CommandBuilder.

        Raises:
            ExecutionPathNotFoundError: Si execution_path n'existe pas.
            ExecutablePathNotFoundError: Si executable_path n'existe pas.
        """
        builder = cls(
            logger=logger,
            logging_enabled=settings.enable_logging,
            paths=paths,
            runner=runner,
            timeout=settings.timeout,
        )
        if settings.execution_path is not None:
            builder.set_execution_path(settings.execution_path)
        if settings.executable_path is not None:
            builder.set_executable_path(settings.executable_path)
        return builder

    # --- Journalisation ---

    def _emit(
        self,
        event_type: CommandEventType,
        message: str,
        command: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        severity: str = "info",
    ) -> None:
        """Transmet un événement si la journalisation est active."""
        if not (self._logging and self._events):
            return
        self._events.log_event(
            CommandEvent(
                event_type=event_type,
                message=message,
                command=command,
                details=details or {},
                severity=severity,
            )
        )

    def _emit_failure(self, command: str, error: Exception) -> None:
        """Journalise un échec d'exécution au niveau erreur."""
        details: Dict[str, Any] = {"error": type(error).__name__}
        if isinstance(error, CommandExecutionError):
            details["exit_status"] = error.exit_status
        self._emit(
            CommandEventType.FAILED,
            str(error),
            command=command,
            details=details,
            severity="error",
        )

    def set_logging(self, enable: bool) -> "CommandBuilder":
        """Active ou désactive l'émission des événements.

        Args:
            enable: True pour activer.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._logging = bool(enable)
        return self

    @property
    def logging_enabled(self) -> bool:
        """True si les événements sont émis."""
        return self._logging

    # --- Template et arguments ---

    def set_command(self, command: Optional[str]) -> "CommandBuilder":
        """Échappe et enregistre le template de la commande.

        Les arguments se placent dans le template sous forme de
        marqueurs ``%s``. None conserve le template précédent.

        Args:
            command: Template brut ou None.

        Returns:
            L'instance courante pour le chaînage.
        """
        if command is not None:
            self._template = escape_command(str(command))
            self._emit(
                CommandEventType.CONFIG_CHANGED,
                f"Commande définie : {self._template}",
                details={"template": self._template},
            )
        return self

    def set_arguments(
        self,
        arguments: Iterable[str],
        keep_existing: bool = False,
    ) -> "CommandBuilder":
        """Échappe et enregistre les arguments de la commande.

        Args:
            arguments: Valeurs brutes, une par marqueur.
            keep_existing: Si True, ajoute à la suite des arguments
                déjà définis au lieu de les remplacer.

        Returns:
            L'instance courante pour le chaînage.
        """
        if not keep_existing:
            self.clear_arguments()

        values = [escape_argument(str(value)) for value in arguments]
        if values:
            self._arguments.extend(values)
            self._emit(
                CommandEventType.CONFIG_CHANGED,
                "Arguments de la commande : "
                + " | ".join(self._arguments),
                details={"arguments": list(self._arguments)},
            )
        return self

    def clear_arguments(self) -> "CommandBuilder":
        """Vide la liste des arguments."""
        self._arguments = []
        return self

    def get_arguments(self) -> List[str]:
        """Retourne une copie des arguments échappés."""
        return list(self._arguments)

    def send_to_dev_null(self, enable: bool = True) -> "CommandBuilder":
        """Redirige ou non les sorties de la commande vers /dev/null.

        Args:
            enable: True pour ajouter la redirection.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._redirect = DEV_NULL_REDIRECT if enable else ""
        return self

    def set_allowed_characters(
        self, characters: Iterable[str] = ()
    ) -> "CommandBuilder":
        """Définit les caractères qui ne seront PAS échappés.

        Utile par exemple pour laisser le shell développer un
        ``*``. À UTILISER AVEC PRÉCAUTION : la commande obtenue
        n'est pas revalidée.

        Args:
            characters: Caractères autorisés.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._allowed_characters = list(characters)
        self._emit(
            CommandEventType.CONFIG_CHANGED,
            "Caractères autorisés : "
            + " - ".join(self._allowed_characters),
            details={"allowed_characters": list(self._allowed_characters)},
        )
        return self

    def get_allowed_characters(self) -> List[str]:
        """Retourne une copie des caractères autorisés."""
        return list(self._allowed_characters)

    # --- Chemins ---

    @property
    def paths(self) -> ExecutionPaths:
        """Configuration des chemins utilisée par cette commande."""
        return self._paths

    def set_execution_path(
        self, path: Optional[str] = None
    ) -> "CommandBuilder":
        """Définit le répertoire dans lequel exécuter la commande.

        Le réglage est porté par ``paths`` : avec shared_paths, il
        s'applique à toutes les commandes du processus.

        Args:
            path: Répertoire existant, ou None pour effacer.

        Returns:
            L'instance courante pour le chaînage.

        Raises:
            ExecutionPathNotFoundError: Si le répertoire n'existe pas.
        """
        self._paths.set_execution_path(path)
        self._emit(
            CommandEventType.CONFIG_CHANGED,
            f"Répertoire d'exécution défini : {path}",
            details={"execution_path": path},
        )
        return self

    def get_execution_path(self) -> Optional[str]:
        """Retourne le répertoire d'exécution ou None."""
        return self._paths.get_execution_path()

    def set_executable_path(
        self, path: Optional[str] = None
    ) -> "CommandBuilder":
        """Définit le répertoire préfixé à la commande.

        Args:
            path: Répertoire existant, ou None pour effacer.

        Returns:
            L'instance courante pour le chaînage.

        Raises:
            ExecutablePathNotFoundError: Si le répertoire n'existe pas.
        """
        self._paths.set_executable_path(path)
        self._emit(
            CommandEventType.CONFIG_CHANGED,
            f"Répertoire des exécutables défini : {path}",
            details={"executable_path": path},
        )
        return self

    def get_executable_path(self) -> Optional[str]:
        """Retourne le répertoire des exécutables ou None."""
        return self._paths.get_executable_path()

    @staticmethod
    def get_cwd() -> str:
        """Retourne le répertoire courant du processus."""
        return os.getcwd()

    # --- Rendu ---

    def get_command(self) -> str:
        """Rend la commande finale sous forme de chaîne.

        Returns:
            Commande prête à être passée à un shell.

        Raises:
            InvalidArgumentCountError: Si le nombre d'arguments ne
                correspond pas au nombre de marqueurs.
            CommandNotSetError: Si aucun template n'est défini.
        """
        if self._template is None:
            raise CommandNotSetError()

        template = self._template
        expected = count_placeholders(template)
        actual = len(self._arguments)
        if expected != actual:
            raise InvalidArgumentCountError(expected, actual)

        executable_path = self._paths.get_executable_path()
        if executable_path is not None:
            prefix = escape_command(executable_path.strip()).rstrip("/")
            template = f"{prefix}/{template.strip()}"

        command = fill_placeholders(template, self._arguments)
        command += self._redirect
        return unescape_allowed(command, self._allowed_characters)

    def __str__(self) -> str:
        return self.get_command()

    # --- Exécution ---

    def _run(self, command: str) -> ExecutionResult:
        """Lance la commande, depuis le répertoire d'exécution s'il
        est défini."""
        with self._paths.lock:
            execution_path = self._paths.get_execution_path()
            if execution_path is not None:
                with working_directory(execution_path) as previous:
                    result = self._runner.run(
                        command, timeout=self._timeout
                    )
                return dataclasses.replace(result, previous_cwd=previous)
        return self._runner.run(command, timeout=self._timeout)

    def execute(self) -> str:
        """Exécute la commande et retourne sa sortie standard.

        Returns:
            Lignes de la sortie standard jointes par ``\\n``.

        Raises:
            InvalidArgumentCountError: Voir get_command().
            CommandNotSetError: Voir get_command().
            ExecFunctionUnavailableError: Si aucun shell n'est
                disponible ; le message contient la commande.
            WorkingDirectoryChangeError: Si le changement ou la
                restauration du répertoire courant échoue.
            CommandTimeoutError: Si le délai est dépassé.
            InvalidUsageError: Code retour 2.
            NonExecutableCommandError: Code retour 126.
            CommandNotFoundError: Code retour 127.
            UnknownExecutionError: Tout autre code non nul.
        """
        command = self.get_command()

        if not self._runner.is_available():
            error = ExecFunctionUnavailableError(command)
            self._emit_failure(command, error)
            raise error

        self._emit(
            CommandEventType.EXECUTING,
            f"Exécution de la commande : {command}",
            command=command,
            details={"execution_path": self.get_execution_path()},
        )

        try:
            result = self._run(command)
        except ShellCommandError as error:
            self._emit_failure(command, error)
            raise

        error = classify_exit_status(result.exit_status, command)
        if error is not None:
            self._emit_failure(command, error)
            raise error

        self._emit(
            CommandEventType.SUCCEEDED,
            f"Commande [{command}] exécutée avec succès",
            command=command,
            details={"exit_status": result.exit_status},
        )
        return result.output
