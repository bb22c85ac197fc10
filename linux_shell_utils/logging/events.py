"""Événements structurés émis par le CommandBuilder.

Ce module fournit les primitives pour tracer la configuration et
l'exécution des commandes shell via une interface typée et une
sortie JSON structurée.

Chaque message porte le marqueur fixe ``"context": "shell_command"``
afin d'être filtrable dans un fichier de log partagé.

Respecte le principe DIP : CommandEventLogger dépend de l'abstraction
Logger, non d'une implémentation concrète.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from linux_shell_utils.logging.base import Logger

EVENT_CONTEXT = "shell_command"


class CommandEventType(StrEnum):
    """Types d'événements émis autour d'une commande."""

    CONFIG_CHANGED = "command.config_changed"
    EXECUTING = "command.executing"
    SUCCEEDED = "command.succeeded"
    FAILED = "command.failed"


@dataclass(frozen=True)
class CommandEvent:
    """Événement structuré lié à une commande shell.

    Attributes:
        event_type: Type d'événement (CommandEventType).
        message: Description lisible de l'événement.
        command: Commande rendue concernée, si connue.
        details: Contexte additionnel (arguments, chemins, code retour).
        severity: Niveau de sévérité (info, warning, error).
        timestamp: Horodatage ISO 8601 UTC (auto-généré).
    """

    event_type: CommandEventType
    message: str
    command: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    severity: str = "info"
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


class CommandEventLogger:
    """Transmet les événements de commande à un Logger injecté.

    Utilisation :
        events = CommandEventLogger(file_logger)
        events.log_event(CommandEvent(
            event_type=CommandEventType.EXECUTING,
            message="Exécution de la commande",
            command="hostname '-s'",
        ))
    """

    def __init__(self, logger: Logger) -> None:
        """Initialise le logger d'événements.

        Args:
            logger: Instance de Logger pour l'émission des messages.
        """
        self._logger = logger

    @staticmethod
    def to_json(event: CommandEvent) -> str:
        """Sérialise un événement en JSON.

        Args:
            event: Événement à sérialiser.

        Returns:
            Chaîne JSON contenant event, context, message, timestamp,
            severity, details et command (si renseignée).
        """
        payload: dict[str, Any] = {
            "event": str(event.event_type),
            "context": EVENT_CONTEXT,
            "message": event.message,
            "timestamp": event.timestamp,
            "severity": event.severity,
            "details": event.details,
        }
        if event.command is not None:
            payload["command"] = event.command
        return json.dumps(payload, ensure_ascii=False, default=str)

    def log_event(self, event: CommandEvent) -> None:
        """Enregistre un événement selon sa sévérité.

        Args:
            event: Événement à journaliser.
        """
        message = self.to_json(event)

        if event.severity in ("error", "critical"):
            self._logger.log_error(message)
        elif event.severity == "warning":
            self._logger.log_warning(message)
        else:
            self._logger.log_info(message)
