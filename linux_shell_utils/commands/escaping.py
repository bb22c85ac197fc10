"""Primitives d'échappement pour les lignes de commande shell.

Deux niveaux d'échappement coexistent :

- ``escape_command`` protège un template complet en préfixant d'un
  antislash chaque métacaractère shell. Les marqueurs ``%s`` ne sont
  pas modifiés.
- ``escape_argument`` transforme une valeur en un littéral entre
  apostrophes que le shell traite comme un seul argument.

Example:
    Un template "ls %s; rm -rf /" devient "ls %s\\; rm -rf /" et
    l'argument "it's" devient le littéral 'it'\\''s'.
"""

from typing import Iterable, List, Sequence

PLACEHOLDER = "%s"

COMMAND_METACHARACTERS = frozenset("#&;`|*?~<>^()[]{}$\\\n")
QUOTE_CHARACTERS = frozenset("'\"")


def escape_command(raw: str) -> str:
    """Échappe les métacaractères shell d'une commande complète.

    Les apostrophes et guillemets ne sont échappés que s'ils ne
    sont pas appariés.

    Args:
        raw: Commande brute.

    Returns:
        Commande dont chaque métacaractère est précédé de ``\\``.
    """
    escaped: List[str] = []
    open_quote = None
    for index, char in enumerate(raw):
        if char in QUOTE_CHARACTERS:
            if open_quote is None and char in raw[index + 1:]:
                open_quote = char
            elif open_quote == char:
                open_quote = None
            else:
                escaped.append("\\")
        elif char in COMMAND_METACHARACTERS:
            escaped.append("\\")
        escaped.append(char)
    return "".join(escaped)


def escape_argument(value: str) -> str:
    """Encadre une valeur d'apostrophes pour en faire un argument unique.

    Toujours entre apostrophes, même pour une valeur sans caractère
    spécial (``-s`` devient ``'-s'``).

    Args:
        value: Valeur brute de l'argument.

    Returns:
        Littéral shell équivalent à la valeur d'origine.
    """
    return "'" + value.replace("'", "'\\''") + "'"


def count_placeholders(template: str) -> int:
    """Compte les marqueurs positionnels d'un template."""
    return template.count(PLACEHOLDER)


def fill_placeholders(template: str, arguments: Sequence[str]) -> str:
    """Remplace chaque marqueur, dans l'ordre, par l'argument suivant.

    Args:
        template: Template contenant des marqueurs ``%s``.
        arguments: Arguments déjà échappés.

    Returns:
        Template dont les marqueurs sont remplacés.

    Raises:
        ValueError: Si le nombre d'arguments ne correspond pas.
    """
    fragments = template.split(PLACEHOLDER)
    if len(fragments) - 1 != len(arguments):
        raise ValueError(
            f"{len(fragments) - 1} marqueur(s) pour "
            f"{len(arguments)} argument(s)"
        )
    parts = [fragments[0]]
    for argument, fragment in zip(arguments, fragments[1:]):
        parts.append(argument)
        parts.append(fragment)
    return "".join(parts)


def unescape_allowed(command: str, characters: Iterable[str]) -> str:
    """Retire l'échappement des caractères explicitement autorisés.

    À UTILISER AVEC PRÉCAUTION : chaque ``\\X`` devient ``X`` sans
    aucune revalidation de la commande obtenue.

    Args:
        command: Commande rendue.
        characters: Caractères à laisser non échappés.

    Returns:
        Commande modifiée.
    """
    for char in characters:
        command = command.replace("\\" + char, char)
    return command
