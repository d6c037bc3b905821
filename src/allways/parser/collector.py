"""
Name Collector and Visibility Filter.

Turns classified statements into export candidates (first-seen order,
duplicates removed) and drops private names.
"""

from typing import Iterable, List

from allways.logging_config import logger
from allways.schemas import ClassifiedStatement, StatementKind

PRIVACY_MARKER = "_"

BINDING_KINDS = {
    StatementKind.IMPORT,
    StatementKind.IMPORT_FROM,
    StatementKind.FUNCTION,
    StatementKind.CLASS,
}


def collect_names(statements: Iterable[ClassifiedStatement]) -> List[str]:
    """
    Collect candidate names bound by imports and definitions.

    Rebinding a name is never an error; the first occurrence fixes its
    position. Export-list assignments do not contribute.
    """
    seen = set()
    names: List[str] = []
    for statement in statements:
        if statement.kind not in BINDING_KINDS:
            continue
        for name in statement.names:
            if name not in seen:
                seen.add(name)
                names.append(name)
    logger.debug(f"Collected {len(names)} candidate names")
    return names


def existing_export_names(statements: Iterable[ClassifiedStatement]) -> List[str]:
    """Names listed in any `__all__` assignment already in the module."""
    seen = set()
    names: List[str] = []
    for statement in statements:
        if statement.kind != StatementKind.EXPORT_LIST:
            continue
        for name in statement.names:
            if name not in seen:
                seen.add(name)
                names.append(name)
    return names


def is_private(name: str) -> bool:
    """Leading-character test only; `_`, `_x` and `__x__` are all private."""
    return name.startswith(PRIVACY_MARKER)


def filter_public(names: Iterable[str]) -> List[str]:
    """Drop private names, keeping order."""
    return [name for name in names if not is_private(name)]
