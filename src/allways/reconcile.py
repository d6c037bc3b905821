"""
List Reconciler: compute the final __all__ sequence.

The sequence is recomputed from the current public candidates. Names
already listed in the module are only used to report what was added or
dropped, so a stale entry disappears once nothing binds it any more.
"""

from typing import Iterable, List, Optional

from allways.logging_config import logger
from allways.schemas import ReconcileResult


def final_export_sequence(candidates: Iterable[str]) -> List[str]:
    """Deduplicate and sort case-sensitively (plain code point order)."""
    return sorted(set(candidates))


def reconcile(candidates: Iterable[str], existing: Optional[Iterable[str]] = None) -> ReconcileResult:
    """
    Reconcile this run's public candidates with an existing export list.

    Args:
        candidates: Filtered candidate names from the current module body
        existing: Strings of any __all__ assignment found, or None if absent

    Returns:
        ReconcileResult with the sorted names and the added/removed delta
    """
    names = final_export_sequence(candidates)

    if existing is None:
        return ReconcileResult(names=names, added=list(names))

    previous = list(existing)
    previous_set = set(previous)
    current_set = set(names)
    added = [name for name in names if name not in previous_set]
    removed = sorted(previous_set - current_set)

    if added or removed:
        logger.debug(f"Export list delta: +{added} -{removed}")

    return ReconcileResult(names=names, previous=previous, added=added, removed=removed)
