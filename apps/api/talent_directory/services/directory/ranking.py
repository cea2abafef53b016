"""Completeness ranking: more populated profile-strength fields sort first."""

from typing import Any, Iterable

from talent_directory.domain import COMPLETENESS_FIELDS
from .fields import get_field


def _is_populated(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return len(value.strip()) > 0
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) > 0
    return True


def completeness_score(record: Any) -> int:
    """Count of populated fields in COMPLETENESS_FIELDS (all weighted equally)."""
    return sum(1 for f in COMPLETENESS_FIELDS if _is_populated(get_field(record, f)))


def rank_by_completeness(records: Iterable[Any]) -> list:
    """Descending by score; equal scores keep their input order (sorted() is stable)."""
    return sorted(records, key=lambda r: -completeness_score(r))
