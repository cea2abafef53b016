"""Case-insensitive substring search across profile text and array fields."""

from typing import Any, Iterable, Optional

from talent_directory.domain import ARRAY_SEARCH_FIELDS, TEXT_SEARCH_FIELDS
from .fields import get_array, get_field


def normalize_term(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def _contains(value: Any, term: str) -> bool:
    return isinstance(value, str) and term in value.lower()


def matches_text(record: Any, term: Optional[str]) -> bool:
    """True if term is a substring of any text field or of any single element of a searched array."""
    term = normalize_term(term)
    if not term:
        return True
    if any(_contains(get_field(record, f), term) for f in TEXT_SEARCH_FIELDS):
        return True
    return any(
        _contains(item, term)
        for f in ARRAY_SEARCH_FIELDS
        for item in get_array(record, f)
    )


def filter_by_text(records: Iterable[Any], term: Optional[str]) -> list:
    """Records matching term, in input order. An empty term passes everything."""
    term = normalize_term(term)
    if not term:
        return list(records)
    return [r for r in records if matches_text(r, term)]
