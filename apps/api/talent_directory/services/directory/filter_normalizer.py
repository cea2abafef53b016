"""
Sanitize/validate step for directory filters, run before query compilation.

Deterministic pre-processor that:
- Strips markup characters (< >) from the search term and trims it (always)
- Trims and dedupes facet selections, dropping empty values (always)
- Lowercases the category; empty category means "all"
- Checks search term length, category, and facet selection sizes against the configured limits

A limit violation never blocks the search: it is logged and recorded on the
result, and the sanitized (but unvalidated) values are used as-is.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError, create_model

from talent_directory.core.config import Settings, get_settings
from talent_directory.domain import ALL_CATEGORIES, INTEREST_CATEGORIES
from talent_directory.schemas.directory import FilterState

logger = logging.getLogger(__name__)

_MARKUP_CHARS = re.compile(r"[<>]")

_CategoryLabel = Literal[(ALL_CATEGORIES, *INTEREST_CATEGORIES)]  # type: ignore[valid-type]


@dataclass(frozen=True)
class FilterLimits:
    search_term_max_length: int = 100
    max_languages: int = 15
    max_expertise: int = 10
    max_memberships: int = 10

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FilterLimits":
        s = settings or get_settings()
        return cls(
            search_term_max_length=s.search_term_max_length,
            max_languages=s.max_selected_languages,
            max_expertise=s.max_selected_expertise,
            max_memberships=s.max_selected_memberships,
        )


@dataclass(frozen=True)
class NormalizedFilters:
    filters: FilterState
    validation_failed: bool = False
    errors: tuple[str, ...] = ()


@lru_cache(maxsize=8)
def _limits_model(limits: FilterLimits) -> type[BaseModel]:
    """Pydantic model enforcing the given limits (one model per distinct limits value)."""
    return create_model(
        "DirectoryFilterLimits",
        category=(_CategoryLabel, ALL_CATEGORIES),
        search_term=(str, Field("", max_length=limits.search_term_max_length)),
        languages=(list[str], Field(default_factory=list, max_length=limits.max_languages)),
        areas_of_expertise=(list[str], Field(default_factory=list, max_length=limits.max_expertise)),
        memberships=(list[str], Field(default_factory=list, max_length=limits.max_memberships)),
    )


def sanitize_search_term(term: Optional[str]) -> str:
    """Remove potential HTML tag characters and trim."""
    if not term or not isinstance(term, str):
        return ""
    return _MARKUP_CHARS.sub("", term).strip()


def _dedupe_list(items: tuple[str, ...]) -> tuple[str, ...]:
    """Dedupe preserving order and drop empty strings. Values stay byte-exact so catalog values match."""
    seen: set[str] = set()
    out: list[str] = []
    for x in items:
        if not isinstance(x, str) or not x or x in seen:
            continue
        seen.add(x)
        out.append(x)
    return tuple(out)


def _normalize_category(category: Optional[str]) -> str:
    c = (category or "").strip().lower()
    return c or ALL_CATEGORIES


def validate_limits(filters: FilterState, limits: FilterLimits) -> list[str]:
    """Return 'field: error_type' strings for every limit violation (empty when valid)."""
    model = _limits_model(limits)
    data = {
        "category": _normalize_category(filters.category),
        # length is measured on the trimmed term
        "search_term": (filters.search_term or "").strip(),
        "languages": list(filters.languages),
        "areas_of_expertise": list(filters.areas_of_expertise),
        "memberships": list(filters.memberships),
    }
    try:
        model.model_validate(data)
    except ValidationError as e:
        return [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['type']}"
            for err in e.errors(include_input=False, include_url=False)
        ]
    return []


def normalize_filters(filters: FilterState, limits: Optional[FilterLimits] = None) -> NormalizedFilters:
    """
    Sanitize filters unconditionally, then validate limits on the raw input (term length after trimming).
    On validation failure, logs a warning and returns the sanitized values anyway.
    """
    limits = limits or FilterLimits.from_settings()
    errors = validate_limits(filters, limits)

    sanitized = FilterState(
        category=_normalize_category(filters.category),
        search_term=sanitize_search_term(filters.search_term),
        languages=_dedupe_list(filters.languages),
        areas_of_expertise=_dedupe_list(filters.areas_of_expertise),
        memberships=_dedupe_list(filters.memberships),
    )

    if errors:
        logger.warning(
            "Directory filter validation failed, searching with unvalidated filters: %s",
            "; ".join(errors),
        )
    return NormalizedFilters(filters=sanitized, validation_failed=bool(errors), errors=tuple(errors))
