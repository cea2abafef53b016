"""
Compile a normalized FilterState into a record-store query plus a residual predicate.

Server predicate (conjunctive):
- status = APPROVED (always, first)
- interested_in contains category (unless category is "all")
- <facet> overlaps selection, for each non-empty facet (OR within a facet, AND across facets)
- optionally, user_id is distinct from the caller (exclude own profile)

Residual predicate: free-text match, evaluated after the store query.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from talent_directory.domain import ALL_CATEGORIES, FACET_FIELDS, ProfileStatus
from talent_directory.schemas.directory import FilterState
from .text_matcher import filter_by_text, matches_text, normalize_term


@dataclass(frozen=True)
class Equals:
    field: str
    value: str


@dataclass(frozen=True)
class ArrayContains:
    field: str
    value: str


@dataclass(frozen=True)
class ArrayOverlaps:
    field: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class NotOwnedBy:
    user_id: str


Predicate = Union[Equals, ArrayContains, ArrayOverlaps, NotOwnedBy]


@dataclass(frozen=True)
class ProfileQuery:
    """Conjunction of predicates over the profiles collection."""
    predicates: tuple[Predicate, ...]

    def describe(self) -> str:
        """Loggable summary: field names and selection sizes only, never values."""
        parts = []
        for p in self.predicates:
            if isinstance(p, Equals):
                parts.append(f"{p.field}=")
            elif isinstance(p, ArrayContains):
                parts.append(f"{p.field}@>")
            elif isinstance(p, ArrayOverlaps):
                parts.append(f"{p.field}&&({len(p.values)})")
            else:
                parts.append("not_owned")
        return ", ".join(parts)


@dataclass(frozen=True)
class CompiledQuery:
    server: ProfileQuery
    search_term: str = ""

    def residual(self, record: Any) -> bool:
        return matches_text(record, self.search_term)

    def narrow(self, records: Iterable[Any]) -> list:
        return filter_by_text(records, self.search_term)


def approved_only(*predicates: Predicate) -> ProfileQuery:
    """ProfileQuery with the APPROVED status predicate prepended."""
    return ProfileQuery((Equals("status", ProfileStatus.APPROVED.value), *predicates))


def compile_query(filters: FilterState, *, exclude_user_id: Optional[str] = None) -> CompiledQuery:
    predicates: list[Predicate] = []

    if filters.category and filters.category != ALL_CATEGORIES:
        predicates.append(ArrayContains("interested_in", filters.category))

    for facet in FACET_FIELDS:
        selected = getattr(filters, facet)
        if selected:
            predicates.append(ArrayOverlaps(facet, tuple(selected)))

    if exclude_user_id:
        predicates.append(NotOwnedBy(str(exclude_user_id)))

    return CompiledQuery(
        server=approved_only(*predicates),
        search_term=normalize_term(filters.search_term),
    )
