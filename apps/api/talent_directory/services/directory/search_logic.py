"""Directory search pipeline.

Pipeline: normalize filters -> compile (server predicate + residual text predicate)
-> record store query -> text filter -> completeness ranking.

The pipeline is a pure function of (FilterState, record population); it never
raises for store failures, it reports them through DirectorySearchResult.error.
"""

import logging
from typing import Optional

from talent_directory.domain import ProfileStatus
from talent_directory.schemas.directory import DirectorySearchResult, FilterState
from .errors import RecordStoreError
from .filter_normalizer import FilterLimits, normalize_filters
from .query_compiler import compile_query
from .ranking import rank_by_completeness
from .record_store import RecordStore

logger = logging.getLogger(__name__)


async def run_directory_search(
    store: RecordStore,
    filters: FilterState,
    *,
    exclude_user_id: Optional[str] = None,
    limits: Optional[FilterLimits] = None,
) -> DirectorySearchResult:
    normalized = normalize_filters(filters, limits)
    compiled = compile_query(normalized.filters, exclude_user_id=exclude_user_id)

    try:
        candidates = await store.query(compiled.server)
    except RecordStoreError as e:
        logger.warning("Directory search query failed [%s]: %s", compiled.server.describe(), e, exc_info=True)
        return DirectorySearchResult(results=[], error=True, validation_failed=normalized.validation_failed)

    # Status is enforced by the store query; re-checked here so no store can leak unapproved rows.
    approved = [r for r in candidates if r.status == ProfileStatus.APPROVED]
    if len(approved) != len(candidates):
        logger.error(
            "Record store returned %d non-approved profiles for [%s]; dropped",
            len(candidates) - len(approved),
            compiled.server.describe(),
        )

    narrowed = compiled.narrow(approved)
    ranked = rank_by_completeness(narrowed)
    logger.info(
        "Directory search [%s] text=%s: %d candidates, %d results",
        compiled.server.describe(),
        bool(compiled.search_term),
        len(approved),
        len(ranked),
    )
    return DirectorySearchResult(results=ranked, validation_failed=normalized.validation_failed)
