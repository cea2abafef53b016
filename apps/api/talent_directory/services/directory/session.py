"""Per-caller directory search session: filter state, last published result, facet catalog."""

import logging
from typing import Any, Optional

from talent_directory.schemas.directory import DirectorySearchResult, FacetCatalog, FilterState
from .facets import load_facet_catalog
from .filter_normalizer import FilterLimits
from .record_store import RecordStore
from .search_logic import run_directory_search

logger = logging.getLogger(__name__)


class DirectorySearchSession:
    """
    Holds one caller's immutable FilterState and the last published search result.

    Callers run search() after each set_filter(). Every search takes a monotonic
    sequence number; a response is published only if no newer search was issued
    while it was in flight, so the published result always matches the most
    recently requested filters.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        exclude_user_id: Optional[str] = None,
        initial: Optional[FilterState] = None,
        limits: Optional[FilterLimits] = None,
    ):
        self._store = store
        self._exclude_user_id = exclude_user_id
        self._limits = limits
        self._filters = initial or FilterState()
        self._state = DirectorySearchResult()
        self._seq = 0
        self._catalog: Optional[FacetCatalog] = None

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def state(self) -> DirectorySearchResult:
        return self._state

    def set_filter(self, **changes: Any) -> FilterState:
        self._filters = self._filters.merge(**changes)
        return self._filters

    async def search(self) -> DirectorySearchResult:
        self._seq += 1
        seq = self._seq
        self._state = self._state.model_copy(update={"loading": True})

        published = False
        try:
            outcome = await run_directory_search(
                self._store,
                self._filters,
                exclude_user_id=self._exclude_user_id,
                limits=self._limits,
            )
            if seq != self._seq:
                logger.debug("Discarding superseded directory search #%d (latest #%d)", seq, self._seq)
                return self._state
            self._state = outcome
            published = True
            return outcome
        finally:
            # cancelled or failed unexpectedly while still the latest search
            if not published and seq == self._seq and self._state.loading:
                self._state = self._state.model_copy(update={"loading": False})

    async def get_facet_catalog(self, refresh: bool = False) -> FacetCatalog:
        """Build once and cache; refresh=True rebuilds. Failed loads are not cached."""
        if self._catalog is not None and not refresh:
            return self._catalog
        catalog, error = await load_facet_catalog(self._store)
        if not error:
            self._catalog = catalog
        return catalog
