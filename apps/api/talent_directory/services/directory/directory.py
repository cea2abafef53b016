"""Directory service facade used by the HTTP routers.

Business logic is split across:
- search pipeline: .search_logic
- facet catalog: .facets
- stateful per-caller session (in-process callers): .session
"""

import logging
from uuid import UUID

from fastapi import HTTPException

from talent_directory.schemas import (
    DirectorySearchRequest,
    DirectorySearchResponse,
    FacetCatalogResponse,
    ProfileCard,
)
from talent_directory.serializers import profile_record_to_card
from .errors import RecordStoreError
from .facets import load_facet_catalog
from .query_compiler import Equals, approved_only
from .record_store import RecordStore
from .search_logic import run_directory_search

logger = logging.getLogger(__name__)


class DirectoryService:
    """Facade for directory operations."""

    @staticmethod
    async def search(
        store: RecordStore,
        body: DirectorySearchRequest,
        current_user_id: str | None,
    ) -> DirectorySearchResponse:
        exclude_user_id = current_user_id if body.exclude_own else None
        outcome = await run_directory_search(store, body.to_filter_state(), exclude_user_id=exclude_user_id)
        return DirectorySearchResponse(
            results=[profile_record_to_card(r) for r in outcome.results],
            loading=outcome.loading,
            error=outcome.error,
            validation_failed=outcome.validation_failed,
        )

    @staticmethod
    async def facets(store: RecordStore) -> FacetCatalogResponse:
        catalog, error = await load_facet_catalog(store)
        return FacetCatalogResponse(**catalog.model_dump(), error=error)

    @staticmethod
    async def get_profile(store: RecordStore, profile_id: UUID) -> ProfileCard:
        """Load one APPROVED profile card or raise 404 (503 when the store is unavailable)."""
        try:
            records = await store.query(approved_only(Equals("id", str(profile_id))))
        except RecordStoreError as e:
            logger.warning("Profile lookup failed: %s", e, exc_info=True)
            raise HTTPException(status_code=503, detail="Directory temporarily unavailable") from e
        if not records:
            raise HTTPException(status_code=404, detail="Profile not found")
        return profile_record_to_card(records[0])


directory_service = DirectoryService()
