from uuid import UUID

from fastapi import APIRouter, Depends, Request

from talent_directory.core import get_settings, limiter
from talent_directory.dependencies import get_current_user_id_optional, get_record_store
from talent_directory.schemas import (
    DirectorySearchRequest,
    DirectorySearchResponse,
    FacetCatalogResponse,
    ProfileCard,
)
from talent_directory.services.directory import RecordStore, directory_service

router = APIRouter(prefix="/directory", tags=["directory"])


def _search_rate_limit() -> str:
    return get_settings().search_rate_limit


@router.post("/search", response_model=DirectorySearchResponse)
@limiter.limit(_search_rate_limit)
async def search_directory(
    request: Request,
    body: DirectorySearchRequest,
    current_user_id: str | None = Depends(get_current_user_id_optional),
    store: RecordStore = Depends(get_record_store),
):
    """Filtered, completeness-ranked APPROVED profiles. Store failures come back as error=true with no results."""
    return await directory_service.search(store, body, current_user_id)


@router.get("/facets", response_model=FacetCatalogResponse)
async def get_facets(
    store: RecordStore = Depends(get_record_store),
):
    return await directory_service.facets(store)


@router.get("/profiles/{profile_id}", response_model=ProfileCard)
async def get_directory_profile(
    profile_id: UUID,
    store: RecordStore = Depends(get_record_store),
):
    return await directory_service.get_profile(store, profile_id)
