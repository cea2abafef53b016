"""Pydantic request/response schemas."""

from talent_directory.schemas.directory import (
    ProfileCard,
    ProfileRecord,
    FilterState,
    FacetCatalog,
    DirectorySearchResult,
    DirectorySearchRequest,
    DirectorySearchResponse,
    FacetCatalogResponse,
)
from talent_directory.schemas.endorsements import EndorsementToggleRequest, EndorsementSummary

__all__ = [
    "ProfileCard",
    "ProfileRecord",
    "FilterState",
    "FacetCatalog",
    "DirectorySearchResult",
    "DirectorySearchRequest",
    "DirectorySearchResponse",
    "FacetCatalogResponse",
    "EndorsementToggleRequest",
    "EndorsementSummary",
]
