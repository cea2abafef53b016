from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from talent_directory.domain import ALL_CATEGORIES, ProfileStatus


def _str_list(v: Any) -> list[str]:
    """Coalesce a possibly-malformed array column to a list of strings."""
    if v is None or not isinstance(v, (list, tuple)):
        return []
    return [x for x in v if isinstance(x, str)]


def _str_tuple(v: Any) -> tuple[str, ...]:
    if v is None:
        return ()
    if isinstance(v, str):
        return (v,)
    return tuple(v)


# ---------------------------------------------------------------------------
# Profile records
# ---------------------------------------------------------------------------

class ProfileCard(BaseModel):
    """Public directory projection of a profile (no contact or ownership fields)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    status: ProfileStatus = ProfileStatus.PENDING
    name: Optional[str] = None
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    nationality: Optional[str] = None
    short_bio: Optional[str] = None
    long_bio: Optional[str] = None
    interested_in: list[str] = []
    interested_in_description: Optional[str] = None
    languages: list[str] = []
    areas_of_expertise: list[str] = []
    memberships: list[str] = []
    keywords: list[str] = []
    profile_picture: Optional[str] = None
    social_media_links: Optional[dict[str, Any]] = None
    created_at: Optional[datetime] = None

    @field_validator(
        "interested_in", "languages", "areas_of_expertise", "memberships", "keywords",
        mode="before",
    )
    @classmethod
    def _coalesce_arrays(cls, v: Any) -> list[str]:
        return _str_list(v)

    @field_validator("social_media_links", mode="before")
    @classmethod
    def _links_dict_or_none(cls, v: Any) -> Optional[dict]:
        return v if isinstance(v, dict) else None


class ProfileRecord(ProfileCard):
    """Full profile row as returned by the record store."""

    user_id: Optional[str] = None
    email: Optional[str] = None
    contact_number: Optional[str] = None
    alt_contact_name: Optional[str] = None


# ---------------------------------------------------------------------------
# Filter state
# ---------------------------------------------------------------------------

class FilterState(BaseModel):
    """Immutable directory filter. Empty facet selection means no restriction on that facet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    category: str = ALL_CATEGORIES
    search_term: str = ""
    languages: tuple[str, ...] = ()
    areas_of_expertise: tuple[str, ...] = ()
    memberships: tuple[str, ...] = ()

    @field_validator("languages", "areas_of_expertise", "memberships", mode="before")
    @classmethod
    def _coalesce_selection(cls, v: Any) -> tuple[str, ...]:
        return _str_tuple(v)

    @field_validator("category", "search_term", mode="before")
    @classmethod
    def _none_to_default(cls, v: Any, info) -> Any:
        if v is None:
            return ALL_CATEGORIES if info.field_name == "category" else ""
        return v

    def merge(self, **changes: Any) -> "FilterState":
        """Return a new FilterState with the given fields replaced."""
        return FilterState.model_validate({**self.model_dump(), **changes})


class FacetCatalog(BaseModel):
    languages: list[str] = []
    areas_of_expertise: list[str] = []
    memberships: list[str] = []


class DirectorySearchResult(BaseModel):
    """Observable outcome of one directory search."""

    results: list[ProfileRecord] = []
    loading: bool = False
    error: bool = False
    validation_failed: bool = False


# ---------------------------------------------------------------------------
# HTTP request/response
# ---------------------------------------------------------------------------

class DirectorySearchRequest(FilterState):
    exclude_own: bool = False

    def to_filter_state(self) -> FilterState:
        return FilterState.model_validate(self.model_dump(exclude={"exclude_own"}))


class DirectorySearchResponse(BaseModel):
    results: list[ProfileCard]
    loading: bool = False
    error: bool = False
    validation_failed: bool = False


class FacetCatalogResponse(FacetCatalog):
    error: bool = False
