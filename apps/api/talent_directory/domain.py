"""
Domain enums and field groupings for directory profiles.
Single source of truth for the DB model, the search pipeline, and the API.
"""

from enum import Enum
from typing import Literal, get_args

# -----------------------------------------------------------------------------
# 1. Enums
# -----------------------------------------------------------------------------


class ProfileStatus(str, Enum):
    """Moderation lifecycle. Values are the strings stored in profiles.status."""
    PENDING = "PENDING_APPROVAL"
    APPROVED = "APPROVED"
    REJECTED = "NOT_APPROVED"


InterestCategory = Literal["speaker", "panelist", "board member"]

INTEREST_CATEGORIES: tuple[str, ...] = get_args(InterestCategory)

# Category sentinel meaning "no category restriction"
ALL_CATEGORIES = "all"

# -----------------------------------------------------------------------------
# 2. Field groups
# -----------------------------------------------------------------------------

# Multi-select facets (set-overlap filtering, catalog-backed)
FACET_FIELDS: tuple[str, ...] = ("languages", "areas_of_expertise", "memberships")

# Scalar text fields matched by free-text search
TEXT_SEARCH_FIELDS: tuple[str, ...] = ("name", "job_title", "company_name", "short_bio", "long_bio")

# Array fields matched element-wise by free-text search
ARRAY_SEARCH_FIELDS: tuple[str, ...] = ("keywords", "areas_of_expertise", "memberships")

# Profile-strength fields counted by the completeness ranker (unweighted)
COMPLETENESS_FIELDS: tuple[str, ...] = (
    "name",
    "job_title",
    "company_name",
    "nationality",
    "short_bio",
    "long_bio",
    "profile_picture",
    "areas_of_expertise",
    "languages",
    "keywords",
    "memberships",
)

# Fields never returned to directory callers
PRIVATE_FIELDS: tuple[str, ...] = ("user_id", "email", "contact_number", "alt_contact_name")

# -----------------------------------------------------------------------------
# 3. Predefined option lists (profile submission)
# -----------------------------------------------------------------------------

LANGUAGES: tuple[str, ...] = (
    "Arabic",
    "Chinese",
    "Czech",
    "Dutch",
    "English",
    "French",
    "German",
    "Greek",
    "Hungarian",
    "Italian",
    "Polish",
    "Portuguese",
    "Romanian",
    "Russian",
    "Serbo-Croatian",
    "Spanish",
    "Turkish",
    "Ukrainian",
)

MEMBERSHIPS: tuple[str, ...] = (
    "Cyprus Chamber of Commerce and Industry (CCCI)",
    "International Chamber of Commerce (ICC)",
)
