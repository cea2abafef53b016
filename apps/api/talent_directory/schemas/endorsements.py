from pydantic import BaseModel, Field


class EndorsementToggleRequest(BaseModel):
    area_of_expertise: str = Field(min_length=1, max_length=50)


class EndorsementSummary(BaseModel):
    """Endorsement counts per area of expertise for one profile."""

    profile_id: str
    counts: dict[str, int] = {}
    endorsed_by_me: list[str] = []
