from uuid import UUID

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from talent_directory.core import get_settings, limiter
from talent_directory.dependencies import get_current_user_id, get_current_user_id_optional, get_db
from talent_directory.schemas import EndorsementSummary, EndorsementToggleRequest
from talent_directory.services import endorsement_service

router = APIRouter(prefix="/profiles", tags=["endorsements"])


def _endorse_rate_limit() -> str:
    return get_settings().endorse_rate_limit


@router.get("/{profile_id}/endorsements", response_model=EndorsementSummary)
async def get_endorsements(
    profile_id: UUID,
    current_user_id: str | None = Depends(get_current_user_id_optional),
    db: AsyncSession = Depends(get_db),
):
    return await endorsement_service.summary(db, str(profile_id), current_user_id)


@router.post("/{profile_id}/endorsements", response_model=EndorsementSummary)
@limiter.limit(_endorse_rate_limit)
async def toggle_endorsement(
    request: Request,
    profile_id: UUID,
    body: EndorsementToggleRequest,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Endorse an area of expertise on someone else's profile, or withdraw an existing endorsement."""
    return await endorsement_service.toggle(db, str(profile_id), current_user_id, body.area_of_expertise)
