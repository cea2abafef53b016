"""Endorsement business logic: per-profile counts per area of expertise, and toggling."""

import logging

from fastapi import HTTPException
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talent_directory.db.models import Endorsement, Profile
from talent_directory.schemas import EndorsementSummary

logger = logging.getLogger(__name__)


async def _get_approved_profile(db: AsyncSession, profile_id: str) -> Profile:
    result = await db.execute(
        select(Profile).where(Profile.id == profile_id, Profile.status == Profile.APPROVED)
    )
    profile = result.scalar_one_or_none()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


async def get_endorsement_summary(
    db: AsyncSession,
    profile_id: str,
    user_id: str | None = None,
) -> EndorsementSummary:
    """Counts per area for an APPROVED profile, plus the areas the caller endorsed (if signed in)."""
    await _get_approved_profile(db, profile_id)

    counts_result = await db.execute(
        select(Endorsement.area_of_expertise, func.count(Endorsement.id))
        .where(Endorsement.profile_id == profile_id)
        .group_by(Endorsement.area_of_expertise)
    )
    counts = {area: int(n) for area, n in counts_result.all()}

    mine: list[str] = []
    if user_id:
        mine_result = await db.execute(
            select(Endorsement.area_of_expertise).where(
                Endorsement.profile_id == profile_id,
                Endorsement.user_id == user_id,
            )
        )
        mine = sorted(r[0] for r in mine_result.all())

    return EndorsementSummary(profile_id=profile_id, counts=counts, endorsed_by_me=mine)


async def toggle_endorsement(
    db: AsyncSession,
    profile_id: str,
    user_id: str,
    area_of_expertise: str,
) -> EndorsementSummary:
    """Add the caller's endorsement for area, or remove it if present. Returns the updated summary."""
    profile = await _get_approved_profile(db, profile_id)
    if profile.user_id and str(profile.user_id) == str(user_id):
        raise HTTPException(status_code=403, detail="You cannot endorse your own profile")
    area = area_of_expertise.strip()
    if area not in (profile.areas_of_expertise or []):
        raise HTTPException(status_code=400, detail="Area of expertise is not listed on this profile")

    result = await db.execute(
        select(Endorsement).where(
            Endorsement.profile_id == profile_id,
            Endorsement.user_id == user_id,
            Endorsement.area_of_expertise == area,
        )
    )
    existing = result.scalar_one_or_none()
    if existing:
        await db.delete(existing)
        logger.info("Endorsement removed: profile=%s", profile_id)
    else:
        db.add(Endorsement(profile_id=profile_id, user_id=user_id, area_of_expertise=area))
        logger.info("Endorsement added: profile=%s", profile_id)
    await db.flush()

    return await get_endorsement_summary(db, profile_id, user_id)


class EndorsementService:
    """Facade for endorsement operations."""

    @staticmethod
    async def summary(db: AsyncSession, profile_id: str, user_id: str | None) -> EndorsementSummary:
        return await get_endorsement_summary(db, profile_id, user_id)

    @staticmethod
    async def toggle(db: AsyncSession, profile_id: str, user_id: str, area: str) -> EndorsementSummary:
        return await toggle_endorsement(db, profile_id, user_id, area)


endorsement_service = EndorsementService()
