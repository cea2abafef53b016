import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Text,
    DateTime,
    ForeignKey,
    Index,
    func,
)
from sqlalchemy.dialects.postgresql import UUID, ARRAY, JSONB
from sqlalchemy.orm import relationship

from talent_directory.domain import ProfileStatus

from .session import Base


def uuid4_str():
    return str(uuid.uuid4())


class Profile(Base):
    """One directory profile per submission; only APPROVED rows are searchable."""
    __tablename__ = "profiles"

    PENDING = ProfileStatus.PENDING.value
    APPROVED = ProfileStatus.APPROVED.value
    REJECTED = ProfileStatus.REJECTED.value

    id = Column(UUID(as_uuid=False), primary_key=True, default=uuid4_str)
    user_id = Column(UUID(as_uuid=False), nullable=True, index=True)  # auth provider subject; null for orphans
    status = Column(String(32), nullable=False, default=PENDING, index=True)

    # Identity / text
    name = Column(String(100), nullable=False)
    job_title = Column(String(100), nullable=True)
    company_name = Column(String(100), nullable=True)
    nationality = Column(String(50), nullable=True)
    short_bio = Column(String(500), nullable=True)
    long_bio = Column(Text, nullable=True)

    # Categories and facets
    interested_in = Column(ARRAY(String), nullable=False, default=list)
    interested_in_description = Column(Text, nullable=True)
    languages = Column(ARRAY(String), nullable=False, default=list)
    areas_of_expertise = Column(ARRAY(String), nullable=False, default=list)
    memberships = Column(ARRAY(String), nullable=False, default=list)
    keywords = Column(ARRAY(String), nullable=False, default=list)

    # Display-only
    profile_picture = Column(String(1000), nullable=True)
    social_media_links = Column(JSONB, nullable=True)

    # Contact (never returned by directory routes)
    email = Column(String(255), nullable=False)
    contact_number = Column(String(50), nullable=True)
    alt_contact_name = Column(String(100), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc))

    endorsements = relationship("Endorsement", back_populates="profile", cascade="all, delete-orphan")

    __table_args__ = (
        Index("ix_profiles_interested_in", "interested_in", postgresql_using="gin"),
        Index("ix_profiles_languages", "languages", postgresql_using="gin"),
        Index("ix_profiles_areas_of_expertise", "areas_of_expertise", postgresql_using="gin"),
        Index("ix_profiles_memberships", "memberships", postgresql_using="gin"),
    )


class Endorsement(Base):
    __tablename__ = "endorsements"

    id = Column(UUID(as_uuid=False), primary_key=True, default=uuid4_str)
    user_id = Column(UUID(as_uuid=False), nullable=False)
    profile_id = Column(UUID(as_uuid=False), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    area_of_expertise = Column(String(50), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    profile = relationship("Profile", back_populates="endorsements")

    __table_args__ = (
        Index("ix_endorsements_user_profile_area", "user_id", "profile_id", "area_of_expertise", unique=True),
        Index("ix_endorsements_profile_area", "profile_id", "area_of_expertise"),
        Index("ix_endorsements_user_id", "user_id"),
    )
