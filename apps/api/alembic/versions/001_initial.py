"""Initial schema: profiles (with facet GIN indexes) and endorsements.

Revision ID: 001
Revises:
Create Date: 2025-07-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="PENDING_APPROVAL"),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("job_title", sa.String(100), nullable=True),
        sa.Column("company_name", sa.String(100), nullable=True),
        sa.Column("nationality", sa.String(50), nullable=True),
        sa.Column("short_bio", sa.String(500), nullable=True),
        sa.Column("long_bio", sa.Text(), nullable=True),
        sa.Column("interested_in", sa.ARRAY(sa.String()), nullable=False, server_default="{}"),
        sa.Column("interested_in_description", sa.Text(), nullable=True),
        sa.Column("languages", sa.ARRAY(sa.String()), nullable=False, server_default="{}"),
        sa.Column("areas_of_expertise", sa.ARRAY(sa.String()), nullable=False, server_default="{}"),
        sa.Column("memberships", sa.ARRAY(sa.String()), nullable=False, server_default="{}"),
        sa.Column("keywords", sa.ARRAY(sa.String()), nullable=False, server_default="{}"),
        sa.Column("profile_picture", sa.String(1000), nullable=True),
        sa.Column("social_media_links", postgresql.JSONB(), nullable=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("contact_number", sa.String(50), nullable=True),
        sa.Column("alt_contact_name", sa.String(100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_profiles_user_id", "profiles", ["user_id"])
    op.create_index("ix_profiles_status", "profiles", ["status"])
    for col in ("interested_in", "languages", "areas_of_expertise", "memberships"):
        op.create_index(f"ix_profiles_{col}", "profiles", [col], postgresql_using="gin")

    op.create_table(
        "endorsements",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("profile_id", sa.UUID(), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("area_of_expertise", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
    )
    op.create_index(
        "ix_endorsements_user_profile_area",
        "endorsements",
        ["user_id", "profile_id", "area_of_expertise"],
        unique=True,
    )
    op.create_index("ix_endorsements_profile_area", "endorsements", ["profile_id", "area_of_expertise"])
    op.create_index("ix_endorsements_user_id", "endorsements", ["user_id"])


def downgrade() -> None:
    op.drop_table("endorsements")
    for col in ("memberships", "areas_of_expertise", "languages", "interested_in"):
        op.drop_index(f"ix_profiles_{col}", table_name="profiles")
    op.drop_index("ix_profiles_status", table_name="profiles")
    op.drop_index("ix_profiles_user_id", table_name="profiles")
    op.drop_table("profiles")
