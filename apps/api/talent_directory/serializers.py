"""Shared model-to-response serializers."""

from talent_directory.schemas import ProfileCard, ProfileRecord


def profile_record_to_card(record: ProfileRecord) -> ProfileCard:
    """Public projection: drops ownership and contact fields."""
    return ProfileCard.model_validate(record.model_dump(include=set(ProfileCard.model_fields)))
