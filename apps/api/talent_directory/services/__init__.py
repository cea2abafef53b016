from .directory import directory_service
from .endorsements import endorsement_service

__all__ = ["directory_service", "endorsement_service"]
