from .directory import router as directory_router
from .endorsements import router as endorsements_router

ROUTERS = (directory_router, endorsements_router)

__all__ = [
    "ROUTERS",
    "directory_router",
    "endorsements_router",
]
