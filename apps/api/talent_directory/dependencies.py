from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from talent_directory.core.auth import decode_access_token
from talent_directory.db.session import async_session
from talent_directory.services.directory import RecordStore, SqlAlchemyRecordStore

security = HTTPBearer(auto_error=False)
BearerCredentials = Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)]


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session for endorsement writes: commit on success, roll back on error."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_record_store() -> RecordStore:
    # Search opens its own short sessions so concurrent queries never share one
    return SqlAlchemyRecordStore(async_session)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id_optional(credentials: BearerCredentials) -> Optional[str]:
    """Caller's user id from a valid bearer token; None for anonymous or invalid tokens."""
    return decode_access_token(credentials.credentials) if credentials else None


async def get_current_user_id(credentials: BearerCredentials) -> str:
    if not credentials:
        raise _unauthorized("Not authenticated")
    user_id = decode_access_token(credentials.credentials)
    if not user_id:
        raise _unauthorized("Invalid or expired token")
    return user_id
