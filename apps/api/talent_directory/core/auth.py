"""Bearer tokens. The directory only needs the caller's user id (the `sub` claim)."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from talent_directory.core.config import get_settings

logger = logging.getLogger(__name__)


def create_access_token(subject: str, expire_minutes: Optional[int] = None) -> str:
    s = get_settings()
    now = datetime.now(timezone.utc)
    ttl = timedelta(minutes=s.jwt_expire_minutes if expire_minutes is None else expire_minutes)
    claims = {"sub": str(subject), "iat": now, "exp": now + ttl}
    return jwt.encode(claims, s.jwt_secret, algorithm=s.jwt_algorithm)


def decode_access_token(token: str) -> Optional[str]:
    """Subject of a valid token; None when it is malformed, expired or has no subject."""
    s = get_settings()
    try:
        claims = jwt.decode(token, s.jwt_secret, algorithms=[s.jwt_algorithm])
    except JWTError as e:
        logger.debug("Rejected bearer token: %s", type(e).__name__)
        return None
    subject = claims.get("sub")
    return str(subject) if subject else None
