from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from talent_directory.core.auth import decode_access_token
from talent_directory.core.config import get_settings

_BEARER = "bearer "


def get_rate_limit_key(request: Request) -> str:
    """Signed-in callers share one bucket across IPs; anonymous callers are limited per IP."""
    header = request.headers.get("Authorization", "")
    if header[: len(_BEARER)].lower() == _BEARER:
        user_id = decode_access_token(header[len(_BEARER):].strip())
        if user_id:
            return f"user:{user_id}"
    return f"ip:{get_remote_address(request)}"


def build_limiter() -> Limiter:
    s = get_settings()
    # memory:// is per process; point RATE_LIMIT_STORAGE_URI at redis:// when running several workers
    return Limiter(
        key_func=get_rate_limit_key,
        storage_uri=s.rate_limit_storage_uri,
        enabled=s.rate_limit_enabled,
    )


limiter = build_limiter()
