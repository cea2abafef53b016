from starlette.requests import Request

from talent_directory.core.auth import create_access_token, decode_access_token
from talent_directory.core.limiter import get_rate_limit_key
from talent_directory.db.session import async_database_url, sync_database_url


def _request(headers: dict[str, str] | None = None) -> Request:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/directory/search",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": ("10.0.0.7", 5555),
    }
    return Request(scope)


def test_token_round_trip():
    assert decode_access_token(create_access_token("user-1")) == "user-1"
    assert decode_access_token("garbage") is None


def test_rate_limit_key_prefers_token_subject():
    token = create_access_token("user-1")
    assert get_rate_limit_key(_request({"Authorization": f"Bearer {token}"})) == "user:user-1"
    assert get_rate_limit_key(_request({"Authorization": f"bearer {token}"})) == "user:user-1"


def test_rate_limit_key_falls_back_to_ip():
    assert get_rate_limit_key(_request()) == "ip:10.0.0.7"
    assert get_rate_limit_key(_request({"Authorization": "Bearer nope"})) == "ip:10.0.0.7"


def test_database_url_forms():
    assert async_database_url("postgres://u@h/db") == "postgresql+asyncpg://u@h/db"
    assert async_database_url("postgresql://u@h/db") == "postgresql+asyncpg://u@h/db"
    assert async_database_url("postgresql+asyncpg://u@h/db") == "postgresql+asyncpg://u@h/db"
    assert sync_database_url("postgres://u@h/db") == "postgresql://u@h/db"
    assert sync_database_url("postgresql+asyncpg://u@h/db") == "postgresql://u@h/db"


def test_expired_token_is_rejected():
    assert decode_access_token(create_access_token("user-1", expire_minutes=-1)) is None
