from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from talent_directory.core.config import get_settings


def async_database_url(url: str) -> str:
    """Accept postgres://, postgresql:// or postgresql+asyncpg:// and return the asyncpg form."""
    for prefix in ("postgres://", "postgresql://", "postgresql+psycopg2://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def sync_database_url(url: str) -> str:
    """psycopg2 form of the same URL, for Alembic."""
    return async_database_url(url).replace("postgresql+asyncpg://", "postgresql://", 1)


database_url = async_database_url(get_settings().database_url)

# Hosted Postgres behind a connection pooler: don't hold our own pool
engine = create_async_engine(
    database_url,
    echo=get_settings().sql_echo,
    poolclass=NullPool if "render.com" in database_url else None,
)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
Base = declarative_base()
