import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import create_engine, pool

# apps/api on the path so talent_directory resolves when alembic runs from here
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from talent_directory.core.config import get_settings
from talent_directory.db import models  # noqa: F401
from talent_directory.db.session import Base, sync_database_url

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Migrations run on psycopg2; the app itself uses asyncpg
config.set_main_option("sqlalchemy.url", sync_database_url(get_settings().database_url))
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(config.get_main_option("sqlalchemy.url"), poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
