"""Alembic environment for the RoomKey schema; connection URL comes from Settings."""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection
from sqlalchemy.pool import NullPool

os.environ.setdefault("APP_ENV", "dev")
from roomkey.core.config import settings
from roomkey.models import Base

# Registers every table on Base.metadata.
from roomkey.models import Booking, BookingToken, Hotel, Offer, Room, User  # noqa: F401

config = context.config
# alembic.ini may omit the logging sections; fileConfig raises KeyError then.
if config.config_file_name is not None:
    try:
        fileConfig(config.config_file_name)
    except KeyError:
        pass

target_metadata = Base.metadata


def include_object(obj, name, type_, reflected, compare_to) -> bool:
    """
    Keep autogenerate away from the accounts table.

    Deployed users tables differ (id vs user_id, full_name vs name, optional
    columns) and the service adapts to them at runtime; the hand-written users
    migration is the only place that changes that table.
    """
    if type_ == "table":
        table_name = name
    else:
        table_name = getattr(getattr(obj, "table", None), "name", None)
    return table_name != settings.USERS_TABLE


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        include_object=include_object,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        include_object=include_object,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(settings.DATABASE_URL, poolclass=NullPool)
    with connectable.connect() as connection:
        do_run_migrations(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
