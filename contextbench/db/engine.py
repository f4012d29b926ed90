"""Database engine configuration for the context benchmark."""

import os

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .schema import Base

# Connection string - override with the environment variable or --database-url
DATABASE_URL_ENV = "CONTEXTBENCH_DATABASE_URL"
DEFAULT_DATABASE_URL = "sqlite:///./.contextbench.db"


def get_database_url() -> str:
    """Read the configured connection string."""
    return os.environ.get(DATABASE_URL_ENV, DEFAULT_DATABASE_URL)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for the given connection string."""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        url,
        connect_args=connect_args,
        echo=echo,
        pool_pre_ping=True,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    """Session factory shared by the context providers.

    Instances stay loaded after commit so a long-lived session can serve
    repeated lookups from its identity map without refreshing them.
    """
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def _sqlite_file(engine: Engine):
    """Path of a file-backed SQLite database, or None."""
    url = engine.url
    if url.get_backend_name() != "sqlite":
        return None
    database = url.database
    if not database or database == ":memory:" or database.startswith("file:"):
        return None
    return database


def database_exists(engine: Engine) -> bool:
    """Check whether the backing store exists."""
    path = _sqlite_file(engine)
    if path is not None:
        return os.path.exists(path)
    inspector = inspect(engine)
    return any(inspector.has_table(table.name) for table in Base.metadata.sorted_tables)


def delete_database(engine: Engine) -> None:
    """Remove the backing store."""
    path = _sqlite_file(engine)
    if path is not None:
        # Pooled connections keep the file open
        engine.dispose()
        os.remove(path)
    else:
        Base.metadata.drop_all(bind=engine)


def create_database(engine: Engine) -> None:
    """Create the schema tables."""
    Base.metadata.create_all(bind=engine)
