"""Database package for the context benchmark."""

from .engine import (
    DATABASE_URL_ENV,
    DEFAULT_DATABASE_URL,
    create_database,
    create_db_engine,
    database_exists,
    delete_database,
    get_database_url,
    make_session_factory,
)
from .schema import Account, Base, Contact

__all__ = [
    "DATABASE_URL_ENV",
    "DEFAULT_DATABASE_URL",
    "create_database",
    "create_db_engine",
    "database_exists",
    "delete_database",
    "get_database_url",
    "make_session_factory",
    "Account",
    "Base",
    "Contact",
]
