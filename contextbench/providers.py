"""
Context providers handing out database sessions to the benchmark runner.

Two strategies are compared:

- DynamicContextProvider opens a brand-new session for every call. Each session
  only knows about the rows it loaded itself, so every lookup goes to the database.
- StaticContextProvider keeps one session for its whole lifetime. Rows loaded once
  stay in that session's identity map, so a lookup by primary key returns the
  tracked instance without issuing a query, and pending changes pile up in one
  unit of work.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import ContextManager, Generator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from contextbench.db import Contact, make_session_factory


class ContextProvider(ABC):
    """Capability handing out a session bound to the configured store."""

    @abstractmethod
    def get_context(self) -> ContextManager[Session]:
        """Get a session, scoped to a ``with`` block."""

    def close(self) -> None:
        """Release anything held for the provider's lifetime."""


class DynamicContextProvider(ContextProvider):
    """New session per call, closed when the ``with`` block exits."""

    def __init__(self, engine: Engine):
        self._session_factory = make_session_factory(engine)

    @contextmanager
    def get_context(self) -> Generator[Session, None, None]:
        session = self._session_factory()
        try:
            yield session
        finally:
            session.close()


class StaticContextProvider(ContextProvider):
    """Same session for every call until ``close()``."""

    def __init__(self, engine: Engine):
        self._session = make_session_factory(engine)()

    @contextmanager
    def get_context(self) -> Generator[Session, None, None]:
        yield self._session

    def close(self) -> None:
        self._session.close()


def get_single_contact(session: Session, contact_id: int) -> Contact:
    """Fetch exactly one contact by id, served from the identity map when tracked."""
    contact = session.get(Contact, contact_id)
    if contact is None:
        raise NoResultFound(f"No contact with id {contact_id}")
    return contact
