"""Seeding, test runner and timer for the context benchmark."""

import time
from typing import Any, Callable, Dict

import psutil
from sqlalchemy import select
from sqlalchemy.orm import Session

from contextbench.db import Account, Contact, create_database, database_exists, delete_database
from contextbench.providers import ContextProvider, get_single_contact

CONTACT_COUNT = 4000
PROGRESS_EVERY = 1000
TEST_CONTACT_LIMIT = 2000


def recreate_database(session: Session) -> None:
    """Drop the store if it exists, then create it empty."""
    engine = session.get_bind()
    exists = database_exists(engine)
    print("Database " + ("Exists" if exists else "Does Not Exist"))
    if exists:
        print("Deleting Database")
        delete_database(engine)
    print("Creating Database")
    create_database(engine)


def add_some_contacts(session: Session, count: int = CONTACT_COUNT, progress_every: int = PROGRESS_EVERY) -> None:
    """Insert ``count`` contacts named "Contact 0", "Contact 1", ... in one commit."""
    print("Adding Contacts")
    for i in range(count):
        if (i + 1) % progress_every == 0:
            print(i + 1)
        session.add(Contact(name=f"Contact {i}"))
    print("Saving Changes")
    session.commit()


def setup_database(provider: ContextProvider, contact_count: int = CONTACT_COUNT) -> None:
    """Recreate and seed the store through a single throwaway session."""
    with provider.get_context() as session:
        recreate_database(session)
        add_some_contacts(session, contact_count)


def run_test(provider: ContextProvider, limit: int = TEST_CONTACT_LIMIT) -> int:
    """
    Link a new account to each of the first ``limit`` contacts.

    Every contact is looked up again through a session obtained from the provider,
    so the static provider answers from its identity map while the dynamic one
    queries a fresh session each time. Returns the number of contacts processed.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    with provider.get_context() as session:
        contacts = session.scalars(select(Contact)).all()

    processed = 0
    for contact in contacts[:limit]:
        with provider.get_context() as session:
            # Either the tracked instance or a fresh copy, depending on the provider
            local_contact = get_single_contact(session, contact.id)
            local_contact.account = Account(name=contact.name)
            session.commit()
        processed += 1
    return processed


def format_elapsed(milliseconds: int) -> str:
    """Render milliseconds with thousands separators, e.g. ``1,234ms``."""
    return f"{milliseconds:,}ms"


def _rss_mb() -> float:
    return psutil.Process().memory_info().rss / 1024 / 1024


def time_test(name: str, action: Callable[[], Any]) -> Dict[str, Any]:
    """Run ``action`` under a stopwatch and print the elapsed time."""
    print()
    print(name)

    rss_before = _rss_mb()
    start = time.perf_counter()
    result = action()
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    rss_after = _rss_mb()

    print()
    print(format_elapsed(elapsed_ms))

    return {
        "name": name,
        "elapsed_ms": elapsed_ms,
        "result": result,
        "rss_before_mb": rss_before,
        "rss_after_mb": rss_after,
    }
