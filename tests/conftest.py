"""Shared fixtures: a throwaway SQLite file per test."""

import pytest

from contextbench.benchmarks import setup_database
from contextbench.db import create_db_engine
from contextbench.providers import DynamicContextProvider, StaticContextProvider

SEEDED_CONTACTS = 30


@pytest.fixture()
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'bench.db'}"


@pytest.fixture()
def engine(database_url):
    engine = create_db_engine(database_url)
    yield engine
    engine.dispose()


@pytest.fixture()
def dynamic_provider(engine):
    return DynamicContextProvider(engine)


@pytest.fixture()
def static_provider(engine):
    provider = StaticContextProvider(engine)
    yield provider
    provider.close()


@pytest.fixture()
def seeded(dynamic_provider):
    """Store recreated and seeded with a small batch of contacts."""
    setup_database(dynamic_provider, SEEDED_CONTACTS)
    return SEEDED_CONTACTS
