"""Shared fixtures for end-to-end tests.

A PostgreSQL container is started once per test session with testcontainers
and migrated to the latest Alembic revision, which creates and seeds the
``film`` table. Tests are skipped when Docker is not available.
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from testcontainers.postgres import PostgresContainer

from alembic import command
from alembic.config import Config
from film_query.core.database import create_engine, create_sessionmaker

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def pytest_collection_modifyitems(items):
    for item in items:
        if item.path.is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.e2e)


def alembic_config(database_url: str) -> Config:
    """Build an Alembic config pointing at ``database_url``."""
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.attributes["configure_logger"] = False
    return cfg


@pytest.fixture(scope="session")
def pg_url() -> Iterator[str]:
    container = PostgresContainer("postgres:16")
    try:
        container.start()
    except Exception as exc:
        pytest.skip(f"PostgreSQL container unavailable (is Docker running?): {exc}")
    try:
        yield container.get_connection_url()
    finally:
        container.stop()


@pytest.fixture(scope="session")
def alembic_cfg(pg_url: str) -> Config:
    return alembic_config(pg_url)


@pytest.fixture(scope="session")
def migrated_pg_url(pg_url: str, alembic_cfg: Config) -> str:
    """Database URL of the container after ``alembic upgrade head``."""
    command.upgrade(alembic_cfg, "head")
    return pg_url


@pytest_asyncio.fixture
async def engine(migrated_pg_url: str) -> AsyncIterator[AsyncEngine]:
    eng = create_engine(migrated_pg_url)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with create_sessionmaker(engine)() as s:
        yield s


@pytest_asyncio.fixture
async def client(engine: AsyncEngine) -> AsyncIterator[AsyncClient]:
    """HTTP client for the application with sessions bound to the container database."""
    from film_query.core.database import get_session
    from film_query.server.main import app

    session_maker = create_sessionmaker(engine)

    async def get_session_override() -> AsyncIterator[AsyncSession]:
        async with session_maker() as s:
            yield s

    app.dependency_overrides[get_session] = get_session_override

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://localhost") as ac:
        yield ac

    app.dependency_overrides.clear()
