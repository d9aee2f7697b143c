"""Unit tests for database engine, session and seeding utilities."""

from unittest.mock import patch

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from film_query.core.database import (
    SAKILA_FILM_TITLES,
    check_connection,
    create_engine,
    create_sessionmaker,
    normalize_url,
    seed_films,
    seed_rows,
)
from film_query.core.database.repositories import FilmRepository


class TestNormalizeUrl:
    """Test Postgres URL normalization to the asyncpg driver."""

    @pytest.mark.parametrize(
        "url",
        [
            "postgres://u:p@h:5432/db",
            "postgresql://u:p@h:5432/db",
            "postgresql+psycopg://u:p@h:5432/db",
            "postgresql+psycopg2://u:p@h:5432/db",
            "postgresql+asyncpg://u:p@h:5432/db",
        ],
    )
    def test_postgres_variants_use_asyncpg(self, url: str):
        assert normalize_url(url) == "postgresql+asyncpg://u:p@h:5432/db"

    def test_non_postgres_url_is_unchanged(self):
        assert normalize_url("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"


class TestEngineAndSessions:
    """Test engine and session factory helpers."""

    async def test_create_engine_returns_async_engine(self):
        engine = create_engine("sqlite+aiosqlite:///:memory:")
        try:
            assert isinstance(engine, AsyncEngine)
            assert engine.url.drivername == "sqlite+aiosqlite"
        finally:
            await engine.dispose()

    async def test_sessionmaker_does_not_expire_on_commit(self, test_engine: AsyncEngine):
        factory = create_sessionmaker(test_engine)

        assert factory.kw["expire_on_commit"] is False


class TestCheckConnection:
    """Test the database connectivity probe."""

    async def test_reachable_database(self, test_engine: AsyncEngine):
        assert await check_connection(test_engine) is True

    async def test_unreachable_database(self, tmp_path):
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/film.db")
        try:
            with patch("film_query.core.database.utils.logger") as mock_logger:
                assert await check_connection(engine) is False
                mock_logger.warning.assert_called_once()
        finally:
            await engine.dispose()


class TestSeeding:
    """Test the Sakila seed helpers."""

    def test_seed_rows_use_sequential_ids(self):
        rows = seed_rows(["FIRST", "SECOND"])

        assert rows == [{"film_id": 1, "title": "FIRST"}, {"film_id": 2, "title": "SECOND"}]

    def test_sample_data_has_46_titles_starting_with_a(self):
        assert sum(1 for title in SAKILA_FILM_TITLES if title.startswith("A")) == 46
        assert len(set(SAKILA_FILM_TITLES)) == len(SAKILA_FILM_TITLES)

    async def test_seed_is_skipped_when_table_has_rows(self, test_engine: AsyncEngine):
        async with create_sessionmaker(test_engine)() as session:
            inserted = await seed_films(session)
            total = await FilmRepository(session).count()

        assert inserted == 0
        assert total == len(SAKILA_FILM_TITLES)
