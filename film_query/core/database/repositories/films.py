"""
Film repository implementation.

This module provides data access operations for the ``film`` table:
case-insensitive title prefix search and full listing, both ordered by title.
Built on async SQLAlchemy with SQLModel entities.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, literal
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.films import Film
from .base import AsyncQueryBuilder, AsyncReadRepository


class FilmRepository(AsyncReadRepository[Film]):
    """Repository for film data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        super().__init__(session, Film)

    async def find_by_title_starting_with(self, prefix: str) -> List[Film]:
        """Find films whose title starts with ``prefix``, ignoring case.

        Equivalent to ``WHERE UPPER(title) LIKE UPPER(:prefix || '%') ORDER BY title``.
        Both sides are upper-cased by the database, so a letter whose Python
        upper case is longer (``ß`` becomes ``SS``) is never widened.

        Args:
            prefix: Title prefix to match

        Returns:
            Matching films ordered by title
        """
        pattern = func.upper(literal(AsyncQueryBuilder.escape_like(prefix) + "%"))
        stmt = (
            select(Film)
            .where(func.upper(Film.title).like(pattern, escape="\\"))
            .order_by(Film.title)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_all_order_by_title(self) -> List[Film]:
        """Return every film ordered by title."""
        return await self.list()

    async def list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Film]:
        """List films ordered by title with optional pagination.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of films
        """
        stmt = AsyncQueryBuilder.apply_pagination(select(Film).order_by(Film.title), limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Film))
        return int(result.scalar_one())
