"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns used by the
repository implementations of the database layer. The film catalogue is
read-only, so the contract only covers queries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncReadRepository(ABC, Generic[EntityType]):
    """Base async repository interface with read operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[EntityType]:
        """List entities with optional pagination.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of entity instances
        """

    @abstractmethod
    async def count(self) -> int:
        """Count all entities of this repository's table."""


class AsyncQueryBuilder:
    """Utility class for building async SQLModel-based database queries."""

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt

    @staticmethod
    def escape_like(value: str, escape_char: str = "\\") -> str:
        """Escape LIKE wildcards so ``value`` matches literally.

        Args:
            value: Raw text to embed in a LIKE pattern
            escape_char: Character declared as ``ESCAPE`` in the query

        Returns:
            The escaped text
        """
        return (
            value.replace(escape_char, escape_char * 2)
            .replace("%", f"{escape_char}%")
            .replace("_", f"{escape_char}_")
        )
