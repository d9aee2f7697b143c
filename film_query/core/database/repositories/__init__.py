"""Data access layer, one repository per table."""

from .base import AsyncQueryBuilder, AsyncReadRepository
from .films import FilmRepository

__all__ = ["AsyncQueryBuilder", "AsyncReadRepository", "FilmRepository"]
