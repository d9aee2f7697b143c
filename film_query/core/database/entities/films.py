"""
Film entity model.

This module contains the database entity for the Sakila ``film`` table.
Rows are seed data loaded by the initial migration; the application only
reads them.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Column, Index, String
from sqlmodel import Field

from ..base import Base


class Film(Base, table=True):
    """Entity for a film of the catalogue.

    Table: film
    """

    __tablename__ = "film"
    __table_args__ = (Index("idx_film_title", "title"),)

    film_id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(sa_column=Column(String(255), nullable=False))

    def __repr__(self) -> str:
        return f"Film(film_id={self.film_id}, title={self.title!r})"
