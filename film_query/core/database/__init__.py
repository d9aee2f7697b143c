"""
Database layer for the Film Query service.

Structure:
- entities/: Database entity models organized by table
- repositories/: Data access layer organized by table
- session.py: Global engine and session factory management
- seed.py: Sakila sample titles and the seeding helper
- utils.py: Database utility functions (engine, session factory, DDL, health)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .seed import SAKILA_FILM_TITLES, seed_films, seed_rows
from .utils import (
    check_connection,
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_url,
)

__all__ = [
    "Base",
    "SAKILA_FILM_TITLES",
    "async_session_maker",
    "check_connection",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "normalize_url",
    "seed_films",
    "seed_rows",
]
