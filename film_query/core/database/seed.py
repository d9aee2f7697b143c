"""
Sakila sample film titles.

``init_db`` inserts these rows when tables are created from ORM metadata for
local development. The initial Alembic migration keeps its own copy of the
same titles. Identifiers follow insertion order, starting at 1.
"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from film_query.core.logging_config import get_logger

from .entities.films import Film

logger = get_logger(__name__)

SAKILA_FILM_TITLES: tuple[str, ...] = (
    # 46 titles starting with 'A'
    "ACADEMY DINOSAUR", "ACE GOLDFINGER", "ADAPTATION HOLES", "AFFAIR PREJUDICE",
    "AFRICAN EGG", "AGENT TRUMAN", "AIRPLANE SIERRA", "AIRPORT POLLOCK",
    "ALABAMA DEVIL", "ALADDIN CALENDAR", "ALAMO VIDEOTAPE", "ALASKA PHANTOM",
    "ALI FOREVER", "ALICE FANTASIA", "ALIEN CENTER", "ALLEY EVOLUTION",
    "ALONE TRIP", "ALTER VICTORY", "AMADEUS HOLY", "AMELIE HELLFIGHTERS",
    "AMERICAN CIRCUS", "AMISTAD MIDSUMMER", "ANACONDA CONFESSIONS", "ANALYZE HOOSIERS",
    "ANGELS LIFE", "ANNIE IDENTITY", "ANONYMOUS HUMAN", "ANTHEM LUKE",
    "ANTITRUST TOMATOES", "ANYTHING SAVANNAH", "APACHE DIVINE", "APOCALYPSE FLAMINGOS",
    "APOLLO TEEN", "ARABIA DOGMA", "ARACHNOPHOBIA ROLLERCOASTER", "ARMAGEDDON LOST",
    "ARMY FLINTSTONES", "ARSENIC INDEPENDENCE", "ARTIST COLDBLOODED", "ATLANTIS CAUSE",
    "ATTACKS HATE", "ATTRACTION NEWTON", "AUTUMN CROW", "AVIATOR POLLOCK",
    "AWAKENINGS BED", "AWESOME GUMP",
    # One title for most other letters
    "DANCING FEVER", "EAGLE LOVERBOY", "FAMILY SWEET", "GASOLINE DUDE",
    "HAMLET WISDOM", "ICE CROSSING", "JACKET FRISCO", "KARATE MOON",
    "LABOR TRACY", "MAGIC MALLRATS", "NATURAL STOCK", "OCEAN THIRTEEN",
    "PACIFIC AMISTAD", "QUEEN LUKE", "RADIO JACK", "SATURDAY LAMBS",
    "TAXI KICK", "UNFAITHFUL KILL", "VALLEY PACKER", "WAGON JAWS",
    "YOUNG LANGUAGE", "ZION GARDEN",
)


def seed_rows(titles: Sequence[str] = SAKILA_FILM_TITLES) -> list[dict]:
    """Build ``film`` rows with sequential identifiers for ``titles``."""
    return [{"film_id": index, "title": title} for index, title in enumerate(titles, start=1)]


async def seed_films(session: AsyncSession, titles: Sequence[str] = SAKILA_FILM_TITLES) -> int:
    """Insert ``titles`` into an empty ``film`` table.

    Args:
        session: Async session to write with; committed on success
        titles: Titles to insert

    Returns:
        Number of inserted rows, 0 when the table already held data
    """
    existing = (await session.execute(select(func.count()).select_from(Film))).scalar_one()
    if existing:
        logger.debug(f"Film table already holds {existing} rows; skipping seed")
        return 0

    rows = seed_rows(titles)
    await session.execute(insert(Film), rows)
    await session.commit()
    logger.info(f"Seeded {len(rows)} films")
    return len(rows)
