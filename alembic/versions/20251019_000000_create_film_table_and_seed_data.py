"""Create film table and seed Sakila sample data

Revision ID: 20251019_000000
Revises: None
Create Date: 2025-10-19 00:00:00.000000

This is the initial migration of the Film Query service. It creates:
- The ``film`` table (film_id SERIAL primary key, title VARCHAR(255) NOT NULL)
- The ``idx_film_title`` index used by the title prefix search
- The Sakila sample titles (46 starting with 'A', one for most other letters)

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20251019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the film table and seed initial data."""

    film_table = op.create_table(
        "film",
        sa.Column("film_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("film_id"),
    )
    op.create_index("idx_film_title", "film", ["title"])

    # ==========================================
    # Seed Sakila sample titles
    # ==========================================
    film_titles = [
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
    ]

    op.bulk_insert(
        film_table,
        [{"film_id": film_id, "title": title} for film_id, title in enumerate(film_titles, start=1)],
    )

    # Explicit identifiers were inserted; move the serial sequence past them
    if op.get_context().dialect.name == "postgresql":
        op.execute("SELECT setval(pg_get_serial_sequence('film', 'film_id'), (SELECT MAX(film_id) FROM film))")


def downgrade() -> None:
    """Drop the film table."""
    op.drop_index("idx_film_title", table_name="film")
    op.drop_table("film")
