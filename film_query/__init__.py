"""Film Query Service.

A read-only REST service over the Sakila ``film`` table.

Layers
------

- ``film_query.server.api``: FastAPI routers (``GET /api/v1/films``, health).
- ``film_query.server.services``: ``FilmService`` with the query rules and
  database error translation.
- ``film_query.core.database``: SQLModel entities, async repositories and
  engine/session management.

Typical request
---------------

``GET /api/v1/films?startsWith=a`` validates the letter, asks ``FilmService``
for films whose title starts with it (case-insensitive), and answers with
``{"films": [...], "count": n, "filter": {"startsWith": "a"}}``.
"""

__version__ = "1.0.0"
