"""
Service Dependencies.

Annotated dependency aliases used by the API endpoints.
"""

from typing import Annotated

from fastapi import Depends

from film_query.server.services.film_service import FilmService, get_film_service

FilmServiceDep = Annotated[FilmService, Depends(get_film_service)]
