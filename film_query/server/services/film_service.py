"""
Film Service.

Business logic for film queries. Sits between the API router and the
``FilmRepository`` and translates database failures into the service's
own error types so the API layer never sees SQLAlchemy exceptions.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import Depends
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from film_query.core.database import get_session
from film_query.core.database.entities import Film
from film_query.core.database.repositories import FilmRepository
from film_query.core.errors import (
    FilmDataAccessError,
    FilmDataIntegrityError,
    FilmQueryError,
)
from film_query.core.logging_config import get_logger
from film_query.core.monitoring import log_film_query

logger = get_logger(__name__)


class FilmService:
    """
    Service layer for querying the film catalogue.
    """

    def __init__(self, repository: FilmRepository) -> None:
        self.repository = repository

    async def find_films_by_starting_letter(self, letter: Optional[str]) -> List[Film]:
        """
        Find films whose title starts with ``letter``.

        A missing, empty or whitespace-only letter returns the whole catalogue.
        Matching is case-insensitive and results are ordered by title.

        Args:
            letter: The starting letter, already validated by the caller.

        Returns:
            Matching films.

        Raises:
            FilmDataIntegrityError: The database reported a constraint violation.
            FilmDataAccessError: The database could not be queried.
            FilmQueryError: Any other failure.
        """
        prefix = letter.strip() if letter is not None else ""
        try:
            if prefix:
                logger.debug(f"Searching for films starting with letter: {prefix}")
                films = await self.repository.find_by_title_starting_with(prefix)
                logger.debug(f"Found {len(films)} films starting with letter: {prefix}")
            else:
                logger.debug("Retrieving all films (no filter applied)")
                films = await self.repository.find_all_order_by_title()
                logger.debug(f"Found {len(films)} total films")
        except NoResultFound:
            logger.info(f"No films found for search criteria: {letter}")
            films = []
        except IntegrityError as exc:
            logger.error(f"Data integrity violation while searching films with letter: {letter}", exc_info=True)
            raise FilmDataIntegrityError(letter=letter) from exc
        except SQLAlchemyError as exc:
            logger.error(f"Database access error while searching films with letter: {letter}", exc_info=True)
            raise FilmDataAccessError(letter=letter) from exc
        except Exception as exc:
            logger.error(f"Unexpected error while searching films with letter: {letter}", exc_info=True)
            raise FilmQueryError(letter=letter) from exc

        log_film_query(prefix or None, len(films))
        return films


def get_film_service(session: AsyncSession = Depends(get_session)) -> FilmService:
    """Build a ``FilmService`` bound to the request's database session."""
    return FilmService(FilmRepository(session))
