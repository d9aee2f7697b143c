"""Business logic and service layer."""

from .film_service import FilmService, get_film_service

__all__ = ["FilmService", "get_film_service"]
