"""
API Schemas.

This module contains Pydantic models used for API response validation.
These schemas define the interface contract between the client and the server.
"""

from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from film_query.core.database.entities import Film


class FilmItem(BaseModel):
    """
    A single film in a query result.

    Exposes the database identifier under its column name, ``film_id``.
    """

    film_id: int = Field(..., description="Unique identifier of the film.", examples=[1])
    title: str = Field(..., description="Title of the film.", examples=["ACADEMY DINOSAUR"])

    model_config = ConfigDict(from_attributes=True)


class FilmResponse(BaseModel):
    """
    Response body of the film query endpoint.

    ``count`` is always the length of ``films``. ``filter`` holds the applied
    query parameters and is empty when the full catalogue was requested.
    """

    films: List[FilmItem] = Field(default_factory=list, description="Films matching the query, ordered by title.")
    count: int = Field(..., ge=0, description="Number of films returned.")
    filter: Dict[str, str] = Field(
        default_factory=dict,
        description="Applied filter parameters.",
        examples=[{"startsWith": "A"}, {}],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "films": [
                    {"film_id": 1, "title": "ACADEMY DINOSAUR"},
                    {"film_id": 8, "title": "AIRPORT POLLOCK"},
                ],
                "count": 2,
                "filter": {"startsWith": "A"},
            }
        }
    )

    @classmethod
    def from_entities(cls, films: Sequence[Film], filter: Optional[Dict[str, str]] = None) -> "FilmResponse":
        """Build a response from film entities, deriving ``count`` from the list."""
        items = [FilmItem.model_validate(film) for film in films]
        return cls(films=items, count=len(items), filter=filter or {})


class ProblemDetail(BaseModel):
    """
    RFC 7807 problem details body returned for 4xx and 5xx responses.

    ``errorId`` is only present on internal errors; clients quote it when
    reporting an issue so it can be matched against the server log.
    """

    type: str = Field(..., description="URI identifying the problem type.")
    title: str = Field(..., description="Short summary of the problem type.")
    status: int = Field(..., description="HTTP status code.")
    detail: str = Field(..., description="Explanation specific to this occurrence.")
    instance: str = Field(..., description="Request path that produced the problem.")
    timestamp: str = Field(..., description="ISO-8601 UTC time the problem occurred.")
    errorId: Optional[str] = Field(default=None, description="Correlation identifier for internal errors.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "https://example.com/problems/invalid-parameter",
                "title": "Invalid Parameter",
                "status": 400,
                "detail": "Parameter 'startsWith' must be a single letter (A-Z)",
                "instance": "/api/v1/films",
                "timestamp": "2024-01-15T10:30:00+00:00",
            }
        }
    )


class HealthStatus(BaseModel):
    """Liveness and readiness status."""

    status: str = Field(..., examples=["ok"])
    database: Optional[str] = Field(default=None, examples=["up", "down"])


class VersionInfo(BaseModel):
    """Version information of the running server."""

    version: str
    schema_version: str
