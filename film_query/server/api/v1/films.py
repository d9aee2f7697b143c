"""
Film Query Endpoints.

This module exposes the read-only film catalogue. Clients can list every film
or only the films whose title starts with a given letter.
"""

from typing import Dict, Optional

from fastapi import APIRouter, Query

from film_query.core.errors import InvalidParameterError
from film_query.core.logging_config import get_logger
from film_query.server.core import constant
from film_query.server.schemas import FilmResponse, ProblemDetail
from film_query.server.services.deps import FilmServiceDep

logger = get_logger(__name__)

router = APIRouter()

STARTS_WITH = "startsWith"
EMPTY_PARAMETER_DETAIL = f"Parameter '{STARTS_WITH}' cannot be empty"
NOT_A_LETTER_DETAIL = f"Parameter '{STARTS_WITH}' must be a single letter (A-Z)"


def _invalid_parameter_example(summary: str, detail: str) -> dict:
    return {
        "summary": summary,
        "value": {
            "type": constant.PROBLEM_TYPE_INVALID_PARAMETER,
            "title": "Invalid Parameter",
            "status": 400,
            "detail": detail,
            "instance": f"{constant.API_V1_STR}/films",
            "timestamp": "2024-01-15T10:30:00+00:00",
        },
    }


def validate_starts_with(starts_with: Optional[str]) -> Optional[str]:
    """
    Validate the ``startsWith`` query parameter.

    Surrounding whitespace is ignored. The remaining value must be exactly one
    alphabetic character.

    Returns:
        The trimmed letter, or None when the parameter was not supplied.

    Raises:
        InvalidParameterError: The parameter is empty, longer than one
            character, or not a letter.
    """
    if starts_with is None:
        return None

    trimmed = starts_with.strip()
    if not trimmed:
        raise InvalidParameterError(EMPTY_PARAMETER_DETAIL, parameter=STARTS_WITH)
    if len(trimmed) != 1 or not trimmed.isalpha():
        raise InvalidParameterError(NOT_A_LETTER_DETAIL, parameter=STARTS_WITH)
    return trimmed


@router.get(
    "",
    response_model=FilmResponse,
    summary="Query films by starting letter",
    description="""
Retrieves films from the Sakila catalogue whose title starts with the given letter.

- **Without parameter**: returns every film.
- **With `startsWith`**: returns films whose title starts with that letter.
- **Case handling**: `A` and `a` return the same films.
- **Ordering**: results are ordered by title.
""",
    operation_id="getFilmsByStartingLetter",
    response_description="Films matching the query, their count and the applied filter.",
    responses={
        200: {
            "description": "Films retrieved successfully",
            "content": {
                "application/json": {
                    "examples": {
                        "startsWithA": {
                            "summary": "Films starting with A",
                            "value": {
                                "films": [
                                    {"film_id": 1, "title": "ACADEMY DINOSAUR"},
                                    {"film_id": 8, "title": "AIRPORT POLLOCK"},
                                ],
                                "count": 2,
                                "filter": {"startsWith": "A"},
                            },
                        },
                        "noFilter": {
                            "summary": "All films",
                            "value": {
                                "films": [{"film_id": 1, "title": "ACADEMY DINOSAUR"}],
                                "count": 1,
                                "filter": {},
                            },
                        },
                        "empty": {
                            "summary": "No matching films",
                            "value": {"films": [], "count": 0, "filter": {"startsWith": "Q"}},
                        },
                    }
                }
            },
        },
        400: {
            "model": ProblemDetail,
            "description": "The startsWith parameter is not a single letter",
            "content": {
                constant.PROBLEM_JSON_MEDIA_TYPE: {
                    "examples": {
                        "multipleCharacters": _invalid_parameter_example("Multiple characters", NOT_A_LETTER_DETAIL),
                        "numeric": _invalid_parameter_example("Numeric value", NOT_A_LETTER_DETAIL),
                        "empty": _invalid_parameter_example("Empty or whitespace", EMPTY_PARAMETER_DETAIL),
                    }
                }
            },
        },
        500: {"model": ProblemDetail, "description": "Unexpected server error"},
    },
)
async def get_films(
    film_service: FilmServiceDep,
    starts_with: Optional[str] = Query(
        default=None,
        alias=STARTS_WITH,
        description="Filter films by their starting letter. Single letter A-Z, case-insensitive.",
        examples=["A"],
        json_schema_extra={"pattern": "^[A-Za-z]$", "minLength": 1, "maxLength": 1},
    ),
) -> FilmResponse:
    """
    List films, optionally filtered by the first letter of their title.

    The applied filter is echoed back exactly as the client sent it.
    """
    letter = validate_starts_with(starts_with)

    films = await film_service.find_films_by_starting_letter(letter)

    applied_filter: Dict[str, str] = {}
    if letter is not None:
        applied_filter[STARTS_WITH] = starts_with

    return FilmResponse.from_entities(films, applied_filter)
