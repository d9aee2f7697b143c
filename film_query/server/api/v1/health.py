"""
Health Check Endpoints.

This module provides basic system status endpoints (health, readiness, version)
used for monitoring and deployment verification.
"""

from fastapi import APIRouter, Response, status

from film_query import __version__
from film_query.core import database
from film_query.server.schemas import HealthStatus, VersionInfo

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthStatus,
    response_model_exclude_none=True,
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check() -> HealthStatus:
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return HealthStatus(status="ok")


@router.get(
    "/health/ready",
    response_model=HealthStatus,
    summary="Readiness Check",
    description="Check that the server can reach its database.",
    response_description="Status object including the database state.",
    responses={503: {"model": HealthStatus, "description": "Database unreachable"}},
)
async def readiness_check(response: Response) -> HealthStatus:
    """
    Readiness endpoint.

    Runs a trivial query against the database. Answers 503 when it fails so
    orchestrators stop routing traffic to this instance.
    """
    if await database.check_connection(database.engine):
        return HealthStatus(status="ok", database="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthStatus(status="unavailable", database="down")


@router.get(
    "/version",
    response_model=VersionInfo,
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version() -> VersionInfo:
    """
    Get API version.

    Returns the current semantic version of the API and supported schema version.
    """
    return VersionInfo(version=__version__, schema_version="v1")
