"""
Unit tests for LogfireMiddleware.
"""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from film_query.server.middleware import LogfireMiddleware

MIDDLEWARE_MODULE = "film_query.server.middleware.logfire_middleware"


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(LogfireMiddleware)

    @app.get("/ok")
    async def ok():
        return {"status": "ok"}

    @app.get("/missing")
    async def missing():
        from fastapi import HTTPException

        raise HTTPException(status_code=404, detail="not here")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app


@pytest.fixture
async def client(app: FastAPI):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://localhost") as ac:
        yield ac


class TestLogfireMiddleware:
    """Test request tracing."""

    async def test_adds_process_time_header(self, client: AsyncClient):
        response = await client.get("/ok")

        assert response.status_code == 200
        assert float(response.headers["X-Process-Time"]) >= 0

    async def test_reports_request_to_monitoring(self, client: AsyncClient):
        with patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log:
            await client.get("/missing")

        mock_log.assert_called_once()
        kwargs = mock_log.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/missing"
        assert kwargs["status_code"] == 404
        assert kwargs["duration_ms"] >= 0

    async def test_failed_request_is_reported_as_500_and_reraised(self, client: AsyncClient):
        with (
            patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log,
            patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger,
        ):
            response = await client.get("/boom")

        assert response.status_code == 500
        assert mock_log.call_args.kwargs["status_code"] == 500
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["extra"]["error"] == "boom"

    async def test_slow_request_logs_warning(self, client: AsyncClient):
        with (
            patch(f"{MIDDLEWARE_MODULE}.SLOW_REQUEST_THRESHOLD_MS", -1),
            patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger,
        ):
            await client.get("/ok")

        mock_logger.warning.assert_called_once()
        assert "Slow API request: GET /ok" in mock_logger.warning.call_args[0][0]

    async def test_fast_request_does_not_warn(self, client: AsyncClient):
        with patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger:
            await client.get("/ok")

        mock_logger.warning.assert_not_called()
