"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from api.exception_handlers import setup_exception_handlers
from core.exceptions import InvalidMultiplierError, PersistenceError, SpaceNotFoundError


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


async def _get(app: FastAPI, path: str):  # type: ignore[no-untyped-def]
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_app_exception_returns_error_code_and_message(self) -> None:
        app = _create_test_app()

        @app.get("/raise-app")
        async def _() -> None:
            raise SpaceNotFoundError("some-id")

        response = await _get(app, "/raise-app")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "SPACE_NOT_FOUND"
        assert "some-id" in body["message"]
        assert body["details"]["space_id"] == "some-id"

    @pytest.mark.asyncio
    async def test_invalid_multiplier_lists_allowed_values(self) -> None:
        app = _create_test_app()

        @app.get("/raise-multiplier")
        async def _() -> None:
            raise InvalidMultiplierError(3, (1, 2, 5, 10))

        response = await _get(app, "/raise-multiplier")

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "INVALID_MULTIPLIER"
        assert body["details"] == {"multiplier": 3, "allowed": [1, 2, 5, 10]}

    @pytest.mark.asyncio
    async def test_persistence_error_returns_503(self) -> None:
        app = _create_test_app()

        @app.get("/raise-persistence")
        async def _() -> None:
            raise PersistenceError("clock_in", "space-1", "disk full")

        response = await _get(app, "/raise-persistence")

        assert response.status_code == 503
        body = response.json()
        assert body["error_code"] == "DATABASE_ERROR"
        assert body["details"]["operation"] == "clock_in"
        assert "clock in" in body["message"]

    @pytest.mark.asyncio
    async def test_sqlalchemy_error_returns_503(self) -> None:
        app = _create_test_app()

        @app.get("/raise-db")
        async def _() -> None:
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

        response = await _get(app, "/raise-db")

        assert response.status_code == 503
        assert response.json()["error_code"] == "DATABASE_ERROR"

    @pytest.mark.asyncio
    async def test_http_exception_returns_standard_format(self) -> None:
        from starlette.exceptions import HTTPException

        app = _create_test_app()

        @app.get("/raise-http")
        async def _() -> None:
            raise HTTPException(status_code=405, detail="Method Not Allowed")

        response = await _get(app, "/raise-http")

        assert response.status_code == 405
        body = response.json()
        assert body["error_code"] == "HTTP_ERROR"
        assert body["message"] == "Method Not Allowed"

    @pytest.mark.asyncio
    async def test_validation_error_returns_field_details(self) -> None:
        from pydantic import BaseModel, Field

        app = _create_test_app()

        class Body(BaseModel):
            name: str = Field(..., min_length=1)

        @app.post("/validate")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={"name": ""})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"][0]["field"] == "body.name"

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500(self) -> None:
        app = _create_test_app()

        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        handler = app.exception_handlers.get(Exception)
        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, RuntimeError("Something went wrong"))  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["details"]["request_id"] == "test-req-id"
