"""Integration tests for To-dos API."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


@pytest.fixture
async def space_id(api_client: AsyncClient) -> str:
    response = await api_client.post("/api/v1/spaces", json={"name": "Garage"})
    return response.json()["data"]["id"]


class TestTodosAPI:
    """Integration tests for To-dos API."""

    @pytest.mark.asyncio
    async def test_create_todo(self, api_client: AsyncClient, space_id: str) -> None:
        """Test POST /api/v1/spaces/{id}/todos."""
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/todos",
            json={"description": "Sweep the floor", "before_image": "https://img/b.png"},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["description"] == "Sweep the floor"
        assert data["completed"] is False
        assert data["before_image"] == "https://img/b.png"
        assert data["space_id"] == space_id

    @pytest.mark.asyncio
    async def test_create_todo_validation_error(
        self, api_client: AsyncClient, space_id: str
    ) -> None:
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/todos", json={"description": ""}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_list_todos_oldest_first(self, api_client: AsyncClient, space_id: str) -> None:
        for description in ("First", "Second"):
            await api_client.post(
                f"/api/v1/spaces/{space_id}/todos", json={"description": description}
            )

        response = await api_client.get(f"/api/v1/spaces/{space_id}/todos")

        assert response.status_code == 200
        assert [t["description"] for t in response.json()["data"]] == ["First", "Second"]

    @pytest.mark.asyncio
    async def test_complete_todo(self, api_client: AsyncClient, space_id: str) -> None:
        created = await api_client.post(
            f"/api/v1/spaces/{space_id}/todos", json={"description": "Sweep"}
        )
        todo_id = created.json()["data"]["id"]

        response = await api_client.patch(
            f"/api/v1/spaces/{space_id}/todos/{todo_id}",
            json={"completed": True, "after_image": "https://img/a.png"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["completed"] is True
        assert data["after_image"] == "https://img/a.png"
        assert data["description"] == "Sweep"

    @pytest.mark.asyncio
    async def test_update_todo_not_found(self, api_client: AsyncClient, space_id: str) -> None:
        response = await api_client.patch(
            f"/api/v1/spaces/{space_id}/todos/{uuid4()}", json={"completed": True}
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "TODO_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_todo(self, api_client: AsyncClient, space_id: str) -> None:
        created = await api_client.post(
            f"/api/v1/spaces/{space_id}/todos", json={"description": "Sweep"}
        )
        todo_id = created.json()["data"]["id"]

        response = await api_client.delete(f"/api/v1/spaces/{space_id}/todos/{todo_id}")

        assert response.status_code == 204
        listed = await api_client.get(f"/api/v1/spaces/{space_id}/todos")
        assert listed.json()["data"] == []
