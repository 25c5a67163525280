"""Integration tests for Actions and Multi-step Actions API."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


@pytest.fixture
async def space_id(api_client: AsyncClient) -> str:
    response = await api_client.post("/api/v1/spaces", json={"name": "Garage"})
    return response.json()["data"]["id"]


class TestActionsAPI:
    @pytest.mark.asyncio
    async def test_create_action(self, api_client: AsyncClient, space_id: str) -> None:
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/actions",
            json={"name": "Sweep", "points": 10, "description": "Whole floor"},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Sweep"
        assert data["points"] == 10
        assert data["space_id"] == space_id

    @pytest.mark.asyncio
    async def test_non_positive_points_become_one(
        self, api_client: AsyncClient, space_id: str
    ) -> None:
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/actions", json={"name": "Sweep", "points": -5}
        )

        assert response.json()["data"]["points"] == 1

    @pytest.mark.asyncio
    async def test_update_and_list(self, api_client: AsyncClient, space_id: str) -> None:
        created = await api_client.post(
            f"/api/v1/spaces/{space_id}/actions", json={"name": "Sweep", "points": 10}
        )
        action_id = created.json()["data"]["id"]

        response = await api_client.patch(
            f"/api/v1/spaces/{space_id}/actions/{action_id}", json={"points": 15}
        )
        assert response.status_code == 200
        assert response.json()["data"]["points"] == 15

        listed = await api_client.get(f"/api/v1/spaces/{space_id}/actions")
        assert [(a["name"], a["points"]) for a in listed.json()["data"]] == [("Sweep", 15)]

    @pytest.mark.asyncio
    async def test_delete_action(self, api_client: AsyncClient, space_id: str) -> None:
        created = await api_client.post(
            f"/api/v1/spaces/{space_id}/actions", json={"name": "Sweep", "points": 10}
        )
        action_id = created.json()["data"]["id"]

        response = await api_client.delete(f"/api/v1/spaces/{space_id}/actions/{action_id}")
        assert response.status_code == 204

        response = await api_client.delete(f"/api/v1/spaces/{space_id}/actions/{action_id}")
        assert response.status_code == 404
        assert response.json()["error_code"] == "ACTION_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_actions_of_missing_space(self, api_client: AsyncClient) -> None:
        response = await api_client.get(f"/api/v1/spaces/{uuid4()}/actions")

        assert response.status_code == 404


class TestMultiStepActionsAPI:
    @pytest.mark.asyncio
    async def test_create_multi_step_action(
        self, api_client: AsyncClient, space_id: str
    ) -> None:
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/multi-step-actions",
            json={"name": "Tidy", "points_per_step": 3, "steps": ["Clear", "Wipe", "Stack"]},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert [s["name"] for s in data["steps"]] == ["Clear", "Wipe", "Stack"]
        assert data["current_step_index"] == 0
        assert data["is_complete"] is False

    @pytest.mark.asyncio
    async def test_create_without_steps(self, api_client: AsyncClient, space_id: str) -> None:
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/multi-step-actions",
            json={"name": "Tidy", "points_per_step": 3, "steps": []},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_with_blank_steps_only(
        self, api_client: AsyncClient, space_id: str
    ) -> None:
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/multi-step-actions",
            json={"name": "Tidy", "points_per_step": 3, "steps": [" "]},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_and_delete(self, api_client: AsyncClient, space_id: str) -> None:
        created = await api_client.post(
            f"/api/v1/spaces/{space_id}/multi-step-actions",
            json={"name": "Tidy", "steps": ["Clear"]},
        )
        msa_id = created.json()["data"]["id"]
        url = f"/api/v1/spaces/{space_id}/multi-step-actions/{msa_id}"

        assert (await api_client.get(url)).json()["data"]["points_per_step"] == 1
        assert (await api_client.delete(url)).status_code == 204

        response = await api_client.get(url)
        assert response.status_code == 404
        assert response.json()["error_code"] == "MULTI_STEP_ACTION_NOT_FOUND"
