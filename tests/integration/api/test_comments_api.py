"""Integration tests for Comments API."""

import pytest
from httpx import AsyncClient


@pytest.fixture
async def space_id(api_client: AsyncClient) -> str:
    response = await api_client.post("/api/v1/spaces", json={"name": "Garage"})
    return response.json()["data"]["id"]


class TestCommentsAPI:
    @pytest.mark.asyncio
    async def test_add_and_list(self, api_client: AsyncClient, space_id: str) -> None:
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/comments", json={"text": "Halfway there"}
        )
        assert response.status_code == 201

        listed = await api_client.get(f"/api/v1/spaces/{space_id}/comments")

        assert listed.status_code == 200
        comments = listed.json()["data"]
        assert len(comments) == 1
        assert comments[0]["text"] == "Halfway there"
        assert comments[0]["image_url"] is None

    @pytest.mark.asyncio
    async def test_image_only_comment(self, api_client: AsyncClient, space_id: str) -> None:
        response = await api_client.post(
            f"/api/v1/spaces/{space_id}/comments", json={"image_url": "https://img/a.png"}
        )

        assert response.status_code == 201
        assert response.json()["data"]["text"] == ""

    @pytest.mark.asyncio
    async def test_empty_comment_rejected(self, api_client: AsyncClient, space_id: str) -> None:
        response = await api_client.post(f"/api/v1/spaces/{space_id}/comments", json={})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_comment(self, api_client: AsyncClient, space_id: str) -> None:
        created = await api_client.post(
            f"/api/v1/spaces/{space_id}/comments", json={"text": "Remove me"}
        )
        comment_id = created.json()["data"]["id"]

        response = await api_client.delete(f"/api/v1/spaces/{space_id}/comments/{comment_id}")
        assert response.status_code == 204

        response = await api_client.delete(f"/api/v1/spaces/{space_id}/comments/{comment_id}")
        assert response.status_code == 404
        assert response.json()["error_code"] == "COMMENT_NOT_FOUND"
