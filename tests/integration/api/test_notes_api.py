"""
Integration Tests for the Notes API.

Drives notes through archive, trash and restore over HTTP and checks
which list each one shows up in.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration

NOTES = "/api/v1/notes"


async def _create(client: AsyncClient, title: str = "Groceries", content: str = "milk") -> dict:
    response = await client.post(NOTES, json={"title": title, "content": content})
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def _ids(client: AsyncClient, path: str) -> list[str]:
    response = await client.get(path)
    assert response.status_code == 200, response.text
    return [note["id"] for note in response.json()["data"]]


class TestCreateAndList:
    """Tests for note creation and the active list."""

    @pytest.mark.asyncio
    async def test_create_note(self, client: AsyncClient, api):
        response = await client.post(NOTES, json={"title": "Groceries", "content": "milk"})

        data = api.assert_success(response, 201)
        note = data["data"]
        assert note["title"] == "Groceries"
        assert note["content"] == "milk"
        assert note["is_archived"] is False
        assert note["deleted_at"] is None
        assert note["state"] == "active"
        assert data["metadata"]["request_id"]

    @pytest.mark.asyncio
    async def test_create_empty_note(self, client: AsyncClient, api):
        data = api.assert_success(await client.post(NOTES, json={}), 201)
        assert data["data"]["title"] is None

    @pytest.mark.asyncio
    async def test_title_too_long(self, client: AsyncClient, api):
        response = await client.post(NOTES, json={"title": "x" * 256})
        api.assert_error(response, 422, "VAL_REQUEST_INVALID")

    @pytest.mark.asyncio
    async def test_new_note_is_listed(self, client: AsyncClient):
        note = await _create(client)
        assert note["id"] in await _ids(client, NOTES)

    @pytest.mark.asyncio
    async def test_get_note(self, client: AsyncClient, api):
        note = await _create(client)

        data = api.assert_success(await client.get(f"{NOTES}/{note['id']}"))

        assert data["data"]["id"] == note["id"]

    @pytest.mark.asyncio
    async def test_get_missing_note(self, client: AsyncClient, api):
        api.assert_error(await client.get(f"{NOTES}/nonexistent"), 404, "RES_NOT_FOUND")


class TestArchive:
    """Tests for archive and unarchive."""

    @pytest.mark.asyncio
    async def test_archive_moves_note_to_archive_list(self, client: AsyncClient, api):
        note = await _create(client)

        data = api.assert_success(await client.patch(f"{NOTES}/{note['id']}/archive"))

        assert data["data"]["is_archived"] is True
        assert data["data"]["state"] == "archived"
        assert note["id"] not in await _ids(client, NOTES)
        assert note["id"] in await _ids(client, "/api/v1/archived-notes")

    @pytest.mark.asyncio
    async def test_unarchive_returns_note_to_active_list(self, client: AsyncClient, api):
        note = await _create(client)
        await client.patch(f"{NOTES}/{note['id']}/archive")

        data = api.assert_success(await client.patch(f"{NOTES}/{note['id']}/unarchive"))

        assert data["data"]["is_archived"] is False
        assert note["id"] in await _ids(client, NOTES)
        assert note["id"] not in await _ids(client, "/api/v1/archived-notes")

    @pytest.mark.asyncio
    async def test_archive_twice(self, client: AsyncClient, api):
        note = await _create(client)
        await client.patch(f"{NOTES}/{note['id']}/archive")

        data = api.assert_success(await client.patch(f"{NOTES}/{note['id']}/archive"))

        assert data["data"]["is_archived"] is True

    @pytest.mark.asyncio
    async def test_archive_missing_note(self, client: AsyncClient, api):
        api.assert_error(await client.patch(f"{NOTES}/nonexistent/archive"), 404)


class TestTrashAndRestore:
    """Tests for soft delete and restore."""

    @pytest.mark.asyncio
    async def test_delete_moves_note_to_trash(self, client: AsyncClient, api):
        note = await _create(client)

        data = api.assert_success(await client.delete(f"{NOTES}/{note['id']}"))

        assert data["data"]["deleted_at"] is not None
        assert data["data"]["state"] == "trashed"
        assert note["id"] not in await _ids(client, NOTES)
        assert note["id"] in await _ids(client, "/api/v1/trash")

    @pytest.mark.asyncio
    async def test_trashed_archived_note_leaves_archive_list(self, client: AsyncClient):
        note = await _create(client)
        await client.patch(f"{NOTES}/{note['id']}/archive")

        await client.delete(f"{NOTES}/{note['id']}")

        assert note["id"] not in await _ids(client, "/api/v1/archived-notes")
        assert note["id"] in await _ids(client, "/api/v1/trash")

    @pytest.mark.asyncio
    async def test_restore_returns_note_to_active_list(self, client: AsyncClient, api):
        note = await _create(client)
        await client.delete(f"{NOTES}/{note['id']}")

        data = api.assert_success(await client.patch(f"{NOTES}/{note['id']}/restore"))

        assert data["data"]["deleted_at"] is None
        assert note["id"] in await _ids(client, NOTES)
        assert note["id"] not in await _ids(client, "/api/v1/trash")

    @pytest.mark.asyncio
    async def test_restore_active_note_is_rejected(self, client: AsyncClient, api):
        note = await _create(client)

        data = api.assert_error(
            await client.patch(f"{NOTES}/{note['id']}/restore"),
            400,
            "VAL_INVALID_TRANSITION",
        )

        assert data["error"]["message"] == "Note is not deleted"
        assert note["id"] in await _ids(client, NOTES)

    @pytest.mark.asyncio
    async def test_delete_missing_note(self, client: AsyncClient, api):
        api.assert_error(await client.delete(f"{NOTES}/nonexistent"), 404, "RES_NOT_FOUND")

    @pytest.mark.asyncio
    async def test_restore_missing_note(self, client: AsyncClient, api):
        api.assert_error(await client.patch(f"{NOTES}/nonexistent/restore"), 404, "RES_NOT_FOUND")


class TestRootAndHealth:
    @pytest.mark.asyncio
    async def test_root_banner(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json() == {"message": "API is running..."}

    @pytest.mark.asyncio
    async def test_liveness(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_request_id_header_is_echoed(self, client: AsyncClient):
        response = await client.get(NOTES, headers={"X-Request-ID": "req-abc"})

        assert response.headers["X-Request-ID"] == "req-abc"
        assert response.json()["metadata"]["request_id"] == "req-abc"
