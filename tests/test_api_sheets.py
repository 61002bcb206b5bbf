"""HTTP tests for the sheet and revision endpoints."""
import uuid

from sqlalchemy import func, select

from sheetcollab.core.config import settings
from sheetcollab.core.errors import PersistenceError
from sheetcollab.core.security import read_session_token
from sheetcollab.db.models import Revision as RevisionModel
from sheetcollab.db.models import Sheet as SheetModel
from sheetcollab.db.repositories import SheetRepository


async def _create(client, data=None, name="S1") -> dict:
    response = await client.post("/api/sheet/create", json={"name": name, "data": data if data is not None else {"x": 1}})
    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "SheetSuccess", body
    return body["data"]


async def _revision_data(client, revision_id) -> dict:
    response = await client.get(f"/api/revision/get/{revision_id}")
    body = response.json()
    assert body["type"] == "RevisionInfo", body
    return body["data"]


class TestCreateAndRead:

    async def test_create_returns_populated_sheet(self, client, user_id):
        sheet = await _create(client)

        assert sheet["name"] == "S1"
        assert sheet["owners"] == [{"uuid": str(user_id), "name": f"user-{user_id.hex[:8]}"}]
        assert sheet["collaborators"] == []
        assert len(sheet["chat_channels"]) == 1
        assert len(sheet["revisions"]) == 1

        revision = await _revision_data(client, sheet["revisions"][0])
        assert revision["data"] == {"x": 1}
        assert revision["sheet_id"] == sheet["uuid"]
        assert revision["comment"] == {"message": "initial commit", "by": f"user-{user_id.hex[:8]}"}

    async def test_get_sheet(self, client):
        created = await _create(client)

        response = await client.get(f"/api/sheet/get/{created['uuid']}")
        body = response.json()

        assert body["type"] == "SheetInfo"
        assert body["status"] == "info"
        assert body["data"]["uuid"] == created["uuid"]
        assert body["data"]["owners"] == created["owners"]

    async def test_serialized_content_is_decoded(self, client):
        sheet = await _create(client, data='{"cells": [["a", "b"]]}')
        revision = await _revision_data(client, sheet["revisions"][0])
        assert revision["data"] == {"cells": [["a", "b"]]}

    async def test_malformed_content_is_parse_error(self, client, db_session):
        response = await client.post("/api/sheet/create", json={"name": "S1", "data": "{broken"})
        body = response.json()

        assert response.status_code == 200
        assert body["type"] == "ParseError"
        assert body["status"] == "error"
        result = await db_session.execute(select(func.count()).select_from(SheetModel))
        assert result.scalar() == 0

    async def test_nan_content_is_parse_error(self, client, db_session):
        response = await client.post("/api/sheet/create", json={"name": "S1", "data": '{"x": NaN}'})
        body = response.json()

        assert body["type"] == "ParseError"
        for model in (SheetModel, RevisionModel):
            result = await db_session.execute(select(func.count()).select_from(model))
            assert result.scalar() == 0

    async def test_invalid_body_is_parse_error(self, client):
        response = await client.post("/api/sheet/create", json={"name": 123})
        body = response.json()

        assert response.status_code == 200
        assert body["type"] == "ParseError"
        assert body["status"] == "error"

    async def test_missing_sheet(self, client):
        response = await client.get(f"/api/sheet/get/{uuid.uuid4()}")
        assert response.json() == {"type": "SheetError", "status": "error", "message": "no such sheet"}

    async def test_invalid_sheet_id_is_missing_sheet(self, client):
        response = await client.get("/api/sheet/get/not-an-id")
        assert response.json()["message"] == "no such sheet"

    async def test_missing_revision(self, client):
        response = await client.get(f"/api/revision/get/{uuid.uuid4()}")
        assert response.json() == {"type": "RevisionError", "status": "error", "message": "no such revision"}


class TestRevisionWorkflow:

    async def test_edit_revert_and_duplicate(self, client, user_id):
        created = await _create(client, data={"x": 1})
        sheet_id = created["uuid"]
        first_revision = created["revisions"][0]

        response = await client.post(f"/api/sheet/update/{sheet_id}/", json={"data": {"x": 2}, "message": "edit"})
        updated = response.json()
        assert updated["type"] == "SheetSuccess"
        assert len(updated["data"]["revisions"]) == 2

        response = await client.post(f"/api/sheet/reverse/{sheet_id}/", json={"revision": first_revision})
        reverted = response.json()
        assert reverted["type"] == "SheetSuccess"
        assert len(reverted["data"]["revisions"]) == 3

        response = await client.post(f"/api/sheet/revision/{sheet_id}/")
        duplicated = response.json()
        assert duplicated["type"] == "SheetSuccess"
        assert duplicated["data"]["owners"] == [str(user_id)]

        response = await client.get(f"/api/sheet/history/{sheet_id}")
        history = response.json()
        assert history["type"] == "SheetHistoryInfo"
        assert history["data"]["total"] == 4

        revisions = history["data"]["revisions"]
        assert [revision["data"]["x"] for revision in revisions] == [1, 2, 1, 1]
        assert [revision["uuid"] for revision in revisions] == duplicated["data"]["revisions"]
        assert revisions[1]["comment"]["message"] == "edit"
        assert revisions[2]["comment"] == {
            "message": f"cloned from revision {first_revision}",
            "by": created["owners"][0]["name"],
        }
        assert revisions[3]["comment"]["message"] == f"cloned from revision {revisions[2]['uuid']}"

    async def test_update_with_id_in_body(self, client):
        created = await _create(client)

        response = await client.post("/api/sheet/update/", json={"id": created["uuid"], "data": [1, 2, 3], "message": "list"})
        body = response.json()

        assert body["type"] == "SheetSuccess"
        revision = await _revision_data(client, body["data"]["revisions"][-1])
        assert revision["data"] == [1, 2, 3]

    async def test_write_response_matches_stored_sheet(self, client):
        created = await _create(client)

        response = await client.post(f"/api/sheet/update/{created['uuid']}/", json={"data": {"x": 2}, "message": "edit"})
        written = response.json()["data"]

        response = await client.get(f"/api/sheet/get/{created['uuid']}")
        stored = response.json()["data"]

        assert written["updated_at"] == stored["updated_at"]
        assert written["created_at"] == stored["created_at"]
        assert written["revisions"] == stored["revisions"]

    async def test_update_with_numeric_id_in_body(self, client):
        response = await client.post("/api/sheet/update/", json={"id": 5, "data": {"x": 2}})
        assert response.json() == {"type": "SheetError", "status": "error", "message": "no such sheet"}

    async def test_reverse_with_numeric_revision(self, client):
        created = await _create(client)

        response = await client.post(f"/api/sheet/reverse/{created['uuid']}/", json={"revision": 7})
        assert response.json() == {"type": "SheetError", "status": "error", "message": "no such revision"}

    async def test_update_without_id(self, client):
        response = await client.post("/api/sheet/update/", json={"data": {"x": 2}})
        assert response.json() == {"type": "SheetError", "status": "error", "message": "no such sheet"}

    async def test_update_with_malformed_content(self, client):
        created = await _create(client)

        response = await client.post(f"/api/sheet/update/{created['uuid']}/", json={"data": "[1,"})
        assert response.json()["type"] == "ParseError"

        response = await client.get(f"/api/sheet/get/{created['uuid']}")
        assert len(response.json()["data"]["revisions"]) == 1

    async def test_reverse_to_missing_revision(self, client):
        created = await _create(client)

        response = await client.post(f"/api/sheet/reverse/{created['uuid']}/", json={"revision": str(uuid.uuid4())})
        assert response.json() == {"type": "SheetError", "status": "error", "message": "no such revision"}

    async def test_reverse_to_revision_of_other_sheet(self, client):
        target = await _create(client, name="target")
        other = await _create(client, name="other")

        response = await client.post(
            f"/api/sheet/reverse/{target['uuid']}/",
            json={"revision": other["revisions"][0]}
        )
        assert response.json() == {
            "type": "SheetError",
            "status": "error",
            "message": "revision is not in revisions of target sheet",
        }

        for sheet in (target, other):
            response = await client.get(f"/api/sheet/get/{sheet['uuid']}")
            assert len(response.json()["data"]["revisions"]) == 1

    async def test_duplicate_on_missing_sheet(self, client):
        response = await client.post(f"/api/sheet/revision/{uuid.uuid4()}/")
        assert response.json()["type"] == "SheetError"

    async def test_history_of_missing_sheet(self, client):
        response = await client.get(f"/api/sheet/history/{uuid.uuid4()}")
        assert response.json()["type"] == "SheetError"

    async def test_storage_failure_is_database_error(self, client, monkeypatch):
        created = await _create(client)

        async def broken_update(self, sheet):
            raise PersistenceError("connection lost")

        monkeypatch.setattr(SheetRepository, "update", broken_update)

        response = await client.post(f"/api/sheet/revision/{created['uuid']}/")
        assert response.json() == {"type": "DatabaseError", "status": "error", "message": "connection lost"}


class TestSession:

    async def test_new_visitor_gets_session_cookie(self, anonymous_client):
        response = await anonymous_client.post("/api/sheet/create", json={"name": "S1", "data": {"x": 1}})
        body = response.json()

        token = response.cookies[settings.session_cookie_name]
        assert str(read_session_token(token)) == body["data"]["owners"][0]["uuid"]

    async def test_session_user_is_reused(self, client, user_id):
        first = await _create(client, name="first")
        second = await _create(client, name="second")
        assert first["owners"] == second["owners"]
        assert first["owners"][0]["uuid"] == str(user_id)


class TestHealth:

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
