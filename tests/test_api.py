"""
HTTP API tests.

Exercise the task endpoints through the FastAPI test client.
"""

from fastapi.testclient import TestClient

from tasklist.main import create_app
from tasklist.settings import AppSettings


def _names(payload):
    return [task["name"] for task in payload["tasks"]]


class TestHealthEndpoint:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"]["integrity_check"] == "ok"
        assert data["database"]["pool"]["pool_size"] == 2


class TestTaskListAPI:
    def test_list_empty(self, client):
        response = client.get("/tasks")
        assert response.status_code == 200
        assert response.json() == {"name": None, "tasks": []}

    def test_add_task(self, client):
        response = client.post("/tasks", json={"name": "Buy milk"})
        assert response.status_code == 200
        data = response.json()
        assert data["name"] is None
        assert _names(data) == ["Buy milk"]
        assert isinstance(data["tasks"][0]["id"], int)

    def test_added_tasks_are_listed(self, client):
        client.post("/tasks", json={"name": "one"})
        client.post("/tasks", json={"name": "two"})
        assert _names(client.get("/tasks").json()) == ["one", "two"]

    def test_add_empty_name_is_rejected(self, client):
        response = client.post("/tasks", json={"name": ""})
        assert response.status_code == 422
        data = response.json()
        assert data["success"] is False
        assert data["error"]["error_code"] == 2005
        assert client.get("/tasks").json()["tasks"] == []

    def test_add_without_name_is_rejected(self, client):
        response = client.post("/tasks", json={})
        assert response.status_code == 422

    def test_delete_task(self, client):
        created = client.post("/tasks", json={"name": "Buy milk"}).json()["tasks"][0]
        response = client.delete(f"/tasks/{created['id']}")
        assert response.status_code == 200
        assert response.json()["tasks"] == []

    def test_delete_unparseable_id_keeps_list(self, client):
        before = client.post("/tasks", json={"name": "Buy milk"}).json()
        response = client.delete("/tasks/abc")
        assert response.status_code == 200
        assert response.json()["tasks"] == before["tasks"]

    def test_delete_unknown_id_keeps_list(self, client):
        before = client.post("/tasks", json={"name": "Buy milk"}).json()
        response = client.delete("/tasks/99999")
        assert response.status_code == 200
        assert response.json()["tasks"] == before["tasks"]


class TestGetTaskAPI:
    def test_get_task(self, client):
        created = client.post("/tasks", json={"name": "Buy milk"}).json()["tasks"][0]
        response = client.get(f"/tasks/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_task(self, client):
        response = client.get("/tasks/99999")
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["error_code"] == 1002
        assert error["context"]["task_id"] == 99999

    def test_get_unparseable_id(self, client):
        response = client.get("/tasks/abc")
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["category"] == "validation"
        assert error["context"]["field_value"] == "abc"

    def test_get_oversized_id(self, client):
        response = client.get("/tasks/99999999999999999999")
        assert response.status_code == 400
        assert response.json()["error"]["error_code"] == 2002

    def test_delete_oversized_id_keeps_list(self, client):
        before = client.post("/tasks", json={"name": "Buy milk"}).json()
        response = client.delete("/tasks/99999999999999999999")
        assert response.status_code == 200
        assert response.json()["tasks"] == before["tasks"]


class TestSeparateApps:
    def test_second_app_does_not_close_first_apps_pool(self, client, tmp_path):
        other_settings = AppSettings(_env_file=None, database_path=str(tmp_path / "other.db"), log_format="plain")
        with TestClient(create_app(other_settings)) as other_client:
            assert other_client.get("/tasks").status_code == 200
            response = client.post("/tasks", json={"name": "Buy milk"})
        assert response.status_code == 200
        assert _names(response.json()) == ["Buy milk"]
        assert _names(client.get("/tasks").json()) == ["Buy milk"]


class TestErrorResponses:
    def test_unknown_route(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_method_not_allowed(self, client):
        response = client.put("/tasks")
        assert response.status_code == 405
        assert response.json()["error"]["category"] == "validation"
