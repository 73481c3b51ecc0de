from __future__ import annotations

import logging
import uuid

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from todo_api.api import routes_todos
from todo_api.core.config import Settings
from todo_api.main import create_app


def _boom(*_args, **_kwargs):
    raise OperationalError("SELECT 1", {}, Exception("database is locked"))


def test_list_failure_returns_500(client, monkeypatch) -> None:
    monkeypatch.setattr(routes_todos, "list_todos", _boom)

    resp = client.get("/api/todos")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to retrieve ToDos"}


def test_create_failure_returns_400_without_detail(client, monkeypatch) -> None:
    monkeypatch.setattr(routes_todos, "create_todo", _boom)

    resp = client.post("/api/todos", json={"text": "Buy milk"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Failed to create ToDo"}
    assert "locked" not in resp.text


def test_update_failure_returns_400(client, monkeypatch) -> None:
    monkeypatch.setattr(routes_todos, "update_todo", _boom)

    resp = client.put(f"/api/todos/{uuid.uuid4()}", json={"completed": True})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Failed to update ToDo"}


def test_delete_failure_returns_400(client, monkeypatch) -> None:
    monkeypatch.setattr(routes_todos, "delete_todo", _boom)

    resp = client.delete(f"/api/todos/{uuid.uuid4()}")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Failed to delete ToDo"}


def test_unreachable_store_does_not_block_startup(tmp_path) -> None:
    missing = tmp_path / "no-such-dir" / "todos.db"
    app = create_app(Settings(database_url=f"sqlite:///{missing}"))

    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "ok"}

        resp = client.get("/api/todos")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to retrieve ToDos"}


def test_store_that_comes_up_after_startup_is_used(tmp_path) -> None:
    late_dir = tmp_path / "late"
    app = create_app(Settings(database_url=f"sqlite:///{late_dir / 'todos.db'}"))

    with TestClient(app) as client:
        assert client.get("/api/todos").status_code == 500

        late_dir.mkdir()

        resp = client.post("/api/todos", json={"text": "Buy milk"})
        assert resp.status_code == 201

        resp = client.get("/api/todos")
        assert resp.status_code == 200
        assert [item["text"] for item in resp.json()] == ["Buy milk"]


def test_bad_database_url_does_not_block_startup() -> None:
    app = create_app(Settings(database_url="no-such-dialect://somewhere/todos"))

    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "ok"}

        resp = client.get("/api/todos")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to retrieve ToDos"}

        resp = client.post("/api/todos", json={"text": "Buy milk"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Failed to create ToDo"}


def test_malformed_id_is_logged_without_traceback(client, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="todo_api.api.routes_todos"):
        assert client.put("/api/todos/not-an-id", json={"completed": True}).status_code == 400
        assert client.delete("/api/todos/not-an-id").status_code == 400

    records = [r for r in caplog.records if r.name == "todo_api.api.routes_todos"]
    assert len(records) == 2
    assert all(r.levelno == logging.INFO for r in records)
    assert all(r.exc_info is None for r in records)


def test_store_failure_is_logged_with_traceback(client, monkeypatch, caplog) -> None:
    monkeypatch.setattr(routes_todos, "delete_todo", _boom)

    with caplog.at_level(logging.INFO, logger="todo_api.api.routes_todos"):
        client.delete(f"/api/todos/{uuid.uuid4()}")

    records = [r for r in caplog.records if r.name == "todo_api.api.routes_todos"]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].exc_info is not None
