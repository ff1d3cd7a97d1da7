from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from pathgrammar.api.app import create_app
from pathgrammar.core.config import get_settings


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setenv("PATHGRAMMAR_CURRENT_DIRECTORY", "C:\\work")
    monkeypatch.setenv("PATHGRAMMAR_ENVIRONMENT", "test")
    get_settings.cache_clear()
    with TestClient(create_app()) as test_client:
        yield test_client
    get_settings.cache_clear()


def test_health(client: TestClient) -> None:
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["current_directory"] == "C:\\work"


def test_root_analysis(client: TestClient) -> None:
    response = client.post("/api/v1/paths/root", json={"path": "\\\\server\\share\\x"})
    assert response.status_code == 200
    assert response.json() == {
        "path": "\\\\server\\share\\x",
        "root_length": 14,
        "root": "\\\\server\\share",
        "is_rooted": True,
        "is_fully_qualified": True,
        "should_revise_to_current": False,
    }


def test_root_analysis_flags_bare_drive(client: TestClient) -> None:
    payload = client.post("/api/v1/paths/root", json={"path": "C:"}).json()
    assert payload["root_length"] == 2
    assert payload["is_fully_qualified"] is False
    assert payload["should_revise_to_current"] is True


def test_root_analysis_rejects_invalid_characters(client: TestClient) -> None:
    response = client.post("/api/v1/paths/root", json={"path": "C:\\a<b"})
    assert response.status_code == 422
    assert "Illegal character" in response.json()["detail"]


def test_split(client: TestClient) -> None:
    response = client.post("/api/v1/paths/split", json={"path": "C:\\a\\b.txt"})
    assert response.status_code == 200
    assert response.json() == {
        "path": "C:\\a\\b.txt",
        "directory": "C:\\a",
        "file": "b.txt",
        "directory_name": "C:\\a",
    }


def test_split_root(client: TestClient) -> None:
    payload = client.post("/api/v1/paths/split", json={"path": "C:\\"}).json()
    assert payload["directory"] == "C:\\"
    assert payload["file"] is None
    assert payload["directory_name"] is None


def test_search_pattern(client: TestClient) -> None:
    accepted = client.post("/api/v1/paths/search-pattern", json={"pattern": "abc..d"})
    assert accepted.status_code == 200
    assert accepted.json() == {"pattern": "abc..d", "valid": True}

    rejected = client.post("/api/v1/paths/search-pattern", json={"pattern": "..\\x"})
    assert rejected.status_code == 422


def test_full_path(client: TestClient) -> None:
    response = client.post("/api/v1/paths/full", json={"path": "  D:\\x\\..\\y \t"})
    assert response.status_code == 200
    assert response.json() == {"path": "  D:\\x\\..\\y \t", "trimmed": "D:\\x\\..\\y", "full_path": "D:\\y"}

    relative = client.post("/api/v1/paths/full", json={"path": "C:"}).json()
    assert relative["full_path"] == "C:\\work"


def test_request_rejects_unknown_fields(client: TestClient) -> None:
    response = client.post("/api/v1/paths/split", json={"path": "C:\\a", "extra": 1})
    assert response.status_code == 422


def test_full_path_rejects_blank_path(client: TestClient) -> None:
    response = client.post("/api/v1/paths/full", json={"path": "   "})
    assert response.status_code == 422
