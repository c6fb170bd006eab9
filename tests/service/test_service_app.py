"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from uipreview.config import PreviewConfig, ValidationConfig
from uipreview.service import create_app
from tests._fixtures.components import CLEAN, DASHBOARD


@pytest.fixture
def client() -> TestClient:
    config = PreviewConfig()
    return TestClient(create_app(lambda: config))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_transform_endpoint_returns_document_and_bindings(client: TestClient) -> None:
    response = client.post("/transform", json={"code": DASHBOARD})

    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["error"] is None
    assert payload["has_entry"] is True
    assert payload["document"].startswith("<!DOCTYPE html>")
    aliases = {(b["source_module"], b["local_name"]) for b in payload["bindings"]}
    assert ("lucide-react", "Love") in aliases
    assert ("recharts", "LineChart") in aliases


def test_transform_endpoint_reports_build_errors(client: TestClient) -> None:
    response = client.post("/transform", json={"code": "const = ;"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is False
    assert payload["error"]
    assert "Build Error:" in payload["document"]


def test_validate_endpoint(client: TestClient) -> None:
    clean = client.post("/validate", json={"code": CLEAN}).json()
    dirty = client.post("/validate", json={"code": '<img src="x.png">'}).json()

    assert clean == {"valid": True, "messages": []}
    assert dirty == {"valid": False, "messages": ["⚠️ <img> tag missing 'alt' attribute."]}


def test_repair_prompt_endpoint_validates_when_messages_absent(client: TestClient) -> None:
    response = client.post("/repair-prompt", json={"code": '<img src="x.png">'})

    assert response.status_code == 200
    messages = response.json()["messages"]
    assert [m["role"] for m in messages] == ["system", "user"]
    assert "- ⚠️ <img> tag missing 'alt' attribute." in messages[1]["content"]


def test_repair_prompt_endpoint_forwards_given_messages(client: TestClient) -> None:
    response = client.post("/repair-prompt", json={"code": "x", "messages": ["custom issue"]})

    assert "- custom issue" in response.json()["messages"][1]["content"]


def test_unknown_checks_map_to_bad_request() -> None:
    config = PreviewConfig(validation=ValidationConfig(enabled=["spelling"]))
    client = TestClient(create_app(lambda: config))

    response = client.post("/validate", json={"code": "x"})

    assert response.status_code == 400
    assert "spelling" in response.json()["detail"]
