# tests/test_api.py
import orjson
import pytest
from fastapi.testclient import TestClient

from aif_core import config
from aif_core.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_infer(client):
    resp = client.post("/infer", json={"samples": ['{"id": 1}', '{"id": "x", "tags": []}']})
    assert resp.status_code == 200
    schema = orjson.loads(resp.content)
    assert schema["type"] == "object"
    assert schema["properties"] == {
        "id": {"type": ["integer", "string"]},
        "tags": {"type": "array"},
    }


def test_infer_bad_sample(client):
    resp = client.post("/infer", json={"samples": ["{}", "not json"]})
    assert resp.status_code == 400
    assert "sample 1" in resp.json()["detail"]


def test_infer_missing_samples(client):
    resp = client.post("/infer", json={"documents": []})
    assert resp.status_code == 400


def test_infer_too_many_samples(client, monkeypatch):
    monkeypatch.setattr(config, "API_MAX_SAMPLES", 1)
    resp = client.post("/infer", json={"samples": ["{}", "{}"]})
    assert resp.status_code == 413


def test_infer_documents(client):
    resp = client.post("/infer/documents", json={"documents": [{"a": [1, 2.5]}]})
    assert resp.status_code == 200
    schema = orjson.loads(resp.content)
    assert schema["properties"]["a"]["items"]["type"] == ["integer", "number"]


def test_diff(client):
    a = '{"properties": {"id": {}}}'
    b = '{"properties": {"id": {}, "tags": {"items": {}}}}'
    resp = client.post("/diff", json={"a": a, "b": b})
    assert resp.status_code == 200
    assert orjson.loads(resp.content) == {"added": ["tags", "tags[]"], "removed": [], "common": ["id"]}


def test_diff_bad_side(client):
    resp = client.post("/diff", json={"a": "{}", "b": "nope"})
    assert resp.status_code == 400
    assert "schema B" in resp.json()["detail"]


def test_infer_deep_sample_is_bad_request(client):
    deep = '{"a":' + "[" * 1000 + "]" * 1000 + "}"
    resp = client.post("/infer", json={"samples": [deep]})
    assert resp.status_code == 400
    assert "nesting deeper than" in resp.json()["detail"]
