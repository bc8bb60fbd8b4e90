import os
import sys
from unittest.mock import patch
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../..")))
from api.main import app
from hashtree.utils.hashing import identity_hash


def test_health_reports_hash_func():
    with patch.dict(os.environ, {"HASH_FUNC": "md5"}):
        with TestClient(app) as client:
            resp = client.get("/health")
            assert resp.status_code == 200
            assert resp.json() == {"status": "ok", "items": 0, "hash_func": "md5"}


def test_put_get_delete_roundtrip():
    with TestClient(app) as client:
        resp = client.post("/put/alpha", params={"value": "1"})
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

        resp = client.get("/get/alpha")
        assert resp.status_code == 200
        assert resp.json() == {"key": "alpha", "value": "1"}

        client.post("/put/alpha", params={"value": "2"})
        assert client.get("/get/alpha").json()["value"] == "2"

        resp = client.delete("/delete/alpha")
        assert resp.status_code == 200
        assert client.get("/get/alpha").status_code == 404
        assert client.delete("/delete/alpha").status_code == 404


def test_records_endpoint_and_collisions():
    with TestClient(app) as client:
        # force every key into one bucket
        app.state.store.hash_func = lambda _key: identity_hash(1)
        for i in range(5):
            resp = client.post("/data/records", json={"key": f"k{i}", "value": f"v{i}"})
            assert resp.status_code == 200
        assert client.get("/health").json()["items"] == 5
        for i in range(5):
            assert client.get(f"/get/k{i}").json()["value"] == f"v{i}"
        assert client.delete("/delete/k0").status_code == 200
        assert client.get("/get/k0").status_code == 404
        assert client.get("/get/k4").json()["value"] == "v4"


def test_missing_key_returns_404():
    with TestClient(app) as client:
        resp = client.get("/get/nothing")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "key not found"
