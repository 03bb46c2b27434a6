import pytest

from app.core.settings import get_settings


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_encode(client):
    r = client.post("/encode", json={"number": 1234})
    assert r.status_code == 200
    assert r.json() == {"encoded": "16J", "checksum": False}


def test_encode_with_checksum(client):
    r = client.post("/encode", json={"number": 1234, "checksum": True})
    assert r.status_code == 200
    assert r.json()["encoded"] == "16JD"


def test_encode_rejects_negative_number(client):
    r = client.post("/encode", json={"number": -1})
    assert r.status_code == 422


def test_decode_reports_normalization(client):
    r = client.post("/decode", json={"encoded": "16j-d", "checksum": True})
    assert r.status_code == 200
    assert r.json() == {"value": 1234, "normalized": "16JD", "corrected": True}


def test_decode_plain(client):
    r = client.post("/decode", json={"encoded": "16J"})
    assert r.status_code == 200
    assert r.json() == {"value": 1234, "normalized": "16J", "corrected": False}


def test_decode_checksum_mismatch(client):
    r = client.post("/decode", json={"encoded": "16JX", "checksum": True})
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == "ChecksumMismatch"


def test_decode_strict_mode(client):
    r = client.post("/decode", json={"encoded": "io", "mode": "strict"})
    assert r.status_code == 422
    detail = r.json()["detail"]
    assert detail["error"] == "NormalizationRequired"
    assert '"io"' in detail["message"]


def test_decode_empty_string(client):
    r = client.post("/decode", json={"encoded": ""})
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == "EmptyInput"


def test_decode_rejects_unknown_mode(client):
    r = client.post("/decode", json={"encoded": "10", "mode": "loud"})
    assert r.status_code == 422


def test_normalize_endpoint(client):
    r = client.post("/normalize", json={"encoded": "ix-Lb-Ko"})
    assert r.status_code == 200
    assert r.json() == {"normalized": "1X1BK0", "corrected": True}


def test_default_mode_from_settings(client, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BASE32_DEFAULT_MODE", "strict")
    get_settings.cache_clear()

    r = client.post("/normalize", json={"encoded": "abc"})
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == "NormalizationRequired"

    # an explicit request mode wins over the configured default
    r = client.post("/normalize", json={"encoded": "abc", "mode": "warn"})
    assert r.status_code == 200
    assert r.json()["normalized"] == "ABC"
