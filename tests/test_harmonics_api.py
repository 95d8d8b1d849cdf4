import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from featherweight.apps.api.main import app
from featherweight.libs.schemas.settings import get_settings

HISTORY = {
    "userId": "u1",
    "journalEntries": [
        {"id": "1", "content": "Seeing 777 again, I feel worthy", "timestamp": "2025-06-17T12:00:00Z"},
        {"id": "2", "content": "777 on the clock", "timestamp": "2025-06-16T08:30:00"},
    ],
    "lifeEvents": [
        {"description": "Met an old friend", "timestamp": "2025-11-02T10:00:00Z", "spiritualLessons": ["Trust"]},
    ],
}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def tiny_history_limit(monkeypatch):
    monkeypatch.setenv("FEATHERWEIGHT_MAX_HISTORY_RECORDS", "1")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_quantum_field_endpoint(client):
    resp = client.post("/harmonics/field", json={"text": "Breathe in slowly. Let it go."})
    assert resp.status_code == 200
    body = resp.json()
    assert body["vibrationalFrequency"] == 432
    assert len(body["harmonicPatterns"]) == 1
    assert body["harmonicPatterns"][0]["manifestationCycle"] == 21
    assert body["probabilityFields"] == []


def test_energetic_state_without_history(client):
    resp = client.post("/harmonics/energetic-state", json={"text": "open to divine light"})
    assert resp.status_code == 200
    body = resp.json()
    assert set(body["energeticBalance"]) == {
        "root", "sacral", "solarPlexus", "heart", "throat", "thirdEye", "crown", "overall",
    }
    assert body["merkabaActivation"] == pytest.approx(0.1)


def test_sacred_numbers_endpoint(client):
    resp = client.post("/harmonics/sacred-numbers", json={"text": "I saw 1111 and 42", "history": HISTORY})
    assert resp.status_code == 200
    numbers = [item["number"] for item in resp.json()]
    assert numbers == [1111]
    assert "synchronicityLevel" in resp.json()[0]


def test_synchronicities_endpoint(client):
    events = [
        {"description": f"Saw 44 again ({i})", "timestamp": f"2024-0{i + 4}-0{i + 1}T12:00:00Z"}
        for i in range(3)
    ]
    resp = client.post("/harmonics/synchronicities", json={"events": events})
    assert resp.status_code == 200
    body = resp.json()
    assert body[0]["pattern"] == "Repeating Number 44"
    assert body[0]["frequency"] == pytest.approx(1.0)


@pytest.mark.asyncio
async def test_report_endpoint():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/harmonics/report", json={"text": "777 is divine", "history": HISTORY})

    assert response.status_code == 200
    body = response.json()
    assert body["userId"] == "u1"
    assert "generatedAt" in body
    assert body["sacredNumbers"][0]["number"] == 777
    assert any(theme["theme"] == "Self-Worth" for theme in body["karmicThemes"])
    assert set(body["chakraBalance"]) >= {"root", "overall"}


def test_report_requires_history(client):
    resp = client.post("/harmonics/report", json={"text": "hello"})
    assert resp.status_code == 422


def test_malformed_timestamp_rejected(client):
    history = {"journalEntries": [{"content": "x", "timestamp": "not a date"}]}
    resp = client.post("/harmonics/report", json={"history": history})
    assert resp.status_code == 422


def test_oversized_history_rejected(client, tiny_history_limit):
    resp = client.post("/harmonics/report", json={"history": HISTORY})
    assert resp.status_code == 413

    events = [{"description": "a", "timestamp": "2024-01-01T00:00:00Z"}] * 2
    resp = client.post("/harmonics/synchronicities", json={"events": events})
    assert resp.status_code == 413

    # Requests without history are never limited.
    assert client.post("/harmonics/energetic-state", json={"text": "calm"}).status_code == 200


def test_long_numbers_are_accepted(client):
    resp = client.post("/harmonics/sacred-numbers", json={"text": "1" * 4301 + " and 33"})
    assert resp.status_code == 200
    assert [item["number"] for item in resp.json()] == [33]
