"""Integration tests for the FastAPI skill endpoint."""

from fastapi.testclient import TestClient

from api_skill import app
from lambda_function import lambda_handler

client = TestClient(app)


def test_skill_endpoint_routes_request(event_factory):
    response = client.post("/skill", json=event_factory("IntentRequest", "AMAZON.StopIntent"))
    assert response.status_code == 200
    body = response.json()["response"]
    assert body["outputSpeech"]["text"] == "Goodbye!"
    assert body["shouldEndSession"] is True


def test_skill_endpoint_matches_lambda(event_factory):
    event = event_factory("IntentRequest", "AMAZON.HelpIntent")
    assert client.post("/skill", json=event).json() == lambda_handler(event, None)


def test_unknown_intent_returns_apology(event_factory):
    response = client.post("/skill", json=event_factory("IntentRequest", "OrderPizzaIntent"))
    assert response.status_code == 200
    assert response.json()["response"]["shouldEndSession"] is False


def test_non_object_body_rejected():
    response = client.post("/skill", json=["LaunchRequest"])
    assert response.status_code == 400
    assert response.json()["detail"] == "Request body must be a JSON object"


def test_invalid_json_rejected():
    response = client.post(
        "/skill", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Request body must be valid JSON"


def test_health_lists_handlers():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["handlers"][0] == "LaunchRequestHandler"
    assert len(data["handlers"]) == 5


def test_non_utf8_body_rejected():
    response = client.post(
        "/skill", content=b'{"request": "\xff"}', headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Request body must be valid JSON"
