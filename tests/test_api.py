"""HTTP-level tests for the protocol routers."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import CALLER_HEADER
from app.dependencies import get_protocol
from app.main import app
from conftest import ALICE, BOB, OWNER


@pytest.fixture
def client(protocol):
    app.dependency_overrides[get_protocol] = lambda: protocol
    yield TestClient(app)
    app.dependency_overrides.clear()


def as_caller(identity: str) -> dict:
    return {CALLER_HEADER: identity}


POLICY_BODY = {
    "coverage_amount": 1000,
    "premium": 50,
    "duration": 30,
    "trigger_condition": "temperature",
    "trigger_value": 35,
}


def test_create_and_get_policy(client):
    response = client.post("/api/policies", json=POLICY_BODY, headers=as_caller(ALICE))
    assert response.status_code == 201
    assert response.json() == {"policy_id": 1}

    response = client.get("/api/policies/1")
    assert response.status_code == 200
    body = response.json()
    assert body["policyholder"] == ALICE
    assert body["coverage_amount"] == 1000
    assert body["trigger_condition"] == "temperature"
    assert body["is_active"] is True


def test_mutation_without_caller_header_is_401(client):
    response = client.post("/api/policies", json=POLICY_BODY)
    assert response.status_code == 401


def test_invalid_policy_payload_is_422(client):
    body = dict(POLICY_BODY, coverage_amount=-5)
    response = client.post("/api/policies", json=body, headers=as_caller(ALICE))
    assert response.status_code == 422


def test_cancel_policy_twice(client):
    client.post("/api/policies", json=POLICY_BODY, headers=as_caller(ALICE))
    assert client.post("/api/policies/1/cancel", headers=as_caller(ALICE)).status_code == 200

    response = client.post("/api/policies/1/cancel", headers=as_caller(ALICE))
    assert response.status_code == 403
    assert response.json()["detail"]["error"] == "unauthorized"


def test_unknown_records_are_404(client):
    for path in ("/api/policies/999", "/api/claims/999", "/api/oracle/feeds/humidity"):
        response = client.get(path)
        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "not-found"


def test_updater_administration_is_owner_only(client):
    response = client.put(
        f"/api/oracle/updaters/{BOB}",
        json={"is_authorized": True},
        headers=as_caller(ALICE),
    )
    assert response.status_code == 403
    assert response.json()["detail"]["error"] == "owner-only"

    response = client.put(
        f"/api/oracle/updaters/{BOB}",
        json={"is_authorized": True},
        headers=as_caller(OWNER),
    )
    assert response.status_code == 200
    assert client.get(f"/api/oracle/updaters/{BOB}").json() == {
        "identity": BOB,
        "is_authorized": True,
    }


def test_unauthorized_feed_update_is_403(client):
    response = client.put(
        "/api/oracle/feeds/temperature", json={"value": 30}, headers=as_caller(BOB)
    )
    assert response.status_code == 403
    assert response.json()["detail"]["error"] == "unauthorized"


def test_claim_flow_over_http(client):
    client.post("/api/policies", json=POLICY_BODY, headers=as_caller(ALICE))
    client.put(
        f"/api/oracle/updaters/{BOB}", json={"is_authorized": True}, headers=as_caller(OWNER)
    )
    response = client.put(
        "/api/oracle/feeds/temperature", json={"value": 40}, headers=as_caller(BOB)
    )
    assert response.status_code == 200
    assert client.get("/api/oracle/feeds/temperature").json() == {
        "feed_name": "temperature",
        "value": 40,
        "last_updated": 100,
    }

    response = client.post("/api/claims", json={"policy_id": 1}, headers=as_caller(ALICE))
    assert response.status_code == 201
    claim_id = response.json()["claim_id"]

    response = client.post(f"/api/claims/{claim_id}/process", headers=as_caller(BOB))
    assert response.status_code == 200
    assert response.json() == {"claim_id": claim_id, "approved": True}

    claim = client.get(f"/api/claims/{claim_id}").json()
    assert claim["status"] == "approved"
    assert claim["amount"] == 1000
    assert claim["processed_at"] == 100

    response = client.post(f"/api/claims/{claim_id}/process", headers=as_caller(BOB))
    assert response.status_code == 403
    assert response.json()["detail"]["error"] == "unauthorized"


def test_processing_claim_without_feed_is_404(client):
    client.post("/api/policies", json=POLICY_BODY, headers=as_caller(ALICE))
    client.post("/api/claims", json={"policy_id": 1}, headers=as_caller(ALICE))

    response = client.post("/api/claims/1/process", headers=as_caller(ALICE))
    assert response.status_code == 404
    assert client.get("/api/claims/1").json()["status"] == "pending"


def test_health_reports_counts(client):
    client.post("/api/policies", json=POLICY_BODY, headers=as_caller(ALICE))
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["policies_count"] == 1
    assert body["claims_count"] == 0
