import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi import HTTPException
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from leaddesk.core.config import Config
from leaddesk.core.records import RecordStore
from leaddesk.core.storage import MemoryStorage, set_storage
from leaddesk.main import app
from leaddesk.modules.sessions.schemas import OpenSessionDto
from leaddesk.modules.sessions.service import SessionsService, session_manager


@pytest.fixture
def medium():
    storage = MemoryStorage()
    set_storage(storage)
    session_manager.clear()
    yield storage
    session_manager.clear()
    set_storage(None)


@pytest.fixture
def client(medium):
    with TestClient(app) as test_client:
        yield test_client


def _create_bill(client, values):
    session = client.post("/api/stores/billProfiles/sessions", json={}).json()
    client.patch(f"/api/sessions/{session['session_id']}/fields", json={"values": values})
    client.post(f"/api/sessions/{session['session_id']}/submit")
    return client.post(f"/api/sessions/{session['session_id']}/confirm", json={"accept": True}).json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "storage": "MemoryStorage"}


def test_list_stores(client):
    stores = {s["key"]: s for s in client.get("/api/stores").json()}
    assert len(stores) == 30
    assert stores["billProfiles"]["kind"] == "list"
    assert stores["leadDetails"]["kind"] == "profile"
    assert "ownerEmail" in stores["billProfiles"]["required_fields"]
    assert "from" in stores["whatsappMessages"]["fields"]


def test_unknown_store_is_404(client):
    assert client.get("/api/stores/nope/records").status_code == 404


def test_create_bill_flow(client, medium, bill_values):
    opened = client.post("/api/stores/billProfiles/sessions", json={})
    assert opened.status_code == 201
    session_id = opened.json()["session_id"]
    assert opened.json()["state"] == "editing"

    patched = client.patch(f"/api/sessions/{session_id}/fields", json={"values": {"ownerEmail": "bad"}})
    assert patched.json()["errors"] == {"ownerEmail": "Invalid email"}

    client.patch(f"/api/sessions/{session_id}/fields", json={"values": bill_values()})
    submitted = client.post(f"/api/sessions/{session_id}/submit")
    assert submitted.status_code == 200
    assert submitted.json()["state"] == "awaiting_confirmation"
    assert submitted.json()["prompt"] == "Do you want to save the details?"

    confirmed = client.post(f"/api/sessions/{session_id}/confirm", json={"accept": True}).json()
    assert confirmed["state"] == "committed"
    assert confirmed["acknowledgments"][0]["title"] == "Success!"
    record_id = confirmed["record"]["id"]

    listing = client.get("/api/stores/billProfiles/records").json()
    assert listing["total"] == 1
    assert listing["items"][0]["id"] == record_id
    assert RecordStore(medium).get("billProfiles", record_id)["billName"] == "Acme Settlement"

    # Committed sessions are closed
    assert client.get(f"/api/sessions/{session_id}").status_code == 404


def test_invalid_submit_returns_error_map(client, medium):
    session_id = client.post("/api/stores/billProfiles/sessions", json={}).json()["session_id"]

    response = client.post(f"/api/sessions/{session_id}/submit")

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert errors["billName"] == "Bill Name is required"
    assert errors["ownerEmail"] == "Owner Email is required"
    assert client.get(f"/api/sessions/{session_id}").json()["state"] == "editing"
    assert RecordStore(medium).load("billProfiles") == []


def test_declined_confirmation_returns_to_editing(client, medium, bill_values):
    session_id = client.post("/api/stores/billProfiles/sessions", json={}).json()["session_id"]
    client.patch(f"/api/sessions/{session_id}/fields", json={"values": bill_values()})
    client.post(f"/api/sessions/{session_id}/submit")

    declined = client.post(f"/api/sessions/{session_id}/confirm", json={"accept": False}).json()

    assert declined["state"] == "editing"
    assert declined["values"]["billName"] == "Acme Settlement"
    assert RecordStore(medium).load("billProfiles") == []


def test_confirm_without_submit_is_conflict(client):
    session_id = client.post("/api/stores/billProfiles/sessions", json={}).json()["session_id"]
    assert client.post(f"/api/sessions/{session_id}/confirm", json={"accept": True}).status_code == 409


def test_edit_bill_flow(client, bill_values):
    record_id = _create_bill(client, bill_values())["record"]["id"]

    opened = client.post("/api/stores/billProfiles/sessions", json={"editing_id": record_id}).json()
    assert opened["editing_id"] == record_id
    assert opened["values"]["billName"] == "Acme Settlement"

    session_id = opened["session_id"]
    client.patch(f"/api/sessions/{session_id}/fields", json={"values": {"status": "Paid"}})
    client.post(f"/api/sessions/{session_id}/submit")
    client.post(f"/api/sessions/{session_id}/confirm", json={"accept": True})

    record = client.get(f"/api/stores/billProfiles/records/{record_id}").json()
    assert record["status"] == "Paid"
    assert client.get("/api/stores/billProfiles/records").json()["total"] == 1


def test_edit_missing_record_is_404(client):
    response = client.post("/api/stores/billProfiles/sessions", json={"editing_id": "missing"})
    assert response.status_code == 404


def test_delete_bill_flow(client, bill_values):
    record_id = _create_bill(client, bill_values())["record"]["id"]

    kept = client.delete(f"/api/stores/billProfiles/records/{record_id}", params={"confirm": False}).json()
    assert kept["deleted"] is False
    assert client.get(f"/api/stores/billProfiles/records/{record_id}").status_code == 200

    deleted = client.delete(f"/api/stores/billProfiles/records/{record_id}", params={"confirm": True}).json()
    assert deleted["deleted"] is True
    assert deleted["acknowledgments"][0]["title"] == "Deleted!"
    assert client.get(f"/api/stores/billProfiles/records/{record_id}").status_code == 404


def test_query_records(client, bill_values):
    _create_bill(client, bill_values(billName="Acme One", status="Paid"))
    _create_bill(client, bill_values(billName="Other", status="Pending"))

    found = client.get("/api/stores/billProfiles/records", params={"search": "acme"}).json()
    assert [r["billName"] for r in found["items"]] == ["Acme One"]

    pending = client.get("/api/stores/billProfiles/records", params={"status": "Pending"}).json()
    assert [r["billName"] for r in pending["items"]] == ["Other"]


def test_cancel_session(client, medium):
    session_id = client.post("/api/stores/billProfiles/sessions", json={}).json()["session_id"]
    assert client.delete(f"/api/sessions/{session_id}").status_code == 200
    assert client.get(f"/api/sessions/{session_id}").status_code == 404
    assert RecordStore(medium).load("billProfiles") == []


def test_profile_flow(client):
    assert client.get("/api/stores/leadStatusData/profile").json() is None

    session_id = client.post("/api/stores/leadStatusData/sessions", json={}).json()["session_id"]
    client.patch(
        f"/api/sessions/{session_id}/fields",
        json={
            "values": {
                "leadStatus": "New",
                "legalStatus": "Pending",
                "harassmentStatus": "Not Reported",
                "paymentStatus": "Paid",
            }
        },
    )
    client.post(f"/api/sessions/{session_id}/submit")
    confirmed = client.post(f"/api/sessions/{session_id}/confirm", json={"accept": True}).json()
    assert confirmed["acknowledgments"][0]["message"] == "Data has been saved."

    profile = client.get("/api/stores/leadStatusData/profile").json()
    assert profile["leadStatus"] == "New"


def test_profile_store_has_no_record_listing(client):
    assert client.get("/api/stores/leadDetails/records").status_code == 409
    assert client.get("/api/stores/billProfiles/profile").status_code == 409


def test_confirm_write_failure_returns_acknowledgment(client, medium, bill_values):
    session_id = client.post("/api/stores/billProfiles/sessions", json={}).json()["session_id"]
    client.patch(f"/api/sessions/{session_id}/fields", json={"values": bill_values()})
    client.post(f"/api/sessions/{session_id}/submit")
    medium.quota_bytes = 10

    response = client.post(f"/api/sessions/{session_id}/confirm", json={"accept": True})

    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail["message"] == "Storage quota exceeded"
    assert detail["acknowledgments"][0]["level"] == "error"

    later = client.get(f"/api/sessions/{session_id}").json()
    assert later["state"] == "editing"
    assert later["acknowledgments"] == []
    assert later["values"]["billName"] == "Acme Settlement"


def test_concurrent_confirms_commit_once(medium, bill_values):
    session_manager.clear()
    session_id = SessionsService.open("billProfiles", OpenSessionDto()).session_id
    SessionsService.update_fields(session_id, bill_values())
    SessionsService.submit(session_id)

    def confirm():
        try:
            return SessionsService.confirm(session_id, True).state.value
        except HTTPException as e:
            return e.status_code

    with ThreadPoolExecutor(max_workers=4) as pool:
        outcomes = list(pool.map(lambda _: confirm(), range(4)))

    assert outcomes.count("committed") == 1
    assert len(RecordStore(medium).load("billProfiles")) == 1


def test_io_routes_run_in_worker_threads():
    for route in app.routes:
        if isinstance(route, APIRoute):
            assert not asyncio.iscoroutinefunction(route.endpoint), route.path


def test_environment_setting():
    assert Config(ENVIRONMENT="production").is_production is True
    assert Config(ENVIRONMENT="development").is_production is False


def test_docs_served_outside_production(client):
    assert client.get("/docs").status_code == 200
