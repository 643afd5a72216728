# tests/test_ussd_route.py
"""Tests for the USSD HTTP adapter and health endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from agromart_ussd.infrastructure.cache import session_store
from agromart_ussd.infrastructure.cache.session_store import InMemorySessionStore
from agromart_ussd.infrastructure.external import kyc_sink
from agromart_ussd.infrastructure.external.kyc_sink import LogKycSink
from agromart_ussd.main import app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(session_store, "_store", InMemorySessionStore())
    monkeypatch.setattr(kyc_sink, "_sink", LogKycSink())
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_status(client):
    resp = client.get("/ussd")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "active"
    assert body["code"] == "*123#"
    assert "KYC Registration" in body["features"]


def test_form_encoded_request(client):
    resp = client.post(
        "/ussd",
        data={"sessionId": "ATUid_1", "serviceCode": "*123#", "phoneNumber": "+2348012345678", "text": ""},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text.startswith("CON Welcome to Lovitti Agro Mart")


def test_json_request(client):
    resp = client.post("/ussd", json={"sessionId": "ATUid_2", "text": "3"})
    assert resp.status_code == 200
    assert resp.text == "END For help, call 0800-AGRO or visit lovitti.agro/help"


def test_missing_text_is_main_menu(client):
    resp = client.post("/ussd", json={"sessionId": "ATUid_3"})
    assert resp.text.startswith("CON Welcome")


def test_null_text_is_main_menu(client):
    resp = client.post("/ussd", json={"sessionId": "ATUid_3", "text": None})
    assert resp.text.startswith("CON Welcome")


def test_invalid_selection(client):
    resp = client.post("/ussd", data={"sessionId": "ATUid_4", "text": "99"})
    assert resp.text == "END Invalid selection. Please try again."


def test_kyc_flow_over_http(client):
    sid = "ATUid_5"
    assert client.post("/ussd", data={"sessionId": sid, "text": "4*1"}).text == (
        "CON Farmer Registration\nEnter Full Name:"
    )
    assert client.post("/ussd", data={"sessionId": sid, "text": "4*1*John Doe"}).text == (
        "CON Enter Phone Number:"
    )


def test_missing_session_id_gets_generated(client):
    resp = client.post("/ussd", json={"text": "4*1"})
    assert resp.status_code == 200
    assert resp.text == "CON Farmer Registration\nEnter Full Name:"


def test_unexpected_error_returns_end_envelope(client):
    with patch(
        "agromart_ussd.api.routes.ussd.handle_ussd",
        new=AsyncMock(side_effect=RuntimeError("boom")),
    ):
        resp = client.post("/ussd", data={"sessionId": "ATUid_6", "text": "1"})

    assert resp.status_code == 200
    assert resp.text == (
        "END Sorry, there was an error processing your request. Please try again later."
    )


def test_numeric_fields_are_accepted(client):
    resp = client.post(
        "/ussd",
        json={"sessionId": 123, "serviceCode": 384, "phoneNumber": 2348012345678, "text": "3"},
    )
    assert resp.status_code == 200
    assert resp.text == "END For help, call 0800-AGRO or visit lovitti.agro/help"


def test_malformed_json_returns_end_envelope(client):
    resp = client.post(
        "/ussd",
        content=b'{"sessionId": "ATUid_7", "text": ',
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 200
    assert resp.text.startswith("END ")


def test_wrongly_shaped_field_returns_end_envelope(client):
    resp = client.post("/ussd", json={"sessionId": {"nested": True}, "text": "1"})
    assert resp.status_code == 200
    assert resp.text.startswith("END ")


def test_request_log_masks_phone_in_text(client):
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="INFO")
    try:
        client.post("/ussd", data={"sessionId": "ATUid_8", "text": "4*1*John Doe*+2341234567890"})
    finally:
        logger.remove(handler_id)

    request_logs = [m for m in messages if m.startswith("USSD request")]
    assert request_logs
    assert "+2341234567890" not in request_logs[0]
    assert "7890" in request_logs[0]
