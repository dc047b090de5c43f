"""
HTTP-level tests for the booking and admin endpoints.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.application.use_cases.admin_slots import AdminSlotsUseCase
from app.application.use_cases.reservation import ReservationUseCase
from app.application.use_cases.send_confirmation import SendConfirmationUseCase
from app.infrastructure.email.mock_mailer import MockMailer
from app.infrastructure.payments.mock_gateway import MockPaymentGateway
from app.infrastructure.store.memory_store import MemorySlotStore
from app.main import app
from app.wiring.dependencies import get_admin_use_case, get_reservation_use_case


SECRET = "admin-pass"
BOOKING = {
    "date": "2024-05-01",
    "time": "10:00",
    "firstName": "Ana",
    "lastName": "B",
    "email": "a@b.com",
    "service": "Manicure",
}


@pytest.fixture
def ctx():
    store = MemorySlotStore()
    gateway = MockPaymentGateway()
    mailer = MockMailer()
    reservation = ReservationUseCase(
        store=store,
        payment_gateway=gateway,
        notifier=SendConfirmationUseCase(mailer=mailer, business_name="Maison Cilia", business_address="Paris"),
        frontend_url="http://front.test",
    )
    admin = AdminSlotsUseCase(store=store, admin_secret=SECRET)
    app.dependency_overrides[get_reservation_use_case] = lambda: reservation
    app.dependency_overrides[get_admin_use_case] = lambda: admin
    try:
        yield {"client": TestClient(app), "store": store, "gateway": gateway, "mailer": mailer}
    finally:
        app.dependency_overrides.clear()


def test_liveness(ctx):
    resp = ctx["client"].get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "OK" in resp.text


def test_full_booking_flow(ctx):
    client = ctx["client"]
    headers = {"Authorization": SECRET}

    assert client.post("/admin/add-slot", json={"date": "2024-05-01", "time": "10:00"}, headers=headers).json() == {
        "success": True
    }
    assert client.get("/calendar").json() == [{"date": "2024-05-01", "time": "10:00", "booked": False}]

    resp = client.post("/create-checkout", json=BOOKING)
    assert resp.status_code == 200
    assert resp.json()["url"].startswith("http://front.test/success.html?date=2024-05-01")

    resp = client.post("/confirm", json=BOOKING)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    resp = client.post("/confirm", json=BOOKING)
    assert resp.status_code == 400
    assert "error" in resp.json()

    # Public calendar hides client details; the admin view has them.
    assert client.get("/calendar").json() == [{"date": "2024-05-01", "time": "10:00", "booked": True}]
    reservations = client.get("/admin/reservations", headers=headers).json()
    assert reservations == [
        {
            "date": "2024-05-01",
            "time": "10:00",
            "booked": True,
            "client": {"firstName": "Ana", "lastName": "B", "email": "a@b.com", "service": "Manicure"},
        }
    ]
    assert len(ctx["mailer"].sent) == 1


def test_checkout_for_booked_slot_is_400(ctx):
    ctx["store"].insert_slot("2024-05-01", "10:00")
    ctx["client"].post("/confirm", json=BOOKING)

    resp = ctx["client"].post("/create-checkout", json=BOOKING)

    assert resp.status_code == 400
    assert ctx["gateway"].sessions == []


def test_checkout_missing_fields_is_400(ctx):
    ctx["store"].insert_slot("2024-05-01", "10:00")

    resp = ctx["client"].post("/create-checkout", json={"date": "2024-05-01", "time": "10:00"})

    assert resp.status_code == 400
    assert "error" in resp.json()


def test_malformed_body_is_400(ctx):
    resp = ctx["client"].post("/confirm", content=b"not json", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request body"}


@pytest.mark.parametrize("headers", [{}, {"Authorization": "wrong"}, {"Authorization": f"Bearer {SECRET}"}])
def test_admin_rejects_bad_secret(ctx, headers):
    client = ctx["client"]

    assert client.get("/admin/reservations", headers=headers).status_code == 401
    assert client.post("/admin/add-slot", json={"date": "2024-05-01", "time": "10:00"}, headers=headers).status_code == 401
    assert client.post("/admin/delete-slot", json={"date": "2024-05-01", "time": "10:00"}, headers=headers).status_code == 401
    assert ctx["store"].list_slots() == []


def test_add_slot_duplicate_and_missing_are_400(ctx):
    client = ctx["client"]
    headers = {"Authorization": SECRET}

    client.post("/admin/add-slot", json={"date": "2024-05-01", "time": "10:00"}, headers=headers)

    assert client.post("/admin/add-slot", json={"date": "2024-05-01", "time": "10:00"}, headers=headers).status_code == 400
    assert client.post("/admin/add-slot", json={"date": "2024-05-01"}, headers=headers).status_code == 400
    assert len(ctx["store"].list_slots()) == 1


def test_delete_missing_slot_succeeds(ctx):
    resp = ctx["client"].post(
        "/admin/delete-slot", json={"date": "2099-01-01", "time": "00:00"}, headers={"Authorization": SECRET}
    )

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
