from __future__ import annotations

from typing import Any

from app.domain.entities.slot import ClientInfo, Slot


def serialize_slot(slot: Slot) -> dict[str, Any]:
    """Serialize Slot to the persisted JSON layout (camelCase client fields)."""
    client = None
    if slot.client is not None:
        client = {
            "firstName": slot.client.first_name,
            "lastName": slot.client.last_name,
            "email": slot.client.email,
            "service": slot.client.service,
        }
    return {
        "date": slot.date,
        "time": slot.time,
        "booked": slot.booked,
        "client": client,
    }


def deserialize_slot(data: dict[str, Any]) -> Slot:
    """Deserialize a persisted slot dict."""
    client_data = data.get("client")
    client = None
    if client_data:
        client = ClientInfo(
            first_name=client_data.get("firstName", ""),
            last_name=client_data.get("lastName", ""),
            email=client_data.get("email") or "",
            service=client_data.get("service", ""),
        )
    return Slot(
        date=str(data["date"]),
        time=str(data["time"]),
        booked=bool(data.get("booked", False)),
        client=client,
    )


def sort_slots(slots: list[Slot]) -> list[Slot]:
    return sorted(slots, key=lambda s: (s.date, s.time))
