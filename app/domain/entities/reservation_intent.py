from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.slot import ClientInfo


@dataclass(frozen=True)
class ReservationIntent:
    """Booking details a client submits before paying and again when confirming."""

    date: str
    time: str
    first_name: str
    last_name: str
    service: str
    email: str = ""

    def to_client(self) -> ClientInfo:
        return ClientInfo(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            service=self.service,
        )
