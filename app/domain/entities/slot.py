from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientInfo:
    first_name: str
    last_name: str
    email: str = ""
    service: str = ""


@dataclass(frozen=True)
class Slot:
    date: str
    time: str
    booked: bool = False
    client: ClientInfo | None = None  # set iff booked

    @property
    def key(self) -> tuple[str, str]:
        return (self.date, self.time)

    def book(self, client: ClientInfo) -> Slot:
        return Slot(date=self.date, time=self.time, booked=True, client=client)
