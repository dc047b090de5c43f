from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.reservation_intent import ReservationIntent
from app.domain.entities.slot import ClientInfo, Slot


class ClientSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str = ""
    service: str = ""

    @classmethod
    def from_entity(cls, client: ClientInfo) -> "ClientSchema":
        return cls(
            first_name=client.first_name,
            last_name=client.last_name,
            email=client.email,
            service=client.service,
        )


class PublicSlotSchema(BaseModel):
    date: str
    time: str
    booked: bool

    @classmethod
    def from_entity(cls, slot: Slot) -> "PublicSlotSchema":
        return cls(date=slot.date, time=slot.time, booked=slot.booked)


class SlotSchema(PublicSlotSchema):
    client: ClientSchema | None = None

    @classmethod
    def from_entity(cls, slot: Slot) -> "SlotSchema":
        return cls(
            date=slot.date,
            time=slot.time,
            booked=slot.booked,
            client=ClientSchema.from_entity(slot.client) if slot.client else None,
        )


class BookingRequestSchema(BaseModel):
    # All optional: the use case reports missing fields.
    model_config = ConfigDict(populate_by_name=True)

    date: str | None = None
    time: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    service: str | None = None

    def to_intent(self) -> ReservationIntent:
        return ReservationIntent(
            date=self.date or "",
            time=self.time or "",
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            service=self.service or "",
            email=self.email or "",
        )


class SlotKeySchema(BaseModel):
    date: str | None = None
    time: str | None = None


class CheckoutResponseSchema(BaseModel):
    url: str


class SuccessResponseSchema(BaseModel):
    success: bool = True


class ErrorResponseSchema(BaseModel):
    error: str
