from __future__ import annotations

import logging
from urllib.parse import quote, urlencode

from app.application.exceptions import InvalidInput, SlotUnavailable
from app.application.ports.payment_gateway import PaymentGatewayPort
from app.application.ports.slot_store import SlotStorePort
from app.application.use_cases.send_confirmation import SendConfirmationUseCase
from app.domain.entities.reservation_intent import ReservationIntent
from app.domain.entities.slot import Slot


DEPOSIT_AMOUNT_CENTS = 1000
DEPOSIT_CURRENCY = "eur"


class ReservationUseCase:
    """
    Two-phase booking: request a payment session for a free slot, then confirm.

    Nothing is persisted between the two calls. The store's compare-and-swap in
    confirm_reservation is the only thing keeping a slot to a single client.
    """

    def __init__(
        self,
        store: SlotStorePort,
        payment_gateway: PaymentGatewayPort,
        notifier: SendConfirmationUseCase,
        frontend_url: str,
        amount_minor_units: int = DEPOSIT_AMOUNT_CENTS,
        currency: str = DEPOSIT_CURRENCY,
    ) -> None:
        self._store = store
        self._payment_gateway = payment_gateway
        self._notifier = notifier
        self._frontend_url = frontend_url.rstrip("/")
        self._amount_minor_units = amount_minor_units
        self._currency = currency
        self._logger = logging.getLogger(__name__)

    def list_calendar(self) -> list[Slot]:
        return self._store.list_slots()

    def request_payment_session(self, intent: ReservationIntent) -> str:
        """Check the slot is still free and return the checkout redirect URL."""
        self._validate(intent)

        slot = self._store.find_slot(intent.date, intent.time)
        if slot is None or slot.booked:
            self._logger.info(
                "Checkout refused", extra={"date": intent.date, "time": intent.time, "reason": "unavailable"}
            )
            raise SlotUnavailable()

        return self._payment_gateway.create_session(
            intent=intent,
            amount_minor_units=self._amount_minor_units,
            currency=self._currency,
            description=f"{intent.service} | {intent.date} à {intent.time}",
            success_url=self.build_success_url(intent),
            cancel_url=f"{self._frontend_url}/booking.html",
        )

    def confirm_reservation(self, intent: ReservationIntent) -> Slot:
        self._validate(intent)

        # Missing and already-booked slots are reported the same way.
        slot = self._store.find_slot(intent.date, intent.time)
        if slot is None or slot.booked:
            raise SlotUnavailable()

        client = intent.to_client()
        if not self._store.mark_booked(intent.date, intent.time, client):
            # Lost the race to a concurrent confirm (or the slot was deleted meanwhile).
            self._logger.info(
                "Confirm lost race", extra={"date": intent.date, "time": intent.time, "reason": "unavailable"}
            )
            raise SlotUnavailable()

        confirmed = slot.book(client)
        self._logger.info(
            "Reservation confirmed",
            extra={"date": intent.date, "time": intent.time, "service": intent.service},
        )

        self._notifier.execute(confirmed)
        return confirmed

    def build_success_url(self, intent: ReservationIntent) -> str:
        query = urlencode(
            {
                "date": intent.date,
                "time": intent.time,
                "service": intent.service,
                "firstName": intent.first_name,
                "lastName": intent.last_name,
                "email": intent.email,
            },
            quote_via=quote,
        )
        return f"{self._frontend_url}/success.html?{query}"

    @staticmethod
    def _validate(intent: ReservationIntent) -> None:
        missing = [
            name
            for name, value in (
                ("date", intent.date),
                ("time", intent.time),
                ("firstName", intent.first_name),
                ("lastName", intent.last_name),
                ("service", intent.service),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise InvalidInput(f"Missing required fields: {', '.join(missing)}")
