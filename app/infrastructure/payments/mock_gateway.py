from __future__ import annotations

import logging

from app.application.ports.payment_gateway import PaymentGatewayPort
from app.domain.entities.reservation_intent import ReservationIntent


class MockPaymentGateway(PaymentGatewayPort):
    """Skips the hosted checkout and redirects straight to the success page."""

    def __init__(self) -> None:
        self.sessions: list[dict[str, object]] = []
        self._logger = logging.getLogger(__name__)

    def create_session(
        self,
        intent: ReservationIntent,
        amount_minor_units: int,
        currency: str,
        description: str,
        success_url: str,
        cancel_url: str,
    ) -> str:
        self.sessions.append(
            {
                "intent": intent,
                "amount": amount_minor_units,
                "currency": currency,
                "description": description,
                "success_url": success_url,
                "cancel_url": cancel_url,
            }
        )
        self._logger.info(
            "Mock checkout session created",
            extra={"date": intent.date, "time": intent.time, "service": intent.service},
        )
        return success_url
