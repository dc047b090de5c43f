from __future__ import annotations

import logging
from typing import Any

import stripe

from app.application.exceptions import PaymentSessionError
from app.application.ports.payment_gateway import PaymentGatewayPort
from app.domain.entities.reservation_intent import ReservationIntent


class StripeGateway(PaymentGatewayPort):
    def __init__(self, api_key: str, product_name: str) -> None:
        if not api_key:
            raise ValueError("STRIPE_SECRET_KEY is required for Stripe checkout")
        self._api_key = api_key
        self._product_name = product_name
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
        params: dict[str, Any] = {
            "payment_method_types": ["card"],
            "mode": "payment",
            "metadata": {
                "firstName": intent.first_name,
                "lastName": intent.last_name,
                "service": intent.service,
                "date": intent.date,
                "time": intent.time,
            },
            "line_items": [
                {
                    "price_data": {
                        "currency": currency,
                        "unit_amount": amount_minor_units,
                        "product_data": {
                            "name": self._product_name,
                            "description": description,
                        },
                    },
                    "quantity": 1,
                }
            ],
            "success_url": success_url,
            "cancel_url": cancel_url,
        }
        if intent.email:
            params["customer_email"] = intent.email

        try:
            session = stripe.checkout.Session.create(api_key=self._api_key, **params)
        except stripe.StripeError as e:
            self._logger.error(
                "Stripe checkout session failed",
                extra={"error": str(e), "date": intent.date, "time": intent.time},
            )
            raise PaymentSessionError() from e

        url = getattr(session, "url", None)
        if not url:
            self._logger.error("Stripe session returned no URL", extra={"date": intent.date, "time": intent.time})
            raise PaymentSessionError()

        self._logger.info("Checkout session created", extra={"date": intent.date, "time": intent.time})
        return url
