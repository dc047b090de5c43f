from abc import ABC, abstractmethod

from app.domain.entities.reservation_intent import ReservationIntent


class PaymentGatewayPort(ABC):
    @abstractmethod
    def create_session(
        self,
        intent: ReservationIntent,
        amount_minor_units: int,
        currency: str,
        description: str,
        success_url: str,
        cancel_url: str,
    ) -> str:
        """Create a hosted checkout session. Returns the redirect URL."""
        raise NotImplementedError
