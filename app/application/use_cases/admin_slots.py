from __future__ import annotations

import hmac
import logging

from app.application.exceptions import Unauthorized
from app.application.ports.slot_store import SlotStorePort
from app.domain.entities.slot import Slot


class AdminSlotsUseCase:
    """Slot catalog management gated by a single shared secret."""

    def __init__(self, store: SlotStorePort, admin_secret: str) -> None:
        self._store = store
        self._admin_secret = admin_secret
        self._logger = logging.getLogger(__name__)

    def authorize(self, supplied_secret: str | None) -> bool:
        if not self._admin_secret or supplied_secret is None:
            return False
        return hmac.compare_digest(supplied_secret.encode("utf-8"), self._admin_secret.encode("utf-8"))

    def _require_admin(self, supplied_secret: str | None) -> None:
        if not self.authorize(supplied_secret):
            self._logger.warning("Admin access denied", extra={"reason": "bad_secret"})
            raise Unauthorized()

    def list_reservations(self, supplied_secret: str | None) -> list[Slot]:
        self._require_admin(supplied_secret)
        return self._store.list_slots()

    def add_slot(self, supplied_secret: str | None, date: str | None, time: str | None) -> Slot:
        self._require_admin(supplied_secret)
        slot = self._store.insert_slot(date or "", time or "")
        self._logger.info("Slot added", extra={"date": slot.date, "time": slot.time})
        return slot

    def delete_slot(self, supplied_secret: str | None, date: str | None, time: str | None) -> None:
        self._require_admin(supplied_secret)
        self._store.delete_slot(date or "", time or "")
        self._logger.info("Slot deleted", extra={"date": date, "time": time})
