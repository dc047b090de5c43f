from abc import ABC, abstractmethod

from app.application.exceptions import InvalidInput
from app.domain.entities.slot import ClientInfo, Slot


class SlotStorePort(ABC):
    @abstractmethod
    def list_slots(self) -> list[Slot]:
        """Return every slot ordered by (date, time)."""
        raise NotImplementedError

    @abstractmethod
    def find_slot(self, date: str, time: str) -> Slot | None:
        raise NotImplementedError

    @abstractmethod
    def insert_slot(self, date: str, time: str) -> Slot:
        """
        Create an unbooked slot.
        Raises DuplicateKey if the key exists; the check is atomic with the write.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_slot(self, date: str, time: str) -> None:
        """Remove the slot if present. Deleting a missing key is a no-op."""
        raise NotImplementedError

    @abstractmethod
    def mark_booked(self, date: str, time: str, client: ClientInfo) -> bool:
        """
        Compare-and-swap booked False -> True for the slot keyed by (date, time).
        Returns False when the slot is missing or already booked.
        """
        raise NotImplementedError

    @staticmethod
    def _require_key(date: str | None, time: str | None) -> None:
        if not date or not date.strip() or not time or not time.strip():
            raise InvalidInput("Date and time are required")
