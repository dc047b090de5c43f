from __future__ import annotations

import threading

from app.application.exceptions import DuplicateKey
from app.application.ports.slot_store import SlotStorePort
from app.domain.entities.slot import ClientInfo, Slot
from app.infrastructure.store.serialization import sort_slots


class MemorySlotStore(SlotStorePort):
    def __init__(self, slots: list[Slot] | None = None) -> None:
        self._slots: dict[tuple[str, str], Slot] = {s.key: s for s in slots or []}
        self._lock = threading.Lock()

    def list_slots(self) -> list[Slot]:
        with self._lock:
            return sort_slots(list(self._slots.values()))

    def find_slot(self, date: str, time: str) -> Slot | None:
        return self._slots.get((date, time))

    def insert_slot(self, date: str, time: str) -> Slot:
        self._require_key(date, time)
        with self._lock:
            if (date, time) in self._slots:
                raise DuplicateKey()
            slot = Slot(date=date, time=time)
            self._slots[slot.key] = slot
            return slot

    def delete_slot(self, date: str, time: str) -> None:
        with self._lock:
            self._slots.pop((date, time), None)

    def mark_booked(self, date: str, time: str, client: ClientInfo) -> bool:
        with self._lock:
            slot = self._slots.get((date, time))
            if slot is None or slot.booked:
                return False
            self._slots[slot.key] = slot.book(client)
            return True
