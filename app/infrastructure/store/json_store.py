from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from app.application.exceptions import DuplicateKey, StorageUnavailable
from app.application.ports.slot_store import SlotStorePort
from app.domain.entities.slot import ClientInfo, Slot
from app.infrastructure.store.serialization import deserialize_slot, serialize_slot, sort_slots


class JsonSlotStore(SlotStorePort):
    """
    Slot store backed by a single JSON document: {"slots": [...]}.

    Every mutation is a read-modify-write under one lock, and the file is
    replaced atomically so readers never see a half-written document.
    """

    def __init__(self, data_file: str = "./data/data.json") -> None:
        self._file_path = Path(data_file)
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _load_data(self) -> dict[str, Any]:
        """Load the document, return an empty calendar if the file is missing."""
        if not self._file_path.exists():
            return {"slots": []}

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            # Never fall back to an empty calendar on a corrupt file.
            self._logger.error(
                "Failed to read slot file", extra={"error": str(e), "reason": str(self._file_path)}
            )
            raise StorageUnavailable() from e

        if not isinstance(data, dict) or not isinstance(data.get("slots"), list):
            self._logger.error("Slot file has unexpected layout", extra={"reason": str(self._file_path)})
            raise StorageUnavailable()
        return data

    def _save_data(self, data: dict[str, Any]) -> None:
        """Save the document atomically via a temp file and rename."""
        temp_path = self._file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except OSError as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass
            self._logger.error("Failed to write slot file", extra={"error": str(e)})
            raise StorageUnavailable() from e

    def _load_slots(self) -> list[Slot]:
        items = self._load_data()["slots"]
        try:
            return [deserialize_slot(item) for item in items]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            self._logger.error("Malformed slot entry in file", extra={"error": str(e), "reason": str(self._file_path)})
            raise StorageUnavailable() from e

    def _save_slots(self, slots: list[Slot]) -> None:
        self._save_data({"slots": [serialize_slot(slot) for slot in slots]})

    def list_slots(self) -> list[Slot]:
        with self._lock:
            return sort_slots(self._load_slots())

    def find_slot(self, date: str, time: str) -> Slot | None:
        with self._lock:
            for slot in self._load_slots():
                if slot.date == date and slot.time == time:
                    return slot
        return None

    def insert_slot(self, date: str, time: str) -> Slot:
        self._require_key(date, time)
        with self._lock:
            slots = self._load_slots()
            if any(s.date == date and s.time == time for s in slots):
                raise DuplicateKey()
            slot = Slot(date=date, time=time)
            slots.append(slot)
            self._save_slots(slots)
            return slot

    def delete_slot(self, date: str, time: str) -> None:
        with self._lock:
            slots = self._load_slots()
            remaining = [s for s in slots if not (s.date == date and s.time == time)]
            if len(remaining) != len(slots):
                self._save_slots(remaining)

    def mark_booked(self, date: str, time: str, client: ClientInfo) -> bool:
        with self._lock:
            slots = self._load_slots()
            for index, slot in enumerate(slots):
                if slot.date == date and slot.time == time:
                    if slot.booked:
                        return False
                    slots[index] = slot.book(client)
                    self._save_slots(slots)
                    return True
            return False
