"""
Redis document store for slots.

Key format: {prefix}:slot:{date}|{time}, each part percent-encoded so "|" never
appears inside a part and distinct (date, time) pairs never share a key.
Value: JSON document in the same layout as one entry of the JSON file store.
Index: {prefix}:index, a Set holding every slot key.

Uniqueness and the booked False -> True transition are enforced with
WATCH/MULTI optimistic transactions on the slot key.
"""

from __future__ import annotations

import json
import logging
from urllib.parse import quote

from redis import Redis, RedisError, WatchError

from app.application.exceptions import DuplicateKey, StorageUnavailable
from app.application.ports.slot_store import SlotStorePort
from app.domain.entities.slot import ClientInfo, Slot
from app.infrastructure.store.serialization import deserialize_slot, serialize_slot, sort_slots


class RedisSlotStore(SlotStorePort):
    """Redis-backed slot store, one document per slot."""

    def __init__(self, redis: Redis, prefix: str = "salon", max_retries: int = 5) -> None:
        self.redis = redis
        self.prefix = prefix
        self.max_retries = max_retries
        self._logger = logging.getLogger(__name__)

    def _key(self, date: str, time: str) -> str:
        return f"{self.prefix}:slot:{quote(date, safe='')}|{quote(time, safe='')}"

    @property
    def _index_key(self) -> str:
        return f"{self.prefix}:index"

    def _decode(self, raw: str | bytes) -> Slot:
        try:
            if isinstance(raw, bytes):
                raw = raw.decode()
            return deserialize_slot(json.loads(raw))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            self._logger.error("Malformed slot document in Redis", extra={"error": str(e)})
            raise StorageUnavailable() from e

    def _storage_error(self, action: str, e: Exception) -> StorageUnavailable:
        self._logger.error("Redis %s failed", action, extra={"error": str(e)})
        return StorageUnavailable()

    # ── Read ─────────────────────────────────────────────────────────────

    def list_slots(self) -> list[Slot]:
        try:
            keys = sorted(self.redis.smembers(self._index_key))
            if not keys:
                return []
            docs = self.redis.mget(keys)
        except RedisError as e:
            raise self._storage_error("list", e) from e
        # Keys whose document vanished between SMEMBERS and MGET were just deleted.
        return sort_slots([self._decode(doc) for doc in docs if doc is not None])

    def find_slot(self, date: str, time: str) -> Slot | None:
        try:
            raw = self.redis.get(self._key(date, time))
        except RedisError as e:
            raise self._storage_error("get", e) from e
        if raw is None:
            return None
        return self._decode(raw)

    # ── Write ────────────────────────────────────────────────────────────

    def insert_slot(self, date: str, time: str) -> Slot:
        self._require_key(date, time)
        key = self._key(date, time)
        slot = Slot(date=date, time=time)
        document = json.dumps(serialize_slot(slot), ensure_ascii=False)

        try:
            with self.redis.pipeline() as pipe:
                for _ in range(self.max_retries):
                    try:
                        pipe.watch(key)
                        if pipe.exists(key):
                            raise DuplicateKey()
                        pipe.multi()
                        pipe.set(key, document)
                        pipe.sadd(self._index_key, key)
                        pipe.execute()
                        return slot
                    except WatchError:
                        continue
        except RedisError as e:
            raise self._storage_error("insert", e) from e

        self._logger.error("Slot insert kept conflicting", extra={"date": date, "time": time})
        raise StorageUnavailable()

    def delete_slot(self, date: str, time: str) -> None:
        key = self._key(date, time)
        try:
            pipe = self.redis.pipeline()
            pipe.delete(key)
            pipe.srem(self._index_key, key)
            pipe.execute()
        except RedisError as e:
            raise self._storage_error("delete", e) from e

    def mark_booked(self, date: str, time: str, client: ClientInfo) -> bool:
        key = self._key(date, time)
        try:
            with self.redis.pipeline() as pipe:
                for _ in range(self.max_retries):
                    try:
                        pipe.watch(key)
                        raw = pipe.get(key)
                        if raw is None:
                            return False
                        slot = self._decode(raw)
                        if slot.booked:
                            return False
                        pipe.multi()
                        pipe.set(key, json.dumps(serialize_slot(slot.book(client)), ensure_ascii=False))
                        pipe.execute()
                        return True
                    except WatchError:
                        # Someone else touched the slot; re-read and decide again.
                        continue
        except RedisError as e:
            raise self._storage_error("update", e) from e

        self._logger.error("Slot booking kept conflicting", extra={"date": date, "time": time})
        raise StorageUnavailable()
