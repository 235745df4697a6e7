"""Repository layer for OrderRecord persistence."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection

from luckydraw.db import get_orders_collection
from luckydraw.models.order_record import OrderRecord


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderRepository:
    """Single-document reads and writes on the order collection.

    Every write is one atomic document operation; no method reads and then
    writes separately.
    """

    def __init__(
        self,
        collection: Collection | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._fixed_collection = collection
        self._clock = clock

    def _collection(self) -> Collection:
        if self._fixed_collection is not None:
            return self._fixed_collection
        return get_orders_collection()

    def get(self, order_number: str) -> OrderRecord | None:
        doc = self._collection().find_one({"_id": order_number})
        if not doc:
            return None
        return OrderRecord.from_document(doc)

    def insert_if_absent(self, order_number: str, registered_by: str | None = None) -> OrderRecord | None:
        """Create an unused record. Returns None if the order number exists."""

        now = self._clock()
        record = OrderRecord(
            order_number=order_number,
            has_played=False,
            draw_result=None,
            created_at=now,
            timestamp=now,
            registered_by=registered_by,
        )
        fields = record.to_document()
        fields.pop("_id")

        result = self._collection().update_one(
            {"_id": order_number},
            {"$setOnInsert": fields},
            upsert=True,
        )
        if result.upserted_id is None:
            return None
        return record

    def mark_played(self, order_number: str, draw_result: str) -> OrderRecord | None:
        """Compare-and-swap ``hasPlayed`` from false to true.

        Returns the updated record, or None when no unused record matched
        (missing or already played).
        """

        doc = self._collection().find_one_and_update(
            # $ne also matches documents written without a hasPlayed field
            {"_id": order_number, "hasPlayed": {"$ne": True}},
            {"$set": {"hasPlayed": True, "drawResult": draw_result, "timestamp": self._clock()}},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None
        return OrderRecord.from_document(doc)

    def list_all(self) -> Sequence[OrderRecord]:
        cur = self._collection().find({}).sort([("createdAt", ASCENDING), ("_id", ASCENDING)])
        return [OrderRecord.from_document(d) for d in cur]

    def list_played(self) -> Sequence[OrderRecord]:
        cur = self._collection().find({"hasPlayed": True}).sort([("timestamp", ASCENDING), ("_id", ASCENDING)])
        return [OrderRecord.from_document(d) for d in cur]
