"""Connectivity probe against the document store."""

from __future__ import annotations

from datetime import datetime, timezone

from pymongo.collection import Collection

from luckydraw.db import get_probe_collection

PROBE_DOC_ID = "testDoc"


class ProbeRepository:
    def __init__(self, collection: Collection | None = None) -> None:
        self._fixed_collection = collection

    def _collection(self) -> Collection:
        if self._fixed_collection is not None:
            return self._fixed_collection
        return get_probe_collection()

    def write_and_read(self, message: str) -> dict | None:
        """Upsert the probe document and read it back."""

        coll = self._collection()
        coll.update_one(
            {"_id": PROBE_DOC_ID},
            {"$set": {"message": message, "timestamp": datetime.now(timezone.utc)}},
            upsert=True,
        )
        return coll.find_one({"_id": PROBE_DOC_ID})
