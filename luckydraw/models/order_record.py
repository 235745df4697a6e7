"""OrderRecord document model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def _as_utc(value: Any) -> datetime | None:
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        # pymongo without tz_aware returns naive UTC
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class OrderRecord:
    """One registered order number and its redemption state.

    The order number is the document's ``_id``.
    """

    order_number: str
    has_played: bool = False
    draw_result: str | None = None
    created_at: datetime | None = None
    timestamp: datetime | None = None
    registered_by: str | None = None

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "OrderRecord":
        return cls(
            order_number=str(doc["_id"]),
            has_played=bool(doc.get("hasPlayed", False)),
            draw_result=doc.get("drawResult"),
            created_at=_as_utc(doc.get("createdAt")),
            timestamp=_as_utc(doc.get("timestamp")),
            registered_by=doc.get("registeredBy"),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            "_id": self.order_number,
            "hasPlayed": self.has_played,
            "drawResult": self.draw_result,
            "createdAt": self.created_at,
            "timestamp": self.timestamp,
            "registeredBy": self.registered_by,
        }
