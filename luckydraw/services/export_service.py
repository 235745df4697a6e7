"""CSV export of order records."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from datetime import datetime

from luckydraw.models.order_record import OrderRecord

EXPORT_COLUMNS = ("orderNumber", "hasPlayed", "drawResult", "createdAt", "timestamp")
EXPORT_FILENAME = "order-numbers.csv"


def _iso(value: datetime | None) -> str:
    return value.isoformat() if value is not None else ""


def export_csv(records: Iterable[OrderRecord]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(EXPORT_COLUMNS)
    for r in records:
        writer.writerow(
            [
                r.order_number,
                "true" if r.has_played else "false",
                r.draw_result or "",
                _iso(r.created_at),
                _iso(r.timestamp),
            ]
        )
    return buf.getvalue()
