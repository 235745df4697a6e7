"""Bulk registration of order numbers from a text or CSV file."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from marshmallow import ValidationError as MarshmallowValidationError

from luckydraw.repositories.order_repository import OrderRepository
from luckydraw.schemas.order import OrderNumberSchema

logger = logging.getLogger(__name__)

_schema = OrderNumberSchema()
_HEADER_NAMES = {"ordernumber", "order_number", "order number"}


@dataclass
class ImportSummary:
    created: int = 0
    existing: int = 0
    invalid: list[str] = field(default_factory=list)


def iter_order_numbers(lines: Iterable[str]) -> Iterator[str]:
    """Yield the first column of each non-empty row, skipping a header row."""

    for i, row in enumerate(csv.reader(lines)):
        if not row or not row[0].strip():
            continue
        value = row[0].strip()
        if i == 0 and value.lower() in _HEADER_NAMES:
            continue
        yield value


def import_order_numbers(
    repository: OrderRepository,
    order_numbers: Iterable[str],
    *,
    registered_by: str | None = "bulk-import",
    dry_run: bool = False,
) -> ImportSummary:
    summary = ImportSummary()
    seen: set[str] = set()

    for raw in order_numbers:
        try:
            order_number = _schema.load({"orderNumber": raw})["order_number"]
        except MarshmallowValidationError:
            summary.invalid.append(raw)
            continue

        if order_number in seen:
            summary.existing += 1
            continue
        seen.add(order_number)

        if dry_run:
            if repository.get(order_number) is None:
                summary.created += 1
            else:
                summary.existing += 1
            continue

        if repository.insert_if_absent(order_number, registered_by=registered_by) is None:
            summary.existing += 1
        else:
            summary.created += 1
            if summary.created % 500 == 0:
                logger.info("Registered %s order numbers...", summary.created)

    return summary
