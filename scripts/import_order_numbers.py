"""Bulk-register order numbers into MongoDB.

Reads one order number per line (or the first column of a CSV file) and
creates an unused record for each one that does not exist yet.

Usage:
  MONGODB_URI='mongodb://localhost:27017' python scripts/import_order_numbers.py --file orders.csv

Options:
  --mongo-uri / --mongo-db   override the configured credentials
  --collection orderNumbers
  --dry-run                  report what would be created without writing
"""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from pymongo import MongoClient

from luckydraw.credentials import load_store_credentials
from luckydraw.errors import CredentialsError
from luckydraw.repositories.order_repository import OrderRepository
from luckydraw.services.bulk_import_service import import_order_numbers, iter_order_numbers


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register order numbers from a file")
    parser.add_argument("--file", dest="path", type=str, required=True)
    parser.add_argument("--mongo-uri", dest="mongo_uri", type=str, default=None)
    parser.add_argument("--mongo-db", dest="mongo_db", type=str, default=None)
    parser.add_argument("--collection", dest="collection", type=str, default=None)
    parser.add_argument("--dry-run", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    mongo_uri = args.mongo_uri
    mongo_db = args.mongo_db
    if not mongo_uri:
        try:
            credentials = load_store_credentials()
        except CredentialsError as e:
            raise SystemExit(str(e)) from e
        mongo_uri = credentials.uri
        mongo_db = mongo_db or credentials.database

    mongo_db = mongo_db or os.getenv("MONGODB_DB", "lucky_draw")
    collection_name = args.collection or os.getenv("ORDERS_COLLECTION", "orderNumbers")

    logger.info("MongoDB db=%s collection=%s", mongo_db, collection_name)

    client = MongoClient(mongo_uri, tz_aware=True)
    try:
        repo = OrderRepository(collection=client[mongo_db][collection_name])
        with open(args.path, "r", encoding="utf-8", newline="") as f:
            summary = import_order_numbers(repo, iter_order_numbers(f), dry_run=args.dry_run)
    finally:
        client.close()

    for bad in summary.invalid:
        logger.warning("Skipped invalid order number: %r", bad)

    verb = "Would register" if args.dry_run else "Registered"
    logger.info("%s %s order numbers (%s already existed)", verb, summary.created, summary.existing)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
