"""MongoDB client lifecycle.

One ``MongoClient`` per process: created by ``init_db`` at startup, shared by
every request through ``app.extensions`` and closed when the process exits.
"""

from __future__ import annotations

import atexit
import logging

from flask import Flask, current_app
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from luckydraw.credentials import StoreCredentials, load_store_credentials

logger = logging.getLogger(__name__)


def create_mongo_client(credentials: StoreCredentials) -> MongoClient:
    # Lazy connect: no network traffic until the first operation.
    return MongoClient(credentials.uri, tz_aware=True, connect=False)


def init_db(app: Flask, client: MongoClient | None = None) -> None:
    """Attach the document store client to the app.

    When ``client`` is given (tests) it is used as-is and its lifecycle is
    left to the caller. Otherwise credentials are resolved from the
    environment, which raises ``CredentialsError`` if they are absent.
    """

    database_name = str(app.config["MONGODB_DB"])

    if client is None:
        credentials = load_store_credentials()
        client = create_mongo_client(credentials)
        if credentials.database:
            database_name = credentials.database
        atexit.register(_close_client, client)
        logger.info("Document store client created (source=%s, db=%s)", credentials.source, database_name)

    app.extensions["mongo_client"] = client
    app.extensions["mongo_db"] = client[database_name]


def _close_client(client: MongoClient) -> None:
    logger.info("Closing document store client")
    client.close()


def get_mongo_db() -> Database:
    """Get the database bound to the current app."""

    db: Database | None = current_app.extensions.get("mongo_db")
    if db is None:
        raise RuntimeError("Document store not initialized")
    return db


def get_orders_collection() -> Collection:
    return get_mongo_db()[str(current_app.config["ORDERS_COLLECTION"])]


def get_probe_collection() -> Collection:
    return get_mongo_db()[str(current_app.config["PROBE_COLLECTION"])]
