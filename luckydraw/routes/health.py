"""Health and maintenance routes."""

from __future__ import annotations

from flask import Blueprint, Response

from luckydraw.services.connectivity_service import ConnectivityService
from luckydraw.utils.responses import ok

health_bp = Blueprint("health", __name__)

_connectivity = ConnectivityService()


@health_bp.get("/health")
def health_check():
    """Health check endpoint."""

    return ok({"status": "ok"})


@health_bp.get("/keep-alive")
def keep_alive() -> Response:
    return Response("alive", mimetype="text/plain")


@health_bp.get("/test-connection")
@health_bp.get("/test-firestore")
def test_connection():
    """Write and read back a probe document."""

    _connectivity.probe()
    return ok({"connected": True}, message="Document store is connected!")
