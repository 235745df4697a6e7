"""Document store connectivity check."""

from __future__ import annotations

from luckydraw.errors import BackendError
from luckydraw.repositories.probe_repository import ProbeRepository

PROBE_MESSAGE = "Hello from the lucky draw service!"


class ConnectivityService:
    def __init__(self, repository: ProbeRepository | None = None) -> None:
        self._repo = repository or ProbeRepository()

    def probe(self) -> bool:
        doc = self._repo.write_and_read(PROBE_MESSAGE)
        if not doc or doc.get("message") != PROBE_MESSAGE:
            raise BackendError(message="Probe document could not be read back")
        return True
