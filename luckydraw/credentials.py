"""Document store credential resolution.

Priority:
  1) MONGODB_CREDENTIALS       base64-encoded JSON blob
  2) MONGODB_CREDENTIALS_FILE  path to a JSON file
  3) MONGODB_URI               plain connection string

The JSON form is ``{"uri": "...", "database": "..."}``; ``connectionString``
is accepted in place of ``uri`` and ``database`` is optional.
"""

from __future__ import annotations

import base64
import binascii
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from luckydraw.errors import InvalidCredentialsError, MissingCredentialsError


@dataclass(frozen=True)
class StoreCredentials:
    uri: str
    database: str | None = None
    source: str = "env"


def _from_mapping(data: Any, source: str) -> StoreCredentials:
    if not isinstance(data, Mapping):
        raise InvalidCredentialsError(f"{source}: credentials must be a JSON object")

    uri = str(data.get("uri") or data.get("connectionString") or "").strip()
    if not uri:
        raise InvalidCredentialsError(f"{source}: credentials have no 'uri'")

    database = str(data.get("database") or "").strip() or None
    return StoreCredentials(uri=uri, database=database, source=source)


def decode_base64_credentials(blob: str) -> StoreCredentials:
    """Parse a base64-encoded JSON credentials blob."""

    try:
        raw = base64.b64decode(blob.strip(), validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidCredentialsError(f"MONGODB_CREDENTIALS is not valid base64 JSON: {e}") from e
    return _from_mapping(data, "MONGODB_CREDENTIALS")


def read_credentials_file(path: str) -> StoreCredentials:
    """Parse a JSON credentials file."""

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise InvalidCredentialsError(f"Cannot read credentials file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidCredentialsError(f"Credentials file {path} is not valid JSON: {e}") from e
    return _from_mapping(data, "MONGODB_CREDENTIALS_FILE")


def load_store_credentials(environ: Mapping[str, str] | None = None) -> StoreCredentials:
    """Resolve credentials from the environment.

    Raises:
        MissingCredentialsError: no source is set.
        InvalidCredentialsError: a source is set but cannot be used.
    """

    env = os.environ if environ is None else environ

    blob = (env.get("MONGODB_CREDENTIALS") or "").strip()
    if blob:
        return decode_base64_credentials(blob)

    path = (env.get("MONGODB_CREDENTIALS_FILE") or "").strip()
    if path:
        return read_credentials_file(path)

    uri = (env.get("MONGODB_URI") or "").strip()
    if uri:
        return StoreCredentials(uri=uri, source="MONGODB_URI")

    raise MissingCredentialsError(
        "Document store credentials not found "
        "(set MONGODB_CREDENTIALS, MONGODB_CREDENTIALS_FILE or MONGODB_URI)"
    )
