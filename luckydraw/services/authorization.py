"""Sales-rep authorization for order number registration.

This is a placeholder collaborator: it decides whether a request may
register an order number before the request reaches RedemptionService.
None of these modes is real authentication.
"""

from __future__ import annotations

import hmac
from collections.abc import Mapping

from luckydraw.errors import ConfigurationError, ForbiddenError

ROLE_HEADER = "x-role"
TOKEN_HEADER = "x-sales-token"
SALES_ROLE = "sales"


class SalesAuthorizer:
    """Approve or deny a registration request.

    ``authorize`` returns an identity string for auditing (may be None) or
    raises ForbiddenError.
    """

    def authorize(self, headers: Mapping[str, str]) -> str | None:
        raise NotImplementedError


class HeaderRoleAuthorizer(SalesAuthorizer):
    """Trust an ``x-role: sales`` request header."""

    def authorize(self, headers: Mapping[str, str]) -> str | None:
        role = (headers.get(ROLE_HEADER) or "").strip().lower()
        if role != SALES_ROLE:
            raise ForbiddenError("Only sales representatives can add order numbers.")
        return SALES_ROLE


class TokenAuthorizer(SalesAuthorizer):
    """Require a shared token in ``x-sales-token``."""

    def __init__(self, token: str) -> None:
        if not token:
            raise ConfigurationError("SALES_API_TOKEN is required when SALES_AUTH_MODE=token")
        self._token = token

    def authorize(self, headers: Mapping[str, str]) -> str | None:
        supplied = (headers.get(TOKEN_HEADER) or "").strip()
        if not supplied or not hmac.compare_digest(supplied.encode("utf-8"), self._token.encode("utf-8")):
            raise ForbiddenError("Invalid sales token.")
        return "sales-token"


class OpenAuthorizer(SalesAuthorizer):
    def authorize(self, headers: Mapping[str, str]) -> str | None:
        return None


def build_authorizer(mode: str, token: str = "") -> SalesAuthorizer:
    """Select an authorizer from SALES_AUTH_MODE."""

    mode = (mode or "header").lower().strip()
    if mode == "header":
        return HeaderRoleAuthorizer()
    if mode == "token":
        return TokenAuthorizer(token)
    if mode == "open":
        return OpenAuthorizer()
    raise ConfigurationError(f"Unknown SALES_AUTH_MODE: {mode!r}")
