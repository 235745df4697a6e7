"""Tests for sales-rep authorization."""

import pytest

from luckydraw.errors import ConfigurationError, ForbiddenError
from luckydraw.services.authorization import (
    HeaderRoleAuthorizer,
    OpenAuthorizer,
    TokenAuthorizer,
    build_authorizer,
)


class TestHeaderRoleAuthorizer:
    def test_sales_role(self):
        assert HeaderRoleAuthorizer().authorize({"x-role": "sales"}) == "sales"

    def test_role_is_case_insensitive(self):
        assert HeaderRoleAuthorizer().authorize({"x-role": " Sales "}) == "sales"

    @pytest.mark.parametrize("headers", [{}, {"x-role": ""}, {"x-role": "customer"}])
    def test_denied(self, headers):
        with pytest.raises(ForbiddenError):
            HeaderRoleAuthorizer().authorize(headers)


class TestTokenAuthorizer:
    def test_valid_token(self):
        assert TokenAuthorizer("abc").authorize({"x-sales-token": "abc"}) == "sales-token"

    @pytest.mark.parametrize("headers", [{}, {"x-sales-token": "abd"}, {"x-role": "sales"}])
    def test_denied(self, headers):
        with pytest.raises(ForbiddenError):
            TokenAuthorizer("abc").authorize(headers)

    def test_requires_token(self):
        with pytest.raises(ConfigurationError):
            TokenAuthorizer("")


class TestBuildAuthorizer:
    def test_modes(self):
        assert isinstance(build_authorizer("header"), HeaderRoleAuthorizer)
        assert isinstance(build_authorizer("TOKEN", "t"), TokenAuthorizer)
        assert isinstance(build_authorizer("open"), OpenAuthorizer)
        assert isinstance(build_authorizer(""), HeaderRoleAuthorizer)

    def test_open_allows_anyone(self):
        assert build_authorizer("open").authorize({}) is None

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError):
            build_authorizer("ldap")
