"""Tests for reading the caller's session from a request."""

import pytest

from banter.config import AuthSettings
from banter.domain.error import UnauthenticatedError
from banter.domain.service import JWTService
from banter.interface.api.auth import require_user_id, session_token


class TestSessionToken:
    def test_cookie_wins_over_header(self):
        assert session_token("cookie-token", "Bearer header-token") == "cookie-token"

    def test_bearer_header(self):
        assert session_token(None, "Bearer abc.def") == "abc.def"
        assert session_token(None, "bearer abc.def") == "abc.def"

    def test_other_schemes_ignored(self):
        assert session_token(None, "Basic dXNlcjpwYXNz") is None
        assert session_token(None, "Bearer ") is None
        assert session_token(None, None) is None


class TestRequireUserId:
    def test_valid_token(self):
        jwt_service = JWTService(AuthSettings())
        token = jwt_service.create_token("user-1", "Ada")

        assert require_user_id(jwt_service, token, None) == "user-1"

    def test_missing_token(self):
        with pytest.raises(UnauthenticatedError):
            require_user_id(JWTService(AuthSettings()), None, None)
