"""Unit tests for reading and writing the session cookie."""

from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Response

from fanclub.config import settings
from fanclub.core.security import create_session_token
from fanclub.core.session import (
    clear_session_cookie,
    decode_session,
    encode_session,
    set_session_cookie,
)
from fanclub.schemas.auth import SessionUser


def _session_user() -> SessionUser:
    return SessionUser(
        id=uuid4(),
        username="alice",
        first_name="Alice",
        last_name="Tester",
        email="a@x.com",
        login_status="logged-in",
        last_login_at=datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc),
    )


class TestDecodeSession:
    def test_valid_cookie_resolves_snapshot(self):
        session_user = _session_user()

        assert decode_session(encode_session(session_user)) == session_user

    def test_missing_cookie_is_anonymous(self):
        assert decode_session(None) is None
        assert decode_session("") is None

    def test_garbage_cookie_is_anonymous(self):
        assert decode_session("not-a-token") is None

    def test_raw_json_cookie_is_anonymous(self):
        """An unsigned JSON snapshot is not accepted as a session."""
        assert decode_session('{"id": "1", "username": "alice"}') is None

    def test_incomplete_snapshot_is_anonymous(self):
        token = create_session_token({"id": str(uuid4())})

        assert decode_session(token) is None


class TestSessionCookie:
    def test_set_cookie_attributes(self):
        response = Response()
        set_session_cookie(response, _session_user())

        header = response.headers["set-cookie"]
        assert header.startswith(f"{settings.session_cookie_name}=")
        assert "HttpOnly" in header
        assert "Max-Age=604800" in header
        assert "Path=/" in header
        assert "samesite=lax" in header.lower()
        # Test environment is not production
        assert "Secure" not in header

    def test_clear_cookie_expires_it(self):
        response = Response()
        clear_session_cookie(response)

        header = response.headers["set-cookie"]
        assert header.startswith(f"{settings.session_cookie_name}=")
        assert "Max-Age=0" in header
