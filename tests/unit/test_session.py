"""
Unit tests for Session domain model.
"""

import time
from datetime import datetime, timedelta, timezone

import jwt

from legasi_dms.domain.session import Session
from legasi_dms.domain.user import UserRecord


def _token(exp):
    return jwt.encode({"sub": "1", "exp": exp}, "any-secret", algorithm="HS256")


def test_session_complete_only_when_onboarded():
    """Test completeness follows the user's onboarding flags."""
    pending = Session(token="t", user=UserRecord(email_verified=True, temporal_password=True))
    done = Session(token="t", user=UserRecord(email_verified=True, temporal_password=False))

    assert not pending.is_complete()
    assert done.is_complete()


def test_session_expiry_from_jwt():
    """Test expiry read from the exp claim without verifying the signature."""
    future = int(time.time()) + 3600
    session = Session(token=_token(future), user=UserRecord())

    assert session.expires_at == datetime.fromtimestamp(future, tz=timezone.utc)
    assert not session.is_expired()
    assert session.is_expired(now=datetime.now(timezone.utc) + timedelta(hours=2))


def test_session_expired_token():
    session = Session(token=_token(int(time.time()) - 10), user=UserRecord())
    assert session.is_expired()


def test_opaque_token_never_expires():
    """Test non-JWT tokens carry no expiry."""
    session = Session(token="opaque-token", user=UserRecord())

    assert session.expires_at is None
    assert not session.is_expired()


def test_with_user_keeps_token_unless_rotated():
    session = Session(token="old", user=UserRecord(id=1))

    same = session.with_user(UserRecord(id=1, email_verified=True))
    rotated = session.with_user(UserRecord(id=1), token="new")

    assert same.token == "old"
    assert same.user.email_verified
    assert rotated.token == "new"


def test_session_serialization():
    """Test session to/from dict."""
    session = Session(token="abc", user=UserRecord(id=3, role="super_admin", email="a@b.c"))

    restored = Session.from_dict(session.to_dict())

    assert restored == session
