"""
Session Domain Model - Bearer token plus the user it belongs to.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from datetime import datetime, timezone

import jwt

from legasi_dms.domain.user import UserRecord


@dataclass
class Session:
    """
    Session entity - what the dashboard keeps between page loads.

    Domain rules:
    - Created on successful login, overwritten after each onboarding step,
      destroyed on logout
    - Complete (usable for the dashboard) only when the email is verified
      and no temporary password remains
    - The token is opaque to the client; expiry is read from the ``exp``
      claim when the backend issues JWTs, without verifying the signature
    """
    token: str
    user: UserRecord

    def is_complete(self) -> bool:
        """Check if onboarding is finished for this session's user."""
        return self.user.is_onboarded()

    @property
    def expires_at(self) -> Optional[datetime]:
        """Token expiry from its ``exp`` claim, None for non-JWT tokens."""
        try:
            claims = jwt.decode(
                self.token,
                options={"verify_signature": False, "verify_exp": False},
            )
        except jwt.InvalidTokenError:
            return None

        exp = claims.get("exp")
        if exp is None:
            return None
        try:
            return datetime.fromtimestamp(int(exp), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError):
            return None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """True if the token carries an expiry that has passed."""
        expires_at = self.expires_at
        if expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) >= expires_at

    def with_user(self, user: UserRecord, token: Optional[str] = None) -> "Session":
        """Copy with a refreshed user and, if given, a rotated token."""
        return Session(token=token or self.token, user=user)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "token": self.token,
            "user": self.user.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        """Deserialize from dict."""
        return cls(
            token=data["token"],
            user=UserRecord.from_dict(data.get("user") or {}),
        )
