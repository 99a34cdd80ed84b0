"""
User Domain Model - Dashboard account as returned by the backend.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from enum import Enum


class UserRole(Enum):
    """Dashboard roles."""
    SUPER_ADMIN = "super_admin"          # Program-wide administration
    PROJECT_MANAGER = "project_manager"  # Data entry for assigned projects

    @property
    def label(self) -> str:
        """Human-readable role name shown on the login selector."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["UserRole"]:
        """
        Resolve a role from a UI label or a backend role string.

        Accepts "Super Admin", "super_admin", "SUPER_ADMIN",
        "Project Manager", "project_manager" and backend variants such
        as "manager". Returns None when nothing matches.
        """
        if not value:
            return None
        if isinstance(value, UserRole):
            return value

        normalized = str(value).strip().lower().replace(" ", "_").replace("-", "_")
        if "super_admin" in normalized:
            return cls.SUPER_ADMIN
        if "manager" in normalized:
            return cls.PROJECT_MANAGER
        return None


@dataclass(frozen=True)
class Credentials:
    """Login form input. Never persisted; the password is kept out of repr."""
    email: str
    password: str = field(repr=False)


_LABELS = {
    UserRole.SUPER_ADMIN: "Super Admin",
    UserRole.PROJECT_MANAGER: "Project Manager",
}

_TRUE_STRINGS = ("true", "1", "yes")


def parse_flag(value: Any) -> bool:
    """
    Read a backend boolean flag.

    Only real booleans, the integer 1 and the strings "true", "1" and
    "yes" (any case) count as set; "false", "0", None and anything else
    read as unset.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False


# Fields modelled explicitly; everything else is kept in UserRecord.extra
_KNOWN_FIELDS = ("id", "role", "name", "email", "email_verified", "temporal_password")


@dataclass
class UserRecord:
    """
    User entity - the account object persisted alongside the token.

    Domain rules:
    - The authoritative copy lives server-side; this is a local mirror
      refreshed after each onboarding step
    - Role-specific fields (fullname, username, phone_number, ...) are
      preserved verbatim in ``extra``
    """
    id: Any = None
    role: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    email_verified: bool = False
    temporal_password: bool = False

    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def user_role(self) -> Optional[UserRole]:
        """Parsed role, or None if the backend sent something unknown."""
        return UserRole.parse(self.role)

    @property
    def display_name(self) -> Optional[str]:
        return self.name or self.extra.get("fullname") or self.extra.get("username")

    def is_onboarded(self) -> bool:
        """True once email is verified and no temporary password remains."""
        return self.email_verified and not self.temporal_password

    def merge(self, changes: Optional[Dict[str, Any]]) -> "UserRecord":
        """
        Return a copy with server-confirmed fields applied on top.

        Args:
            changes: Partial user dict from a backend response

        Returns:
            New UserRecord; self is left untouched
        """
        data = self.to_dict()
        data.update(changes or {})
        return UserRecord.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        data = dict(self.extra)
        data.update({
            "id": self.id,
            "role": self.role,
            "name": self.name,
            "email": self.email,
            "email_verified": self.email_verified,
            "temporal_password": self.temporal_password,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserRecord":
        """Deserialize from dict."""
        return cls(
            id=data.get("id"),
            role=data.get("role"),
            name=data.get("name"),
            email=data.get("email"),
            email_verified=parse_flag(data.get("email_verified")),
            temporal_password=parse_flag(data.get("temporal_password")),
            extra={k: v for k, v in data.items() if k not in _KNOWN_FIELDS},
        )
