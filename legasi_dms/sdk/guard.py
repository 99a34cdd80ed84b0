"""
Route Guard - Decides whether the stored session may open a dashboard.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from legasi_dms.config import Settings, get_settings
from legasi_dms.domain.user import UserRole
from legasi_dms.ports.session_port import SessionRepository

logger = logging.getLogger(__name__)


class Decision(Enum):
    """Route decision."""
    ALLOW = "allow"
    REDIRECT_LOGIN = "redirect_login"
    UNAUTHORIZED = "unauthorized"


@dataclass
class RouteDecision:
    decision: Decision
    reason: str
    redirect_to: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.decision == Decision.ALLOW


class RouteGuard:
    """
    Protects role dashboards.

    Rules, in order:
    1. No stored session, or an expired token → login page
    2. Stored role differs from the required one → unauthorized page
    3. Role requires onboarding and it is unfinished → login page
    4. Otherwise allow
    """

    def __init__(self, sessions: SessionRepository, settings: Optional[Settings] = None):
        self._sessions = sessions
        self._settings = settings or get_settings()

    def check(self, required_role: UserRole) -> RouteDecision:
        session = self._sessions.get()

        if session is None:
            return self._to_login("No active session")

        if session.is_expired():
            logger.info("Stored session token has expired")
            return self._to_login("Session expired")

        role = session.user.user_role
        if role != required_role:
            return RouteDecision(
                decision=Decision.UNAUTHORIZED,
                reason=f"Role {session.user.role!r} cannot open the {required_role.label} dashboard",
                redirect_to=self._settings.unauthorized_path,
            )

        policy = self._settings.policy_for(required_role)
        if policy.requires_onboarding and not session.is_complete():
            return self._to_login("Onboarding not finished")

        return RouteDecision(decision=Decision.ALLOW, reason=f"{required_role.label} authorized")

    def _to_login(self, reason: str) -> RouteDecision:
        return RouteDecision(
            decision=Decision.REDIRECT_LOGIN,
            reason=reason,
            redirect_to=self._settings.login_path,
        )
