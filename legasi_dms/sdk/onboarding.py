"""
Login & Onboarding Wizard - Guards access to the role dashboards.

Flow:
┌──────────────────────────────────────────────────────────────────────┐
│  CREDENTIALS → AUTHENTICATING ─┬─→ NEEDS_EMAIL_VERIFICATION ─┐       │
│       ↑                        ├─→ NEEDS_PASSWORD_RESET ←────┤       │
│       │                        ├─→ COMPLETE ←────────────────┘       │
│    FAILED ←────────────────────┘                                     │
└──────────────────────────────────────────────────────────────────────┘

The state machine (``transition``) is pure and independent of any UI;
OnboardingWizard drives it with backend calls and session persistence.
Every step catches its own errors and reports them in a StepOutcome,
so a failed step never leaves the wizard in an undefined state.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Set

from legasi_dms.config import Settings, get_settings
from legasi_dms.domain.result import ErrorKind
from legasi_dms.domain.session import Session
from legasi_dms.domain.user import Credentials, UserRecord, UserRole, parse_flag
from legasi_dms.domain.validation import (
    PasswordPolicy,
    PasswordRequirements,
    validate_verification_code,
)
from legasi_dms.errors import (
    DEFAULT_ERROR_MESSAGE,
    AuthenticationError,
    DMSError,
    InvalidTransition,
)
from legasi_dms.ports.auth_api_port import AuthApiPort
from legasi_dms.ports.notifier_port import Notifier
from legasi_dms.ports.session_port import SessionRepository

logger = logging.getLogger(__name__)

AUTH_FAILED_MESSAGE = "Authentication failed. Please try again."
EMAIL_VERIFIED_MESSAGE = "Email verified successfully"
INVALID_CODE_MESSAGE = "Invalid verification code"
CODE_SENT_MESSAGE = "Verification code sent"
PASSWORD_UPDATED_MESSAGE = "Your password has been updated successfully. Redirecting to dashboard..."
PASSWORD_FAILED_MESSAGE = "Failed to update password. Please try again."


class WizardState(str, Enum):
    """Onboarding wizard states."""
    CREDENTIALS = "credentials"
    AUTHENTICATING = "authenticating"
    NEEDS_EMAIL_VERIFICATION = "needs_email_verification"
    NEEDS_PASSWORD_RESET = "needs_password_reset"
    FAILED = "failed"
    COMPLETE = "complete"


class WizardEvent(str, Enum):
    """Inputs that move the wizard."""
    SUBMIT = "submit"
    LOGIN_SUCCEEDED = "login_succeeded"
    LOGIN_FAILED = "login_failed"
    EMAIL_VERIFIED = "email_verified"
    VERIFICATION_FAILED = "verification_failed"
    PASSWORD_CHANGED = "password_changed"
    PASSWORD_CHANGE_FAILED = "password_change_failed"


# Events each state accepts
ACCEPTED_EVENTS: Dict[WizardState, Set[WizardEvent]] = {
    WizardState.CREDENTIALS: {WizardEvent.SUBMIT},
    WizardState.FAILED: {WizardEvent.SUBMIT},
    WizardState.AUTHENTICATING: {WizardEvent.LOGIN_SUCCEEDED, WizardEvent.LOGIN_FAILED},
    WizardState.NEEDS_EMAIL_VERIFICATION: {WizardEvent.EMAIL_VERIFIED, WizardEvent.VERIFICATION_FAILED},
    WizardState.NEEDS_PASSWORD_RESET: {WizardEvent.PASSWORD_CHANGED, WizardEvent.PASSWORD_CHANGE_FAILED},
    WizardState.COMPLETE: set(),
}


def gate(user: UserRecord, gated: bool = True) -> WizardState:
    """
    Decide where a signed-in user goes next.

    Args:
        user: Server-confirmed user record
        gated: Whether the user's role must finish onboarding

    Returns:
        NEEDS_EMAIL_VERIFICATION, NEEDS_PASSWORD_RESET or COMPLETE
    """
    if not gated:
        return WizardState.COMPLETE
    if not user.email_verified:
        return WizardState.NEEDS_EMAIL_VERIFICATION
    if user.temporal_password:
        return WizardState.NEEDS_PASSWORD_RESET
    return WizardState.COMPLETE


def transition(
    state: WizardState,
    event: WizardEvent,
    user: Optional[UserRecord] = None,
    gated: bool = True,
) -> WizardState:
    """
    Compute the next wizard state.

    Args:
        state: Current state
        event: Event to apply
        user: Updated user record (required for success events)
        gated: Whether the role must finish onboarding

    Returns:
        Next state

    Raises:
        InvalidTransition: if ``state`` does not accept ``event``
    """
    if event not in ACCEPTED_EVENTS[state]:
        raise InvalidTransition(f"Cannot apply {event.value} in state {state.value}")

    if event == WizardEvent.SUBMIT:
        return WizardState.AUTHENTICATING
    if event == WizardEvent.LOGIN_FAILED:
        return WizardState.FAILED
    if event in (WizardEvent.VERIFICATION_FAILED, WizardEvent.PASSWORD_CHANGE_FAILED):
        return state
    if event == WizardEvent.PASSWORD_CHANGED:
        return WizardState.COMPLETE

    # LOGIN_SUCCEEDED / EMAIL_VERIFIED: route on the refreshed flags
    if user is None:
        raise InvalidTransition(f"{event.value} requires the updated user")
    return gate(user, gated)


@dataclass
class StepOutcome:
    """What the UI should show after a wizard step."""
    state: WizardState
    error: Optional[str] = None
    notice: Optional[str] = None
    redirect_to: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def submit_credentials(
    auth_api: AuthApiPort,
    role: UserRole,
    credentials: Credentials,
    settings: Optional[Settings] = None,
) -> Session:
    """
    Log in and extract the session from the reply. Nothing is persisted.

    Args:
        auth_api: Backend adapter
        role: Role selected on the login form
        credentials: Email and password
        settings: Client settings (for the role's response shape)

    Returns:
        Session built from the reply's token and user object

    Raises:
        AuthenticationError: success flag false or token/user missing
        NetworkError: no response received
        UnexpectedError: unreadable reply
    """
    policy = (settings or get_settings()).policy_for(role)
    result = auth_api.login(role, credentials.email, credentials.password)

    if not result.ok:
        if result.error.kind == ErrorKind.REJECTED:
            raise AuthenticationError(result.error)
        raise result.error.to_exception()

    body = result.value
    token = body.get("token")
    user_data = body.get(policy.user_field)

    if body.get("success") is not True or not token or not isinstance(user_data, dict):
        raise AuthenticationError.from_message(body.get("message") or AUTH_FAILED_MESSAGE)

    user = UserRecord.from_dict(user_data)
    if not user.role:
        user.role = role.value

    return Session(token=token, user=user)


class OnboardingWizard:
    """
    Drives one login attempt through onboarding.

    Example:
        wizard = OnboardingWizard(UserRole.PROJECT_MANAGER, auth_api, sessions)

        outcome = wizard.login("pm@example.com", "Temp#123")
        if outcome.state == WizardState.NEEDS_EMAIL_VERIFICATION:
            outcome = wizard.verify_email("123456")
        if outcome.state == WizardState.NEEDS_PASSWORD_RESET:
            outcome = wizard.reset_password("N3w#Password", "N3w#Password")
        if outcome.redirect_to:
            go(outcome.redirect_to)
    """

    def __init__(
        self,
        role: UserRole,
        auth_api: AuthApiPort,
        sessions: SessionRepository,
        settings: Optional[Settings] = None,
        notifier: Optional[Notifier] = None,
        password_policy: Optional[PasswordPolicy] = None,
    ):
        """
        Initialize wizard.

        Args:
            role: Role selected on the login form
            auth_api: Backend adapter
            sessions: Session repository written after each step
            settings: Client settings
            notifier: Alert sink (optional)
            password_policy: Rules for the new password
        """
        self._role = role
        self._auth_api = auth_api
        self._sessions = sessions
        self._settings = settings or get_settings()
        self._policy = self._settings.policy_for(role)
        self._notifier = notifier
        self._password_policy = password_policy or PasswordPolicy()

        self._state = WizardState.CREDENTIALS
        self._email: Optional[str] = None
        self._session: Optional[Session] = None

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def user(self) -> Optional[UserRecord]:
        return self._session.user if self._session else None

    @property
    def gated(self) -> bool:
        return self._policy.requires_onboarding

    def resume(self) -> StepOutcome:
        """
        Pick up a stored session for this role (e.g. after a reload).

        Returns:
            Outcome for the step the stored user still has to complete;
            the wizard stays on CREDENTIALS if nothing usable is stored
        """
        session = self._sessions.get()
        if session is None or session.user.user_role != self._role or session.is_expired():
            return StepOutcome(state=self._state)

        self._session = session
        self._email = session.user.email
        self._state = gate(session.user, self.gated)
        return self._outcome()

    # Credential submission & post-login gate

    def login(self, email: str, password: str) -> StepOutcome:
        """
        Submit credentials and route the user.

        Persists the session on success, before any onboarding step.
        """
        self._state = transition(self._state, WizardEvent.SUBMIT)
        self._email = email

        try:
            session = submit_credentials(
                self._auth_api,
                self._role,
                Credentials(email=email, password=password),
                self._settings,
            )
        except DMSError as e:
            logger.info("Login failed for role %s: %s", self._role.value, e.message)
            self._state = transition(self._state, WizardEvent.LOGIN_FAILED)
            return StepOutcome(state=self._state, error=e.message)
        except Exception:
            logger.exception("Unexpected error during login")
            self._state = transition(self._state, WizardEvent.LOGIN_FAILED)
            return StepOutcome(state=self._state, error=DEFAULT_ERROR_MESSAGE)

        self._session = self._sessions.set(session.token, session.user)
        self._state = transition(
            self._state,
            WizardEvent.LOGIN_SUCCEEDED,
            user=session.user,
            gated=self.gated,
        )
        logger.info("Login succeeded for role %s, next step: %s", self._role.value, self._state.value)
        return self._outcome()

    # Email verification

    def verify_email(self, code: str) -> StepOutcome:
        """Submit the emailed six-digit code."""
        self._expect(WizardState.NEEDS_EMAIL_VERIFICATION)

        try:
            code = validate_verification_code(code)
        except DMSError as e:
            return StepOutcome(state=self._state, error=e.message)

        try:
            body = self._auth_api.verify_email(self._session.token, code).unwrap()
        except DMSError as e:
            return self._fail_verification(e.message or INVALID_CODE_MESSAGE)
        except Exception:
            logger.exception("Unexpected error during email verification")
            return self._fail_verification("An error occurred during verification")

        changes = {"email_verified": True}
        reply_user = body.get("user")
        if isinstance(reply_user, dict):
            for flag in ("email_verified", "temporal_password"):
                if flag in reply_user:
                    changes[flag] = parse_flag(reply_user[flag])

        user = self._session.user.merge(changes)
        self._session = self._sessions.set(self._session.token, user)

        message = body.get("message") or EMAIL_VERIFIED_MESSAGE
        self._notify_success(message)

        self._state = transition(self._state, WizardEvent.EMAIL_VERIFIED, user=user, gated=self.gated)
        return self._outcome(notice=message)

    def resend_code(self) -> StepOutcome:
        """Request a new code; the wizard state is left unchanged."""
        self._expect(WizardState.NEEDS_EMAIL_VERIFICATION)

        email = self._email or self.user.email
        try:
            result = self._auth_api.resend_verification_code(self._session.token, email)
        except Exception:
            logger.exception("Unexpected error while resending verification code")
            return StepOutcome(state=self._state, error="Failed to resend PIN. Please try again.")

        if not result.ok:
            return StepOutcome(state=self._state, error=result.message or "Failed to resend PIN")
        return StepOutcome(state=self._state, notice=CODE_SENT_MESSAGE)

    # Temporary password reset

    def password_requirements(self, password: str) -> PasswordRequirements:
        """Live checklist for the new-password field."""
        return self._password_policy.requirements(password)

    def can_submit_password(self, password: str, confirmation: str) -> bool:
        """Whether the submit button should be enabled."""
        return self._password_policy.can_submit(password, confirmation)

    def reset_password(self, new_password: str, confirm_password: str) -> StepOutcome:
        """Replace the temporary password and finish onboarding."""
        self._expect(WizardState.NEEDS_PASSWORD_RESET)

        try:
            self._password_policy.validate(new_password, confirm_password)
        except DMSError as e:
            return StepOutcome(state=self._state, error=e.message)

        try:
            body = self._auth_api.change_temporary_password(
                self._session.token,
                new_password,
                confirm_password,
            ).unwrap()
        except DMSError as e:
            return self._fail_password(e.message or PASSWORD_FAILED_MESSAGE)
        except Exception:
            logger.exception("Unexpected error during password change")
            return self._fail_password("An error occurred. Please try again.")

        reply_user = body.get("user")
        changes = dict(reply_user) if isinstance(reply_user, dict) else {}
        changes["temporal_password"] = False
        user = self._session.user.merge(changes)
        self._session = self._sessions.set(body.get("token") or self._session.token, user)

        self._state = transition(self._state, WizardEvent.PASSWORD_CHANGED, user=user, gated=self.gated)
        return self._outcome(notice=PASSWORD_UPDATED_MESSAGE)

    # Helpers

    def _expect(self, state: WizardState):
        if self._state != state:
            raise InvalidTransition(
                f"Step requires state {state.value}, wizard is in {self._state.value}"
            )

    def _outcome(self, notice: Optional[str] = None) -> StepOutcome:
        redirect_to = self._policy.dashboard_path if self._state == WizardState.COMPLETE else None
        return StepOutcome(state=self._state, notice=notice, redirect_to=redirect_to)

    def _fail_verification(self, message: str) -> StepOutcome:
        self._notify_error(message)
        self._state = transition(self._state, WizardEvent.VERIFICATION_FAILED)
        return StepOutcome(state=self._state, error=message)

    def _fail_password(self, message: str) -> StepOutcome:
        self._state = transition(self._state, WizardEvent.PASSWORD_CHANGE_FAILED)
        return StepOutcome(state=self._state, error=message)

    def _notify_success(self, text: str):
        if self._notifier:
            self._notifier.success("success", text)

    def _notify_error(self, text: str):
        if self._notifier:
            self._notifier.error("error", text)
