"""
Profile Management - View and edit the signed-in manager's account.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from legasi_dms.domain.profile import Profile
from legasi_dms.domain.validation import PasswordPolicy
from legasi_dms.errors import DEFAULT_ERROR_MESSAGE, DMSError, ValidationError
from legasi_dms.ports.dashboard_api_port import DashboardApiPort
from legasi_dms.ports.notifier_port import Notifier

logger = logging.getLogger(__name__)

PROFILE_UPDATED_MESSAGE = "Profile updated successfully"
PASSWORD_CHANGED_MESSAGE = "Password changed successfully"


@dataclass
class ProfileOutcome:
    ok: bool
    profile: Optional[Profile] = None
    error: Optional[str] = None


class ProfileManager:
    """
    Profile page workflows.

    Example:
        manager = ProfileManager(api)
        manager.load()
        manager.profile.phone_number = "+2348000000000"
        manager.save()
    """

    def __init__(
        self,
        api: DashboardApiPort,
        notifier: Optional[Notifier] = None,
        password_policy: Optional[PasswordPolicy] = None,
    ):
        self._api = api
        self._notifier = notifier
        self._policy = password_policy or PasswordPolicy(mismatch_message="New passwords don't match")
        self.profile: Optional[Profile] = None

    def load(self) -> ProfileOutcome:
        result = self._api.fetch_profile()
        if not result.ok:
            return ProfileOutcome(ok=False, error=result.message)
        self.profile = result.value
        return ProfileOutcome(ok=True, profile=self.profile)

    def save(self, profile: Optional[Profile] = None) -> ProfileOutcome:
        """Send the edited profile; the local copy becomes the server's reply."""
        profile = profile or self.profile
        if profile is None:
            return ProfileOutcome(ok=False, error="Profile not loaded")

        return self._run(
            lambda: self._store(self._api.update_profile(profile).unwrap()),
            PROFILE_UPDATED_MESSAGE,
        )

    def change_password(
        self,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> ProfileOutcome:
        """
        Change the account password.

        The new password is checked locally first; a failing check never
        reaches the backend.
        """
        def change():
            if not current_password:
                raise ValidationError("Current password is required")
            self._policy.validate(new_password, confirm_password)
            self._api.change_password(current_password, new_password, confirm_password).unwrap()
            return self.profile

        return self._run(change, PASSWORD_CHANGED_MESSAGE)

    def _store(self, profile: Profile) -> Profile:
        self.profile = profile
        return profile

    def _run(self, step, success_text: str) -> ProfileOutcome:
        try:
            profile = step()
        except DMSError as e:
            self._alert("error", e.message)
            return ProfileOutcome(ok=False, error=e.message)
        except Exception:
            logger.exception("Unexpected error on profile page")
            self._alert("error", DEFAULT_ERROR_MESSAGE)
            return ProfileOutcome(ok=False, error=DEFAULT_ERROR_MESSAGE)

        self._alert("success", success_text)
        return ProfileOutcome(ok=True, profile=profile)

    def _alert(self, kind: str, text: str):
        if not self._notifier:
            return
        if kind == "success":
            self._notifier.success("Success", text)
        else:
            self._notifier.error("Error", text)
