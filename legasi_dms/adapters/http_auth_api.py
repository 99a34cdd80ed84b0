"""
HTTP Auth Adapter - Implements AuthApiPort against the REST backend.
"""

from typing import Any, Dict, Optional
from legasi_dms.adapters.http_base import HttpBackend
from legasi_dms.domain.result import Result
from legasi_dms.domain.user import UserRole
from legasi_dms.ports.auth_api_port import AuthApiPort


class HttpAuthApi(HttpBackend, AuthApiPort):
    """
    httpx-based authentication adapter.

    Login payloads are shaped per role (see RolePolicy.identifier_field):
    Project Managers send ``login_id`` where Super Admins send ``email``.
    """

    def login(self, role: UserRole, email: str, password: str) -> Result[Dict[str, Any]]:
        """
        Post credentials to the role's login endpoint.

        The raw body is returned untouched; deciding whether it holds a
        usable token and user is left to the caller.
        """
        policy = self._settings.policy_for(role)
        payload = {
            policy.identifier_field: email,
            "password": password,
        }
        return self._request("POST", self._path(policy.login_endpoint), json=payload)

    def verify_email(self, token: str, code: str) -> Result[Dict[str, Any]]:
        """Post the verification code with the bearer token."""
        result = self._request(
            "POST",
            self._path("email_verification"),
            token=token,
            json={"verificationCode": code},
        )
        return self._require_success(result, default_message="Invalid verification code")

    def resend_verification_code(self, token: Optional[str], email: str) -> Result[None]:
        """Ask for a fresh code; any 2xx reply counts as sent."""
        result = self._request(
            "POST",
            self._path("resend_verification"),
            token=token,
            json={"email": email},
        )
        if not result.ok:
            return result
        return Result.success(None, message=result.message)

    def change_temporary_password(
        self,
        token: str,
        new_password: str,
        confirm_password: str,
    ) -> Result[Dict[str, Any]]:
        """Post the replacement password with the bearer token."""
        result = self._request(
            "POST",
            self._path("change_temp_password"),
            token=token,
            json={
                "newPassword": new_password,
                "confirmPassword": confirm_password,
            },
        )
        return self._require_success(
            result,
            default_message="Failed to update password. Please try again.",
        )
