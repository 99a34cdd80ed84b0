"""
Auth API Port - Interface for the backend's authentication endpoints.

Implementations:
- HttpAuthApi: httpx client against the REST backend
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from legasi_dms.domain.result import Result
from legasi_dms.domain.user import UserRole


class AuthApiPort(ABC):
    """Port: Log in and complete account onboarding."""

    @abstractmethod
    def login(self, role: UserRole, email: str, password: str) -> Result[Dict[str, Any]]:
        """
        Submit credentials to the role's login endpoint.

        Args:
            role: Role selected on the login form
            email: Email or login id
            password: Plain-text password (never stored)

        Returns:
            Result whose value is the raw response body
        """
        pass

    @abstractmethod
    def verify_email(self, token: str, code: str) -> Result[Dict[str, Any]]:
        """
        Submit the emailed verification code.

        Args:
            token: Bearer token from login
            code: Six-digit code

        Returns:
            Result whose value is the raw response body
        """
        pass

    @abstractmethod
    def resend_verification_code(self, token: Optional[str], email: str) -> Result[None]:
        """
        Ask the backend to email a fresh verification code.

        Args:
            token: Bearer token, if one is held
            email: Address to send the code to

        Returns:
            Result with no value
        """
        pass

    @abstractmethod
    def change_temporary_password(
        self,
        token: str,
        new_password: str,
        confirm_password: str,
    ) -> Result[Dict[str, Any]]:
        """
        Replace the temporary password issued with the account.

        Args:
            token: Bearer token
            new_password: New password
            confirm_password: Confirmation of the new password

        Returns:
            Result whose value is the raw response body
        """
        pass
