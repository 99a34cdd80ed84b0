"""
LEGASI DMS - Dashboard client for the LEGASI data management system

Hexagonal architecture for role-based login, first-login onboarding
and the project manager workspace.

Usage:
    from legasi_dms import DashboardClient, UserRole

    client = DashboardClient.from_settings()

    # Log in and onboard
    wizard = client.start_login(UserRole.PROJECT_MANAGER)
    outcome = wizard.login("pm@example.com", "Temp#123")

    # Guard a dashboard
    decision = client.check_access(UserRole.PROJECT_MANAGER)
"""

__version__ = "0.1.0"

from legasi_dms.sdk.client import DashboardClient
from legasi_dms.domain.user import UserRecord, UserRole
from legasi_dms.domain.session import Session
from legasi_dms.config import Settings, get_settings
from legasi_dms.logging_config import configure_logging

__all__ = [
    "DashboardClient",
    "UserRecord",
    "UserRole",
    "Session",
    "Settings",
    "get_settings",
    "configure_logging",
]
