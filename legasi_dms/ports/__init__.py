"""
Ports - Interfaces for session storage, backend access and alerts.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from legasi_dms.ports.session_port import SessionRepository
from legasi_dms.ports.auth_api_port import AuthApiPort
from legasi_dms.ports.dashboard_api_port import DashboardApiPort
from legasi_dms.ports.notifier_port import Notifier

__all__ = [
    "SessionRepository",
    "AuthApiPort",
    "DashboardApiPort",
    "Notifier",
]
