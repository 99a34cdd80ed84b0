"""
Domain Models - Pure dashboard entities.

No infrastructure dependencies. Domain logic only.
"""

from legasi_dms.domain.user import UserRecord, UserRole, Credentials
from legasi_dms.domain.session import Session
from legasi_dms.domain.result import Result, ApiError, ErrorKind, is_success_payload
from legasi_dms.domain.validation import (
    PasswordPolicy,
    PasswordRequirements,
    validate_verification_code,
)
from legasi_dms.domain.data_entry import DataEntry, CustomField, MediaFile, MediaType
from legasi_dms.domain.project import Project, DashboardStats
from legasi_dms.domain.profile import Profile

__all__ = [
    "UserRecord",
    "UserRole",
    "Credentials",
    "Session",
    "Result",
    "ApiError",
    "ErrorKind",
    "is_success_payload",
    "PasswordPolicy",
    "PasswordRequirements",
    "validate_verification_code",
    "DataEntry",
    "CustomField",
    "MediaFile",
    "MediaType",
    "Project",
    "DashboardStats",
    "Profile",
]
