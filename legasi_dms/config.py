"""
Client settings loaded from environment / .env file.

Uses pydantic-settings so every value can be overridden via LEGASI_* env
vars (nested fields with a double underscore, e.g.
LEGASI_ENDPOINTS__ADMIN_LOGIN) or the .env file at the project root.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Optional

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from legasi_dms.domain.user import UserRole


class EndpointSettings(BaseModel):
    """Backend paths, relative to ``api_base_url``."""

    # ── Auth ─────────────────────────────────────────────────────────
    admin_login: str = "/auth/admin-login"
    project_manager_login: str = "/auth/project-manager/login"
    email_verification: str = "/auth/project-manager/email-verification"
    change_temp_password: str = "/auth/project-manager/change-temp-password"
    resend_verification: str = "/auth/resend-verification-pin"
    profile: str = "/auth/project-manager/profile"
    update_profile: str = "/auth/project-manager/update-profile"
    change_password: str = "/auth/project-manager/change-password"

    # ── Project manager workspace ────────────────────────────────────
    projects: str = "/project-manager/projects"
    project: str = "/project-manager/project"
    upload_image: str = "/project-manager/upload-image"
    upload_video: str = "/project-manager/upload-video"
    upload_document: str = "/project-manager/upload-document"
    create_data_entry: str = "/project-manager/create-data"
    update_data_entry: str = "/project-manager/update-data"
    data_entries: str = "/project-manager/datas"
    data_entry: str = "/project-manager/data"
    delete_data_entry: str = "/project-manager/delete-data"
    dashboard: str = "/project-manager/dashboard"


class RolePolicy(BaseModel):
    """How one role logs in and whether it must finish onboarding."""

    login_endpoint: str            # attribute name on EndpointSettings
    identifier_field: str          # payload key carrying the email
    user_field: str                # response key carrying the user object
    dashboard_path: str
    requires_onboarding: bool = True


def _default_roles() -> Dict[UserRole, RolePolicy]:
    return {
        UserRole.SUPER_ADMIN: RolePolicy(
            login_endpoint="admin_login",
            identifier_field="email",
            user_field="admin",
            dashboard_path="/superadmin",
            requires_onboarding=False,
        ),
        UserRole.PROJECT_MANAGER: RolePolicy(
            login_endpoint="project_manager_login",
            identifier_field="login_id",
            user_field="user",
            dashboard_path="/project-manager",
            requires_onboarding=True,
        ),
    }


class Settings(BaseSettings):
    # ── Backend ──────────────────────────────────────────────────────
    api_base_url: str = "http://localhost:7000/api/v1"
    request_timeout: float = 60.0
    endpoints: EndpointSettings = EndpointSettings()

    # ── Roles ────────────────────────────────────────────────────────
    roles: Dict[UserRole, RolePolicy] = _default_roles()
    login_path: str = "/login"
    unauthorized_path: str = "/unauthorized"

    # ── Uploads ──────────────────────────────────────────────────────
    max_parallel_uploads: int = 4

    # ── Session storage ──────────────────────────────────────────────
    token_key: str = "authToken"
    user_key: str = "userData"
    session_file: str = "~/.legasi_dms/session.json"
    redis_url: Optional[str] = None

    # ── Logging ──────────────────────────────────────────────────────
    log_level: str = "INFO"

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("roles", mode="before")
    @classmethod
    def _merge_roles(cls, v: object) -> object:
        # Partial overrides (e.g. only requires_onboarding) keep the defaults
        if not isinstance(v, dict):
            return v
        merged = {role: policy.model_dump() for role, policy in _default_roles().items()}
        for key, override in v.items():
            role = UserRole.parse(key) if not isinstance(key, UserRole) else key
            if role is None:
                raise ValueError(f"Unknown role: {key}")
            if isinstance(override, RolePolicy):
                override = override.model_dump()
            merged[role] = {**merged[role], **override}
        return merged

    def policy_for(self, role: UserRole) -> RolePolicy:
        return self.roles[role]

    def endpoint(self, name: str) -> str:
        """Resolve an EndpointSettings attribute name to its path."""
        return getattr(self.endpoints, name)

    model_config = SettingsConfigDict(
        env_prefix="LEGASI_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings instance."""
    return Settings()
