"""
Unit tests for client settings.
"""

import pytest

from legasi_dms.config import Settings
from legasi_dms.domain.user import UserRole


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_base_url == "http://localhost:7000/api/v1"
    assert settings.request_timeout == 60.0
    assert settings.token_key == "authToken"
    assert settings.user_key == "userData"
    assert settings.endpoint("project_manager_login") == "/auth/project-manager/login"


def test_role_policies():
    """Test each role's login shape and dashboard."""
    settings = Settings(_env_file=None)

    admin = settings.policy_for(UserRole.SUPER_ADMIN)
    manager = settings.policy_for(UserRole.PROJECT_MANAGER)

    assert (admin.identifier_field, admin.user_field, admin.dashboard_path) == ("email", "admin", "/superadmin")
    assert not admin.requires_onboarding
    assert (manager.identifier_field, manager.user_field, manager.dashboard_path) == (
        "login_id", "user", "/project-manager"
    )
    assert manager.requires_onboarding


def test_trailing_slash_stripped():
    assert Settings(_env_file=None, api_base_url="https://dms.example.org/api/v1/").api_base_url == (
        "https://dms.example.org/api/v1"
    )


def test_env_overrides(monkeypatch):
    """Test LEGASI_* variables, nested with a double underscore."""
    monkeypatch.setenv("LEGASI_API_BASE_URL", "https://api.example.org")
    monkeypatch.setenv("LEGASI_ENDPOINTS__ADMIN_LOGIN", "/v2/admin/login")
    monkeypatch.setenv("LEGASI_MAX_PARALLEL_UPLOADS", "2")

    settings = Settings(_env_file=None)

    assert settings.api_base_url == "https://api.example.org"
    assert settings.endpoints.admin_login == "/v2/admin/login"
    assert settings.endpoints.project_manager_login == "/auth/project-manager/login"
    assert settings.max_parallel_uploads == 2


def test_partial_role_override_keeps_defaults():
    settings = Settings(_env_file=None, roles={"Super Admin": {"requires_onboarding": True}})

    admin = settings.policy_for(UserRole.SUPER_ADMIN)
    assert admin.requires_onboarding
    assert admin.user_field == "admin"
    assert settings.policy_for(UserRole.PROJECT_MANAGER).identifier_field == "login_id"


def test_unknown_role_rejected():
    with pytest.raises(ValueError):
        Settings(_env_file=None, roles={"auditor": {"requires_onboarding": True}})
