"""
Unit tests for UserRecord and UserRole.
"""

import pytest
from legasi_dms.domain.user import Credentials, UserRecord, UserRole


@pytest.mark.parametrize("value,expected", [
    ("Super Admin", UserRole.SUPER_ADMIN),
    ("super_admin", UserRole.SUPER_ADMIN),
    ("SUPER_ADMIN", UserRole.SUPER_ADMIN),
    ("Project Manager", UserRole.PROJECT_MANAGER),
    ("project-manager", UserRole.PROJECT_MANAGER),
    ("manager", UserRole.PROJECT_MANAGER),
    ("viewer", None),
    ("", None),
    (None, None),
])
def test_role_parse(value, expected):
    """Test role resolution from labels and backend strings."""
    assert UserRole.parse(value) is expected


def test_role_label():
    assert UserRole.SUPER_ADMIN.label == "Super Admin"
    assert UserRole.PROJECT_MANAGER.label == "Project Manager"


def test_credentials_hide_password():
    """Test password never shows up in repr."""
    creds = Credentials(email="pm@example.com", password="Secret#1")
    assert "Secret#1" not in repr(creds)


def test_user_onboarding_flags():
    """Test onboarding completeness."""
    assert not UserRecord(email_verified=False).is_onboarded()
    assert not UserRecord(email_verified=True, temporal_password=True).is_onboarded()
    assert UserRecord(email_verified=True, temporal_password=False).is_onboarded()


def test_user_serialization_keeps_extra_fields():
    """Test unknown backend fields survive a round trip."""
    data = {
        "id": 7,
        "role": "project_manager",
        "email": "pm@example.com",
        "email_verified": True,
        "temporal_password": False,
        "fullname": "Ada Obi",
        "phone_number": "0800",
    }

    user = UserRecord.from_dict(data)

    assert user.extra == {"fullname": "Ada Obi", "phone_number": "0800"}
    assert user.display_name == "Ada Obi"
    assert user.user_role == UserRole.PROJECT_MANAGER
    assert user.to_dict() == {**data, "name": None}


def test_user_merge_returns_new_record():
    """Test merge applies changes without mutating the original."""
    user = UserRecord(id=1, email="pm@example.com", email_verified=False, temporal_password=True)

    merged = user.merge({"email_verified": True, "username": "ada"})

    assert merged.email_verified is True
    assert merged.temporal_password is True
    assert merged.extra["username"] == "ada"
    assert user.email_verified is False
    assert "username" not in user.extra


def test_user_merge_with_nothing():
    user = UserRecord(id=1, email="pm@example.com")
    assert user.merge(None) == user


@pytest.mark.parametrize("value,expected", [
    (True, True),
    (False, False),
    (1, True),
    (0, False),
    ("true", True),
    ("TRUE", True),
    ("1", True),
    ("false", False),
    ("0", False),
    ("", False),
    (None, False),
])
def test_onboarding_flags_parsed_strictly(value, expected):
    """Test text forms of false never read as set."""
    user = UserRecord.from_dict({"email_verified": value, "temporal_password": value})

    assert user.email_verified is expected
    assert user.temporal_password is expected
