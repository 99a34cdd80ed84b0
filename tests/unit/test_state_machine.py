"""
Unit tests for the onboarding state machine.
"""

import pytest

from legasi_dms.domain.user import UserRecord
from legasi_dms.errors import InvalidTransition
from legasi_dms.sdk.onboarding import ACCEPTED_EVENTS, WizardEvent, WizardState, gate, transition

UNVERIFIED = UserRecord(email_verified=False, temporal_password=True)
TEMP_PASSWORD = UserRecord(email_verified=True, temporal_password=True)
ONBOARDED = UserRecord(email_verified=True, temporal_password=False)


@pytest.mark.parametrize("user,expected", [
    (UNVERIFIED, WizardState.NEEDS_EMAIL_VERIFICATION),
    (TEMP_PASSWORD, WizardState.NEEDS_PASSWORD_RESET),
    (ONBOARDED, WizardState.COMPLETE),
])
def test_gate_routes_on_flags(user, expected):
    assert gate(user) == expected


def test_ungated_role_skips_onboarding():
    """Test roles without onboarding go straight to the dashboard."""
    assert gate(UNVERIFIED, gated=False) == WizardState.COMPLETE


def test_submit_starts_authentication():
    assert transition(WizardState.CREDENTIALS, WizardEvent.SUBMIT) == WizardState.AUTHENTICATING
    assert transition(WizardState.FAILED, WizardEvent.SUBMIT) == WizardState.AUTHENTICATING


def test_login_outcomes():
    assert transition(WizardState.AUTHENTICATING, WizardEvent.LOGIN_FAILED) == WizardState.FAILED
    assert transition(
        WizardState.AUTHENTICATING, WizardEvent.LOGIN_SUCCEEDED, user=UNVERIFIED
    ) == WizardState.NEEDS_EMAIL_VERIFICATION


def test_verified_email_routes_through_gate():
    """Test a verified user with a temporary password lands on the reset step."""
    assert transition(
        WizardState.NEEDS_EMAIL_VERIFICATION, WizardEvent.EMAIL_VERIFIED, user=TEMP_PASSWORD
    ) == WizardState.NEEDS_PASSWORD_RESET
    assert transition(
        WizardState.NEEDS_EMAIL_VERIFICATION, WizardEvent.EMAIL_VERIFIED, user=ONBOARDED
    ) == WizardState.COMPLETE


def test_failures_keep_the_current_step():
    assert transition(
        WizardState.NEEDS_EMAIL_VERIFICATION, WizardEvent.VERIFICATION_FAILED
    ) == WizardState.NEEDS_EMAIL_VERIFICATION
    assert transition(
        WizardState.NEEDS_PASSWORD_RESET, WizardEvent.PASSWORD_CHANGE_FAILED
    ) == WizardState.NEEDS_PASSWORD_RESET


def test_password_change_completes():
    assert transition(WizardState.NEEDS_PASSWORD_RESET, WizardEvent.PASSWORD_CHANGED) == WizardState.COMPLETE


def test_success_events_need_user():
    with pytest.raises(InvalidTransition):
        transition(WizardState.AUTHENTICATING, WizardEvent.LOGIN_SUCCEEDED)


def test_complete_is_terminal():
    for event in WizardEvent:
        with pytest.raises(InvalidTransition):
            transition(WizardState.COMPLETE, event, user=ONBOARDED)


def test_rejected_events_raise():
    """Test every event a state does not accept is refused."""
    for state, accepted in ACCEPTED_EVENTS.items():
        for event in set(WizardEvent) - accepted:
            with pytest.raises(InvalidTransition):
                transition(state, event, user=ONBOARDED)
