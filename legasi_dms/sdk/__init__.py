"""
SDK - High-level workflows for the dashboard.

- DashboardClient: wires adapters and hands out workflows
- OnboardingWizard: login, email verification, temporary password reset
- RouteGuard: role dashboard access decisions
- DataEntryForm / DataEntryList: field reports and their media
- DashboardOverview: projects and counters
- ProfileManager: profile and password changes
"""

from legasi_dms.sdk.client import DashboardClient
from legasi_dms.sdk.onboarding import (
    OnboardingWizard,
    StepOutcome,
    WizardEvent,
    WizardState,
    gate,
    submit_credentials,
    transition,
)
from legasi_dms.sdk.guard import Decision, RouteDecision, RouteGuard
from legasi_dms.sdk.data_entry import DataEntryForm, DataEntryList, SubmissionOutcome
from legasi_dms.sdk.overview import DashboardOverview, OverviewSnapshot
from legasi_dms.sdk.profile import ProfileManager, ProfileOutcome

__all__ = [
    "DashboardClient",
    "OnboardingWizard",
    "StepOutcome",
    "WizardEvent",
    "WizardState",
    "gate",
    "submit_credentials",
    "transition",
    "Decision",
    "RouteDecision",
    "RouteGuard",
    "DataEntryForm",
    "DataEntryList",
    "SubmissionOutcome",
    "DashboardOverview",
    "OverviewSnapshot",
    "ProfileManager",
    "ProfileOutcome",
]
