"""
Dashboard Client - High-level SDK for the LEGASI dashboard.

Wires settings, session storage, the backend adapters and alerts
together, and hands out the per-page workflows.
"""

import logging
from typing import Optional

import httpx

from legasi_dms.adapters.file_session import FileSessionRepository
from legasi_dms.adapters.http_auth_api import HttpAuthApi
from legasi_dms.adapters.http_dashboard_api import HttpDashboardApi
from legasi_dms.adapters.logging_notifier import LoggingNotifier
from legasi_dms.adapters.redis_session import RedisSessionRepository
from legasi_dms.config import Settings, get_settings
from legasi_dms.domain.session import Session
from legasi_dms.domain.user import UserRole
from legasi_dms.ports.auth_api_port import AuthApiPort
from legasi_dms.ports.dashboard_api_port import DashboardApiPort
from legasi_dms.ports.notifier_port import Notifier
from legasi_dms.ports.session_port import SessionRepository
from legasi_dms.sdk.data_entry import DataEntryForm, DataEntryList
from legasi_dms.sdk.guard import RouteDecision, RouteGuard
from legasi_dms.sdk.onboarding import OnboardingWizard
from legasi_dms.sdk.overview import DashboardOverview
from legasi_dms.sdk.profile import ProfileManager

logger = logging.getLogger(__name__)


class DashboardClient:
    """
    High-level client combining session storage, backend access and alerts.

    Example:
        from legasi_dms import DashboardClient, UserRole

        client = DashboardClient.from_settings()

        wizard = client.start_login(UserRole.PROJECT_MANAGER)
        outcome = wizard.login("pm@example.com", "Temp#123")

        # Later, on the dashboard
        if client.check_access(UserRole.PROJECT_MANAGER).allowed:
            overview = client.overview().load()

        client.logout()
    """

    def __init__(
        self,
        sessions: SessionRepository,
        auth_api: AuthApiPort,
        dashboard_api: DashboardApiPort,
        settings: Optional[Settings] = None,
        notifier: Optional[Notifier] = None,
    ):
        """
        Initialize dashboard client with adapters.

        Args:
            sessions: Session repository (required)
            auth_api: Login and onboarding backend
            dashboard_api: Workspace backend
            settings: Client settings
            notifier: Alert sink (defaults to LoggingNotifier)
        """
        self._sessions = sessions
        self._auth_api = auth_api
        self._dashboard_api = dashboard_api
        self._settings = settings or get_settings()
        self._notifier = notifier or LoggingNotifier()
        self._http: Optional[httpx.Client] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        sessions: Optional[SessionRepository] = None,
        http_client: Optional[httpx.Client] = None,
        notifier: Optional[Notifier] = None,
    ) -> "DashboardClient":
        """
        Build a client with the HTTP adapters.

        Session storage is Redis when ``redis_url`` is configured,
        otherwise the JSON session file.

        Args:
            settings: Client settings
            sessions: Session repository overriding the configured one
            http_client: httpx.Client shared by both adapters
            notifier: Alert sink
        """
        settings = settings or get_settings()

        if sessions is None:
            if settings.redis_url:
                sessions = RedisSessionRepository(
                    redis_url=settings.redis_url,
                    token_key=settings.token_key,
                    user_key=settings.user_key,
                )
            else:
                sessions = FileSessionRepository(
                    settings.session_file,
                    token_key=settings.token_key,
                    user_key=settings.user_key,
                )

        owns_http = http_client is None
        http_client = http_client or httpx.Client(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
            headers={"Accept": "application/json"},
        )

        client = cls(
            sessions=sessions,
            auth_api=HttpAuthApi(settings=settings, client=http_client),
            dashboard_api=HttpDashboardApi(sessions, settings=settings, client=http_client),
            settings=settings,
            notifier=notifier,
        )
        if owns_http:
            client._http = http_client
        return client

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def sessions(self) -> SessionRepository:
        return self._sessions

    # Authentication

    def start_login(self, role: UserRole) -> OnboardingWizard:
        """
        Begin a login attempt for the role chosen on the login form.

        Returns:
            A fresh wizard in the CREDENTIALS state
        """
        return OnboardingWizard(
            role,
            self._auth_api,
            self._sessions,
            settings=self._settings,
            notifier=self._notifier,
        )

    def current_session(self) -> Optional[Session]:
        return self._sessions.get()

    def guard(self) -> RouteGuard:
        return RouteGuard(self._sessions, self._settings)

    def check_access(self, required_role: UserRole) -> RouteDecision:
        """Route guard decision for a role dashboard."""
        return self.guard().check(required_role)

    def logout(self) -> None:
        """Forget the stored session."""
        self._sessions.clear()
        logger.info("Session cleared")

    # Workspace

    def overview(self) -> DashboardOverview:
        return DashboardOverview(self._dashboard_api)

    def data_entry_form(self) -> DataEntryForm:
        return DataEntryForm(self._dashboard_api, settings=self._settings, notifier=self._notifier)

    def data_entries(self) -> DataEntryList:
        return DataEntryList(self._dashboard_api, notifier=self._notifier)

    def profile(self) -> ProfileManager:
        return ProfileManager(self._dashboard_api, notifier=self._notifier)

    def close(self):
        """Close the HTTP client if this instance created it."""
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
