"""
HTTP Dashboard Adapter - Implements DashboardApiPort against the REST backend.
"""

import logging
from typing import Any, Dict, List, Optional
from legasi_dms.adapters.http_base import HttpBackend
from legasi_dms.config import Settings
from legasi_dms.domain.data_entry import DataEntry, MediaType
from legasi_dms.domain.project import Project, DashboardStats
from legasi_dms.domain.profile import Profile
from legasi_dms.domain.result import Result
from legasi_dms.ports.dashboard_api_port import DashboardApiPort
from legasi_dms.ports.session_port import SessionRepository

logger = logging.getLogger(__name__)

_UPLOAD_ENDPOINTS = {
    MediaType.IMAGE: "upload_image",
    MediaType.VIDEO: "upload_video",
    MediaType.DOCUMENT: "upload_document",
}


class HttpDashboardApi(HttpBackend, DashboardApiPort):
    """
    httpx-based adapter for the project manager workspace.

    Every call is authenticated with the token currently held by the
    session repository, so a password change that rotates the token is
    picked up without rebuilding the adapter.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        settings: Optional[Settings] = None,
        client=None,
    ):
        """
        Initialize dashboard adapter.

        Args:
            sessions: Source of the bearer token
            settings: Client settings
            client: Preconfigured httpx.Client
        """
        super().__init__(settings=settings, client=client)
        self._sessions = sessions

    def _call(self, method: str, endpoint: str, **kwargs: Any) -> Result[Dict[str, Any]]:
        return self._request(method, self._path(endpoint), token=self._sessions.token(), **kwargs)

    @staticmethod
    def _data(result: Result[Dict[str, Any]]) -> Any:
        return result.value.get("data")

    # Projects & stats

    def fetch_projects(self) -> Result[List[Project]]:
        result = self._call("GET", "projects")
        if not result.ok:
            return result

        data = self._data(result)
        if not isinstance(data, list):
            return self._unexpected("Expected array in data property", result.value)
        return Result.success([Project.from_dict(p) for p in data], message=result.message)

    def fetch_project(self, project_id: Any) -> Result[Dict[str, Any]]:
        result = self._call("GET", "project", params={"project_id": project_id})
        if not result.ok:
            return result
        return Result.success(self._data(result), message=result.message)

    def fetch_stats(self) -> Result[DashboardStats]:
        result = self._call("GET", "dashboard")
        if not result.ok:
            return result

        data = self._data(result)
        if not isinstance(data, dict):
            return self._unexpected("Invalid dashboard data format", result.value)
        return Result.success(DashboardStats.from_dict(data), message=result.message)

    # Data entries

    def list_data_entries(self) -> Result[List[DataEntry]]:
        result = self._call("GET", "data_entries")
        if not result.ok:
            return result

        data = self._data(result)
        if not isinstance(data, list):
            return self._unexpected("Expected array in data property", result.value)
        return Result.success([DataEntry.from_dict(e) for e in data], message=result.message)

    def create_data_entry(self, entry: DataEntry) -> Result[Dict[str, Any]]:
        return self._call("POST", "create_data_entry", json=entry.to_payload())

    def update_data_entry(self, entry_id: str, changes: Dict[str, Any]) -> Result[DataEntry]:
        result = self._call(
            "PUT",
            "update_data_entry",
            params={"data_entry_id": entry_id},
            json=changes,
        )
        if not result.ok:
            return result

        data = self._data(result)
        if not isinstance(data, dict) or data.get("id") is None:
            return self._unexpected("Invalid response from server", result.value)
        return Result.success(DataEntry.from_dict(data), message=result.message)

    def delete_data_entry(self, entry_id: str) -> Result[None]:
        result = self._call("DELETE", "delete_data_entry", params={"data_entry_id": entry_id})
        if not result.ok:
            return result
        return Result.success(None, message=result.message)

    # Media

    def upload_media(self, media_type: MediaType, filename: str, content: bytes) -> Result[str]:
        """Multipart upload with a single file field named after the type."""
        result = self._call(
            "POST",
            _UPLOAD_ENDPOINTS[media_type],
            files={media_type.field_name: (filename, content)},
        )
        if not result.ok:
            logger.warning("Upload of %s (%s) failed: %s", filename, media_type.value, result.message)
            return result

        body = result.value
        url = body.get(media_type.url_key)
        if not url and isinstance(body.get("data"), dict):
            url = body["data"].get(media_type.url_key)
        if not url:
            return self._unexpected(f"Missing {media_type.url_key} in response", body)

        return Result.success(url, message=result.message)

    # Profile

    def fetch_profile(self) -> Result[Profile]:
        result = self._call("GET", "profile")
        if not result.ok:
            return result

        data = self._data(result)
        if not isinstance(data, dict):
            return self._unexpected("Invalid profile data format", result.value)
        return Result.success(Profile.from_dict(data), message=result.message)

    def update_profile(self, profile: Profile) -> Result[Profile]:
        result = self._call("PUT", "update_profile", json=profile.to_update_payload())
        if not result.ok:
            return result

        data = self._data(result)
        if not isinstance(data, dict):
            return self._unexpected("No data returned from server", result.value)
        return Result.success(Profile.from_dict(data), message=result.message)

    def change_password(
        self,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> Result[None]:
        result = self._call(
            "POST",
            "change_password",
            json={
                "currentPassword": current_password,
                "newPassword": new_password,
                "confirmPassword": confirm_password,
            },
        )
        result = self._require_success(result, default_message="Failed to change password")
        if not result.ok:
            return result
        return Result.success(None, message=result.message)
