"""
Dashboard API Port - Interface for the project manager workspace.

Implementations:
- HttpDashboardApi: httpx client against the REST backend
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from legasi_dms.domain.data_entry import DataEntry, MediaType
from legasi_dms.domain.project import Project, DashboardStats
from legasi_dms.domain.profile import Profile
from legasi_dms.domain.result import Result


class DashboardApiPort(ABC):
    """Port: Projects, data entries, media and profile."""

    # Projects & stats

    @abstractmethod
    def fetch_projects(self) -> Result[List[Project]]:
        """List projects assigned to the signed-in manager."""
        pass

    @abstractmethod
    def fetch_project(self, project_id: Any) -> Result[Dict[str, Any]]:
        """Fetch one project with its details."""
        pass

    @abstractmethod
    def fetch_stats(self) -> Result[DashboardStats]:
        """Fetch dashboard counters and recent entries."""
        pass

    # Data entries

    @abstractmethod
    def list_data_entries(self) -> Result[List[DataEntry]]:
        """List the manager's submitted entries."""
        pass

    @abstractmethod
    def create_data_entry(self, entry: DataEntry) -> Result[Dict[str, Any]]:
        """Submit a new entry."""
        pass

    @abstractmethod
    def update_data_entry(self, entry_id: str, changes: Dict[str, Any]) -> Result[DataEntry]:
        """Update an entry and return the server's copy."""
        pass

    @abstractmethod
    def delete_data_entry(self, entry_id: str) -> Result[None]:
        """Delete an entry."""
        pass

    # Media

    @abstractmethod
    def upload_media(self, media_type: MediaType, filename: str, content: bytes) -> Result[str]:
        """
        Upload one file.

        Args:
            media_type: Selects the endpoint and the multipart field name
            filename: Original file name
            content: File bytes

        Returns:
            Result whose value is the stored file's URL
        """
        pass

    # Profile

    @abstractmethod
    def fetch_profile(self) -> Result[Profile]:
        pass

    @abstractmethod
    def update_profile(self, profile: Profile) -> Result[Profile]:
        pass

    @abstractmethod
    def change_password(
        self,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> Result[None]:
        pass
