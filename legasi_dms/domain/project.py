"""
Project Domain Model - Projects assigned to a project manager.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from legasi_dms.domain.data_entry import DataEntry


@dataclass
class Project:
    """A program project as listed on the dashboard."""
    id: str
    name: str
    manager_id: Optional[Any] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    target_entry: Optional[int] = None
    status: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """Build from a backend project object (ids are normalized to str)."""
        return cls(
            id=str(data["id"]),
            name=data.get("project_name") or data.get("name") or "",
            manager_id=data.get("project_manager_id"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            target_entry=data.get("target_entry"),
            status=data.get("status"),
            description=data.get("description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "project_name": self.name,
            "project_manager_id": self.manager_id,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "target_entry": self.target_entry,
            "status": self.status,
            "description": self.description,
        }


@dataclass
class DashboardStats:
    """Counters and recent activity for the project manager dashboard."""
    project_count: int = 0
    data_entry_count: int = 0
    recent_entries: List[DataEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DashboardStats":
        return cls(
            project_count=int(data.get("project_count") or 0),
            data_entry_count=int(data.get("data_entry_count") or 0),
            recent_entries=[
                DataEntry.from_dict(entry)
                for entry in data.get("recent_data_entry") or []
            ],
        )
