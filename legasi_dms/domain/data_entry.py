"""
Data Entry Domain Model - Field reports and their media attachments.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from enum import Enum


class MediaType(Enum):
    """Attachment kinds accepted by the upload endpoints."""
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"

    @property
    def field_name(self) -> str:
        """Multipart form field carrying the file."""
        return self.value

    @property
    def url_key(self) -> str:
        """Key holding the stored file's URL in upload and entry payloads."""
        return f"{self.value}_url"


@dataclass
class CustomField:
    """Free-form name/value pair attached to an entry."""
    name: str = ""
    value: str = ""

    def is_filled(self) -> bool:
        return bool(self.name) and bool(self.value)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomField":
        return cls(name=data.get("name") or "", value=data.get("value") or "")


@dataclass
class MediaFile:
    """
    File attached to the data entry form.

    Lifecycle: uploading=True on attach; on completion either
    ``remote_url`` or ``error`` is set and ``uploading`` drops to False.
    """
    filename: str
    content: bytes
    media_type: MediaType
    uploading: bool = True
    error: Optional[str] = None
    remote_url: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.uploading and self.error is None

    def mark_uploaded(self, url: str):
        self.remote_url = url
        self.uploading = False
        self.error = None

    def mark_failed(self, message: str = "Upload failed"):
        self.uploading = False
        self.error = message


@dataclass
class DataEntry:
    """A submitted field report."""
    project_id: Any
    date: str
    description: str = ""
    location: str = ""
    image_url: str = ""
    video_url: str = ""
    document_url: str = ""
    metadata: List[CustomField] = field(default_factory=list)

    id: Optional[str] = None
    project_name: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def media_url(self, media_type: MediaType) -> str:
        return getattr(self, media_type.url_key)

    def to_payload(self) -> Dict[str, Any]:
        """Body sent to the create/update endpoints."""
        return {
            "project_id": self.project_id,
            "project": self.project_name or "",
            "date": self.date,
            "description": self.description,
            "location": self.location,
            "image_url": self.image_url,
            "video_url": self.video_url,
            "document_url": self.document_url,
            "metadata": [f.to_dict() for f in self.metadata if f.is_filled()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DataEntry":
        """Build from a backend entry; a missing project reads as unknown."""
        project = data.get("project")
        if isinstance(project, dict):
            project_name = project.get("project_name") or "Unknown Project"
        else:
            project_name = project or data.get("project_name") or "Unknown Project"

        return cls(
            id=str(data["id"]) if data.get("id") is not None else None,
            project_id=data.get("project_id"),
            project_name=project_name,
            date=data.get("date") or "",
            description=data.get("description") or "",
            location=data.get("location") or "",
            image_url=data.get("image_url") or "",
            video_url=data.get("video_url") or "",
            document_url=data.get("document_url") or "",
            metadata=[CustomField.from_dict(f) for f in data.get("metadata") or []],
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )
