"""
Data Entry Workflows - Field report form and the list of submitted entries.

Uploads:
- Files attached together are uploaded one at a time, in order
- Files still pending at submit time are uploaded in parallel
  (fire all, then wait for all); any failure aborts the submission
- Files that did upload are kept; nothing is rolled back
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from datetime import date as date_type
from typing import Any, Dict, Iterable, List, Optional, Tuple

from legasi_dms.config import Settings, get_settings
from legasi_dms.domain.data_entry import CustomField, DataEntry, MediaFile, MediaType
from legasi_dms.domain.project import Project
from legasi_dms.errors import DMSError, UploadError, ValidationError
from legasi_dms.ports.dashboard_api_port import DashboardApiPort
from legasi_dms.ports.notifier_port import Notifier

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "Failed to submit data. Please try again."
FIX_UPLOADS_MESSAGE = "Please fix upload errors before submitting"


@dataclass
class SubmissionOutcome:
    ok: bool
    entry: Optional[DataEntry] = None
    response: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None


class DataEntryForm:
    """
    State of the data entry form.

    Example:
        form = DataEntryForm(api)
        form.load_projects()
        form.description = "Distributed seedlings"
        form.attach(MediaType.IMAGE, [("field.jpg", image_bytes)])
        outcome = form.submit()
    """

    def __init__(
        self,
        api: DashboardApiPort,
        settings: Optional[Settings] = None,
        notifier: Optional[Notifier] = None,
    ):
        self._api = api
        self._settings = settings or get_settings()
        self._notifier = notifier

        self.projects: List[Project] = []
        self.projects_error: Optional[str] = None
        self.project_id: Optional[str] = None
        self.files: List[MediaFile] = []
        self.reset()

    def reset(self):
        """Clear every input; the project list and selection are kept."""
        self.date = date_type.today().isoformat()
        self.description = ""
        self.location = ""
        self.files = []
        self.custom_fields: List[CustomField] = [CustomField()]

    # Projects

    def load_projects(self) -> bool:
        """
        Fetch the manager's projects and select the first one.

        Returns:
            True on success; on failure ``projects_error`` holds the message
        """
        self.projects_error = None
        result = self._api.fetch_projects()
        if not result.ok:
            self.projects_error = result.message or "Failed to load projects"
            return False

        self.projects = result.value
        if self.projects:
            self.project_id = self.projects[0].id
        return True

    def select_project(self, project_id: Any):
        project_id = str(project_id)
        if not any(p.id == project_id for p in self.projects):
            raise ValidationError(f"Unknown project: {project_id}")
        self.project_id = project_id

    @property
    def project_name(self) -> str:
        for project in self.projects:
            if project.id == self.project_id:
                return project.name
        return ""

    # Custom fields

    def add_custom_field(self, name: str = "", value: str = "") -> CustomField:
        custom_field = CustomField(name=name, value=value)
        self.custom_fields.append(custom_field)
        return custom_field

    def remove_custom_field(self, index: int) -> CustomField:
        return self.custom_fields.pop(index)

    # Media

    def queue(self, media_type: MediaType, files: Iterable[Tuple[str, bytes]]) -> List[MediaFile]:
        """Add files without uploading them; submit() uploads anything pending."""
        batch = [
            MediaFile(filename=name, content=content, media_type=media_type)
            for name, content in files
        ]
        self.files.extend(batch)
        return batch

    def attach(self, media_type: MediaType, files: Iterable[Tuple[str, bytes]]) -> List[MediaFile]:
        """
        Add files and upload them one at a time.

        A failed file is marked with an error and stays attached until it
        is removed; later files in the batch are still uploaded.
        """
        batch = self.queue(media_type, files)
        for media_file in batch:
            try:
                self._upload(media_file)
            except Exception as e:
                logger.warning("Upload of %s failed: %s", media_file.filename, e)
        return batch

    def remove(self, index: int) -> MediaFile:
        return self.files.pop(index)

    def _upload(self, media_file: MediaFile) -> str:
        """Upload one file and record the outcome on it."""
        try:
            url = self._api.upload_media(
                media_file.media_type,
                media_file.filename,
                media_file.content,
            ).unwrap()
        except Exception:
            media_file.mark_failed()
            raise

        media_file.mark_uploaded(url)
        return url

    def _flush_pending(self):
        """Upload every pending file in parallel and wait for all of them."""
        pending = [f for f in self.files if f.is_pending]
        if not pending:
            return

        workers = max(1, min(len(pending), self._settings.max_parallel_uploads))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="upload") as pool:
            futures = {pool.submit(self._upload, f): f for f in pending}
            wait(futures)

        failures = []
        for future, media_file in futures.items():
            exc = future.exception()
            if exc is not None:
                logger.warning("Upload of %s failed: %s", media_file.filename, exc)
                failures.append(f"Failed to upload {media_file.filename}")

        if failures:
            raise UploadError(failures)

    # Submission

    def build_entry(self) -> DataEntry:
        """Assemble the submission from the current inputs."""
        if not self.project_id:
            raise ValidationError("Select a project")

        urls = {}
        for media_type in MediaType:
            urls[media_type.url_key] = next(
                (f.remote_url for f in self.files if f.media_type == media_type and f.remote_url),
                "",
            )

        project_id = int(self.project_id) if str(self.project_id).isdigit() else self.project_id

        return DataEntry(
            project_id=project_id,
            project_name=self.project_name,
            date=self.date,
            description=self.description,
            location=self.location,
            metadata=[f for f in self.custom_fields if f.is_filled()],
            **urls,
        )

    def submit(self) -> SubmissionOutcome:
        """
        Finish pending uploads, then create the entry.

        The form is reset only after the backend accepts the entry.
        """
        try:
            self._flush_pending()
            if any(f.error for f in self.files):
                raise ValidationError(FIX_UPLOADS_MESSAGE)

            entry = self.build_entry()
            response = self._api.create_data_entry(entry).unwrap()
        except DMSError as e:
            self._alert_error(e.message)
            return SubmissionOutcome(ok=False, error=e.message)
        except Exception:
            logger.exception("Unexpected error while submitting data entry")
            self._alert_error(SUBMIT_FAILED_MESSAGE)
            return SubmissionOutcome(ok=False, error=SUBMIT_FAILED_MESSAGE)

        self.reset()
        if self._notifier:
            self._notifier.success("Success!", "Data submitted successfully!")
        return SubmissionOutcome(ok=True, entry=entry, response=response)

    def _alert_error(self, text: str):
        if self._notifier:
            self._notifier.error("Error!", text)


class DataEntryList:
    """Submitted entries with refresh, update and delete."""

    def __init__(self, api: DashboardApiPort, notifier: Optional[Notifier] = None):
        self._api = api
        self._notifier = notifier
        self.entries: List[DataEntry] = []
        self.error: Optional[str] = None

    def refresh(self) -> bool:
        """Reload entries; on failure ``error`` holds the message."""
        self.error = None
        result = self._api.list_data_entries()
        if not result.ok:
            self.error = result.message or "Failed to load entries"
            return False
        self.entries = result.value
        return True

    def find(self, entry_id: str) -> Optional[DataEntry]:
        return next((e for e in self.entries if e.id == str(entry_id)), None)

    def update(self, entry_id: str, changes: Dict[str, Any]) -> Optional[DataEntry]:
        """
        Update one entry and replace the local copy with the server's.

        Returns:
            The updated entry, or None if the update failed (``error``
            holds the message and the local list is unchanged)
        """
        self.error = None
        try:
            updated = self._api.update_data_entry(entry_id, changes).unwrap()
        except DMSError as e:
            self.error = e.message
            if self._notifier:
                self._notifier.error("Error!", e.message)
            return None

        self.entries = [updated if e.id == str(entry_id) else e for e in self.entries]
        if self._notifier:
            self._notifier.success("Updated!", "The data entry has been updated.")
        return updated

    def delete(self, entry_id: str) -> bool:
        """Delete one entry; the local list only changes on success."""
        result = self._api.delete_data_entry(entry_id)
        if not result.ok:
            if self._notifier:
                self._notifier.error("Error!", "Failed to delete data entry.")
            return False

        self.entries = [e for e in self.entries if e.id != str(entry_id)]
        if self._notifier:
            self._notifier.success("Deleted!", "The data entry has been deleted.")
        return True
