"""
Integration tests for the httpx adapters: response normalization and
the workspace endpoints.
"""

import httpx
import pytest

from legasi_dms.domain.data_entry import CustomField, DataEntry, MediaType
from legasi_dms.domain.profile import Profile
from legasi_dms.domain.result import ErrorKind
from legasi_dms.domain.user import UserRecord, UserRole
from legasi_dms.errors import DEFAULT_ERROR_MESSAGE, NetworkError, ServerRejection


@pytest.fixture
def signed_in(sessions, token):
    sessions.set(token, UserRecord(id=11, role="project_manager", email_verified=True))
    return token


class TestNormalization:
    """Every reply is folded into a Result."""

    def test_non_json_body_is_unexpected(self, auth_api, backend):
        backend.route("POST", "/auth/admin-login", body=b"<html>oops</html>")

        result = auth_api.login(UserRole.SUPER_ADMIN, "a@b.c", "x")

        assert not result.ok
        assert result.error.kind == ErrorKind.UNEXPECTED
        assert result.message == "Invalid API response format."

    def test_error_without_message_uses_default(self, auth_api, backend):
        backend.route("POST", "/auth/admin-login", status=500, body=b"")

        result = auth_api.login(UserRole.SUPER_ADMIN, "a@b.c", "x")

        assert result.error.kind == ErrorKind.REJECTED
        assert result.error.status_code == 500
        assert result.message == DEFAULT_ERROR_MESSAGE

    def test_timeout_is_network_error(self, auth_api, backend):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        backend.route("POST", "/auth/admin-login", handler=slow)

        result = auth_api.login(UserRole.SUPER_ADMIN, "a@b.c", "x")

        assert result.error.kind == ErrorKind.NETWORK
        with pytest.raises(NetworkError):
            result.unwrap()

    def test_unwrap_rejection(self, auth_api, backend):
        backend.route("POST", "/auth/admin-login", status=403, body={"message": "Forbidden"})

        with pytest.raises(ServerRejection) as excinfo:
            auth_api.login(UserRole.SUPER_ADMIN, "a@b.c", "x").unwrap()

        assert excinfo.value.status_code == 403
        assert excinfo.value.message == "Forbidden"


class TestWorkspaceEndpoints:
    """Projects, entries, media and profile."""

    def test_projects_sent_with_bearer_token(self, dashboard_api, backend, signed_in):
        backend.route("GET", "/project-manager/projects", body={
            "data": [{"id": 3, "project_name": "Seedlings", "status": "active"}],
        })

        projects = dashboard_api.fetch_projects().unwrap()

        assert projects[0].id == "3"
        assert projects[0].name == "Seedlings"
        request = backend.calls("GET", "/project-manager/projects")[0]
        assert request.headers["Authorization"] == f"Bearer {signed_in}"

    def test_projects_must_be_a_list(self, dashboard_api, backend, signed_in):
        backend.route("GET", "/project-manager/projects", body={"data": {"id": 3}})

        result = dashboard_api.fetch_projects()

        assert result.message == "Expected array in data property"

    def test_stats(self, dashboard_api, backend, signed_in):
        backend.route("GET", "/project-manager/dashboard", body={"data": {
            "project_count": 2,
            "data_entry_count": "5",
            "recent_data_entry": [{"id": 1, "date": "2024-05-01", "project": {"project_name": "Seedlings"}}],
        }})

        stats = dashboard_api.fetch_stats().unwrap()

        assert stats.project_count == 2
        assert stats.data_entry_count == 5
        assert stats.recent_entries[0].project_name == "Seedlings"

    def test_list_entries_unknown_project(self, dashboard_api, backend, signed_in):
        backend.route("GET", "/project-manager/datas", body={"data": [{"id": 9, "date": "2024-05-01"}]})

        entries = dashboard_api.list_data_entries().unwrap()

        assert entries[0].id == "9"
        assert entries[0].project_name == "Unknown Project"

    def test_create_entry_payload(self, dashboard_api, backend, signed_in):
        backend.route("POST", "/project-manager/create-data", body={"success": True, "data": {"id": 1}})
        entry = DataEntry(
            project_id=3,
            project_name="Seedlings",
            date="2024-05-01",
            description="Planted",
            image_url="https://cdn/x.jpg",
            metadata=[CustomField("crop", "maize"), CustomField("", "dropped")],
        )

        dashboard_api.create_data_entry(entry).unwrap()

        body = backend.json_of(backend.calls("POST", "/project-manager/create-data")[0])
        assert body["project_id"] == 3
        assert body["image_url"] == "https://cdn/x.jpg"
        assert body["metadata"] == [{"name": "crop", "value": "maize"}]

    def test_update_entry_requires_id(self, dashboard_api, backend, signed_in):
        backend.route("PUT", "/project-manager/update-data", body={"data": {"description": "x"}})

        result = dashboard_api.update_data_entry("9", {"description": "x"})

        assert result.message == "Invalid response from server"
        request = backend.calls("PUT", "/project-manager/update-data")[0]
        assert request.url.params["data_entry_id"] == "9"

    def test_delete_entry(self, dashboard_api, backend, signed_in):
        backend.route("DELETE", "/project-manager/delete-data", body={"success": True})

        assert dashboard_api.delete_data_entry("9").ok

    @pytest.mark.parametrize("media_type,path", [
        (MediaType.IMAGE, "/project-manager/upload-image"),
        (MediaType.VIDEO, "/project-manager/upload-video"),
        (MediaType.DOCUMENT, "/project-manager/upload-document"),
    ])
    def test_upload_url_at_top_level(self, dashboard_api, backend, signed_in, media_type, path):
        backend.route("POST", path, body={media_type.url_key: f"https://cdn/{media_type.value}"})

        url = dashboard_api.upload_media(media_type, "file.bin", b"bytes").unwrap()

        assert url == f"https://cdn/{media_type.value}"
        request = backend.calls("POST", path)[0]
        assert b'name="%s"' % media_type.field_name.encode() in request.content
        assert b'filename="file.bin"' in request.content

    def test_upload_url_under_data(self, dashboard_api, backend, signed_in):
        backend.route("POST", "/project-manager/upload-image", body={"data": {"image_url": "https://cdn/i"}})

        assert dashboard_api.upload_media(MediaType.IMAGE, "a.jpg", b"x").unwrap() == "https://cdn/i"

    def test_upload_missing_url(self, dashboard_api, backend, signed_in):
        backend.route("POST", "/project-manager/upload-video", body={"success": True})

        result = dashboard_api.upload_media(MediaType.VIDEO, "a.mp4", b"x")

        assert result.message == "Missing video_url in response"

    def test_profile_round_trip(self, dashboard_api, backend, signed_in):
        backend.route("GET", "/auth/project-manager/profile", body={"data": {"fullname": "Ada Obi", "email": "pm@x"}})
        backend.route("PUT", "/auth/project-manager/update-profile", handler=lambda r: (200, {"data": backend.json_of(r)}))

        profile = dashboard_api.fetch_profile().unwrap()
        profile.phone_number = "0800"
        saved = dashboard_api.update_profile(profile).unwrap()

        assert saved == Profile(fullname="Ada Obi", email="pm@x", phone_number="0800")

    def test_change_password_requires_success(self, dashboard_api, backend, signed_in):
        backend.route("POST", "/auth/project-manager/change-password", body={"message": "Wrong password"})

        result = dashboard_api.change_password("old", "Str0ng#Pass", "Str0ng#Pass")

        assert result.message == "Wrong password"
