import json

import pytest

from labelkit.errors import ErrorCode, SettingsError
from labelkit.models import load_app_settings

SETTINGS_DOCUMENT = {
    "securityTokens": [{"name": "t1", "key": "a2V5"}],
    "connections": [
        {
            "id": "conn-live",
            "name": "C_live",
            "providerType": "localFileSystemProxy",
            "providerOptions": {"folderPath": "/data"},
        }
    ],
    "recentProjects": [
        {
            "id": "proj-1",
            "name": "Invoice",
            "version": "2.1.0",
            "securityToken": "t1",
            "sourceConnection": {
                "id": "conn-live",
                "name": "C_live",
                "providerType": "localFileSystemProxy",
                "providerOptions": {"encrypted": "Y2lwaGVy"},
            },
            "tags": [],
        },
        {
            "id": "proj-2",
            "name": "Receipt",
            "securityToken": "t1",
            "sourceConnection": {
                "id": "conn-live",
                "name": "C_live",
                "providerType": "localFileSystemProxy",
                "providerOptions": {"folderPath": "/data"},
            },
        },
    ],
}


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(SETTINGS_DOCUMENT), encoding="utf-8")
    return path


class TestLoadAppSettings:
    def test_load(self, settings_file):
        settings = load_app_settings(settings_file)

        assert [t.name for t in settings.security_tokens] == ["t1"]
        assert settings.connections[0].provider_type == "localFileSystemProxy"
        assert [r.id for r in settings.recent_projects] == ["proj-1", "proj-2"]
        assert settings.recent_projects[0].security_token_name == "t1"
        assert settings.recent_projects[0].source_connection.is_encrypted

    def test_find_recent_project_by_id_or_name(self, settings_file):
        settings = load_app_settings(settings_file)

        assert settings.find_recent_project("proj-2").name == "Receipt"
        assert settings.find_recent_project("Invoice").id == "proj-1"
        assert settings.find_recent_project("missing") is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(SettingsError) as exc_info:
            load_app_settings(tmp_path / "nope.json")

        assert exc_info.value.error_code is ErrorCode.SETTINGS_INVALID

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(SettingsError):
            load_app_settings(path)

    def test_reference_without_token_rejected(self, tmp_path):
        document = {"recentProjects": [{"id": "p", "name": "P", "sourceConnection": {}}]}
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(document), encoding="utf-8")

        with pytest.raises(SettingsError):
            load_app_settings(path)
