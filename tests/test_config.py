"""Tests for settings and the user .env writer."""

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, write_user_env_vars


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.base_url == "https://localhost"
        assert settings.http_timeout_seconds == 30.0
        assert settings.verify_tls is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("VAPI_REST_BASE_URL", "https://vc.example")
        monkeypatch.setenv("VAPI_REST_VERIFY_TLS", "false")
        settings = AppSettings(_env_file=None)
        assert settings.base_url == "https://vc.example"
        assert settings.verify_tls is False

    def test_project_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("VAPI_REST_USER_AGENT=from-file\n", encoding="utf-8")
        assert AppSettings(_env_file=env).user_agent == "from-file"

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, http_timeout_seconds=0)


class TestWriteUserEnvVars:
    def test_writes_and_merges(self, tmp_path):
        path = write_user_env_vars({"VAPI_REST_BASE_URL": "https://a.example"})
        assert path == get_user_env_file()
        assert path.is_relative_to(tmp_path)

        write_user_env_vars({"VAPI_REST_USER_AGENT": "ua"})
        text = path.read_text(encoding="utf-8")
        assert "VAPI_REST_BASE_URL=https://a.example" in text
        assert "VAPI_REST_USER_AGENT=ua" in text
