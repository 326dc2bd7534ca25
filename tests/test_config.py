"""Tests for settings loading."""

import pytest

from mma_directory.config import ConfigurationError, load_settings

ENV_VARS = ["SUPABASE_URL", "SUPABASE_KEY", "VITE_SUPABASE_URL", "VITE_SUPABASE_KEY", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test configuration from the environment."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co/")
        monkeypatch.setenv("SUPABASE_KEY", "secret")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = load_settings(env_file=None)

        assert settings.supabase_url == "https://abc.supabase.co"
        assert settings.rest_url == "https://abc.supabase.co/rest/v1"
        assert settings.supabase_key == "secret"
        assert settings.log_level == "DEBUG"
        assert settings.display_timezone == "America/New_York"

    def test_vite_names_accepted(self, monkeypatch):
        monkeypatch.setenv("VITE_SUPABASE_URL", "https://abc.supabase.co")
        monkeypatch.setenv("VITE_SUPABASE_KEY", "secret")

        assert load_settings(env_file=None).supabase_key == "secret"

    def test_missing_is_fatal(self):
        with pytest.raises(ConfigurationError, match="SUPABASE"):
            load_settings(env_file=None)

    def test_blank_is_fatal(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
        monkeypatch.setenv("SUPABASE_KEY", "   ")

        with pytest.raises(ConfigurationError):
            load_settings(env_file=None)

    def test_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SUPABASE_URL=https://file.supabase.co\nSUPABASE_KEY=from-file\n")

        settings = load_settings(env_file=str(env_file))

        assert settings.supabase_url == "https://file.supabase.co"
        assert settings.supabase_key == "from-file"
