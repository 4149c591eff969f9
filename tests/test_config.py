"""Tests for settings classes."""

import pytest
from pydantic import ValidationError

from halo_http.core.config import DOWNLOAD_SUFFIX, HttpTemplateSettings, LoggingSettings, Settings
from halo_http.core.handlers import new_download_path


class TestHttpTemplateSettings:
    """Tests for HttpTemplateSettings."""

    def test_defaults(self):
        """Test default values match the plain blocking client behaviour."""
        settings = HttpTemplateSettings()

        assert settings.connection_timeout is None
        assert settings.read_timeout is None
        assert settings.follow_redirects is True
        assert settings.chunk_size == 1024
        assert settings.download_dir is None
        assert settings.download_suffix == ".dld"
        assert settings.default_content_type == "text/plain; charset=UTF-8"
        assert settings.encoding == "UTF-8"

    def test_environment_override(self, monkeypatch):
        """Test HALO_HTTP_ variables override defaults."""
        monkeypatch.setenv("HALO_HTTP_CHUNK_SIZE", "4096")
        monkeypatch.setenv("HALO_HTTP_READ_TIMEOUT", "2.5")
        monkeypatch.setenv("halo_http_download_dir", "/var/tmp/downloads")

        settings = HttpTemplateSettings()

        assert settings.chunk_size == 4096
        assert settings.read_timeout == 2.5
        assert settings.download_dir == "/var/tmp/downloads"

    def test_chunk_size_must_be_positive(self):
        """Test a zero chunk size is rejected."""
        with pytest.raises(ValidationError):
            HttpTemplateSettings(chunk_size=0)


class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_defaults(self):
        """Test default logging values."""
        settings = LoggingSettings()

        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.log_config_file == "logging.yml"

    def test_environment_override(self, monkeypatch):
        """Test HALO_LOG_ variables override defaults."""
        monkeypatch.setenv("HALO_LOG_LOG_LEVEL", "DEBUG")

        assert LoggingSettings().log_level == "DEBUG"


class TestSettings:
    """Tests for the combined Settings."""

    def test_nested_sections(self):
        """Test nested sections are created with their defaults."""
        settings = Settings()

        assert isinstance(settings.http, HttpTemplateSettings)
        assert isinstance(settings.logging, LoggingSettings)


def test_download_suffix_shared_with_handlers(tmp_path):
    """Test the handlers default suffix is the settings default."""
    assert HttpTemplateSettings().download_suffix == DOWNLOAD_SUFFIX
    assert new_download_path(tmp_path).suffix == DOWNLOAD_SUFFIX
