"""
Tests for settings and the logging helper.
"""

import logging
from pathlib import Path

from reviewslugs.util import logger as logger_module
from reviewslugs.util.logger import ROOT_NAME, get_logger
from reviewslugs.util.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("REVIEWSLUGS_LOG_LEVEL", "REVIEWSLUGS_TRACE_PATTERNS", "REVIEWSLUGS_UPLOAD_DIR"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.trace_patterns is False
        assert settings.upload_dir == Path(".tmp_uploads")

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("REVIEWSLUGS_LOG_LEVEL", "debug")
        monkeypatch.setenv("REVIEWSLUGS_TRACE_PATTERNS", "yes")
        monkeypatch.setenv("REVIEWSLUGS_UPLOAD_DIR", "/tmp/uploads")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.trace_patterns is True
        assert settings.upload_dir == Path("/tmp/uploads")

    def test_trace_flag_falsy(self, monkeypatch):
        monkeypatch.setenv("REVIEWSLUGS_TRACE_PATTERNS", "0")
        assert Settings().trace_patterns is False

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("REVIEWSLUGS_LOG_LEVEL", "verbose")
        settings = Settings()
        assert settings.log_level == "VERBOSE"
        assert settings.effective_log_level == "INFO"
        issues = settings.validate()
        assert len(issues) == 1
        assert "VERBOSE" in issues[0]

    def test_valid_settings_have_no_issues(self, monkeypatch, tmp_path):
        monkeypatch.setenv("REVIEWSLUGS_LOG_LEVEL", "warning")
        monkeypatch.setenv("REVIEWSLUGS_UPLOAD_DIR", str(tmp_path))
        settings = Settings()
        assert settings.effective_log_level == "WARNING"
        assert settings.validate() == []

    def test_upload_dir_must_be_directory(self, monkeypatch, tmp_path):
        not_a_dir = tmp_path / "uploads.txt"
        not_a_dir.write_text("x")
        monkeypatch.setenv("REVIEWSLUGS_UPLOAD_DIR", str(not_a_dir))
        assert any("REVIEWSLUGS_UPLOAD_DIR" in issue for issue in Settings().validate())

    def test_cached(self):
        assert get_settings() is get_settings()


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger().name == ROOT_NAME
        assert get_logger("scripts").name == "reviewslugs.scripts"
        assert get_logger("reviewslugs.services.extract").name == "reviewslugs.services.extract"

    def test_single_handler(self):
        get_logger("a")
        get_logger("b")
        assert len(get_logger().handlers) == 1

    def test_bad_level_does_not_break_logging(self, monkeypatch, caplog):
        """An unknown level name configures INFO and warns instead of raising."""
        monkeypatch.setenv("REVIEWSLUGS_LOG_LEVEL", "VERBOSE")
        monkeypatch.setattr(logger_module, "get_settings", lambda: Settings())
        with caplog.at_level(logging.WARNING):
            logger_module._configure()
        assert get_logger().level == logging.INFO
        assert any("VERBOSE" in rec.getMessage() for rec in caplog.records)
