"""Tests for logging configuration."""

import logging
from pathlib import Path

from wikiquery.logging_config import get_log_dir, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_logger(self):
        """setup_logging should create a logger instance."""
        logger = setup_logging(name="test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test"

    def test_console_only_without_log_dir(self):
        """Without a log directory only a console handler should be added."""
        logger = setup_logging(name="test")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_creates_log_file(self, temp_log_dir):
        """setup_logging should create a log file."""
        logger = setup_logging(name="test", log_dir=str(temp_log_dir))
        logger.info("Test message")

        assert (temp_log_dir / "test.log").exists()

    def test_includes_language_in_filename(self, temp_log_dir):
        """setup_logging should include the language in the filename when provided."""
        logger = setup_logging(name="wikiquery", language="en", log_dir=str(temp_log_dir))
        logger.info("Test message")

        assert (temp_log_dir / "wikiquery-en.log").exists()

    def test_client_loggers_propagate(self, temp_log_dir):
        """Per-language client loggers should write to the package log file."""
        setup_logging(name="wikiquery", log_dir=str(temp_log_dir), console=False)
        logging.getLogger("wikiquery.en").info("Child message")

        content = (temp_log_dir / "wikiquery.log").read_text()
        assert "Child message" in content

    def test_respects_log_level(self, temp_log_dir):
        """setup_logging should respect the configured log level."""
        logger = setup_logging(
            name="test",
            log_dir=str(temp_log_dir),
            level=logging.WARNING,
            console=False,
        )
        logger.debug("Debug message")
        logger.warning("Warning message")

        content = (temp_log_dir / "test.log").read_text()
        assert "Debug message" not in content
        assert "Warning message" in content

    def test_uses_log_dir_env(self, tmp_path, monkeypatch):
        """LOG_DIR should be used when no directory is passed."""
        monkeypatch.setenv("LOG_DIR", str(tmp_path / "env_logs"))
        logger = setup_logging(name="test", console=False)
        logger.info("Test")

        assert (tmp_path / "env_logs" / "test.log").exists()

    def test_reinitialization_replaces_handlers(self, temp_log_dir):
        setup_logging(name="test", log_dir=str(temp_log_dir))
        logger = setup_logging(name="test", log_dir=str(temp_log_dir))
        assert len(logger.handlers) == 2


class TestGetLogDir:
    """Tests for get_log_dir function."""

    def test_returns_none_by_default(self):
        """get_log_dir should return None when LOG_DIR is not set."""
        assert get_log_dir() is None

    def test_returns_custom_default(self):
        assert get_log_dir("/var/log/custom") == Path("/var/log/custom")

    def test_returns_env_var(self, monkeypatch):
        monkeypatch.setenv("LOG_DIR", "/custom/logs")
        assert get_log_dir() == Path("/custom/logs")
