"""Tests for logging setup."""

import logging

from loguru import logger

import settings.logging as log_settings


class TestSetupLogging:
    def test_file_sinks(self, tmp_path, monkeypatch):
        monkeypatch.setattr(log_settings, "LOG_DIR", tmp_path / "logs")

        log_settings.setup_logging("info", to_file=True)
        logger.debug("cache miss detail")
        logger.warning("search retry")
        logger.remove()

        errors = (tmp_path / "logs" / "taxonomy_errors.log").read_text()
        assert "search retry" in errors
        assert "cache miss detail" not in errors

        daily = [p for p in (tmp_path / "logs").glob("taxonomy_*.log") if p.name != "taxonomy_errors.log"]
        assert len(daily) == 1
        assert "cache miss detail" in daily[0].read_text()

    def test_console_only(self, tmp_path, monkeypatch):
        monkeypatch.setattr(log_settings, "LOG_DIR", tmp_path / "logs")
        log_settings.setup_logging("debug", to_file=False)
        logger.remove()
        assert not (tmp_path / "logs").exists()

    def test_quiets_http_libraries(self):
        log_settings.setup_logging(to_file=False)
        logger.remove()
        assert logging.getLogger("httpx").level == logging.WARNING
