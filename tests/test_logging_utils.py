"""
Tests for package logging configuration.
"""

import logging

from cdeclgen.logging_utils import LOGGER_NAME, get_logger, setup_logging


class TestSetupLogging:
    def test_explicit_level(self):
        logger = setup_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("CDECLGEN_LOG_LEVEL", "ERROR")
        assert setup_logging().level == logging.ERROR

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("CDECLGEN_LOG_LEVEL", raising=False)
        assert setup_logging().level == logging.WARNING

    def test_unknown_level_falls_back(self):
        assert setup_logging("LOUD").level == logging.WARNING

    def test_handlers_not_duplicated(self):
        setup_logging("INFO")
        logger = setup_logging("INFO")
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "gen.log"
        logger = setup_logging("INFO", log_file=str(log_file))
        get_logger("test").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "cdeclgen.test - INFO - hello" in log_file.read_text()
        setup_logging("WARNING")


class TestGetLogger:
    def test_child_of_package(self):
        assert get_logger("plan").name == "cdeclgen.plan"

    def test_module_name_not_repeated(self):
        assert get_logger("cdeclgen.registry").name == "cdeclgen.registry"
