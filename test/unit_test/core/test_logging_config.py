"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from vet_clinic.core import logging_config
from vet_clinic.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def _console_handler():
    return next(
        (h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler),
        None,
    )


def _file_handler():
    return next(
        (h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)),
        None,
    )


@pytest.fixture(autouse=True)
def _restore_root_handlers():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestSetupLoggingLevelsAndFormats:
    """Test setup_logging with different log levels and formats."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("debug", logging.DEBUG),  # Test lowercase
        ],
    )
    def test_console_level(self, log_level, expected_level):
        setup_logging(log_level=log_level, enable_file=False)

        console_handler = _console_handler()
        assert console_handler is not None
        assert console_handler.level == expected_level

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_console_format(self, log_format, expected_format):
        setup_logging(log_format=log_format, enable_file=False)

        console_handler = _console_handler()
        assert console_handler.formatter._fmt == expected_format
        assert console_handler.formatter.datefmt == "%Y-%m-%d %H:%M:%S"

    def test_root_logger_level_is_debug(self):
        """Root logger captures everything; filtering happens at handler level."""
        setup_logging(log_level="WARNING", enable_file=False)
        assert logging.getLogger().level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_file_handler_when_enabled(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir) / "logs"
            with patch.object(logging_config, "LOG_FILE_DIR", str(log_dir)), patch.object(
                logging_config, "ENABLE_FILE_LOGGING", True
            ):
                setup_logging(log_level="ERROR", enable_file=True)

                file_handler = _file_handler()
                assert file_handler is not None
                assert file_handler.level == logging.DEBUG
                assert Path(file_handler.baseFilename) == log_dir / "vet_clinic.log"
                assert log_dir.exists()

    def test_no_file_handler_when_disabled_by_configuration(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir) / "logs"
            with patch.object(logging_config, "LOG_FILE_DIR", str(log_dir)), patch.object(
                logging_config, "ENABLE_FILE_LOGGING", False
            ):
                setup_logging(enable_file=True)

                assert _file_handler() is None
                assert not log_dir.exists()

    def test_no_file_handler_when_disabled_by_argument(self):
        with patch.object(logging_config, "ENABLE_FILE_LOGGING", True):
            setup_logging(enable_file=False)

        assert _file_handler() is None


class TestModuleLogLevels:
    """Test module-specific log level configuration."""

    @pytest.mark.parametrize(
        "module_name,expected_level",
        [
            ("vet_clinic.core.database.repositories", logging.DEBUG),
            ("vet_clinic.server", logging.INFO),
            ("vet_clinic.server.api", logging.DEBUG),
            ("sqlalchemy", logging.WARNING),
            ("aiosqlite", logging.WARNING),
        ],
    )
    def test_module_specific_log_levels(self, module_name, expected_level):
        setup_logging(enable_file=False)
        assert get_logger(module_name).level == expected_level

    def test_all_module_log_levels_configured(self):
        setup_logging(enable_file=False)

        for module_name, expected_level_str in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == getattr(logging, expected_level_str)


class TestLoggingConfigSources:
    """Configuration comes from the settings model, or the raw environment as a fallback."""

    def test_reads_settings(self):
        config = logging_config._get_logging_config()

        assert set(config) == {"log_level", "log_format", "log_file_dir", "enable_file_logging"}
        assert config["log_level"] == config["log_level"].upper()

    def test_falls_back_to_environment(self):
        env = {
            "VET_CLINIC_LOG_LEVEL": "warning",
            "VET_CLINIC_LOG_FORMAT": "json",
            "VET_CLINIC_LOG_FILE_DIR": "/tmp/vet-logs",
            "VET_CLINIC_ENABLE_FILE_LOGGING": "yes",
        }
        with patch.dict("sys.modules", {"vet_clinic.server.core.config": None}), patch.dict(os.environ, env):
            config = logging_config._get_logging_config()

        assert config == {
            "log_level": "WARNING",
            "log_format": "json",
            "log_file_dir": "/tmp/vet-logs",
            "enable_file_logging": True,
        }


class TestGetLogger:
    """Test get_logger function."""

    def test_same_name_returns_same_instance(self):
        assert get_logger("same_module") is get_logger("same_module")

    def test_name(self):
        logger = get_logger("vet_clinic.core.database")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "vet_clinic.core.database"
