"""
Tests for logger functionality.
"""

import pytest
from pathlib import Path
from techjobs.logger import StructuredLogger, get_logger, reset_logger


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_logger_creation(self, tmp_path):
        """Logger should be created with default settings."""
        logger = StructuredLogger(
            name="test",
            level="INFO",
            log_dir=tmp_path,
            enable_console=False,
        )

        assert logger.logger.name == "test"
        assert logger.metrics["loads_attempted"] == 0
        logger.close()

    def test_log_methods(self, tmp_path):
        """All log level methods should work."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        # Should not raise exceptions
        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message")
        logger.critical("Critical message")
        logger.close()

    def test_log_with_context(self, tmp_path):
        """Logging with context should include extra data."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.info("Message with context", path=Path("jobs.csv"), count=5)
        logger.close()

        log_content = next(tmp_path.glob("*.log")).read_text()
        assert '"path": "jobs.csv"' in log_content
        assert '"count": 5' in log_content

    def test_metrics_tracking(self):
        """Metrics should be tracked correctly."""
        logger = StructuredLogger(name="test", enable_console=False)

        logger.record_load_attempt()
        logger.record_load_failure("FileNotFoundError")
        logger.record_load_attempt()
        logger.record_load_success(rows=25)

        logger.record_query("find_all")
        logger.record_query("find_all")
        logger.record_query("find_by_value")

        metrics = logger.get_metrics()

        assert metrics["loads_attempted"] == 2
        assert metrics["loads_successful"] == 1
        assert metrics["loads_failed"] == 1
        assert metrics["rows_loaded"] == 25
        assert metrics["errors_by_type"]["FileNotFoundError"] == 1
        assert metrics["queries_by_operation"] == {"find_all": 2, "find_by_value": 1}

    def test_success_rate_calculation(self):
        """Success rate should be calculated correctly."""
        logger = StructuredLogger(name="test", enable_console=False)

        # 3 attempts, 2 successes = 66.7% success rate
        for _ in range(3):
            logger.record_load_attempt()

        logger.record_load_success(rows=1)
        logger.record_load_success(rows=1)

        metrics = logger.get_metrics()

        assert metrics["load_success_rate"] == pytest.approx(0.667, rel=0.01)

    def test_no_success_rate_without_attempts(self):
        logger = StructuredLogger(name="test", enable_console=False)
        assert "load_success_rate" not in logger.get_metrics()

    def test_log_file_creation(self, tmp_path):
        """Log file should be created in specified directory."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.info("Test message")
        logger.close()

        # Check that a log file was created
        log_files = list(tmp_path.glob("*.log"))
        assert len(log_files) == 1

        # Check that message was written
        log_content = log_files[0].read_text()
        assert "Test message" in log_content

    def test_no_log_file_without_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        logger = StructuredLogger(name="test", enable_console=False)
        logger.info("Console only")

        assert not (tmp_path / "logs").exists()
        assert logger.logger.handlers == []

    def test_configure_replaces_handlers(self, tmp_path):
        logger = StructuredLogger(name="test", enable_console=True)
        assert len(logger.logger.handlers) == 1

        logger.record_load_attempt()
        logger.configure(level="DEBUG", log_dir=tmp_path, enable_console=False)

        assert len(logger.logger.handlers) == 1
        assert logger.metrics["loads_attempted"] == 1
        logger.close()

    def test_metrics_summary(self, caplog):
        logger = StructuredLogger(name="test", enable_console=False)
        logger.record_load_attempt()
        logger.record_load_success(rows=3)
        logger.record_query("find_all")

        with caplog.at_level("INFO"):
            logger.log_metrics_summary()

        assert "Loads: 1/1 (100.0% success)" in caplog.text
        assert "find_all: 1" in caplog.text


class TestGlobalLogger:
    """Test global logger singleton."""

    def test_get_logger_singleton(self):
        """get_logger should return same instance."""
        reset_logger()  # Start fresh

        logger1 = get_logger(enable_console=False)
        logger2 = get_logger()

        assert logger1 is logger2

    def test_reset_logger(self):
        """reset_logger should create new instance."""
        reset_logger()

        logger1 = get_logger(enable_console=False)
        logger1.record_load_attempt()

        reset_logger()

        logger2 = get_logger(enable_console=False)

        # Should be different instance with fresh metrics
        assert logger2.metrics["loads_attempted"] == 0
