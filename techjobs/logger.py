"""
Structured logging system for TechJobs.

Provides centralized logging with console and file outputs, log levels,
and metrics tracking for data loads and queries.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for monitoring data loads and query volume.
    """

    def __init__(
        self,
        name: str = "techjobs",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (no file output when None)
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)

        # Metrics tracking
        self.metrics = {
            "loads_attempted": 0,
            "loads_successful": 0,
            "loads_failed": 0,
            "rows_loaded": 0,
            "errors_by_type": {},
            "queries_by_operation": {},
        }

        self.configure(level=level, log_dir=log_dir, enable_console=enable_console)

    def configure(
        self,
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_console: bool = True,
    ) -> None:
        """Replace the handlers and level. Metrics are kept."""
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()  # Remove existing handlers

        # Console handler
        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        # File handler
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"techjobs_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)
            # File gets everything; the console handler filters by level
            self.logger.setLevel(logging.DEBUG)

    def close(self) -> None:
        """Close and detach all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        """Internal logging method with context."""
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_load_attempt(self):
        """Record an attempt to read the data source."""
        self.metrics["loads_attempted"] += 1

    def record_load_success(self, rows: int):
        """Record a completed load and the number of rows read."""
        self.metrics["loads_successful"] += 1
        self.metrics["rows_loaded"] += rows

    def record_load_failure(self, error_type: str):
        """Record a failed load."""
        self.metrics["loads_failed"] += 1

        # Track error types
        if error_type not in self.metrics["errors_by_type"]:
            self.metrics["errors_by_type"][error_type] = 0
        self.metrics["errors_by_type"][error_type] += 1

    def record_query(self, operation: str):
        """Count a query by operation name."""
        queries = self.metrics["queries_by_operation"]
        queries[operation] = queries.get(operation, 0) + 1

    def get_metrics(self) -> dict:
        """Return current metrics."""
        metrics_copy = self.metrics.copy()
        attempts = metrics_copy["loads_attempted"]
        if attempts > 0:
            metrics_copy["load_success_rate"] = round(
                metrics_copy["loads_successful"] / attempts, 3
            )
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        attempts = metrics["loads_attempted"]
        successes = metrics["loads_successful"]
        rate = metrics.get("load_success_rate", 0) * 100

        self.info("=== Job Data Metrics ===")
        self.info(f"Loads: {successes}/{attempts} ({rate:.1f}% success)")
        self.info(f"Rows loaded: {metrics['rows_loaded']}")

        if metrics["queries_by_operation"]:
            self.info("Queries:")
            for operation, count in metrics["queries_by_operation"].items():
                self.info(f"  {operation}: {count}")

        if metrics["errors_by_type"]:
            self.info("Error Types:")
            for error_type, count in metrics["errors_by_type"].items():
                self.info(f"  {error_type}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "techjobs",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = None
