"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path

from techjobs.logger import StructuredLogger, get_logger

HEADER = "name,employer,location,position type,core competency\n"


@pytest.fixture(autouse=True)
def quiet_logger():
    """Drop console output from the shared logger; records still reach caplog."""
    get_logger().configure(enable_console=False)
    yield


@pytest.fixture
def private_logger() -> StructuredLogger:
    """Private logger so metrics start at zero."""
    logger = StructuredLogger(name="techjobs.test", enable_console=False)
    yield logger
    logger.close()


@pytest.fixture
def sample_rows() -> str:
    """Rows with repeated employers/locations in varying case."""
    return (
        "Junior Data Analyst,Lockerdome,Saint Louis,Data Scientist / Business Intelligence,Statistical Analysis\n"
        "Junior Web Developer,Cozy,Portland,Web - Back End,Ruby\n"
        "IT Programmer Analyst,\"Enterprise Holdings, Inc\",Saint Louis,Web - Full Stack,.NET\n"
        "Junior Java Developer,Enterprise Holdings Inc.,saint louis,Web - Back End,Java\n"
        "Front End Developer,cozy,Portland,Web - Front End,JavaScript\n"
        "Mobile Developer,Gyrocode,Miami,Mobile,javascript\n"
    )


@pytest.fixture
def job_csv(tmp_path, sample_rows) -> Path:
    """Create a job data file with a header and sample rows."""
    path = tmp_path / "job_data.csv"
    path.write_text(HEADER + sample_rows, encoding="utf-8")
    return path


@pytest.fixture
def header_only_csv(tmp_path) -> Path:
    path = tmp_path / "empty_jobs.csv"
    path.write_text(HEADER, encoding="utf-8")
    return path


@pytest.fixture
def missing_csv(tmp_path) -> Path:
    return tmp_path / "does_not_exist.csv"
