"""
CSV reader for the job data file.

The file is a header row followed by one listing per row, in the column
order given by techjobs.schema.COLUMNS. Standard CSV quoting applies.
"""

import csv
from importlib import resources
from pathlib import Path
from typing import Iterator, NamedTuple, Optional

from .errors import LoadError
from .logger import StructuredLogger, get_logger
from .schema import validate_header, validate_row

DATA_FILE = "job_data.csv"


class JobRow(NamedTuple):
    name: str
    employer: str
    location: str
    position_type: str
    core_competency: str


def bundled_data_file():
    """The job data shipped inside the package."""
    return resources.files("techjobs") / "data" / DATA_FILE


def iter_job_rows(source: Path, logger: Optional[StructuredLogger] = None) -> Iterator[JobRow]:
    """
    Yield rows from the data file in file order.

    Header problems and empty files are reported to logger (the global
    logger when omitted).

    Raises:
        LoadError: if the file cannot be opened or decoded, is not valid
            CSV, or holds a row with too few columns. Rows yielded before
            the failure stay valid.
    """
    logger = logger or get_logger()
    try:
        with source.open("r", encoding="utf-8-sig", newline="") as f:
            reader = csv.reader(f, strict=True)
            header = next(reader, None)
            if header is None:
                logger.warning("Job data file is empty", path=str(source))
                return

            problems = validate_header(header)
            if problems:
                logger.warning("Unexpected job data header", path=str(source), problems=problems)

            for row in reader:
                if not row:
                    continue
                errors = validate_row(row)
                if errors:
                    raise LoadError(
                        f"Malformed row at line {reader.line_num}: {'; '.join(errors)}",
                        path=source,
                    )
                yield JobRow(*row[:5])
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LoadError(f"Failed to read job data from {source}: {e}", path=source) from e
