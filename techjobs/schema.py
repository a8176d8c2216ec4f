from typing import List, Sequence

# Column order of the job data file. Only positions matter when loading.
COLUMNS = ["name", "employer", "location", "position_type", "core_competency"]


def _norm_header(v: str) -> str:
    return v.strip().lower().replace(" ", "_")


def validate_header(header: Sequence[str]) -> List[str]:
    """
    Returns a list of header problems. Empty list means the header matches.
    A mismatched header is only worth a warning; rows are read by position.
    """
    errors: List[str] = []
    if len(header) < len(COLUMNS):
        errors.append(f"Header has {len(header)} columns, expected {len(COLUMNS)}")
        return errors

    for i, expected in enumerate(COLUMNS):
        got = _norm_header(header[i])
        if got != expected:
            errors.append(f"Column {i + 1} is '{header[i]}', expected '{expected}'")
    return errors


def validate_row(row: Sequence[str]) -> List[str]:
    """Returns a list of row problems. Empty list means the row is loadable."""
    errors: List[str] = []
    if len(row) < len(COLUMNS):
        errors.append(f"Row has {len(row)} columns, expected {len(COLUMNS)}")
    return errors
