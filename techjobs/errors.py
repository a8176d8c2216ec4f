from pathlib import Path
from typing import Optional


class LoadError(Exception):
    """Raised when the job data source cannot be read."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
