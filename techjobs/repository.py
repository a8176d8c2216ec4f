"""
Job repository.

Responsibilities:
- Load the job data file once, on first use.
- Intern employers, locations, position types and skills.
- Answer list and search queries over the loaded jobs.

Loading is best-effort: a source that cannot be read is logged and the
repository answers from whatever was loaded (possibly nothing). A failed
load is retried on the next query; a successful one is never repeated.
"""

import threading
from pathlib import Path
from typing import Dict, List, Optional

from .errors import LoadError
from .loader import bundled_data_file, iter_job_rows
from .logger import StructuredLogger, get_logger
from .models import (
    CoreCompetency,
    Employer,
    Job,
    JobField,
    Location,
    NamedEntity,
    PositionType,
)
from .normalize import contains_ignore_case, is_all
from .registry import EntityRegistry

# Fields checked by find_by_value, in order
SEARCH_FIELDS = [
    JobField.NAME,
    JobField.EMPLOYER,
    JobField.LOCATION,
    JobField.POSITION_TYPE,
    JobField.CORE_COMPETENCY,
]


class JobRepository:
    """In-memory job listings backed by a CSV file."""

    def __init__(
        self,
        data_file: Optional[Path] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            data_file: CSV source (defaults to the bundled job_data.csv)
            logger: Logger for load events and metrics (defaults to the global one)
        """
        self.data_file = data_file if data_file is not None else bundled_data_file()
        self._logger = logger or get_logger()
        self._lock = threading.Lock()
        self._loaded = False

        self._jobs: List[Job] = []
        self.employers: EntityRegistry[Employer] = EntityRegistry(Employer)
        self.locations: EntityRegistry[Location] = EntityRegistry(Location)
        self.position_types: EntityRegistry[PositionType] = EntityRegistry(PositionType)
        self.core_competencies: EntityRegistry[CoreCompetency] = EntityRegistry(CoreCompetency)
        self._registries: Dict[JobField, EntityRegistry] = {
            JobField.EMPLOYER: self.employers,
            JobField.LOCATION: self.locations,
            JobField.POSITION_TYPE: self.position_types,
            JobField.CORE_COMPETENCY: self.core_competencies,
        }

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # Loading

    def ensure_loaded(self) -> None:
        """Load the data file unless a previous load succeeded.

        Never raises for an unreadable source; the failure is logged.
        """
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._load()

    def _load(self) -> None:
        self._logger.record_load_attempt()
        # Registries survive a failed attempt; the job list does not
        self._jobs = []

        try:
            for row in iter_job_rows(self.data_file, logger=self._logger):
                job = Job(
                    row.name,
                    self.employers.intern(row.employer),
                    self.locations.intern(row.location),
                    self.position_types.intern(row.position_type),
                    self.core_competencies.intern(row.core_competency),
                )
                self._jobs.append(job)
        except LoadError as e:
            self._logger.record_load_failure(type(e.__cause__ or e).__name__)
            self._logger.error(
                "Failed to load job data",
                path=str(self.data_file),
                error=str(e),
                jobs_loaded=len(self._jobs),
            )
            return

        self._loaded = True
        self._logger.record_load_success(len(self._jobs))
        self._logger.info(
            f"Loaded {len(self._jobs)} jobs",
            path=str(self.data_file),
            employers=len(self.employers),
            locations=len(self.locations),
            position_types=len(self.position_types),
            core_competencies=len(self.core_competencies),
        )

    # Queries

    def find_all(self) -> List[Job]:
        """All jobs in file order, as a new list."""
        self.ensure_loaded()
        self._logger.record_query("find_all")
        return list(self._jobs)

    def find_by_value(self, value: str) -> List[Job]:
        """
        Search every job field for the given term.

        For example, "Enterprise" matches a job whose employer is
        "Enterprise Holdings, Inc". Matching is case-insensitive.
        """
        self.ensure_loaded()
        self._logger.record_query("find_by_value")
        self._logger.debug("Searching all fields", value=value)

        return [
            job for job in self._jobs
            if any(contains_ignore_case(field.read(job), value) for field in SEARCH_FIELDS)
        ]

    def find_by_column_and_value(self, column: str, value: str) -> List[Job]:
        """
        Search one job field for the given term.

        Args:
            column: Field selector ("name", "employer", "location",
                "positionType", "coreCompetency" or "all"). Unknown
                selectors search the skill field.
            value: Term to look for; "all" (any case) returns every job.

        Returns:
            Jobs whose field contains the term, case-insensitively.
        """
        self.ensure_loaded()

        if is_all(value):
            return self.find_all()

        if column == "all":
            return self.find_by_value(value)

        self._logger.record_query("find_by_column_and_value")
        self._logger.debug("Searching one field", column=column, value=value)
        return [
            job for job in self._jobs
            if contains_ignore_case(self.get_field_value(job, column), value)
        ]

    @staticmethod
    def get_field_value(job: Job, field_name: str) -> str:
        """Display string of the named field.

        Any selector other than name, employer, location and positionType
        returns the skill.
        """
        return JobField.from_selector(field_name).read(job)

    # Accessors

    def get_all(self, field: JobField) -> List[NamedEntity]:
        """Entities of one type, sorted by name."""
        if field not in self._registries:
            raise ValueError(f"No registry for field: {field.value}")
        self.ensure_loaded()
        return self._registries[field].sorted()

    def get_all_employers(self) -> List[Employer]:
        return self.get_all(JobField.EMPLOYER)

    def get_all_locations(self) -> List[Location]:
        return self.get_all(JobField.LOCATION)

    def get_all_position_types(self) -> List[PositionType]:
        return self.get_all(JobField.POSITION_TYPE)

    def get_all_core_competencies(self) -> List[CoreCompetency]:
        return self.get_all(JobField.CORE_COMPETENCY)
