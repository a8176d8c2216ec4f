"""
Domain models for TechJobs.

Provides:
- Employer / Location / PositionType / CoreCompetency: named value types
  interned per repository
- Job: a listing that references one of each
- JobField: closed set of field selectors used by searches
"""

from __future__ import annotations

import itertools
from enum import Enum
from typing import Callable, Dict

# Job ids are unique for the whole process
_job_ids = itertools.count(1)


class NamedEntity:
    """A value holder wrapping a single display name."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))


class Employer(NamedEntity):
    __slots__ = ()


class Location(NamedEntity):
    __slots__ = ()


class PositionType(NamedEntity):
    __slots__ = ()


class CoreCompetency(NamedEntity):
    __slots__ = ()


class Job:
    """A single job listing.

    Jobs do not own their entities: the same Employer instance is shared
    by every job that names it. Each job gets the next process-wide id
    on creation; equality is by id.
    """

    def __init__(
        self,
        name: str,
        employer: Employer,
        location: Location,
        position_type: PositionType,
        core_competency: CoreCompetency,
    ):
        self.id = next(_job_ids)
        self.name = name
        self.employer = employer
        self.location = location
        self.position_type = position_type
        self.core_competency = core_competency

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Job):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Job(id={self.id}, name={self.name!r}, employer={self.employer.name!r})"

    def __str__(self) -> str:
        lines = [f"{field.label}: {field.read(self)}" for field in JobField]
        return "\n".join(lines)


class JobField(str, Enum):
    """Searchable job fields, keyed by their selector string."""

    NAME = "name"
    EMPLOYER = "employer"
    LOCATION = "location"
    POSITION_TYPE = "positionType"
    CORE_COMPETENCY = "coreCompetency"

    @classmethod
    def from_selector(cls, selector: str) -> "JobField":
        """Resolve a free-form selector.

        Anything unrecognised resolves to CORE_COMPETENCY; callers have
        always relied on skill being the default column.
        """
        try:
            return cls(selector)
        except ValueError:
            return cls.CORE_COMPETENCY

    @property
    def label(self) -> str:
        return _LABELS[self]

    def read(self, job: Job) -> str:
        """Display string of this field for the given job."""
        return _ACCESSORS[self](job)


_ACCESSORS: Dict[JobField, Callable[[Job], str]] = {
    JobField.NAME: lambda job: job.name,
    JobField.EMPLOYER: lambda job: str(job.employer),
    JobField.LOCATION: lambda job: str(job.location),
    JobField.POSITION_TYPE: lambda job: str(job.position_type),
    JobField.CORE_COMPETENCY: lambda job: str(job.core_competency),
}

_LABELS: Dict[JobField, str] = {
    JobField.NAME: "Name",
    JobField.EMPLOYER: "Employer",
    JobField.LOCATION: "Location",
    JobField.POSITION_TYPE: "Position Type",
    JobField.CORE_COMPETENCY: "Skill",
}
