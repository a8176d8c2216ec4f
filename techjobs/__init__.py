"""TechJobs: in-memory job listing search."""

__version__ = "0.1.0"
