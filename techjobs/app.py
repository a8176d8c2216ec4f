import argparse
from pathlib import Path
from typing import Iterable, List, Optional

from . import __version__
from .config import Settings
from .env import load_env
from .logger import get_logger
from .models import Job, JobField
from .repository import JobRepository

# Columns offered by the list command, in menu order
LIST_CHOICES = {
    "employer": JobField.EMPLOYER,
    "location": JobField.LOCATION,
    "positionType": JobField.POSITION_TYPE,
    "coreCompetency": JobField.CORE_COMPETENCY,
}
SEARCH_CHOICES = ["all", *[f.value for f in JobField]]


def build_repository(args: argparse.Namespace, settings: Settings) -> JobRepository:
    data_file = Path(args.data) if args.data else settings.data_file
    return JobRepository(data_file=data_file)


def print_jobs(jobs: Iterable[Job]) -> None:
    jobs = list(jobs)
    if not jobs:
        print("No results.")
        return
    for job in jobs:
        print("*****")
        print(job)
        print("*****")
        print()
    print(f"{len(jobs)} job(s) found.")


def cmd_list(args: argparse.Namespace, repo: JobRepository) -> None:
    if args.column == "all":
        print_jobs(repo.find_all())
        return
    field = LIST_CHOICES[args.column]
    entities = repo.get_all(field)
    if not entities:
        print("No results.")
        return
    print(f"All {field.label} values:\n")
    for entity in entities:
        print(f" - {entity}")


def cmd_search(args: argparse.Namespace, repo: JobRepository) -> None:
    if not args.value.strip():
        raise SystemExit("Provide a search term with --value (use 'all' to list every job).")
    print_jobs(repo.find_by_column_and_value(args.column, args.value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="techjobs", description="TechJobs: list and search job listings")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    lst = subparsers.add_parser("list", help="List the values of one column, or every job")
    lst.add_argument("column", choices=[*LIST_CHOICES, "all"], help="Column to list")
    lst.add_argument("--data", help="Path to job data CSV (default: TECHJOBS_DATA_FILE or bundled data)")
    lst.add_argument("--verbose", action="store_true", help="Log load and query metrics when done")
    lst.set_defaults(func=cmd_list)

    srch = subparsers.add_parser("search", help="Search jobs by column and term")
    srch.add_argument("--column", default="all", choices=SEARCH_CHOICES, help="Column to search (default: all)")
    srch.add_argument("--value", required=True, help="Search term, case-insensitive substring")
    srch.add_argument("--data", help="Path to job data CSV (default: TECHJOBS_DATA_FILE or bundled data)")
    srch.add_argument("--verbose", action="store_true", help="Log load and query metrics when done")
    srch.set_defaults(func=cmd_search)

    return parser


def main(argv: Optional[List[str]] = None):
    # Load .env if present (TECHJOBS_DATA_FILE, TECHJOBS_LOG_LEVEL, ...)
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise SystemExit(str(e))
    get_logger().configure(level=settings.log_level, log_dir=settings.log_dir)

    repo = build_repository(args, settings)
    args.func(args, repo)

    if args.verbose:
        get_logger().log_metrics_summary()


if __name__ == "__main__":
    main()
