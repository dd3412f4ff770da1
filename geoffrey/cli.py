"""
geoff - data science project scaffolding.

Usage:
    # new project in ./test_project
    geoff create test_project

    # new project, creating missing parent directories
    geoff create --parents projects/2024/test_project

    # inside a project: add a data source (at most one of -d / -e / -w)
    geoff add data-source sales --database

    # more logging (-v INFO, -vv DEBUG)
    geoff -v create test_project

Exit codes: 0 success, 1 geoff error, 2 usage error.
"""

import argparse
import logging
import sys
from pathlib import Path

from geoffrey import __version__
from geoffrey.core.config import GeoffConfig, load_config
from geoffrey.domain.constants import CREATED_ICON
from geoffrey.domain.errors import GeoffError
from geoffrey.domain.schemas import DataSourceSpec, ProjectSpec, ScaffoldResult
from geoffrey.services.add import DataSourceScaffolder
from geoffrey.services.create import ProjectScaffolder

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


# =============================================================================
# Argument Parsing
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geoff",
        description="Creates and manages data science projects.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="More logging (-v INFO, -vv DEBUG)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML config file (default: $GEOFF_CONFIG)",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    create = commands.add_parser(
        "create",
        help="Creates a new data science project managed by geoff",
    )
    create.add_argument("name", type=Path, help="The name of the project to create")
    create.add_argument(
        "-p",
        "--parents",
        action="store_true",
        help="Whether to create the parent directories in the project name",
    )

    add = commands.add_parser(
        "add",
        help="Adds a new instance of a data source",
    )
    add_commands = add.add_subparsers(dest="add_command", metavar="ENTITY", required=True)

    data_source = add_commands.add_parser(
        "data-source",
        help="Adds a data source instance",
    )
    data_source.add_argument("name", type=Path, help="The name of the data source")
    kind = data_source.add_mutually_exclusive_group()
    kind.add_argument(
        "-d",
        "--database",
        action="store_true",
        help="Flag to add a database data source",
    )
    kind.add_argument(
        "-e",
        "--extract",
        action="store_true",
        help="Flag to add an extract data source",
    )
    kind.add_argument(
        "-w",
        "--web",
        action="store_true",
        help="Flag to add a web data source",
    )

    return parser


# =============================================================================
# Logging
# =============================================================================


def configure_logging(verbose: int, default_level: str = "WARNING") -> None:
    """-v / -vv win over the config file's log_level."""
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, default_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )
    logging.getLogger("geoffrey").setLevel(level)


# =============================================================================
# Commands
# =============================================================================


def run_create(args: argparse.Namespace) -> ScaffoldResult:
    spec = ProjectSpec(name=args.name, create_parents=args.parents)
    return ProjectScaffolder(spec).run()


def run_add_data_source(args: argparse.Namespace, config: GeoffConfig) -> ScaffoldResult:
    spec = DataSourceSpec.from_flags(
        args.name,
        database=args.database,
        extract=args.extract,
        web=args.web,
    )
    return DataSourceScaffolder(spec, require_marker=config.require_marker).run()


def report_error(error: GeoffError) -> None:
    """Explanation, then the short headline, on stderr."""
    print(error.message, file=sys.stderr)
    if error.headline != error.message:
        print(f"\nError: {error.headline}", file=sys.stderr)


def report_result(result: ScaffoldResult) -> None:
    print(f"{CREATED_ICON} {result.name} created!\n")
    print(result.tree.render())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        configure_logging(args.verbose, config.log_level)

        if args.command == "create":
            result = run_create(args)
        else:
            result = run_add_data_source(args, config)
    except GeoffError as e:
        logger.debug(f"Command failed: {e.to_dict()}")
        report_error(e)
        return 1

    report_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
