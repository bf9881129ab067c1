"""Command-line entry point.

Usage:
    git dagger [--count=<value>] [--linearity=<value>] [--seed=<value>]

Generates a random commit DAG inside the current repository and prints the
id of its head commit. No refs are updated; point a branch at the printed
id to keep the history.
"""

import argparse
import random
import sys

import structlog
from rich.console import Console
from rich.markup import escape

from git_dagger.config import DaggerSettings, get_settings
from git_dagger.engine.generator import generate_dag
from git_dagger.engine.inspection import summarize
from git_dagger.errors import DaggerError, UsageError
from git_dagger.git.client import GitClient
from git_dagger.git.materializer import Materializer
from git_dagger.logconfig import configure_logging

logger = structlog.get_logger()

err_console = Console(stderr=True, soft_wrap=True)

USAGE = "git dagger [--count=<value>] [--linearity=<value>] [--seed=<value>] [--max-trials=<value>] [-v]"


class DaggerArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def _count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("<count> is not a non-negative integer") from None
    if count < 0:
        raise argparse.ArgumentTypeError("<count> is not a non-negative integer")
    return count


def _linearity(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("<linearity> is not a real number") from None


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a positive integer") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"'{value}' is not a positive integer")
    return number


def _seed(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("<seed> is not an integer") from None


def build_parser(settings: DaggerSettings) -> DaggerArgumentParser:
    """Build the argument parser with defaults taken from settings."""
    parser = DaggerArgumentParser(
        prog="git dagger",
        usage=USAGE,
        description="Generate a random commit DAG and print its head commit id.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--count",
        type=_count,
        default=settings.default_count,
        metavar="<value>",
        help=f"number of commits to generate (default: {settings.default_count})",
    )
    parser.add_argument(
        "--linearity",
        type=_linearity,
        default=settings.default_linearity,
        metavar="<value>",
        help=f"linearity factor (default: {settings.default_linearity})",
    )
    parser.add_argument(
        "--seed",
        type=_seed,
        default=None,
        metavar="<value>",
        help="seed for a reproducible graph",
    )
    parser.add_argument(
        "--max-trials",
        type=_positive_int,
        default=None,
        metavar="<value>",
        help="force the nearest edge after this many failed samples per commit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser


def _print_error(message: str) -> None:
    err_console.print(f"[bold red]error:[/bold red] {escape(message)}", highlight=False)


def main(argv: list[str] | None = None) -> int:
    """Run git-dagger and return the process exit status."""
    settings = get_settings()
    parser = build_parser(settings)

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        _print_error(str(e))
        err_console.print(f"usage: {USAGE}", markup=False, highlight=False)
        return e.exit_code

    configure_logging(args.verbose)

    if args.count == 0:
        return 0

    try:
        client = GitClient.open(settings)

        rng = random.Random(args.seed).random if args.seed is not None else None
        dag = generate_dag(args.count, args.linearity, rng=rng, max_trials=args.max_trials)
        logger.info("Generated DAG", **summarize(dag).model_dump())

        result = Materializer(client).materialize(dag)
    except DaggerError as e:
        _print_error(str(e))
        return e.exit_code

    print(result.head_oid)
    return 0


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())
