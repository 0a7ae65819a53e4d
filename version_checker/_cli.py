"""
Command-line entrypoints for `version-checker`.
"""

from __future__ import annotations

import argparse
import enum
import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, NoReturn

from version_checker import __version__
from version_checker._advisory import (
    AdvisoryDatabase,
    AdvisoryDatabaseError,
    default_database_path,
    load_database,
)
from version_checker._format import (
    ColumnsFormat,
    JsonFormat,
    MarkdownFormat,
    ReportFormat,
    TableFormat,
)
from version_checker._manifest import CargoManifestSource, ManifestError
from version_checker._registry import CratesIoRegistry, PyPIRegistry
from version_checker._report import Report, Reporter, check_self_update
from version_checker._state import CheckSpinner, CheckState
from version_checker._util import assert_never

logging.basicConfig()
logger = logging.getLogger(__name__)

# NOTE: We configure the top package logger, rather than the root logger,
# to avoid overly verbose logging in third-party code by default.
package_logger = logging.getLogger("version_checker")
package_logger.setLevel(os.environ.get("VERSION_CHECKER_LOGLEVEL", "INFO").upper())

SELF_PACKAGE = "version-checker"


@contextmanager
def _output_io(name: Path) -> Iterator[IO[str]]:  # pragma: no cover
    """
    A context managing wrapper for the `--output` flag. This allows us to avoid
    `argparse.FileType`'s "eager" file creation, which is generally the wrong/unexpected
    behavior when dealing with fallible processes.
    """
    if str(name) in {"stdout", "-"}:
        yield sys.stdout
    else:
        with name.open("w") as io:
            yield io


@enum.unique
class OutputFormatChoice(str, enum.Enum):
    """
    Output formats supported by the `version-checker` CLI.
    """

    Table = "table"
    Columns = "columns"
    Json = "json"
    Markdown = "markdown"

    def to_format(self, color: bool) -> ReportFormat:
        if self is OutputFormatChoice.Table:
            return TableFormat(color=color)
        elif self is OutputFormatChoice.Columns:
            return ColumnsFormat()
        elif self is OutputFormatChoice.Json:
            return JsonFormat()
        elif self is OutputFormatChoice.Markdown:
            return MarkdownFormat()
        else:
            assert_never(self)  # pragma: no cover

    def __str__(self) -> str:
        return self.value


@enum.unique
class ProgressSpinnerChoice(str, enum.Enum):
    """
    Whether or not `version-checker` should display a progress spinner.
    """

    On = "on"
    Off = "off"

    def __bool__(self) -> bool:
        return self is ProgressSpinnerChoice.On

    def __str__(self) -> str:
        return self.value


def _enum_help(msg: str, e: type[enum.Enum]) -> str:  # pragma: no cover
    """
    Render a `--help`-style string for the given enumeration.
    """
    return f"{msg} (choices: {', '.join(str(v) for v in e)})"


def _fatal(msg: str) -> NoReturn:  # pragma: no cover
    """
    Log a fatal error to the standard error stream and exit.
    """
    logger.error(msg)
    sys.exit(1)


def _parser() -> argparse.ArgumentParser:  # pragma: no cover
    parser = argparse.ArgumentParser(
        prog="version-checker",
        description="check a Cargo manifest's dependencies for newer releases and "
        "known security advisories",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "manifests",
        type=Path,
        nargs="*",
        metavar="MANIFEST",
        default=[Path("Cargo.toml")],
        help="the Cargo.toml files (or crate directories) to check",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=OutputFormatChoice,
        choices=OutputFormatChoice,
        default=os.environ.get("VERSION_CHECKER_FORMAT", OutputFormatChoice.Table.value),
        metavar="FORMAT",
        help=_enum_help("the format to emit reports in", OutputFormatChoice),
    )
    advisory_args = parser.add_mutually_exclusive_group()
    advisory_args.add_argument(
        "--advisory-db",
        type=Path,
        metavar="PATH",
        help="a checkout of the RustSec advisory database; defaults to the one `cargo audit` "
        f"maintains at {default_database_path()}",
    )
    advisory_args.add_argument(
        "--no-advisories",
        action="store_true",
        help="don't check dependencies against any advisory database",
    )
    parser.add_argument(
        "--timeout", type=int, default=15, help="set the socket timeout for registry requests"
    )
    parser.add_argument(
        "--no-self-check",
        action="store_true",
        help="don't check PyPI for a newer release of version-checker",
    )
    parser.add_argument(
        "--progress-spinner",
        type=ProgressSpinnerChoice,
        choices=ProgressSpinnerChoice,
        default=os.environ.get("VERSION_CHECKER_PROGRESS_SPINNER", ProgressSpinnerChoice.On.value),
        help="display a progress spinner",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="don't colorize the `table` format",
    )
    parser.add_argument(
        "--fail-outdated",
        action="store_true",
        help="exit with a non-zero status when any dependency is out of date",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="output results to the given file",
        default="stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="run with additional debug logging; supply multiple times to increase verbosity",
    )
    return parser


def _parse_args(
    parser: argparse.ArgumentParser, args: list[str] | None = None
) -> argparse.Namespace:  # pragma: no cover
    parsed = parser.parse_args(args)

    # Configure logging upfront, so that we don't miss anything.
    if parsed.verbose >= 1:
        package_logger.setLevel("DEBUG")
    if parsed.verbose >= 2:
        logging.getLogger().setLevel("DEBUG")

    logger.debug(f"parsed arguments: {parsed}")

    return parsed


def _advisory_database(args: argparse.Namespace) -> AdvisoryDatabase:
    if args.no_advisories:
        return AdvisoryDatabase.empty()

    if args.advisory_db is not None:
        return load_database(args.advisory_db)

    # The default location is only used when it's actually present.
    default_path = default_database_path()
    if not default_path.is_dir():
        logger.warning(
            f"no advisory database at {default_path}; advisories won't be checked "
            "(run `cargo audit fetch` or pass --advisory-db)"
        )
        return AdvisoryDatabase.empty()
    return load_database(default_path)


def _summary(reports: list[Report]) -> str:
    advisories = sum(r.tally.advisories for r in reports)
    out_of_date = sum(r.tally.out_of_date for r in reports)
    total = sum(r.tally.total for r in reports)
    return (
        f"Checked {total} {'dependency' if total == 1 else 'dependencies'}: "
        f"{out_of_date} out of date, "
        f"{advisories} {'advisory applies' if advisories == 1 else 'advisories apply'}"
    )


def check() -> None:  # pragma: no cover
    """
    The primary entrypoint for `version-checker`.
    """
    parser = _parser()
    args = _parse_args(parser)

    color = not args.no_color and args.output == Path("stdout") and sys.stdout.isatty()
    formatter = args.format.to_format(color)

    try:
        advisories = _advisory_database(args)
    except AdvisoryDatabaseError as e:
        _fatal(str(e))

    if not args.no_self_check and not formatter.is_manifest:
        update = check_self_update(PyPIRegistry(timeout=args.timeout), __version__, SELF_PACKAGE)
        if update is not None:
            print(formatter.format_self_update(update), file=sys.stderr)

    registry = CratesIoRegistry(timeout=args.timeout)
    reports: list[Report] = []
    failed = 0
    state = CheckSpinner("Loading manifests") if args.progress_spinner else CheckState()
    with state:
        reporter = Reporter(registry, advisories, state=state)
        for manifest in args.manifests:
            try:
                reports.append(reporter.report(CargoManifestSource(manifest)))
            except ManifestError as e:
                logger.error(str(e))
                failed += 1

    if not reports:
        _fatal("no manifests could be checked")

    with _output_io(args.output) as io:
        for report in reports:
            print(formatter.format(report), file=io)

    if not formatter.is_manifest:
        print(_summary(reports), file=sys.stderr)

    insecure = any(r.tally.insecure > 0 for r in reports)
    outdated = any(r.tally.out_of_date > 0 for r in reports)
    if failed or insecure or (args.fail_outdated and outdated):
        sys.exit(1)
