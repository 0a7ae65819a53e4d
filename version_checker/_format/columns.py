"""
Functionality for formatting reports as a set of human-readable columns.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest
from typing import Any

from version_checker._report import Report

from .interface import ReportFormat

HEADER = ["Advisories", "Dependency", "Version", "Latest"]
TALLY_HEADER = ["Advisories", "Total Dependencies", "Up To Date", "Out Of Date", "Unspecified"]


def tabulate(rows: Iterable[Iterable[Any]]) -> tuple[list[str], list[int]]:
    """Return a list of formatted rows and a list of column sizes.
    For example::
    >>> tabulate([['foobar', 2000], [0xdeadbeef]])
    (['foobar     2000', '3735928559'], [10, 4])
    """
    rows = [tuple(map(str, row)) for row in rows]
    sizes = [max(map(len, col)) for col in zip_longest(*rows, fillvalue="")]
    table = [" ".join(map(str.ljust, row, sizes)).rstrip() for row in rows]
    return table, sizes


def _with_separator(data: list[list[Any]]) -> list[str]:
    strings, sizes = tabulate(data)
    strings.insert(1, " ".join("-" * size for size in sizes))
    return strings


class ColumnsFormat(ReportFormat):
    """
    An implementation of `ReportFormat` that formats reports as a set of columns.
    """

    @property
    def is_manifest(self) -> bool:
        """
        See `ReportFormat.is_manifest`.
        """
        return False

    def format(self, report: Report) -> str:
        """
        Returns a column formatted string for the given report, followed by its tally.

        See `ReportFormat.format`.
        """
        lines = [f"Version Report: {report.manifest}", ""]

        if report.records:
            dep_data: list[list[Any]] = [HEADER]
            for row in report.rows():
                dep_data.append([row.advisories, row.name, row.local, row.remote])
            lines.extend(_with_separator(dep_data))
            lines.append("")

        tally = report.tally
        lines.extend(
            _with_separator(
                [
                    TALLY_HEADER,
                    [
                        tally.advisories,
                        tally.total,
                        tally.up_to_date,
                        tally.out_of_date,
                        tally.unspecified,
                    ],
                ]
            )
        )
        return "\n".join(lines)
