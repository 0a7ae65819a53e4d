"""
Functionality for formatting reports as a colorized terminal table.
"""

from __future__ import annotations

from io import StringIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from version_checker._report import DependencyRecord, Report

from .interface import ReportFormat

_WARN = "yellow"
_STALE = "red"
_FRESH = "green"
_INSECURE = "white on red"


class TableFormat(ReportFormat):
    """
    An implementation of `ReportFormat` that renders reports as a `rich` table, coloring each
    dependency by its condition.
    """

    def __init__(self, color: bool = True, width: int = 120) -> None:
        """
        Create a new `TableFormat`.

        `color` controls whether ANSI color codes are emitted at all.

        `width` is the width of the rendered table, in columns.
        """
        self.color = color
        self.width = width

    @property
    def is_manifest(self) -> bool:
        """
        See `ReportFormat.is_manifest`.
        """
        return False

    def format(self, report: Report) -> str:
        """
        Returns the report rendered as a table, with the tally in the footer.

        See `ReportFormat.format`.
        """
        tally = report.tally
        table = Table(
            title=f"Version Report: {report.manifest}",
            box=box.DOUBLE_EDGE,
            show_footer=True,
        )
        table.add_column("Advisories", footer=str(tally.advisories), justify="right")
        table.add_column("Dependency", footer=f"{tally.total} dependencies")
        table.add_column("Version", footer=f"{tally.up_to_date} up to date")
        table.add_column(
            "Latest", footer=f"{tally.out_of_date} out of date, {tally.unspecified} unspecified"
        )

        for record in report.records:
            table.add_row(*self._cells(record))

        return self._render(table)

    def _cells(self, record: DependencyRecord) -> list[Text]:
        row = record.row()
        flags = record.flags
        styles = ["", "", "", ""]

        if flags.unspecified:
            styles = [_WARN] * 4
        if flags.insecure:
            styles[0] = _INSECURE
        if flags.outdated:
            styles[1:] = [_WARN, _STALE, _FRESH]
        else:
            styles[2:] = [_FRESH, _FRESH]

        texts = [str(row.advisories), row.name, row.local, row.remote]
        return [Text(text, style=style) for text, style in zip(texts, styles)]

    def _render(self, table: Table) -> str:
        buffer = StringIO()
        console = Console(
            file=buffer,
            width=self.width,
            force_terminal=self.color,
            color_system="standard" if self.color else None,
            no_color=not self.color,
            highlight=False,
        )
        console.print(table)
        return buffer.getvalue().rstrip("\n")
