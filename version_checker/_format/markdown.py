"""
Functionality for formatting reports as a Markdown table.
"""

from __future__ import annotations

from textwrap import dedent

from version_checker._report import Report, ReportRow

from .interface import ReportFormat


class MarkdownFormat(ReportFormat):
    """
    An implementation of `ReportFormat` that formats reports as a pair of Markdown tables.
    """

    @property
    def is_manifest(self) -> bool:
        """
        See `ReportFormat.is_manifest`.
        """
        return False

    def format(self, report: Report) -> str:
        """
        Returns a Markdown formatted string representing a report and its tally.
        """
        output = f"## Version Report: {report.manifest}\n"
        dep_rows = [self._format_row(row) for row in report.rows()]
        if dep_rows:
            output += "\n" + dedent(
                """\
                Advisories | Dependency | Version | Latest
                --- | --- | --- | ---
                """
            )
            output += "\n".join(dep_rows) + "\n"

        tally = report.tally
        counts = [
            tally.advisories,
            tally.total,
            tally.up_to_date,
            tally.out_of_date,
            tally.unspecified,
        ]
        output += "\n" + dedent(
            """\
            Advisories | Total Dependencies | Up To Date | Out Of Date | Unspecified
            --- | --- | --- | --- | ---
            """
        )
        output += " | ".join(str(count) for count in counts)
        return output

    def _format_row(self, row: ReportRow) -> str:
        return f"{row.advisories} | {row.name} | {row.local} | {row.remote}"
