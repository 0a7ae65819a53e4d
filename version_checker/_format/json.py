"""
Functionality for formatting reports as JSON objects.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from version_checker._report import DependencyRecord, Report
from version_checker._version_spec import VersionValue

from .interface import ReportFormat


class JsonFormat(ReportFormat):
    """
    An implementation of `ReportFormat` that formats reports as a JSON object.
    """

    @property
    def is_manifest(self) -> bool:
        """
        See `ReportFormat.is_manifest`.
        """
        return True

    def format(self, report: Report) -> str:
        """
        Returns a JSON formatted string for the given report.

        See `ReportFormat.format`.
        """
        output_json: dict[str, Any] = {"manifest": report.manifest}
        output_json["dependencies"] = [self._format_record(r) for r in report.records]
        tally_json = asdict(report.tally)
        tally_json["total"] = report.tally.total
        output_json["tally"] = tally_json
        return json.dumps(output_json)

    def _format_record(self, record: DependencyRecord) -> dict[str, Any]:
        flags = record.flags
        return {
            "name": record.name,
            "kind": str(record.kind),
            "version": self._format_version(record.local.version),
            "operators": sorted(record.local.operators),
            "latest": self._format_version(record.remote),
            "advisories": record.advisories,
            "unspecified": flags.unspecified,
            "insecure": flags.insecure,
            "outdated": flags.outdated,
        }

    def _format_version(self, version: VersionValue) -> str | None:
        if not version.is_specified():
            return None
        return version.display()
